"""
Dashboard views and their access tiers.
"""
from enum import Enum


class View(str, Enum):
    """Feature screens of the dashboard."""
    HOME = "home"
    CHANNEL = "channel"
    SCRIPT = "script"
    TRENDING = "trending"
    ADMIN = "admin"
    NEWS = "news"
    KEYWORD_VIDEO = "keyword_video"
    THUMBNAIL = "thumbnail"
    COMMENT_ANALYSIS = "comment_analysis"
    LIBRARY = "library"
    BATTLE = "battle"
    SHORTS_GENERATOR = "shorts_generator"
    NOTICE = "notice"


# Reachable without logging in
PUBLIC_VIEWS = frozenset({View.HOME, View.NOTICE})

# Require a paid subscription
PRO_VIEWS = frozenset({
    View.CHANNEL,
    View.NEWS,
    View.KEYWORD_VIDEO,
    View.COMMENT_ANALYSIS,
    View.SCRIPT,
    View.THUMBNAIL,
    View.BATTLE,
    View.TRENDING,
    View.SHORTS_GENERATOR,
})

DEFAULT_VIEW = View.HOME

# Views that consume a navigation payload (a channel id or query to pre-load)
PAYLOAD_VIEWS = frozenset({View.CHANNEL})
