"""
Interaction layer for turning UI actions into intents.

Sits between the UI (CLI/Flask) and the dashboard session, with
deterministic parsing and no side effects.
"""
from .view_types import View, PUBLIC_VIEWS, PRO_VIEWS, DEFAULT_VIEW
from .dialog_types import DialogKind, NoticeKind
from .intent_types import Intent, IntentType
from .intent_router import IntentRouter

__all__ = [
    "View",
    "PUBLIC_VIEWS",
    "PRO_VIEWS",
    "DEFAULT_VIEW",
    "DialogKind",
    "NoticeKind",
    "Intent",
    "IntentType",
    "IntentRouter",
]
