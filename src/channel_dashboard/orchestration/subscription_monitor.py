"""
Subscription lifecycle monitor.

Re-evaluated on every session publish. Expired subscriptions re-prompt
every time; "expiring soon" warnings are shown once per identity for
the lifetime of the browser session.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from ..context.session_context import Session, as_utc
from ..interaction.dialog_types import NoticeKind
from ..memory.seen_warnings import SeenWarnings

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SubscriptionNotice:
    kind: NoticeKind
    days_left: int = 0


class SubscriptionMonitor:
    """
    Decides whether a session change should raise a subscription notice.
    """

    def __init__(
        self,
        seen_warnings: SeenWarnings,
        warning_window_days: int = 3,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        :param seen_warnings: Session-scoped record of warnings already shown
        :param warning_window_days: Warn when this many days or fewer remain
        :param clock: Returns the current time (timezone-aware)
        """
        self._seen_warnings = seen_warnings
        self._warning_window_days = warning_window_days
        self._clock = clock

    @staticmethod
    def days_left(end_date: datetime, now: datetime) -> int:
        """Whole days remaining, rounded up."""
        return math.ceil((end_date - now).total_seconds() / SECONDS_PER_DAY)

    def evaluate(self, session: Session) -> Optional[SubscriptionNotice]:
        """
        :param session: Newly published session
        :return: Notice to show, or None
        """
        if not session.is_authenticated or session.subscription_end_date is None:
            return None

        now = as_utc(self._clock())
        end_date = session.subscription_end_date

        if now > end_date:
            logger.info(f"Subscription expired for {session.identity}")
            return SubscriptionNotice(NoticeKind.EXPIRED)

        days_left = self.days_left(end_date, now)
        if not 0 <= days_left <= self._warning_window_days:
            return None

        if self._seen_warnings.has_seen(session.identity):
            logger.debug(f"Expiry warning already shown this session for {session.identity}")
            return None

        self._seen_warnings.mark_seen(session.identity)
        logger.info(f"Subscription for {session.identity} ends in {days_left} day(s)")
        return SubscriptionNotice(NoticeKind.WARNING, days_left=days_left)
