"""
Session context domain objects.

Pure domain models - no Flask, no asyncio, no dashboard logic.
The dashboard only reads the session; whoever owns authentication
publishes new sessions here.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class Session:
    """Who is using the dashboard and what they are allowed to see."""
    is_authenticated: bool = False
    is_pro: bool = False
    subscription_end_date: Optional[datetime] = None
    identity: Optional[str] = None

    def __post_init__(self):
        if self.subscription_end_date is not None:
            object.__setattr__(self, "subscription_end_date", as_utc(self.subscription_end_date))

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @classmethod
    def for_user(
        cls,
        identity: str,
        subscription_end_date: Optional[datetime] = None,
        subscription_active: bool = True,
        is_admin: bool = False,
        now: Optional[datetime] = None,
    ) -> "Session":
        """
        Build a logged-in session, deriving the pro flag.

        Admins are always pro; everyone else is pro while an active
        subscription has not reached its end date.
        """
        now = as_utc(now or datetime.now(timezone.utc))
        end_date = as_utc(subscription_end_date) if subscription_end_date else None
        has_paid_window = subscription_active and end_date is not None and end_date > now
        return cls(
            is_authenticated=True,
            is_pro=is_admin or has_paid_window,
            subscription_end_date=end_date,
            identity=identity,
        )

    def to_dict(self) -> dict:
        return {
            "is_authenticated": self.is_authenticated,
            "is_pro": self.is_pro,
            "subscription_end_date": (
                self.subscription_end_date.isoformat() if self.subscription_end_date else None
            ),
            "identity": self.identity,
        }


SessionListener = Callable[[Session], None]


class SessionContext:
    """
    Holds the current session and notifies listeners on every publish.

    Listeners are re-run even when the published session equals the
    previous one: each publish is a re-evaluation.
    """

    def __init__(self, session: Optional[Session] = None):
        self._session = session or Session.anonymous()
        self._listeners: List[SessionListener] = []

    @property
    def current(self) -> Session:
        return self._session

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def publish(self, session: Session) -> None:
        self._session = session
        for listener in list(self._listeners):
            listener(session)
