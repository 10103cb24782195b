"""
Dashboard events.

State changes flow one way: the gatekeeper, the orchestrator and the
session context publish events on a per-session bus, and the dialog
coordinator only ever learns about the world by subscribing to them.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, DefaultDict, List, Optional, Type

from .context.session_context import Session
from .interaction.dialog_types import NoticeKind
from .interaction.view_types import View
from .reports import ReportKind
from .security.access_policy import NavigationDecision

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionChanged:
    session: Session


@dataclass(frozen=True)
class ViewChanged:
    view: View
    forced: bool = False


@dataclass(frozen=True)
class NavigationDenied:
    view: View
    requires_login: bool


@dataclass(frozen=True)
class NavigationDecisionMade:
    decision: NavigationDecision


@dataclass(frozen=True)
class ReportRequested:
    kind: ReportKind


@dataclass(frozen=True)
class SubscriptionNoticeTriggered:
    kind: NoticeKind
    days_left: int = 0


@dataclass(frozen=True)
class ApiKeyRecorded:
    pass


Handler = Callable[[object], None]


class EventBus:
    """
    Synchronous publish/subscribe hub.

    Handlers run in subscription order on the publishing task.
    """

    def __init__(self):
        self._handlers: DefaultDict[Type, List[Handler]] = defaultdict(list)
        self._history: List[object] = []
        self._history_limit = 200

    def subscribe(self, event_type: Type, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def publish(self, event: object) -> None:
        logger.debug(f"Event: {event}")
        self._history.append(event)
        if len(self._history) > self._history_limit:
            self._history.pop(0)
        for handler in list(self._handlers[type(event)]):
            handler(event)

    def history(self, event_type: Optional[Type] = None) -> List[object]:
        """Recent events, optionally filtered by type (newest last)."""
        if event_type is None:
            return list(self._history)
        return [event for event in self._history if isinstance(event, event_type)]
