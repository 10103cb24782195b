"""
Navigation gatekeeper - owns the active view.
"""
import logging

from ..context.session_context import Session, SessionContext
from ..events import EventBus, NavigationDecisionMade, NavigationDenied, ViewChanged
from ..interaction.view_types import View, DEFAULT_VIEW
from ..security.access_policy import AccessPolicy, DecisionOutcome, NavigationDecision

logger = logging.getLogger(__name__)


class NavigationGatekeeper:
    """
    Applies AccessPolicy decisions to the single active view.

    Denials leave the active view untouched and publish
    NavigationDenied so the dialog layer can prompt for login or upgrade.
    """

    def __init__(self, session_context: SessionContext, events: EventBus, initial_view: View = DEFAULT_VIEW):
        """
        :param session_context: Source of the current session (read-only)
        :param events: Per-session event bus
        :param initial_view: View active before any navigation
        """
        self._session_context = session_context
        self._events = events
        self._active_view = initial_view

    @property
    def active_view(self) -> View:
        return self._active_view

    def request_view(self, view: View) -> NavigationDecision:
        """
        Ask to show ``view``.

        :param view: Requested view
        :return: The decision that was applied
        """
        session = self._session_context.current
        decision = AccessPolicy.decide(view, session)

        if decision.allowed:
            self._activate(view)
        else:
            logger.info(
                f"Navigation to '{view.value}' denied: {decision.outcome.value} "
                f"(identity={session.identity})"
            )
            self._events.publish(
                NavigationDenied(
                    view=view,
                    requires_login=decision.outcome is DecisionOutcome.PROMPT_LOGIN,
                )
            )

        self._events.publish(NavigationDecisionMade(decision))
        return decision

    def on_session_changed(self, session: Session) -> None:
        """
        Re-check the active view against a new session.

        Only a lost login forces the default view; a lost subscription
        keeps the user where they are.
        """
        if AccessPolicy.can_stay_on(self._active_view, session):
            return

        logger.info(
            f"Session no longer allows '{self._active_view.value}', "
            f"returning to '{DEFAULT_VIEW.value}'"
        )
        self._activate(DEFAULT_VIEW, forced=True)

    def force_default_view(self) -> None:
        """Return to the default view, bypassing the policy (it is public)."""
        if self._active_view is not DEFAULT_VIEW:
            self._activate(DEFAULT_VIEW, forced=True)

    def _activate(self, view: View, forced: bool = False) -> None:
        previous = self._active_view
        self._active_view = view
        if previous is not view:
            logger.debug(f"Active view: {previous.value} -> {view.value}")
        self._events.publish(ViewChanged(view=view, forced=forced))
