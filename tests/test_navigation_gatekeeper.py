"""
Tests for the navigation gatekeeper.
"""
import pytest

from channel_dashboard.context import Session, SessionContext
from channel_dashboard.events import NavigationDecisionMade, NavigationDenied, ViewChanged
from channel_dashboard.interaction import DEFAULT_VIEW, View
from channel_dashboard.orchestration import NavigationGatekeeper
from channel_dashboard.security import DecisionOutcome


@pytest.fixture
def session_context():
    return SessionContext()


@pytest.fixture
def gatekeeper(session_context, events):
    return NavigationGatekeeper(session_context, events)


def log_in(session_context, is_pro=False):
    session_context.publish(Session(is_authenticated=True, is_pro=is_pro, identity="ana"))


class TestRequestView:
    """Tests for NavigationGatekeeper.request_view."""

    def test_starts_on_default_view(self, gatekeeper):
        assert gatekeeper.active_view is DEFAULT_VIEW

    def test_anonymous_pro_view_prompts_login(self, gatekeeper, events):
        decision = gatekeeper.request_view(View.CHANNEL)

        assert decision.outcome is DecisionOutcome.PROMPT_LOGIN
        assert gatekeeper.active_view is View.HOME
        assert events.history(NavigationDenied) == [NavigationDenied(View.CHANNEL, requires_login=True)]

    def test_free_user_pro_view_prompts_upgrade(self, gatekeeper, session_context, events):
        log_in(session_context)

        decision = gatekeeper.request_view(View.TRENDING)

        assert decision.outcome is DecisionOutcome.PROMPT_UPGRADE
        assert gatekeeper.active_view is View.HOME
        assert events.history(NavigationDenied) == [NavigationDenied(View.TRENDING, requires_login=False)]

    def test_pro_user_activates(self, gatekeeper, session_context, events):
        log_in(session_context, is_pro=True)

        decision = gatekeeper.request_view(View.CHANNEL)

        assert decision.allowed
        assert gatekeeper.active_view is View.CHANNEL
        assert events.history(ViewChanged)[-1] == ViewChanged(View.CHANNEL)

    def test_every_request_publishes_decision(self, gatekeeper, events):
        gatekeeper.request_view(View.NOTICE)
        gatekeeper.request_view(View.ADMIN)

        outcomes = [e.decision.outcome for e in events.history(NavigationDecisionMade)]
        assert outcomes == [DecisionOutcome.ACTIVATE, DecisionOutcome.PROMPT_LOGIN]


class TestSessionChanges:
    """Tests for the reactive rule on session change."""

    def test_logout_forces_default_view(self, gatekeeper, session_context, events):
        log_in(session_context, is_pro=True)
        gatekeeper.request_view(View.CHANNEL)

        gatekeeper.on_session_changed(Session.anonymous())

        assert gatekeeper.active_view is DEFAULT_VIEW
        assert events.history(ViewChanged)[-1] == ViewChanged(DEFAULT_VIEW, forced=True)

    def test_losing_pro_keeps_active_pro_view(self, gatekeeper, session_context):
        """Only new navigation is gated by tier."""
        log_in(session_context, is_pro=True)
        gatekeeper.request_view(View.CHANNEL)

        downgraded = Session(is_authenticated=True, is_pro=False, identity="ana")
        session_context.publish(downgraded)
        gatekeeper.on_session_changed(downgraded)

        assert gatekeeper.active_view is View.CHANNEL
        assert not gatekeeper.request_view(View.NEWS).allowed

    def test_logout_on_public_view_is_quiet(self, gatekeeper, events):
        gatekeeper.on_session_changed(Session.anonymous())
        assert events.history(ViewChanged) == []
