"""
Tests for the dialog coordinator.
"""
import pytest

from channel_dashboard.context import Session
from channel_dashboard.events import (
    ApiKeyRecorded,
    NavigationDenied,
    ReportRequested,
    SessionChanged,
    SubscriptionNoticeTriggered,
    ViewChanged,
)
from channel_dashboard.exceptions import DialogTransitionError
from channel_dashboard.interaction import DialogKind, NoticeKind, View
from channel_dashboard.orchestration import DialogCoordinator, OpenDialog
from channel_dashboard.reports import ReportKind

USER = Session(is_authenticated=True, identity="ana")


@pytest.fixture
def dialogs(events):
    return DialogCoordinator(events)


class TestPrimaryDialog:
    """Tests for the single primary dialog slot."""

    def test_login_denial_opens_login(self, dialogs, events):
        events.publish(NavigationDenied(View.CHANNEL, requires_login=True))
        assert dialogs.primary == OpenDialog(DialogKind.LOGIN)

    def test_upgrade_denial_opens_pricing(self, dialogs, events):
        events.publish(SessionChanged(USER))
        events.publish(NavigationDenied(View.CHANNEL, requires_login=False))
        assert dialogs.primary == OpenDialog(DialogKind.PRICING)

    def test_login_takes_precedence_over_pricing(self, dialogs, events):
        """An upgrade prompt never hides an open login prompt while logged out."""
        events.publish(NavigationDenied(View.CHANNEL, requires_login=True))
        events.publish(NavigationDenied(View.CHANNEL, requires_login=False))
        assert dialogs.primary.kind is DialogKind.LOGIN

    def test_opening_replaces_current(self, dialogs):
        dialogs.open(DialogKind.GUIDE)
        dialogs.open(DialogKind.QUOTA_INFO)
        assert dialogs.primary.kind is DialogKind.QUOTA_INFO
        assert not dialogs.is_open(DialogKind.GUIDE)

    def test_subscription_notice_carries_details(self, dialogs, events):
        events.publish(SubscriptionNoticeTriggered(NoticeKind.WARNING, days_left=2))
        assert dialogs.primary == OpenDialog(
            DialogKind.SUBSCRIPTION_NOTICE, notice=NoticeKind.WARNING, days_left=2
        )
        assert dialogs.snapshot()["primary"] == {
            "kind": "subscription_notice",
            "notice": "warning",
            "days_left": 2,
        }

    def test_login_closes_account_dialogs(self, dialogs, events):
        dialogs.open(DialogKind.SIGNUP)
        events.publish(SessionChanged(USER))
        assert dialogs.primary is None

    def test_close_only_closes_matching_dialog(self, dialogs):
        dialogs.open(DialogKind.PROFILE)
        dialogs.close(DialogKind.PRICING)
        assert dialogs.primary.kind is DialogKind.PROFILE
        dialogs.close(DialogKind.PROFILE)
        assert dialogs.primary is None


class TestSwitch:
    """Tests for in-dialog links."""

    @pytest.mark.parametrize("source,target", [
        (DialogKind.LOGIN, DialogKind.SIGNUP),
        (DialogKind.LOGIN, DialogKind.FORGOT_PASSWORD),
        (DialogKind.SIGNUP, DialogKind.LOGIN),
        (DialogKind.FORGOT_PASSWORD, DialogKind.LOGIN),
        (DialogKind.PRICING, DialogKind.LOGIN),
        (DialogKind.GUIDE, DialogKind.PRICING),
        (DialogKind.SUBSCRIPTION_NOTICE, DialogKind.PRICING),
    ])
    def test_allowed_switches(self, dialogs, source, target):
        dialogs.primary = OpenDialog(source)
        dialogs.switch(source, target)
        assert dialogs.primary == OpenDialog(target)

    def test_disallowed_switch_raises(self, dialogs):
        dialogs.open(DialogKind.PROFILE)
        with pytest.raises(DialogTransitionError):
            dialogs.switch(DialogKind.PROFILE, DialogKind.PRICING)
        assert dialogs.primary.kind is DialogKind.PROFILE

    def test_switch_from_closed_dialog_raises(self, dialogs):
        with pytest.raises(DialogTransitionError, match="not open"):
            dialogs.switch(DialogKind.LOGIN, DialogKind.SIGNUP)


class TestReportDialog:
    def test_report_request_opens_report_dialog(self, dialogs, events):
        events.publish(ReportRequested(ReportKind.GROWTH))
        assert dialogs.report is DialogKind.GROWTH_REPORT

    def test_report_dialog_independent_of_primary(self, dialogs, events):
        """A report dialog is never blocked by, and never closes, the primary dialog."""
        events.publish(NavigationDenied(View.CHANNEL, requires_login=True))
        events.publish(ReportRequested(ReportKind.STRATEGY))

        assert dialogs.primary.kind is DialogKind.LOGIN
        assert dialogs.report is DialogKind.STRATEGY_REPORT

        dialogs.close(DialogKind.STRATEGY_REPORT)
        assert dialogs.report is None
        assert dialogs.primary.kind is DialogKind.LOGIN


class TestApiKeyPrompt:
    """Tests for the derived API key prompt."""

    def test_hidden_on_default_view(self, dialogs, events):
        events.publish(SessionChanged(USER))
        assert not dialogs.api_key_prompt_visible

    def test_shown_off_default_view_without_key(self, dialogs, events):
        events.publish(SessionChanged(USER))
        events.publish(ViewChanged(View.LIBRARY))
        assert dialogs.api_key_prompt_visible

    def test_hidden_for_anonymous(self, dialogs, events):
        events.publish(ViewChanged(View.NOTICE))
        assert not dialogs.api_key_prompt_visible

    def test_close_without_key_requests_default_view(self, dialogs, events):
        events.publish(SessionChanged(USER))
        events.publish(ViewChanged(View.LIBRARY))
        assert dialogs.close(DialogKind.API_KEY_PROMPT) is True

    def test_recorded_key_closes_prompt(self, dialogs, events):
        events.publish(SessionChanged(USER))
        events.publish(ViewChanged(View.LIBRARY))
        events.publish(ApiKeyRecorded())

        assert not dialogs.api_key_prompt_visible
        assert dialogs.close(DialogKind.API_KEY_PROMPT) is False

    def test_configured_key_never_prompts(self, events):
        dialogs = DialogCoordinator(events, session=USER, active_view=View.LIBRARY, api_key_recorded=True)
        assert not dialogs.api_key_prompt_visible

    def test_explicit_open_on_default_view(self, dialogs, events):
        events.publish(SessionChanged(USER))
        assert dialogs.open_api_key_prompt()
        assert dialogs.is_open(DialogKind.API_KEY_PROMPT)
        # Already on the default view: nothing to leave
        assert dialogs.close(DialogKind.API_KEY_PROMPT) is False
        assert not dialogs.api_key_prompt_visible

    def test_explicit_open_when_anonymous_prompts_login(self, dialogs):
        assert dialogs.open_api_key_prompt() is False
        assert dialogs.primary.kind is DialogKind.LOGIN
