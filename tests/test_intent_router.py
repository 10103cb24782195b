"""
Tests for intent router.
"""
import pytest

from channel_dashboard.interaction import DialogKind, IntentRouter, IntentType, NoticeKind, View
from channel_dashboard.reports import ReportKind
from channel_dashboard.security import ValidationError


@pytest.fixture
def router():
    return IntentRouter()


class TestFromPayload:
    """Tests for JSON action payloads."""

    def test_navigate(self, router):
        intent = router.from_payload({"type": "navigate", "view": "channel"})
        assert intent.type is IntentType.NAVIGATE
        assert intent.view is View.CHANNEL

    def test_navigate_with_payload(self, router):
        intent = router.from_payload(
            {"type": "navigate_with_payload", "view": "channel", "payload": "  UC123  "}
        )
        assert intent.view is View.CHANNEL
        assert intent.payload == "UC123"

    def test_run_analysis_blank_query_is_allowed(self, router):
        """Blank queries parse; the orchestrator ignores them."""
        intent = router.from_payload({"type": "run_analysis", "query": "   "})
        assert intent.query == ""

    def test_generate_report(self, router):
        intent = router.from_payload({"type": "generate_report", "report": "consulting"})
        assert intent.report is ReportKind.CONSULTING

    def test_switch_dialog(self, router):
        intent = router.from_payload({"type": "switch_dialog", "dialog": "login", "target": "signup"})
        assert (intent.dialog, intent.target) == (DialogKind.LOGIN, DialogKind.SIGNUP)

    def test_preview_notice(self, router):
        intent = router.from_payload(
            {"type": "preview_subscription_notice", "notice": "warning", "days_left": "2"}
        )
        assert intent.notice is NoticeKind.WARNING
        assert intent.days_left == 2

    @pytest.mark.parametrize("payload", [
        {"type": "teleport"},
        {"type": "navigate", "view": "settings"},
        {"type": "navigate"},
        {"type": "generate_report", "report": "summary"},
        {"type": "open_dialog", "dialog": 3},
        {"type": "preview_subscription_notice", "notice": "warning", "days_left": -1},
        ["navigate"],
        None,
    ])
    def test_malformed_payloads_raise(self, router, payload):
        with pytest.raises(ValidationError):
            router.from_payload(payload)


class TestRoute:
    """Tests for CLI commands."""

    def test_go(self, router):
        assert router.route("go News").view is View.NEWS

    def test_search_joins_words(self, router):
        intent = router.route("search my favourite channel")
        assert intent.type is IntentType.RUN_ANALYSIS
        assert intent.query == "my favourite channel"

    def test_open_with_payload(self, router):
        intent = router.route("open channel demo-channel")
        assert intent.type is IntentType.NAVIGATE_WITH_PAYLOAD
        assert intent.payload == "demo-channel"

    def test_apikey_commands(self, router):
        assert router.route("apikey").type is IntentType.OPEN_API_KEY_PROMPT
        assert router.route("apikey set").type is IntentType.SUBMIT_API_KEY

    def test_notice_default_days(self, router):
        intent = router.route("notice expired")
        assert intent.notice is NoticeKind.EXPIRED
        assert intent.days_left == 0

    def test_unknown_command(self, router):
        with pytest.raises(ValidationError, match="Unknown command"):
            router.route("dance")

    def test_missing_argument(self, router):
        with pytest.raises(ValidationError, match="Missing view"):
            router.route("go")

    def test_empty_command(self, router):
        with pytest.raises(ValidationError):
            router.route("   ")
