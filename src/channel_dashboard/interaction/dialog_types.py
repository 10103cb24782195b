"""
Modal dialogs the dashboard can show.
"""
from enum import Enum

from ..reports import ReportKind


class DialogKind(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"
    PRICING = "pricing"
    GUIDE = "guide"
    PROFILE = "profile"
    SUBSCRIPTION_NOTICE = "subscription_notice"
    CANCEL_CONFIRMATION = "cancel_confirmation"
    QUOTA_INFO = "quota_info"
    FORGOT_PASSWORD = "forgot_password"
    STRATEGY_REPORT = "strategy_report"
    GROWTH_REPORT = "growth_report"
    CONSULTING_REPORT = "consulting_report"
    API_KEY_PROMPT = "api_key_prompt"


class NoticeKind(str, Enum):
    """Subscription notice variants."""
    EXPIRED = "expired"
    WARNING = "warning"


# At most one of these is open at a time
PRIMARY_DIALOGS = frozenset({
    DialogKind.LOGIN,
    DialogKind.SIGNUP,
    DialogKind.PRICING,
    DialogKind.GUIDE,
    DialogKind.PROFILE,
    DialogKind.SUBSCRIPTION_NOTICE,
    DialogKind.CANCEL_CONFIRMATION,
    DialogKind.QUOTA_INFO,
    DialogKind.FORGOT_PASSWORD,
})

REPORT_DIALOGS = {
    ReportKind.STRATEGY: DialogKind.STRATEGY_REPORT,
    ReportKind.GROWTH: DialogKind.GROWTH_REPORT,
    ReportKind.CONSULTING: DialogKind.CONSULTING_REPORT,
}

# "Sign up instead", "Forgot password?", "Upgrade" links inside dialogs
ALLOWED_SWITCHES = {
    DialogKind.LOGIN: frozenset({DialogKind.SIGNUP, DialogKind.FORGOT_PASSWORD}),
    DialogKind.SIGNUP: frozenset({DialogKind.LOGIN}),
    DialogKind.FORGOT_PASSWORD: frozenset({DialogKind.LOGIN}),
    DialogKind.PRICING: frozenset({DialogKind.LOGIN}),
    DialogKind.GUIDE: frozenset({DialogKind.PRICING}),
    DialogKind.SUBSCRIPTION_NOTICE: frozenset({DialogKind.PRICING}),
}
