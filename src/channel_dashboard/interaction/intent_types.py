"""
Intent types for UI actions.

Every user action is turned into an Intent before it reaches the
gatekeeper or the orchestrator.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..reports import ReportKind
from .dialog_types import DialogKind, NoticeKind
from .view_types import View


class IntentType(Enum):
    """Types of user intents."""
    NAVIGATE = "navigate"
    NAVIGATE_WITH_PAYLOAD = "navigate_with_payload"
    RUN_ANALYSIS = "run_analysis"
    GENERATE_REPORT = "generate_report"
    OPEN_DIALOG = "open_dialog"
    CLOSE_DIALOG = "close_dialog"
    SWITCH_DIALOG = "switch_dialog"
    OPEN_API_KEY_PROMPT = "open_api_key_prompt"
    SUBMIT_API_KEY = "submit_api_key"
    PREVIEW_SUBSCRIPTION_NOTICE = "preview_subscription_notice"


@dataclass(frozen=True)
class Intent:
    type: IntentType
    view: Optional[View] = None
    payload: Optional[str] = None
    query: Optional[str] = None
    report: Optional[ReportKind] = None
    dialog: Optional[DialogKind] = None
    target: Optional[DialogKind] = None
    notice: Optional[NoticeKind] = None
    days_left: int = 0
