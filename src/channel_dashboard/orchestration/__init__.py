"""
Orchestration services for the dashboard.

These hold the deterministic application logic between the UI intents
and the data service: who may see which view, the analysis pipeline,
subscription notices and the dialogs reacting to all of them.
"""

from .navigation_gatekeeper import NavigationGatekeeper
from .analysis_orchestrator import AnalysisOrchestrator, AnalysisPhase, ReportSlot
from .subscription_monitor import SubscriptionMonitor, SubscriptionNotice
from .dialog_coordinator import DialogCoordinator, OpenDialog

__all__ = [
    "NavigationGatekeeper",
    "AnalysisOrchestrator",
    "AnalysisPhase",
    "ReportSlot",
    "SubscriptionMonitor",
    "SubscriptionNotice",
    "DialogCoordinator",
    "OpenDialog",
]
