import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Callable, Optional

from .config import DashboardConfig
from .context.session_context import Session, SessionContext
from .events import ApiKeyRecorded, EventBus, SessionChanged, SubscriptionNoticeTriggered
from .interaction.dialog_types import DialogKind, NoticeKind
from .interaction.intent_types import Intent, IntentType
from .interaction.view_types import PAYLOAD_VIEWS, View
from .memory.seen_warnings import SeenWarnings
from .orchestration.analysis_orchestrator import AnalysisOrchestrator
from .orchestration.dialog_coordinator import DialogCoordinator
from .orchestration.navigation_gatekeeper import NavigationGatekeeper
from .orchestration.subscription_monitor import SubscriptionMonitor
from .reports import ReportKind
from .security.access_policy import NavigationDecision
from .services.data_service import DataService

logger = logging.getLogger(__name__)


@dataclass
class DashboardSnapshot:
    """Everything a renderer needs, as plain data."""
    session_id: str
    active_view: str
    session: dict
    analysis: dict
    dialogs: dict
    last_decision: Optional[dict] = None

    def to_dict(self) -> dict:
        return asdict(self)


class DashboardSession:
    """
    Dashboard state of one browser session.
    The ONLY entry point for the UI layers.
    """

    def __init__(
        self,
        data_service: DataService,
        config: DashboardConfig,
        session_id: str = "default",
        seen_warnings: Optional[SeenWarnings] = None,
        api_key_recorded: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Composition root.
        All per-session components are created and wired here.

        :param data_service: Channel data and report provider
        :param config: Dashboard configuration
        :param session_id: Browser session identifier
        :param seen_warnings: Warnings already shown in this browser session
        :param api_key_recorded: Whether an API key was configured at startup
        :param clock: Current-time source for the subscription monitor
        """
        self.session_id = session_id
        self.config = config
        self.events = EventBus()
        self.session_context = SessionContext()
        self.seen_warnings = seen_warnings if seen_warnings is not None else SeenWarnings(
            config.warning_key_prefix
        )

        self.gatekeeper = NavigationGatekeeper(self.session_context, self.events)
        self.orchestrator = AnalysisOrchestrator(data_service, self.events, config)

        monitor_kwargs = {"clock": clock} if clock is not None else {}
        self.monitor = SubscriptionMonitor(
            self.seen_warnings,
            warning_window_days=config.warning_window_days,
            **monitor_kwargs,
        )
        self.dialogs = DialogCoordinator(
            self.events,
            session=self.session_context.current,
            active_view=self.gatekeeper.active_view,
            api_key_recorded=api_key_recorded,
        )

        self.last_decision: Optional[NavigationDecision] = None
        self.session_context.subscribe(self._on_session_published)

    @property
    def session(self) -> Session:
        return self.session_context.current

    @property
    def active_view(self) -> View:
        return self.gatekeeper.active_view

    # ----------------------------
    # Session
    # ----------------------------
    def publish_session(self, session: Session) -> None:
        """Publish a new session (login, logout, subscription change)."""
        logger.info(
            f"[{self.session_id}] Session published: authenticated={session.is_authenticated}, "
            f"pro={session.is_pro}"
        )
        self.session_context.publish(session)

    def _on_session_published(self, session: Session) -> None:
        self.events.publish(SessionChanged(session))
        self.gatekeeper.on_session_changed(session)

        notice = self.monitor.evaluate(session)
        if notice is not None:
            self.events.publish(SubscriptionNoticeTriggered(notice.kind, notice.days_left))

    # ----------------------------
    # Navigation
    # ----------------------------
    def navigate(self, view: View) -> NavigationDecision:
        self.last_decision = self.gatekeeper.request_view(view)
        return self.last_decision

    async def navigate_with_payload(self, view: View, payload: Optional[str]) -> NavigationDecision:
        """
        Navigate and hand ``payload`` to the view that consumes it.

        Denied navigation discards the payload.
        """
        decision = self.navigate(view)
        if not decision.allowed:
            logger.debug(f"[{self.session_id}] Dropping payload for denied view '{view.value}'")
            return decision

        if view in PAYLOAD_VIEWS and payload:
            await self.orchestrator.run_analysis(payload)
        elif payload:
            logger.debug(f"[{self.session_id}] View '{view.value}' has no payload consumer")
        return decision

    # ----------------------------
    # Analysis
    # ----------------------------
    async def run_analysis(self, query: str) -> None:
        """
        Search from the channel view.

        From any other view this is the "analyze this channel" shortcut
        and goes through the gatekeeper first.
        """
        if self.gatekeeper.active_view is View.CHANNEL:
            await self.orchestrator.run_analysis(query)
        else:
            await self.navigate_with_payload(View.CHANNEL, query)

    async def generate_report(self, kind: ReportKind) -> None:
        await self.orchestrator.generate_report(kind)

    # ----------------------------
    # Dialogs
    # ----------------------------
    def close_dialog(self, kind: DialogKind) -> None:
        if self.dialogs.close(kind):
            self.gatekeeper.force_default_view()

    def submit_api_key(self) -> None:
        """Record that the user has supplied an API key."""
        logger.info(f"[{self.session_id}] API key recorded")
        self.events.publish(ApiKeyRecorded())

    def preview_subscription_notice(self, kind: NoticeKind, days_left: int = 0) -> None:
        """Admin preview of a subscription notice. Bypasses the monitor."""
        self.events.publish(SubscriptionNoticeTriggered(kind, days_left))

    # ----------------------------
    # Intents
    # ----------------------------
    async def dispatch(self, intent: Intent) -> Optional[NavigationDecision]:
        """
        Apply one UI intent.

        :param intent: Parsed intent
        :return: The navigation decision for navigation intents, else None
        """
        logger.debug(f"[{self.session_id}] Dispatching {intent.type.value}")

        if intent.type is IntentType.NAVIGATE:
            return self.navigate(intent.view)
        if intent.type is IntentType.NAVIGATE_WITH_PAYLOAD:
            return await self.navigate_with_payload(intent.view, intent.payload)
        if intent.type is IntentType.RUN_ANALYSIS:
            await self.run_analysis(intent.query or "")
        elif intent.type is IntentType.GENERATE_REPORT:
            await self.generate_report(intent.report)
        elif intent.type is IntentType.OPEN_DIALOG:
            self.dialogs.open(intent.dialog)
        elif intent.type is IntentType.CLOSE_DIALOG:
            self.close_dialog(intent.dialog)
        elif intent.type is IntentType.SWITCH_DIALOG:
            self.dialogs.switch(intent.dialog, intent.target)
        elif intent.type is IntentType.OPEN_API_KEY_PROMPT:
            self.dialogs.open_api_key_prompt()
        elif intent.type is IntentType.SUBMIT_API_KEY:
            self.submit_api_key()
        elif intent.type is IntentType.PREVIEW_SUBSCRIPTION_NOTICE:
            self.preview_subscription_notice(intent.notice, intent.days_left)
        return None

    def snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            session_id=self.session_id,
            active_view=self.gatekeeper.active_view.value,
            session=self.session.to_dict(),
            analysis=self.orchestrator.snapshot(),
            dialogs=self.dialogs.snapshot(),
            last_decision=self.last_decision.to_dict() if self.last_decision else None,
        )
