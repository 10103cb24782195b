"""
Public application facade for Channel Dashboard.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from .config import DashboardConfig, resolve_project_path
from .context.context_manager import SessionContextManager
from .context.session_context import Session
from .exceptions import DashboardNotInitializedError
from .interaction.intent_types import Intent
from .interaction.view_types import View
from .reports import ReportKind
from .security.access_policy import NavigationDecision
from .service import DashboardSession, DashboardSnapshot
from .services.data_service import DataService
from .services.fixture_data_service import FixtureDataService

logger = logging.getLogger(__name__)


class DashboardApp:
    """
    Public application facade for Channel Dashboard.

    This is the single stable entry point for clients.
    All dependency wiring is encapsulated here.

    Usage:
        config = DashboardConfig(...)
        app = DashboardApp(config)
        app.initialize()
        await app.run_analysis("demo-channel", session_id="abc")
    """

    def __init__(
        self,
        config: DashboardConfig,
        data_service: Optional[DataService] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the application facade.

        :param config: DashboardConfig instance
        :param data_service: Data provider; defaults to the JSON fixture in config
        :param clock: Current-time source for subscription checks (tests)
        """
        self._config = config
        self._data_service = data_service
        self._clock = clock
        self._api_key_configured = False
        self._sessions: Optional[SessionContextManager[DashboardSession]] = None

    def initialize(self) -> None:
        """
        Wire the data service and the session registry.

        This method:
        - Loads the fixture data service if none was injected
        - Checks once whether an API key is configured

        Call this once before using any session method.
        """
        if self._sessions is not None:
            return

        if self._data_service is None:
            fixture_path = resolve_project_path(self._config.fixture_path)
            self._data_service = FixtureDataService.from_file(fixture_path)

        self._api_key_configured = self._data_service.is_api_key_configured()
        logger.info(f"Dashboard initialized (api key configured: {self._api_key_configured})")

        self._sessions = SessionContextManager(self._create_session)

    @property
    def config(self) -> DashboardConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._sessions is not None

    def session(self, session_id: str = "default") -> DashboardSession:
        """
        Get or create the dashboard state of a browser session.

        :raises DashboardNotInitializedError: if initialize() has not been called
        """
        if self._sessions is None:
            raise DashboardNotInitializedError("App not initialized. Call initialize() first.")
        return self._sessions.get_context(session_id)

    def publish_session(self, session: Session, session_id: str = "default") -> None:
        self.session(session_id).publish_session(session)

    def navigate(self, view: View, session_id: str = "default") -> NavigationDecision:
        return self.session(session_id).navigate(view)

    async def dispatch(self, intent: Intent, session_id: str = "default") -> Optional[NavigationDecision]:
        return await self.session(session_id).dispatch(intent)

    async def run_analysis(self, query: str, session_id: str = "default") -> None:
        await self.session(session_id).run_analysis(query)

    async def generate_report(self, kind: ReportKind, session_id: str = "default") -> None:
        await self.session(session_id).generate_report(kind)

    def snapshot(self, session_id: str = "default") -> DashboardSnapshot:
        return self.session(session_id).snapshot()

    def end_session(self, session_id: str = "default") -> bool:
        """
        End a browser session: its dashboard state and its record of
        shown subscription warnings are discarded.

        :return: False if the session did not exist
        """
        if self._sessions is None or not self._sessions.has_context(session_id):
            return False
        self._sessions.get_context(session_id).seen_warnings.clear()
        self._sessions.end_context(session_id)
        logger.info(f"Ended dashboard session {session_id}")
        return True

    def _create_session(self, session_id: str) -> DashboardSession:
        return DashboardSession(
            self._data_service,
            self._config,
            session_id=session_id,
            api_key_recorded=self._api_key_configured,
            clock=self._clock,
        )
