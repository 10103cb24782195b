"""
Analysis Pipeline Orchestrator

Handles the multi-step workflow for one channel query:
1. Data service → analyzed videos + aggregate stats
2. First (highest-ranked) video → channel id → channel lookup
3. On demand → strategy / growth / consulting reports

Runs are never cancelled. Every run and every report request carries a
token, and a response whose token is no longer current is dropped, so
a slow answer to an old query can never overwrite a newer one.
"""
import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..config import DashboardConfig
from ..events import EventBus, ReportRequested
from ..models import AnalyzedVideo, ChannelInfo, ChannelStats
from ..reports import Report, ReportKind
from ..services.data_service import DataService

logger = logging.getLogger(__name__)


class AnalysisPhase(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    INFO_FETCHING = "info_fetching"
    READY = "ready"
    EMPTY = "empty"
    FAILED = "failed"


LOADING_PHASES = frozenset({AnalysisPhase.SEARCHING, AnalysisPhase.INFO_FETCHING})

REPORT_OPERATIONS = {
    ReportKind.STRATEGY: "generate_strategy_report",
    ReportKind.GROWTH: "generate_growth_report",
    ReportKind.CONSULTING: "generate_consulting_report",
}


@dataclass
class ReportSlot:
    """Lifecycle of one report kind: requested → processing → result | error."""
    result: Optional[Report] = None
    processing: bool = False
    error: Optional[str] = None
    token: int = 0

    def to_dict(self) -> dict:
        return {
            "result": self.result.model_dump() if self.result is not None else None,
            "processing": self.processing,
            "error": self.error,
        }


def failure_message(error: Exception, fallback: str) -> str:
    """The failure's own message if it has one, otherwise ``fallback``."""
    message = str(error).strip()
    return message or fallback


class AnalysisOrchestrator:
    """
    Owns the in-flight, result and error state of the analysis pipeline.
    """

    def __init__(self, data_service: DataService, events: EventBus, config: DashboardConfig):
        """
        :param data_service: Channel data and report provider
        :param events: Per-session event bus (report dialogs listen here)
        :param config: Dashboard configuration (user-facing messages)
        """
        self._data_service = data_service
        self._events = events
        self._config = config

        self.phase = AnalysisPhase.IDLE
        self.query = ""
        self.videos: Optional[List[AnalyzedVideo]] = None
        self.stats: Optional[ChannelStats] = None
        self.channel_info: Optional[ChannelInfo] = None
        self.message: Optional[str] = None
        self.reports: Dict[ReportKind, ReportSlot] = {kind: ReportSlot() for kind in ReportKind}

        self._run_token = 0
        self._report_sequence = 0
        self._last_report_kind: Optional[ReportKind] = None

    # ----------------------------
    # Derived state
    # ----------------------------
    @property
    def is_loading(self) -> bool:
        return self.phase in LOADING_PHASES

    @property
    def has_videos(self) -> bool:
        return bool(self.videos)

    @property
    def error(self) -> Optional[str]:
        return self.message if self.phase is AnalysisPhase.FAILED else None

    @property
    def ai_processing(self) -> bool:
        return any(slot.processing for slot in self.reports.values())

    @property
    def ai_error(self) -> Optional[str]:
        """Error of the most recently requested report, if any."""
        if self._last_report_kind is None:
            return None
        return self.reports[self._last_report_kind].error

    # ----------------------------
    # Pipeline
    # ----------------------------
    async def run_analysis(self, query: str) -> None:
        """
        Analyze a channel query end to end.

        Blank queries are ignored without touching state.

        :param query: Channel name, handle, id or URL
        """
        query = (query or "").strip()
        if not query:
            logger.debug("Ignoring blank analysis query")
            return

        self._run_token += 1
        token = self._run_token
        self._start_fresh(query)
        logger.info(f"Analysis run {token} started for '{query}'")

        # Step 1: videos + stats
        try:
            result = await self._data_service.analyze_channel(query)
        except Exception as e:
            if self._is_stale(token):
                return
            logger.warning(f"Analysis run {token} failed: {e}")
            self._fail(failure_message(e, self._config.analysis_error_message))
            return

        if self._is_stale(token):
            return

        if result.is_empty():
            self.videos = []
            self.stats = result.stats
            self.message = self._config.empty_result_message
            self.phase = AnalysisPhase.EMPTY
            logger.info(f"Analysis run {token}: no analyzable videos for '{query}'")
            return

        self.videos = list(result.videos)
        self.stats = result.stats
        channel_id = self.videos[0].channel_id

        # Step 2: channel details for the top video's channel
        self.phase = AnalysisPhase.INFO_FETCHING
        try:
            channel_info = await self._data_service.lookup_channel(channel_id)
        except Exception as e:
            if self._is_stale(token):
                return
            # Keep the videos; only the channel header is missing
            logger.warning(f"Analysis run {token}: channel lookup for {channel_id} failed: {e}")
            self._fail(self._config.channel_info_error_message)
            return

        if self._is_stale(token):
            return

        self.channel_info = channel_info
        self.phase = AnalysisPhase.READY
        logger.info(
            f"Analysis run {token} ready: {len(self.videos)} video(s), channel {channel_id}"
        )

    # ----------------------------
    # Reports
    # ----------------------------
    async def generate_report(self, kind: ReportKind) -> None:
        """
        Generate one AI report for the current video set.

        Does nothing until an analysis has produced videos. The report
        dialog is requested before the provider is called.
        """
        if not self.has_videos:
            logger.debug(f"Ignoring {kind.value} report request: no analyzed videos")
            return

        slot = self.reports[kind]
        self._report_sequence += 1
        slot.token = token = self._report_sequence
        self._last_report_kind = kind

        self._events.publish(ReportRequested(kind))
        slot.processing = True
        slot.error = None

        operation = getattr(self._data_service, REPORT_OPERATIONS[kind])
        try:
            result = await operation(list(self.videos))
        except Exception as e:
            if slot.token != token:
                return
            logger.warning(f"{kind.value} report failed: {e}")
            slot.error = failure_message(e, self._config.report_error_message)
            slot.processing = False
            return

        if slot.token != token:
            logger.debug(f"Discarding superseded {kind.value} report")
            return

        slot.result = result
        slot.processing = False
        logger.info(f"{kind.value} report ready")

    async def generate_strategy(self) -> None:
        await self.generate_report(ReportKind.STRATEGY)

    async def generate_growth(self) -> None:
        await self.generate_report(ReportKind.GROWTH)

    async def generate_consulting(self) -> None:
        await self.generate_report(ReportKind.CONSULTING)

    # ----------------------------
    # Internals
    # ----------------------------
    def _start_fresh(self, query: str) -> None:
        self.query = query
        self.videos = None
        self.stats = None
        self.channel_info = None
        self.message = None
        for slot in self.reports.values():
            # New token: responses still in flight for the old videos are dropped
            self._report_sequence += 1
            slot.token = self._report_sequence
            slot.result = None
            slot.error = None
            slot.processing = False
        self.phase = AnalysisPhase.SEARCHING

    def _fail(self, message: str) -> None:
        self.message = message
        self.phase = AnalysisPhase.FAILED

    def _is_stale(self, token: int) -> bool:
        if token != self._run_token:
            logger.debug(f"Discarding result of superseded analysis run {token}")
            return True
        return False

    def snapshot(self) -> dict:
        return {
            "phase": self.phase.value,
            "query": self.query,
            "is_loading": self.is_loading,
            "videos": [asdict(v) for v in self.videos] if self.videos is not None else None,
            "stats": asdict(self.stats) if self.stats is not None else None,
            "channel_info": asdict(self.channel_info) if self.channel_info is not None else None,
            "message": self.message,
            "error": self.error,
            "reports": {kind.value: slot.to_dict() for kind, slot in self.reports.items()},
            "ai_processing": self.ai_processing,
            "ai_error": self.ai_error,
        }
