"""
Shared fixtures for dashboard tests.
"""
import asyncio
from datetime import datetime, timezone

import pytest

from channel_dashboard.config import DashboardConfig
from channel_dashboard.events import EventBus
from channel_dashboard.exceptions import DataServiceError
from channel_dashboard.models import AnalysisResult, AnalyzedVideo, ChannelInfo, ChannelStats
from channel_dashboard.reports import (
    ConsultingReport,
    GrowthReport,
    ReportKind,
    StrategyReport,
)

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


class FakeDataService:
    """
    Scriptable DataService.

    Responses are looked up by call key; a held key waits on an
    asyncio.Event so tests can decide the order in which calls finish.
    """

    def __init__(self):
        self.analyses = {}
        self.channels = {}
        self.reports = {}
        self.api_key_configured = False
        self.calls = []
        self._gates = {}

    def hold(self, *key) -> asyncio.Event:
        """Block the next call with this key until the returned event is set."""
        gate = asyncio.Event()
        self._gates[key] = gate
        return gate

    async def _respond(self, key, value):
        self.calls.append(key)
        gate = self._gates.pop(key, None)
        if gate is not None:
            await gate.wait()
        if isinstance(value, Exception):
            raise value
        return value

    def is_api_key_configured(self) -> bool:
        return self.api_key_configured

    async def analyze_channel(self, query):
        value = self.analyses.get(query, DataServiceError("Channel not found."))
        return await self._respond(("analyze", query), value)

    async def lookup_channel(self, channel_id):
        value = self.channels.get(channel_id, DataServiceError("Channel not found."))
        return await self._respond(("lookup", channel_id), value)

    async def _report(self, kind, videos):
        return await self._respond(("report", kind), self.reports[kind])

    async def generate_strategy_report(self, videos):
        return await self._report(ReportKind.STRATEGY, videos)

    async def generate_growth_report(self, videos):
        return await self._report(ReportKind.GROWTH, videos)

    async def generate_consulting_report(self, videos):
        return await self._report(ReportKind.CONSULTING, videos)


def make_video(video_id, channel_id="C1", views=0):
    return AnalyzedVideo(id=video_id, title=f"Video {video_id}", channel_id=channel_id, view_count=views)


@pytest.fixture
def config():
    """Create a test configuration."""
    return DashboardConfig(fixture_path="unused.json")


@pytest.fixture
def events():
    return EventBus()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    """Fixed clock at NOW."""
    return lambda: now


@pytest.fixture
def data_service():
    """Fake service preloaded with the demo channel."""
    service = FakeDataService()
    service.analyses["demo-channel"] = AnalysisResult(
        videos=[make_video("v1", views=300), make_video("v2", views=200), make_video("v3", views=100)],
        stats=ChannelStats(first_video_date="2021-03-20"),
    )
    service.analyses["other-channel"] = AnalysisResult(
        videos=[make_video("w1", channel_id="C2", views=10)],
    )
    service.analyses["empty-channel"] = AnalysisResult(videos=[])
    service.channels["C1"] = ChannelInfo(id="C1", title="Demo Channel")
    service.channels["C2"] = ChannelInfo(id="C2", title="Other Channel")
    service.reports[ReportKind.STRATEGY] = StrategyReport()
    service.reports[ReportKind.GROWTH] = GrowthReport(title="Growth")
    service.reports[ReportKind.CONSULTING] = ConsultingReport()
    return service
