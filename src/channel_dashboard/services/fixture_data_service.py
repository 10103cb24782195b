"""
Data service backed by a JSON fixture.

Serves pre-computed channel analyses and reports for the demo CLI,
the HTTP app and local development. Nothing is computed here.
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import DataServiceError
from ..models import AnalysisResult, AnalyzedVideo, ChannelInfo, ChannelStats
from ..reports import (
    ConsultingReport,
    GrowthReport,
    ReportKind,
    StrategyReport,
    parse_report,
)

logger = logging.getLogger(__name__)


class FixtureDataService:
    """
    DataService implementation over an in-memory fixture.

    Fixture layout::

        {
          "api_key_configured": true,
          "channels": [
            {
              "channel": {...ChannelInfo fields...},
              "aliases": ["demo-channel"],
              "stats": {...ChannelStats fields...},
              "videos": [{...AnalyzedVideo fields...}],
              "reports": {"strategy": {...}, "growth": {...}, "consulting": {...}}
            }
          ]
        }
    """

    def __init__(self, fixture: Dict[str, Any], latency_seconds: float = 0.0):
        """
        :param fixture: Parsed fixture document
        :param latency_seconds: Simulated latency per call
        """
        self._api_key_configured = bool(fixture.get("api_key_configured", True))
        self._channels: List[Dict[str, Any]] = list(fixture.get("channels", []))
        self._latency = latency_seconds

    @classmethod
    def from_file(cls, path: str, latency_seconds: float = 0.0) -> "FixtureDataService":
        fixture_path = Path(path)
        try:
            with fixture_path.open(encoding="utf-8") as f:
                fixture = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DataServiceError(f"Could not load channel fixture {fixture_path}: {e}") from e

        logger.info(f"Loaded {len(fixture.get('channels', []))} channel(s) from {fixture_path}")
        return cls(fixture, latency_seconds=latency_seconds)

    # ----------------------------
    # DataService
    # ----------------------------
    def is_api_key_configured(self) -> bool:
        return self._api_key_configured

    async def analyze_channel(self, query: str) -> AnalysisResult:
        await self._simulate_latency()
        entry = self._find_by_query(query)
        if entry is None:
            raise DataServiceError("Channel not found.")

        videos = [AnalyzedVideo.from_dict(v) for v in entry.get("videos", [])]
        # Highest-ranked (most viewed) first
        videos.sort(key=lambda v: v.view_count, reverse=True)
        stats = ChannelStats.from_dict(entry.get("stats", {}))
        return AnalysisResult(videos=videos, stats=stats)

    async def lookup_channel(self, channel_id: str) -> ChannelInfo:
        await self._simulate_latency()
        entry = self._find_by_id(channel_id)
        if entry is None:
            raise DataServiceError("Channel not found.")
        return ChannelInfo.from_dict(entry["channel"])

    async def generate_strategy_report(self, videos: List[AnalyzedVideo]) -> StrategyReport:
        return await self._report(ReportKind.STRATEGY, videos)

    async def generate_growth_report(self, videos: List[AnalyzedVideo]) -> GrowthReport:
        return await self._report(ReportKind.GROWTH, videos)

    async def generate_consulting_report(self, videos: List[AnalyzedVideo]) -> ConsultingReport:
        return await self._report(ReportKind.CONSULTING, videos)

    # ----------------------------
    # Internals
    # ----------------------------
    async def _report(self, kind: ReportKind, videos: List[AnalyzedVideo]):
        await self._simulate_latency()
        if not videos:
            raise DataServiceError("There are no videos to analyze.")

        entry = self._find_by_id(videos[0].channel_id)
        payload = (entry or {}).get("reports", {}).get(kind.value, {})
        return parse_report(kind, payload)

    def _find_by_id(self, channel_id: str) -> Optional[Dict[str, Any]]:
        for entry in self._channels:
            if entry.get("channel", {}).get("id") == channel_id:
                return entry
        return None

    def _find_by_query(self, query: str) -> Optional[Dict[str, Any]]:
        needle = query.strip().lower()
        for entry in self._channels:
            channel = entry.get("channel", {})
            names = [channel.get("id", ""), channel.get("title", "")]
            names.extend(entry.get("aliases", []))
            if needle in (name.lower() for name in names if name):
                return entry
        return None

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)
