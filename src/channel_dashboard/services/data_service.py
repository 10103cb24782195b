from typing import List, Protocol

from ..models import AnalysisResult, AnalyzedVideo, ChannelInfo
from ..reports import ConsultingReport, GrowthReport, StrategyReport


class DataService(Protocol):
    """
    Protocol for the channel data and AI report provider.

    Every coroutine either returns its result or raises; a
    DataServiceError message is shown to the user as-is.
    """

    async def lookup_channel(self, channel_id: str) -> ChannelInfo:
        ...

    async def analyze_channel(self, query: str) -> AnalysisResult:
        ...

    async def generate_strategy_report(self, videos: List[AnalyzedVideo]) -> StrategyReport:
        ...

    async def generate_growth_report(self, videos: List[AnalyzedVideo]) -> GrowthReport:
        ...

    async def generate_consulting_report(self, videos: List[AnalyzedVideo]) -> ConsultingReport:
        ...

    def is_api_key_configured(self) -> bool:
        ...
