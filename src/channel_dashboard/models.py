from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


def _known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class AnalyzedVideo:
    id: str
    title: str
    channel_id: str
    channel_title: str = ""
    description: str = ""
    published_at: str = ""
    thumbnail_url: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    hashtags: List[str] = field(default_factory=list)
    duration: int = 0
    video_type: str = "regular"  # short | regular
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    popularity_score: float = 0.0
    country: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzedVideo":
        return cls(**_known_fields(cls, data))


@dataclass
class ChannelStats:
    """Aggregate upload statistics computed over one analyzed video set."""
    first_video_date: str = ""
    average_upload_interval_all: str = ""
    average_upload_interval_recent: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelStats":
        return cls(**_known_fields(cls, data))


@dataclass
class ChannelInfo:
    id: str
    title: str
    description: str = ""
    thumbnail_url: Optional[str] = None
    uploads_playlist_id: Optional[str] = None
    video_count: int = 0
    published_at: str = ""
    subscriber_count: int = 0
    view_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelInfo":
        return cls(**_known_fields(cls, data))


@dataclass
class AnalysisResult:
    """What the data service returns for one channel query."""
    videos: List[AnalyzedVideo]
    stats: ChannelStats = field(default_factory=ChannelStats)

    def is_empty(self) -> bool:
        return not self.videos
