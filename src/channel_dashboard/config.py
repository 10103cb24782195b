import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Repository root (channel-dashboard/); relative data paths resolve here
PROJECT_ROOT = Path(__file__).parent.parent.parent


def resolve_project_path(path: str) -> str:
    """Resolve ``path`` against the repository root unless it is absolute."""
    if os.path.isabs(path):
        return path
    return str(PROJECT_ROOT / path)


@dataclass
class DashboardConfig:
    # Data
    fixture_path: str = "data/demo_channels.json"

    # Subscription lifecycle
    warning_window_days: int = 3
    warning_key_prefix: str = "sub_warning_"

    # User-facing messages
    empty_result_message: str = "No analyzable videos were found for this channel."
    analysis_error_message: str = "Something went wrong while analyzing the channel."
    channel_info_error_message: str = (
        "The videos were analyzed, but the channel details could not be loaded."
    )
    report_error_message: str = "The AI report could not be generated. Please try again."

    # Logging
    log_level: str = "INFO"
    logs_dir: Optional[str] = None
    max_log_files: int = 10

    # HTTP
    rate_limits: tuple = ("200 per hour", "30 per minute")
