"""
Log retention for the dashboard's file logs.

Old files go first (when an age limit is given), then the oldest
surplus files beyond ``max_files``. The newest files always survive.
"""
import logging
import time
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _newest_first(files: List[Path]) -> List[Path]:
    return sorted(files, key=lambda f: f.stat().st_mtime, reverse=True)


def _delete(log_file: Path, reason: str) -> bool:
    try:
        log_file.unlink()
    except OSError as e:
        logger.warning(f"Failed to delete log file {log_file.name}: {e}")
        return False
    logger.debug(f"Deleted log file {log_file.name} ({reason})")
    return True


def cleanup_logs(
    logs_dir: str,
    max_files: int = 10,
    max_age_days: Optional[int] = None,
    pattern: str = "dashboard_*.log",
) -> int:
    """
    Prune dashboard log files.

    :param logs_dir: Directory containing log files
    :param max_files: Number of most recent files to keep
    :param max_age_days: Delete files older than this many days (None: no age limit)
    :param pattern: Glob pattern selecting log files
    :return: Number of files deleted
    """
    logs_path = Path(logs_dir)
    if not logs_path.is_dir():
        return 0

    remaining = _newest_first(list(logs_path.glob(pattern)))
    deleted = 0

    if max_age_days is not None:
        cutoff = time.time() - max_age_days * SECONDS_PER_DAY
        kept = []
        for log_file in remaining:
            if log_file.stat().st_mtime < cutoff and _delete(log_file, "expired"):
                deleted += 1
            else:
                kept.append(log_file)
        remaining = kept

    for log_file in remaining[max_files:]:
        if _delete(log_file, "over limit"):
            deleted += 1

    if deleted:
        logger.info(f"Log cleanup: deleted {deleted} file(s) from {logs_dir}")
    return deleted
