"""
Logging setup shared by the HTTP app and the demo CLI.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import DashboardConfig
from .log_cleanup import cleanup_logs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: DashboardConfig) -> Optional[Path]:
    """
    Configure root logging from the dashboard config.

    Console output always; a timestamped file in ``config.logs_dir``
    when one is set, after pruning old files.

    :param config: Dashboard configuration
    :return: Path of the new log file, or None when logging to console only
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    handlers = [logging.StreamHandler()]

    log_file = None
    if config.logs_dir:
        logs_path = Path(config.logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        # Leave room for the file created below
        cleanup_logs(str(logs_path), max_files=max(config.max_log_files - 1, 0))
        log_file = logs_path / f"dashboard_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    if log_file is not None:
        logging.getLogger(__name__).info(f"Logging to {log_file}")
    return log_file
