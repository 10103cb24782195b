"""
Tests for logging setup and log retention.
"""
import logging
import os
import time

import pytest

from channel_dashboard.config import DashboardConfig
from channel_dashboard.utils.log_cleanup import cleanup_logs
from channel_dashboard.utils.logging_setup import configure_logging


def make_logs(directory, count, start_age_seconds=0):
    """Create dashboard_<n>.log files, n=0 newest."""
    paths = []
    now = time.time()
    for i in range(count):
        path = directory / f"dashboard_{i:03d}.log"
        path.write_text("x", encoding="utf-8")
        mtime = now - start_age_seconds - i * 60
        os.utime(path, (mtime, mtime))
        paths.append(path)
    return paths


class TestCleanupLogs:
    """Tests for cleanup_logs."""

    def test_missing_directory(self, tmp_path):
        assert cleanup_logs(str(tmp_path / "nope")) == 0

    def test_keeps_most_recent(self, tmp_path):
        paths = make_logs(tmp_path, 5)

        assert cleanup_logs(str(tmp_path), max_files=2) == 3
        assert sorted(p.name for p in tmp_path.iterdir()) == [paths[0].name, paths[1].name]

    def test_age_limit(self, tmp_path):
        make_logs(tmp_path, 2, start_age_seconds=3 * 24 * 60 * 60)
        recent = tmp_path / "dashboard_new.log"
        recent.write_text("x", encoding="utf-8")

        assert cleanup_logs(str(tmp_path), max_files=10, max_age_days=1) == 2
        assert [p.name for p in tmp_path.iterdir()] == ["dashboard_new.log"]

    def test_ignores_other_files(self, tmp_path):
        make_logs(tmp_path, 3)
        (tmp_path / "notes.txt").write_text("keep", encoding="utf-8")

        cleanup_logs(str(tmp_path), max_files=1)

        assert (tmp_path / "notes.txt").exists()


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_only(self):
        assert configure_logging(DashboardConfig(log_level="WARNING")) is None
        assert logging.getLogger().level == logging.WARNING

    def test_file_logging_prunes_old_files(self, tmp_path):
        make_logs(tmp_path, 4, start_age_seconds=60)

        log_file = configure_logging(DashboardConfig(logs_dir=str(tmp_path), max_log_files=3))

        assert log_file.exists()
        assert len(list(tmp_path.glob("dashboard_*.log"))) == 3
