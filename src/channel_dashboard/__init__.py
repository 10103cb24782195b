"""
Channel Dashboard - orchestration layer for a channel analytics dashboard.

Public API:
    DashboardApp      - application facade (one per process)
    DashboardConfig   - configuration
    Session           - who is using the dashboard
"""
from .config import DashboardConfig
from .context.session_context import Session
from .app import DashboardApp

__all__ = ["DashboardApp", "DashboardConfig", "Session"]

__version__ = "0.1.0"
