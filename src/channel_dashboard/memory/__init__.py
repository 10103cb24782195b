"""
Session-scoped memory owned by the browser session.
"""
from .seen_warnings import SeenWarnings

__all__ = ["SeenWarnings"]
