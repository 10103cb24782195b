"""
Session context domain objects.

Pure domain models with no external dependencies.
"""
from .session_context import Session, SessionContext, as_utc
from .context_manager import SessionContextManager

__all__ = ["Session", "SessionContext", "SessionContextManager", "as_utc"]
