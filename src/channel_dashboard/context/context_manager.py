"""
Per-session registry.

Keeps one dashboard session per browser session id.
"""
import logging
from typing import Callable, Dict, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SessionContextManager(Generic[T]):
    """
    Creates, looks up and discards per-session objects.

    Purpose:
    - Isolate dashboard state per user/session
    - Keep Flask out of the domain model
    """

    def __init__(self, factory: Callable[[str], T]):
        """
        :param factory: Builds a fresh object for a new session id
        """
        self._factory = factory
        self._contexts: Dict[str, T] = {}

    def get_context(self, session_id: str) -> T:
        """
        Get or create the object for a session.

        :param session_id: Session identifier
        :return: The session's object
        """
        if session_id not in self._contexts:
            logger.debug(f"Creating dashboard session {session_id}")
            self._contexts[session_id] = self._factory(session_id)
        return self._contexts[session_id]

    def has_context(self, session_id: str) -> bool:
        return session_id in self._contexts

    def end_context(self, session_id: str) -> bool:
        """Discard a session. Returns False if it did not exist."""
        return self._contexts.pop(session_id, None) is not None

    def session_ids(self) -> List[str]:
        return list(self._contexts)

    def clear_all(self) -> None:
        self._contexts.clear()
