"""
Session-scoped record of subscription warnings already shown.

Lives exactly as long as the browser session that owns it; the
dashboard writes to it but never clears it.
"""
from typing import Optional, Set


class SeenWarnings:
    """
    Set of ``sub_warning_<identity>`` keys.
    """

    def __init__(self, key_prefix: str = "sub_warning_"):
        self._key_prefix = key_prefix
        self._keys: Set[str] = set()

    def key_for(self, identity: Optional[str]) -> str:
        return f"{self._key_prefix}{identity or ''}"

    def has_seen(self, identity: Optional[str]) -> bool:
        return self.key_for(identity) in self._keys

    def mark_seen(self, identity: Optional[str]) -> None:
        self._keys.add(self.key_for(identity))

    def keys(self) -> Set[str]:
        return set(self._keys)

    def clear(self) -> None:
        """Forget everything. Called only when the owning session ends."""
        self._keys.clear()

    def __len__(self) -> int:
        return len(self._keys)
