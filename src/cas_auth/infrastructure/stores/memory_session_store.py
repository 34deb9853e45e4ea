"""In-process session store for development and tests."""

import copy
from time import monotonic
from typing import Any, Dict, Optional, Tuple


class MemorySessionStore:
    """Dictionary-backed session store with per-entry expiry.

    Not shared between processes; use RedisSessionStore when single logout
    notifications may reach a different worker than the one holding the
    session.
    """

    def __init__(self):
        # key -> (value, expires_at on the monotonic clock or None)
        self._entries: Dict[str, Tuple[Dict[str, Any], Optional[float]]] = {}

    def __contains__(self, key: str) -> bool:
        return self._live(key) is not None

    def __len__(self) -> int:
        return sum(1 for key in list(self._entries) if self._live(key) is not None)

    def _live(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and monotonic() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def get(
        self,
        key: str,
        max_age: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        value = self._live(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(
        self,
        key: str,
        value: Dict[str, Any],
        max_age: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        expires_at = monotonic() + max_age if max_age and max_age > 0 else None
        self._entries[key] = (copy.deepcopy(value), expires_at)

    async def destroy(self, key: str) -> None:
        self._entries.pop(key, None)

    async def close(self) -> None:
        self._entries.clear()
