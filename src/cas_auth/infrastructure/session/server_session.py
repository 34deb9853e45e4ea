"""Server-side session object backed by a session store."""

import logging
import secrets
from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, Optional

from ...core.exceptions import SessionStoreError
from ...core.protocols import SessionStore

logger = logging.getLogger(__name__)


class ServerSession(MutableMapping):
    """Mutable session data stored under an external key.

    The browser only holds the key (in a cookie); the data lives in the
    session store so that a back-channel logout can destroy it.
    """

    def __init__(
        self,
        store: SessionStore,
        key: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        max_age: Optional[int] = None
    ):
        self._store = store
        self._key = key or self.generate_key()
        self._data: Dict[str, Any] = dict(data or {})
        self._max_age = max_age
        self.is_new = key is None
        self.modified = False
        self.destroyed = False

    @staticmethod
    def generate_key() -> str:
        return secrets.token_urlsafe(32)

    @classmethod
    async def load(
        cls,
        store: SessionStore,
        key: Optional[str],
        max_age: Optional[int] = None
    ) -> "ServerSession":
        """Load the session for a cookie value, or start a new one.

        A missing or expired entry yields a fresh session with a new key so
        a stale cookie can never resurrect a destroyed session.
        """
        if key:
            try:
                data = await store.get(key, max_age, {})
            except SessionStoreError as e:
                logger.warning(f"Could not load session, starting a new one: {e.message}")
                data = None
            if data is not None:
                return cls(store, key=key, data=data, max_age=max_age)
        return cls(store, max_age=max_age)

    @property
    def key(self) -> str:
        return self._key

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._data[name] = value
        self.modified = True

    def __delitem__(self, name: str) -> None:
        del self._data[name]
        self.modified = True

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    async def save(self) -> None:
        """Persist the session data under its key."""
        if self.destroyed:
            return
        await self._store.set(self._key, self.to_dict(), self._max_age, {"changed": True})
        self.modified = False
        self.is_new = False

    async def destroy(self) -> None:
        """Remove the session from the store and clear its data."""
        self._data.clear()
        self.destroyed = True
        await self._store.destroy(self._key)
