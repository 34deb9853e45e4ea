"""Session store protocol contract."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class SessionStore(Protocol):
    """Protocol for the external key/value session store.

    Defines ONLY the contract consumed by this library; the storage engine is
    owned by the host application. Every operation may fail and callers must
    treat failures as SessionStoreError.
    """

    async def get(
        self,
        key: str,
        max_age: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load an entry.

        Args:
            key: Store key
            max_age: Expected lifetime of the entry in seconds
            options: Implementation-specific options

        Returns:
            Stored value, or None if absent or expired
        """
        ...

    async def set(
        self,
        key: str,
        value: Dict[str, Any],
        max_age: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Store an entry, replacing any existing one.

        Args:
            key: Store key
            value: JSON-serializable mapping
            max_age: Lifetime in seconds, None for no expiry
            options: Implementation-specific options
        """
        ...

    async def destroy(self, key: str) -> None:
        """Remove an entry. Removing an absent key is not an error."""
        ...
