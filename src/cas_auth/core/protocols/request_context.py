"""Narrow request interfaces consumed by the decision engine."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class CasSession(Protocol):
    """Session object of the current request.

    Keyed slots plus whole-session destruction. ``key`` is the external key
    under which the session lives in the session store.
    """

    @property
    def key(self) -> Optional[str]:
        ...

    def get(self, name: str, default: Any = None) -> Any:
        ...

    def __setitem__(self, name: str, value: Any) -> None:
        ...

    def pop(self, name: str, default: Any = None) -> Any:
        ...

    async def destroy(self) -> None:
        ...


@runtime_checkable
class RequestContext(Protocol):
    """What the CAS core needs to know about an incoming request.

    Isolates the core from any particular web framework; adapters for a
    framework implement this and apply the returned decision themselves.
    """

    @property
    def session(self) -> CasSession:
        ...

    @property
    def query(self) -> Mapping[str, str]:
        """Query string parameters."""
        ...

    @property
    def path(self) -> str:
        """Request path without the query string."""
        ...

    @property
    def full_path(self) -> str:
        """Request path including the query string."""
        ...
