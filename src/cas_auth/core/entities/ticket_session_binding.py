"""Ticket to local session binding entity."""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional


@dataclass(frozen=True)
class TicketSessionBinding:
    """Maps a service ticket to the local session it created.

    Persisted in the session store under the ticket value so that a later
    back-channel logout naming the ticket can find and destroy the session.
    Only created when single logout is enabled.
    """

    ticket: str
    session_key: str

    # 24 hours, matching the lifetime of the bound session
    TTL_SECONDS: ClassVar[int] = 24 * 60 * 60

    def __post_init__(self) -> None:
        if not self.ticket:
            raise ValueError("Binding requires a ticket")
        if not self.session_key:
            raise ValueError("Binding requires a session key")

    def to_store_value(self) -> Dict[str, Any]:
        """Value written to the store under the ticket key."""
        return {"key": self.session_key}

    @classmethod
    def from_store_value(
        cls,
        ticket: str,
        value: Optional[Mapping[str, Any]]
    ) -> Optional["TicketSessionBinding"]:
        """Rebuild a binding from a store entry.

        Returns:
            The binding, or None if the entry is absent or carries no key
        """
        if not value or not isinstance(value, Mapping):
            return None
        key = value.get("key")
        if not key:
            return None
        return cls(ticket=ticket, session_key=str(key))
