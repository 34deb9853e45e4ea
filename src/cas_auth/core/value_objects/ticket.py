"""Service ticket value object."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Ticket:
    """Opaque single-use ticket issued by the CAS server.

    Handles ONLY ticket representation. The ticket has no lifecycle here beyond
    being exchanged once for an identity.
    """

    value: str

    MASK_VISIBLE: ClassVar[int] = 6

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Ticket must be a string")
        if not self.value.strip():
            raise ValueError("Ticket cannot be empty")

    @property
    def masked(self) -> str:
        """Ticket with everything past the prefix hidden, for logs."""
        if len(self.value) <= self.MASK_VISIBLE:
            return "***"
        return f"{self.value[:self.MASK_VISIBLE]}***"

    def __str__(self) -> str:
        return self.value
