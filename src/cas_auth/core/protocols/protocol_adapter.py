"""Protocol adapter contract shared by all CAS versions."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, runtime_checkable

from ..value_objects import ProtocolVersion, ValidationOutcome


@dataclass(frozen=True)
class ValidationRequest:
    """Outgoing validation request, independent of the HTTP client."""

    method: str
    params: Dict[str, str]
    content: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


@runtime_checkable
class ProtocolAdapter(Protocol):
    """Version-specific encode/decode strategy.

    ``parse`` must never raise: every malformed body becomes a
    ValidationFailure.
    """

    version: ProtocolVersion

    @property
    def validate_path(self) -> str:
        ...

    def build_request(self, ticket: str, service_url: str) -> ValidationRequest:
        ...

    def parse(self, body: str) -> ValidationOutcome:
        ...
