"""Ticket validation outcome value objects."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


AttributeValue = Union[str, List[str]]


@dataclass(frozen=True)
class ValidationSuccess:
    """The CAS server accepted the ticket."""

    identity: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """The ticket was rejected or the response could not be understood."""

    reason: str
    code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return False


ValidationOutcome = Union[ValidationSuccess, ValidationFailure]


# Failure messages shared by all protocol adapters
AUTHENTICATION_FAILED = "CAS authentication failed."
BAD_RESPONSE = "Response from CAS server was bad."


def failed_with_code(code: object) -> ValidationFailure:
    """Build the failure reported when the server supplied a failure code."""
    return ValidationFailure(
        f"CAS authentication failed ({code}).",
        code=None if code is None else str(code),
    )
