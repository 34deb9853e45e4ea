"""CAS authentication value objects."""

from .protocol_version import ProtocolVersion
from .ticket import Ticket
from .validation_outcome import (
    AttributeValue,
    ValidationSuccess,
    ValidationFailure,
    ValidationOutcome,
    AUTHENTICATION_FAILED,
    BAD_RESPONSE,
    failed_with_code,
)
from .auth_mode import AuthMode
from .auth_decision import AuthAction, AuthDecision, SloAcknowledgement

__all__ = [
    "ProtocolVersion",
    "Ticket",
    "AttributeValue",
    "ValidationSuccess",
    "ValidationFailure",
    "ValidationOutcome",
    "AUTHENTICATION_FAILED",
    "BAD_RESPONSE",
    "failed_with_code",
    "AuthMode",
    "AuthAction",
    "AuthDecision",
    "SloAcknowledgement",
]
