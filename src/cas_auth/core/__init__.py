"""Core CAS domain: value objects, entities, exceptions and contracts only."""

from .value_objects import (
    ProtocolVersion,
    Ticket,
    AttributeValue,
    ValidationSuccess,
    ValidationFailure,
    ValidationOutcome,
    AuthMode,
    AuthAction,
    AuthDecision,
    SloAcknowledgement,
)
from .entities import TicketSessionBinding, LogoutNotification
from .exceptions import (
    CasAuthError,
    ConfigurationError,
    ProtocolError,
    AuthenticationFailure,
    NetworkError,
    SessionStoreError,
)
from .protocols import (
    SessionStore,
    CasSession,
    RequestContext,
    ProtocolAdapter,
    ValidationRequest,
)

__all__ = [
    "ProtocolVersion",
    "Ticket",
    "AttributeValue",
    "ValidationSuccess",
    "ValidationFailure",
    "ValidationOutcome",
    "AuthMode",
    "AuthAction",
    "AuthDecision",
    "SloAcknowledgement",
    "TicketSessionBinding",
    "LogoutNotification",
    "CasAuthError",
    "ConfigurationError",
    "ProtocolError",
    "AuthenticationFailure",
    "NetworkError",
    "SessionStoreError",
    "SessionStore",
    "CasSession",
    "RequestContext",
    "ProtocolAdapter",
    "ValidationRequest",
]
