"""cas-auth - CAS ticket validation for async Python services.

Supports CAS 1.0, 2.0, 3.0 and SAML 1.1 ticket validation, bounce/block
request protection and back-channel single logout.

Architecture:
- core/: value objects, entities, exceptions and protocols only
- application/: per-version protocol adapters and the CAS use cases
- infrastructure/: session stores, server-side sessions, FastAPI integration
- config/: settings and logging configuration
"""

from .__version__ import __version__

from .client import CasClient
from .config import CasSettings, setup_logging
from .core.value_objects import (
    ProtocolVersion,
    Ticket,
    AuthMode,
    AuthAction,
    AuthDecision,
    SloAcknowledgement,
    ValidationSuccess,
    ValidationFailure,
    ValidationOutcome,
)
from .core.entities import TicketSessionBinding, LogoutNotification
from .core.exceptions import (
    CasAuthError,
    ConfigurationError,
    ProtocolError,
    AuthenticationFailure,
    NetworkError,
    SessionStoreError,
)
from .core.protocols import SessionStore, CasSession, RequestContext
from .infrastructure import (
    RedisSessionStore,
    MemorySessionStore,
    ServerSession,
    ServerSessionMiddleware,
)

__all__ = [
    "__version__",
    # Facade and configuration
    "CasClient",
    "CasSettings",
    "setup_logging",
    # Value objects
    "ProtocolVersion",
    "Ticket",
    "AuthMode",
    "AuthAction",
    "AuthDecision",
    "SloAcknowledgement",
    "ValidationSuccess",
    "ValidationFailure",
    "ValidationOutcome",
    # Entities
    "TicketSessionBinding",
    "LogoutNotification",
    # Exceptions
    "CasAuthError",
    "ConfigurationError",
    "ProtocolError",
    "AuthenticationFailure",
    "NetworkError",
    "SessionStoreError",
    # Protocols
    "SessionStore",
    "CasSession",
    "RequestContext",
    # Infrastructure
    "RedisSessionStore",
    "MemorySessionStore",
    "ServerSession",
    "ServerSessionMiddleware",
]
