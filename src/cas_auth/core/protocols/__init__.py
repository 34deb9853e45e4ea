"""CAS authentication protocol contracts."""

from .session_store import SessionStore
from .request_context import CasSession, RequestContext
from .protocol_adapter import ProtocolAdapter, ValidationRequest

__all__ = [
    "SessionStore",
    "CasSession",
    "RequestContext",
    "ProtocolAdapter",
    "ValidationRequest",
]
