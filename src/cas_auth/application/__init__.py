"""Application layer: protocol adapters and CAS use cases."""

from .adapters import create_protocol_adapter
from .services import (
    TicketValidator,
    AuthDecisionEngine,
    SingleLogoutReconciler,
    LogoutHandler,
)

__all__ = [
    "create_protocol_adapter",
    "TicketValidator",
    "AuthDecisionEngine",
    "SingleLogoutReconciler",
    "LogoutHandler",
]
