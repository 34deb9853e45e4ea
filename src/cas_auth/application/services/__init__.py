"""CAS use-case services."""

from .ticket_validator import TicketValidator, CasServerAddress
from .auth_decision_engine import AuthDecisionEngine, RETURN_TO_SLOT, TICKET_SLOT
from .single_logout_reconciler import SingleLogoutReconciler, parse_logout_request
from .logout_handler import LogoutHandler

__all__ = [
    "TicketValidator",
    "CasServerAddress",
    "AuthDecisionEngine",
    "RETURN_TO_SLOT",
    "TICKET_SLOT",
    "SingleLogoutReconciler",
    "parse_logout_request",
    "LogoutHandler",
]
