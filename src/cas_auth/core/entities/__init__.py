"""CAS authentication entities."""

from .ticket_session_binding import TicketSessionBinding
from .logout_notification import LogoutNotification

__all__ = [
    "TicketSessionBinding",
    "LogoutNotification",
]
