"""Authentication failure exception."""

from typing import Any, Dict, Optional

from .base import CasAuthError


class AuthenticationFailure(CasAuthError):
    """Raised when the CAS server rejected a ticket.

    Carries the reason reported by the protocol adapter and, where the server
    supplied one, the failure code (e.g. ``INVALID_TICKET``).
    """

    def __init__(
        self,
        message: str = "CAS authentication failed.",
        *,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, details={"code": code, **(context or {})})
        self.code = code
