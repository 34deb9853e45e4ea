"""Protocol error for logout requests that cannot be interpreted."""

from typing import Optional

from .base import CasAuthError


class ProtocolError(CasAuthError):
    """Raised when a back-channel logout request cannot be interpreted.

    The single logout reconciler downgrades it to a partial acknowledgement;
    it never reaches request handling. Validation responses are not reported
    this way: protocol adapters return a ValidationFailure instead.
    """

    def __init__(self, message: str, *, version: Optional[str] = None) -> None:
        super().__init__(message, details={"version": version})
        self.version = version
