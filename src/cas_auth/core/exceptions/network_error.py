"""Transport failure while talking to the CAS server."""

from typing import Optional

from .base import CasAuthError


class NetworkError(CasAuthError):
    """Raised when the validation round trip could not be completed.

    Connection refusals, timeouts and TLS errors end up here. They are never
    reported as a protocol failure and never retried.
    """

    def __init__(
        self,
        message: str = "Request error with CAS server.",
        *,
        url: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(
            message,
            details={"url": url, "error": str(cause) if cause else None},
        )
        self.url = url
        self.cause = cause
