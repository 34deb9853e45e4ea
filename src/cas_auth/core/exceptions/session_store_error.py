"""Session store failure."""

from typing import Optional

from .base import CasAuthError


class SessionStoreError(CasAuthError):
    """Raised when a session store operation fails.

    During single logout reconciliation this is downgraded to a partial
    success acknowledgement instead of failing the notification.
    """

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(
            message,
            details={
                "key": key,
                "operation": operation,
                "error": str(cause) if cause else None,
            },
        )
        self.key = key
        self.operation = operation
        self.cause = cause
