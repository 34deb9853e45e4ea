"""Base exceptions for cas-auth.

All exceptions inherit from CasAuthError and carry an error code and a details
dictionary so callers can log them in a structured way.
"""

from typing import Any, Dict, Optional


class CasAuthError(Exception):
    """Base exception for all cas-auth errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: CasAuthError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The cas-auth exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
