"""HTTP status code mapping for cas-auth exceptions."""

from typing import Dict, Type

from .base import CasAuthError
from .configuration_error import ConfigurationError
from .protocol_error import ProtocolError
from .authentication_failure import AuthenticationFailure
from .network_error import NetworkError
from .session_store_error import SessionStoreError


HTTP_STATUS_MAP: Dict[Type[CasAuthError], int] = {
    # 202 Accepted (partial single logout)
    SessionStoreError: 202,

    # 401 Unauthorized
    ProtocolError: 401,
    AuthenticationFailure: 401,
    NetworkError: 401,

    # 500 Internal Server Error
    ConfigurationError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses inherit their parent's mapping.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 for anything unmapped
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
