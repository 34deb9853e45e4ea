"""CAS authentication exceptions.

Each exception represents exactly one failure kind. Parsing and store failures
are caught at the boundary of the component that produced them and converted
into one of these.
"""

from .base import CasAuthError, create_error_response
from .configuration_error import ConfigurationError
from .protocol_error import ProtocolError
from .authentication_failure import AuthenticationFailure
from .network_error import NetworkError
from .session_store_error import SessionStoreError
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "CasAuthError",
    "ConfigurationError",
    "ProtocolError",
    "AuthenticationFailure",
    "NetworkError",
    "SessionStoreError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
    "create_error_response",
]
