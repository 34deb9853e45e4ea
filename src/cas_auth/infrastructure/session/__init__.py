"""Server-side sessions."""

from .server_session import ServerSession
from .middleware import ServerSessionMiddleware

__all__ = [
    "ServerSession",
    "ServerSessionMiddleware",
]
