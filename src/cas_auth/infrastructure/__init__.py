"""Infrastructure: session stores, server-side sessions, web integration.

The FastAPI integration lives in ``cas_auth.infrastructure.fastapi`` and is
not imported here because it depends on the CasClient facade.
"""

from .stores import RedisSessionStore, MemorySessionStore
from .session import ServerSession, ServerSessionMiddleware

__all__ = [
    "RedisSessionStore",
    "MemorySessionStore",
    "ServerSession",
    "ServerSessionMiddleware",
]
