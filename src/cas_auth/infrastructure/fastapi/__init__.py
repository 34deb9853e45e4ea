"""FastAPI / Starlette integration."""

from .context import StarletteRequestContext
from .middleware import CasAuthMiddleware
from .dependencies import cas_guard
from .router import create_cas_router
from .responses import decision_response, acknowledgement_response

__all__ = [
    "StarletteRequestContext",
    "CasAuthMiddleware",
    "cas_guard",
    "create_cas_router",
    "decision_response",
    "acknowledgement_response",
]
