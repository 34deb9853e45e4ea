"""Starlette middleware protecting path prefixes with CAS."""

import logging
from typing import Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...client import CasClient
from ...core.value_objects import AuthMode
from .context import StarletteRequestContext
from .responses import decision_response

logger = logging.getLogger(__name__)


class CasAuthMiddleware(BaseHTTPMiddleware):
    """Applies one authorization mode to every protected request."""

    def __init__(
        self,
        app,
        cas: CasClient,
        mode: AuthMode = AuthMode.BOUNCE,
        protected_paths: Optional[Sequence[str]] = None,
        exempt_paths: Optional[Sequence[str]] = None
    ):
        super().__init__(app)
        self.cas = cas
        self.mode = AuthMode(mode)
        self.protected_paths = list(protected_paths or ["/"])
        self.exempt_paths = list(exempt_paths or [])

    def _is_protected(self, path: str) -> bool:
        if any(path.startswith(prefix) for prefix in self.exempt_paths):
            return False
        return any(path.startswith(prefix) for prefix in self.protected_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        if not self._is_protected(request.url.path):
            return await call_next(request)

        decision = await self.cas.authenticate(StarletteRequestContext(request), self.mode)
        if decision.should_proceed:
            return await call_next(request)

        logger.debug(f"{request.url.path}: {decision.action.value}")
        return decision_response(decision)
