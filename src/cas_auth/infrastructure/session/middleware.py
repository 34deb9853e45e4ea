"""Starlette middleware attaching a server-side session to each request."""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...core.exceptions import SessionStoreError
from ...core.protocols import SessionStore
from .server_session import ServerSession

logger = logging.getLogger(__name__)


class ServerSessionMiddleware(BaseHTTPMiddleware):
    """Loads ``request.state.session`` from the store and saves it afterwards.

    Register it after (i.e. outside of) any middleware that reads the
    session, such as CasAuthMiddleware.
    """

    def __init__(
        self,
        app,
        store: SessionStore,
        cookie_name: str = "cas_sid",
        max_age: Optional[int] = 24 * 60 * 60,
        https_only: bool = False,
        same_site: str = "lax"
    ):
        super().__init__(app)
        self.store = store
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.https_only = https_only
        self.same_site = same_site

    async def dispatch(self, request: Request, call_next) -> Response:
        session = await ServerSession.load(
            self.store, request.cookies.get(self.cookie_name), self.max_age
        )
        request.state.session = session

        response = await call_next(request)

        if session.destroyed:
            response.delete_cookie(self.cookie_name)
        elif session.modified:
            try:
                await session.save()
            except SessionStoreError as e:
                logger.error(f"Failed to save session: {e.message}")
                return response
            response.set_cookie(
                self.cookie_name,
                session.key,
                max_age=self.max_age,
                httponly=True,
                secure=self.https_only,
                samesite=self.same_site,
            )
        return response
