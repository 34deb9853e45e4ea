"""Starlette request adapter for the CAS core."""

from typing import Mapping

from starlette.requests import Request

from ...core.protocols import CasSession


class StarletteRequestContext:
    """RequestContext over a Starlette request.

    Expects ServerSessionMiddleware (or any middleware providing a
    CasSession) to have set ``request.state.session``.
    """

    def __init__(self, request: Request):
        self.request = request

    @property
    def session(self) -> CasSession:
        session = getattr(self.request.state, "session", None)
        if session is None:
            raise RuntimeError(
                "No session on request state; is ServerSessionMiddleware installed?"
            )
        return session

    @property
    def query(self) -> Mapping[str, str]:
        return self.request.query_params

    @property
    def path(self) -> str:
        return self.request.url.path

    @property
    def full_path(self) -> str:
        query = self.request.url.query
        return f"{self.path}?{query}" if query else self.path
