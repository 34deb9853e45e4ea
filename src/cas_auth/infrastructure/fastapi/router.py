"""FastAPI router exposing the CAS login, logout and single logout endpoints."""

from typing import Optional

from fastapi import APIRouter, Form, Request
from starlette.responses import Response

from ...client import CasClient
from ...core.value_objects import AuthDecision, AuthMode
from .context import StarletteRequestContext
from .responses import acknowledgement_response, decision_response


def create_cas_router(cas: CasClient, **router_kwargs) -> APIRouter:
    """Create the CAS endpoints.

    - ``GET /login``: bounce to CAS, then on to ``redirectTo`` once logged in
    - ``GET /logout``: local logout and redirect to CAS logout
    - ``POST /slo``: back-channel logout notifications from the CAS server
    """
    router = APIRouter(**router_kwargs)

    @router.get("/login")
    async def login(request: Request) -> Response:
        ctx = StarletteRequestContext(request)
        decision = await cas.authenticate(ctx, AuthMode.BOUNCE_REDIRECT)
        if decision.should_proceed:
            # Dev mode logs the user in without a round trip
            return decision_response(
                AuthDecision.redirect(request.query_params.get("redirectTo") or "/")
            )
        return decision_response(decision)

    @router.get("/logout")
    async def logout(request: Request) -> Response:
        decision = await cas.logout(StarletteRequestContext(request).session)
        return decision_response(decision)

    @router.post("/slo")
    async def single_logout(logoutRequest: Optional[str] = Form(default=None)) -> Response:
        ack = await cas.handle_single_logout(logoutRequest)
        return acknowledgement_response(ack)

    return router
