"""FastAPI dependencies for per-route CAS protection."""

from typing import Awaitable, Callable

from fastapi import HTTPException, Request, status

from ...client import CasClient
from ...core.value_objects import AuthAction, AuthMode
from .context import StarletteRequestContext


def cas_guard(cas: CasClient, mode: AuthMode = AuthMode.BOUNCE) -> Callable[[Request], Awaitable[str]]:
    """Create a dependency that authenticates the route and returns the user.

    Usage:
        @app.get("/me")
        async def me(user: str = Depends(cas_guard(cas, AuthMode.BLOCK))):
            return {"user": user}
    """

    async def dependency(request: Request) -> str:
        ctx = StarletteRequestContext(request)
        decision = await cas.authenticate(ctx, mode)

        if decision.action is AuthAction.REDIRECT:
            raise HTTPException(
                status_code=status.HTTP_302_FOUND,
                headers={"Location": decision.location},
            )
        if decision.action is AuthAction.UNAUTHORIZED:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)

        return ctx.session.get(cas.settings.session_name)

    return dependency
