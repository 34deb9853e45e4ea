"""Per-request CAS authentication state machine."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from ...core.entities import TicketSessionBinding
from ...core.exceptions import NetworkError, SessionStoreError
from ...core.protocols import RequestContext, SessionStore
from ...core.value_objects import AuthDecision, AuthMode, Ticket
from .ticket_validator import TicketValidator

logger = logging.getLogger(__name__)


RETURN_TO_SLOT = "cas_return_to"
TICKET_SLOT = "cas_ticket"


class AuthDecisionEngine:
    """Decides whether a request proceeds, is redirected or is refused.

    Stateless across requests: everything it remembers lives in the session
    of the request. The transitions are:

    - identity in session: proceed (BOUNCE_REDIRECT redirects to ``redirectTo``)
    - dev mode: write the dev identity into the session and proceed
    - BLOCK: 401
    - ticket in query: validate it; success commits the login and redirects to
      the saved return URL, failure or network error gives 401
    - otherwise: save the return URL and redirect to the CAS login page
    """

    def __init__(
        self,
        cas_url: str,
        service_url: str,
        validator: TicketValidator,
        *,
        session_name: str = "cas_user",
        session_info: Optional[str] = None,
        renew: bool = False,
        is_dev_mode: bool = False,
        dev_mode_user: str = "",
        dev_mode_info: Optional[Dict[str, Any]] = None,
        single_logout: bool = False,
        session_store: Optional[SessionStore] = None
    ):
        if single_logout and session_store is None:
            raise ValueError("Single logout requires a session store")

        self.cas_url = cas_url
        self.service_url = service_url
        self.validator = validator
        self.session_name = session_name
        self.session_info = session_info
        self.renew = renew
        self.is_dev_mode = is_dev_mode
        self.dev_mode_user = dev_mode_user
        self.dev_mode_info = dev_mode_info or {}
        self.single_logout = single_logout
        self.session_store = session_store

    async def decide(self, ctx: RequestContext, mode: AuthMode) -> AuthDecision:
        """Run the state machine for one request.

        Args:
            ctx: Narrow view of the current request
            mode: Authorization mode of the protected route

        Returns:
            The action the web layer must take
        """
        if ctx.session.get(self.session_name):
            if mode is AuthMode.BOUNCE_REDIRECT:
                return AuthDecision.redirect(ctx.query.get("redirectTo") or "/")
            return AuthDecision.proceed()

        if self.is_dev_mode:
            ctx.session[self.session_name] = self.dev_mode_user
            if self.session_info:
                ctx.session[self.session_info] = dict(self.dev_mode_info)
            logger.debug(f"Dev mode: session bound to {self.dev_mode_user!r}")
            return AuthDecision.proceed()

        if mode is AuthMode.BLOCK:
            return AuthDecision.unauthorized()

        ticket = (ctx.query.get("ticket") or "").strip()
        if ticket:
            return await self._handle_ticket(ctx, Ticket(ticket))

        return self._login(ctx)

    def service_url_for(self, ctx: RequestContext) -> str:
        """Externally visible callback URL for the current path."""
        return self.service_url + ctx.path

    def login_url(self, ctx: RequestContext) -> str:
        """CAS login URL for the current request."""
        query: Dict[str, str] = {"service": self.service_url_for(ctx)}
        if self.renew:
            query["renew"] = "true"
        return f"{self.cas_url}/login?{urlencode(query)}"

    def _login(self, ctx: RequestContext) -> AuthDecision:
        # An explicit returnTo wins over the URL of the current request
        ctx.session[RETURN_TO_SLOT] = ctx.query.get("returnTo") or ctx.full_path
        return AuthDecision.redirect(self.login_url(ctx))

    async def _handle_ticket(self, ctx: RequestContext, ticket: Ticket) -> AuthDecision:
        try:
            outcome = await self.validator.validate(ticket, self.service_url_for(ctx))
        except NetworkError as e:
            logger.error(f"Ticket {ticket.masked} could not be validated: {e.message}")
            return AuthDecision.unauthorized()

        if not outcome.is_success:
            return AuthDecision.unauthorized()

        if self.single_logout:
            try:
                await self._bind_ticket(ctx, ticket)
            except SessionStoreError as e:
                logger.error(f"Login for {outcome.identity} not committed: {e.message}")
                return AuthDecision.unauthorized()

        ctx.session[self.session_name] = outcome.identity
        if self.session_info:
            ctx.session[self.session_info] = dict(outcome.attributes)

        return AuthDecision.redirect(ctx.session.get(RETURN_TO_SLOT) or "/")

    async def _bind_ticket(self, ctx: RequestContext, ticket: Ticket) -> None:
        """Store the ticket to session mapping used by single logout."""
        session_key = ctx.session.key
        if not session_key:
            raise SessionStoreError(
                "Session has no external key to bind the ticket to",
                key=ticket.value,
                operation="set",
            )

        binding = TicketSessionBinding(ticket=ticket.value, session_key=session_key)
        logger.info(
            f"Storing local session for SLO, {ticket.masked} (sso ticket) => "
            f"{session_key[:8]}... (local session key)"
        )
        try:
            await self.session_store.set(
                binding.ticket,
                binding.to_store_value(),
                binding.TTL_SECONDS,
                {"changed": True},
            )
        except SessionStoreError:
            raise
        except Exception as e:
            raise SessionStoreError(
                "Failed to store ticket binding",
                key=ticket.value,
                operation="set",
                cause=e,
            ) from e

        ctx.session[TICKET_SLOT] = ticket.value
