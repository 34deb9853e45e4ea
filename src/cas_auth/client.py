"""CAS client facade.

Wires the protocol adapter, ticket validator, decision engine, single logout
reconciler and logout handler together from one settings object.

Usage:
    from cas_auth import CasClient, AuthMode

    cas = CasClient(
        cas_url="https://cas.example.com/cas",
        service_url="https://app.example.com",
        cas_version="3.0",
        session_info="cas_userinfo",
    )

    decision = await cas.bounce(ctx)
"""

import logging
from typing import Any, Optional

import httpx

from .application.adapters import create_protocol_adapter
from .application.services import (
    AuthDecisionEngine,
    LogoutHandler,
    SingleLogoutReconciler,
    TicketValidator,
)
from .config.settings import CasSettings
from .core.protocols import CasSession, RequestContext, SessionStore
from .core.value_objects import AuthDecision, AuthMode, SloAcknowledgement
from .infrastructure.stores import MemorySessionStore, RedisSessionStore

logger = logging.getLogger(__name__)


class CasClient:
    """CAS authentication for one service.

    Everything version-specific is decided here, once: the adapter, the
    validation endpoint and whether attributes are kept in the session.
    """

    def __init__(
        self,
        settings: Optional[CasSettings] = None,
        *,
        session_store: Optional[SessionStore] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **options: Any
    ):
        """Initialize CAS client.

        Args:
            settings: Prepared settings; if omitted they are built from
                ``options`` and the environment
            session_store: Store holding sessions and ticket bindings;
                defaults to Redis when ``redis_url`` is set, memory otherwise
            http_client: Optional HTTP client for the validation round trip
            **options: Individual settings (``cas_url``, ``service_url``, ...)

        Raises:
            ConfigurationError: If a required URL is missing or the protocol
                version is not supported
        """
        if settings is None:
            settings = CasSettings.load(**options)
        elif options:
            settings = CasSettings.load(**{**settings.model_dump(), **options})
        self.settings = settings

        self.version = settings.cas_version
        self.adapter = create_protocol_adapter(self.version)
        self._owns_store = session_store is None
        self.session_store = session_store or self._default_store(settings)

        self.validator = TicketValidator(
            settings.cas_url,
            self.adapter,
            timeout=settings.request_timeout,
            http_client=http_client,
        )
        self.engine = AuthDecisionEngine(
            settings.cas_url,
            settings.service_url,
            self.validator,
            session_name=settings.session_name,
            session_info=settings.effective_session_info,
            renew=settings.renew,
            is_dev_mode=settings.is_dev_mode,
            dev_mode_user=settings.dev_mode_user,
            dev_mode_info=settings.dev_mode_info,
            single_logout=settings.single_logout,
            session_store=self.session_store,
        )
        self.reconciler = SingleLogoutReconciler(
            self.session_store, enabled=settings.single_logout
        )
        self.logout_handler = LogoutHandler(
            settings.cas_url,
            session_name=settings.session_name,
            session_info=settings.effective_session_info,
            destroy_session=settings.destroy_session,
            logout_redirect_url=settings.logout_redirect_url,
            single_logout=settings.single_logout,
            session_store=self.session_store,
        )

        logger.info(
            f"CAS {self.version.value} client configured for {settings.cas_url} "
            f"(single logout {'on' if settings.single_logout else 'off'})"
        )

    @staticmethod
    def _default_store(settings: CasSettings) -> SessionStore:
        if settings.redis_url:
            return RedisSessionStore.from_url(
                settings.redis_url, key_prefix=settings.redis_key_prefix
            )
        return MemorySessionStore()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client and the session store this client created."""
        await self.validator.aclose()
        if self._owns_store:
            await self.session_store.close()

    async def authenticate(self, ctx: RequestContext, mode: AuthMode) -> AuthDecision:
        """Decide what to do with a request under an authorization mode."""
        return await self.engine.decide(ctx, AuthMode(mode))

    async def bounce(self, ctx: RequestContext) -> AuthDecision:
        """Send unauthenticated users to the CAS login page."""
        return await self.authenticate(ctx, AuthMode.BOUNCE)

    async def bounce_redirect(self, ctx: RequestContext) -> AuthDecision:
        """Like bounce, but send authenticated users on to ``redirectTo``."""
        return await self.authenticate(ctx, AuthMode.BOUNCE_REDIRECT)

    async def block(self, ctx: RequestContext) -> AuthDecision:
        """Answer 401 to unauthenticated users."""
        return await self.authenticate(ctx, AuthMode.BLOCK)

    async def logout(self, session: CasSession) -> AuthDecision:
        """Log the user out locally and redirect to the CAS logout page."""
        return await self.logout_handler.logout(session)

    async def handle_single_logout(self, payload: Optional[str]) -> SloAcknowledgement:
        """Handle a back-channel logout request from the CAS server."""
        return await self.reconciler.handle(payload)
