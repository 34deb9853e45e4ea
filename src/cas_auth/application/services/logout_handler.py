"""Local logout followed by a redirect to the CAS logout endpoint."""

import logging
from typing import Optional
from urllib.parse import urlencode

from ...core.protocols import CasSession, SessionStore
from ...core.value_objects import AuthDecision
from .auth_decision_engine import RETURN_TO_SLOT, TICKET_SLOT

logger = logging.getLogger(__name__)


class LogoutHandler:
    """Logs the current user out locally and sends them to CAS logout."""

    def __init__(
        self,
        cas_url: str,
        *,
        session_name: str = "cas_user",
        session_info: Optional[str] = None,
        destroy_session: bool = False,
        logout_redirect_url: Optional[str] = None,
        single_logout: bool = False,
        session_store: Optional[SessionStore] = None
    ):
        self.cas_url = cas_url
        self.session_name = session_name
        self.session_info = session_info
        self.destroy_session = destroy_session
        self.logout_redirect_url = logout_redirect_url
        self.single_logout = single_logout
        self.session_store = session_store

    @property
    def logout_url(self) -> str:
        if self.logout_redirect_url:
            return f"{self.cas_url}/logout?{urlencode({'service': self.logout_redirect_url})}"
        return f"{self.cas_url}/logout"

    async def logout(self, session: CasSession) -> AuthDecision:
        """Clear the CAS login from the session and redirect to CAS logout."""
        ticket = session.get(TICKET_SLOT)

        if self.destroy_session:
            try:
                await session.destroy()
            except Exception as e:
                logger.error(f"Failed to destroy session on logout: {e}")
        else:
            session.pop(self.session_name, None)
            if self.session_info:
                session.pop(self.session_info, None)
            session.pop(TICKET_SLOT, None)
            session.pop(RETURN_TO_SLOT, None)

        if ticket and self.single_logout and self.session_store is not None:
            try:
                await self.session_store.destroy(ticket)
            except Exception as e:
                logger.warning(f"Failed to drop SLO binding for {ticket}: {e}")

        return AuthDecision.redirect(self.logout_url)
