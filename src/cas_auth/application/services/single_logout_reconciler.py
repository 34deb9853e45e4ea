"""Back-channel single logout reconciliation."""

import logging
from typing import Optional
from xml.parsers.expat import ExpatError

from ...core.entities import LogoutNotification, TicketSessionBinding
from ...core.exceptions import ProtocolError
from ...core.protocols import SessionStore
from ...core.value_objects import SloAcknowledgement
from ..adapters.xml_parser import parse_document, text_of, attribute_of

logger = logging.getLogger(__name__)


def parse_logout_request(payload: Optional[str]) -> LogoutNotification:
    """Parse a SAML LogoutRequest pushed by the CAS server.

    Sample::

        <samlp:LogoutRequest xmlns:samlp="urn:oasis:names:tc:SAML:2.0:protocol"
            ID="LR-6-1nEuptR9wGcunDut1kpQrju0" Version="2.0"
            IssueInstant="2019-04-19T05:37:57Z">
          <saml:NameID xmlns:saml="urn:oasis:names:tc:SAML:2.0:assertion">sample_id</saml:NameID>
          <samlp:SessionIndex>ST-8-E1LBqLsi89XFcxrzvWgqI01SEjY45420fc75be9</samlp:SessionIndex>
        </samlp:LogoutRequest>

    Raises:
        ProtocolError: If the payload is missing, malformed or has no session index
    """
    if not payload:
        raise ProtocolError("SLO request from CAS server was empty.")

    try:
        document = parse_document(payload)
    except ExpatError as e:
        raise ProtocolError(f"SLO request from CAS server was bad: {e}") from e

    request = document.get("logoutrequest")
    if not isinstance(request, dict):
        raise ProtocolError("SLO request from CAS server was bad.")

    session_index = text_of(request.get("sessionindex")).strip()
    if not session_index:
        raise ProtocolError("SLO request from CAS server has no session index.")

    return LogoutNotification(
        session_index=session_index,
        name_id=text_of(request.get("nameid")) or None,
        request_id=attribute_of(request, "ID"),
    )


class SingleLogoutReconciler:
    """Tears down the local session named by a CAS logout notification.

    Handles ONLY the ticket -> session reconciliation in the session store.
    Every step is best effort: a failing step downgrades the acknowledgement
    to partial success and never undoes an earlier step. The notifier always
    receives ``ok``.
    """

    def __init__(self, session_store: Optional[SessionStore], enabled: bool = False):
        if enabled and session_store is None:
            raise ValueError("Single logout requires a session store")
        self.session_store = session_store
        self.enabled = enabled

    async def handle(self, payload: Optional[str]) -> SloAcknowledgement:
        """Reconcile one logout notification.

        Args:
            payload: Raw ``logoutRequest`` form value

        Returns:
            Full (200) or partial (202) acknowledgement
        """
        if not self.enabled:
            return SloAcknowledgement.full()

        try:
            notification = parse_logout_request(payload)
        except ProtocolError as e:
            logger.warning(f"Ignoring SLO request: {e.message}")
            return SloAcknowledgement.partial()

        return await self.reconcile(notification.session_index)

    async def reconcile(self, ticket: str) -> SloAcknowledgement:
        """Destroy the session bound to a ticket, then the binding itself."""
        try:
            entry = await self.session_store.get(
                ticket, TicketSessionBinding.TTL_SECONDS, {}
            )
        except Exception as e:
            logger.error(f"Trying to sign off, but reading {ticket} from session store failed: {e}")
            return SloAcknowledgement.partial()

        binding = TicketSessionBinding.from_store_value(ticket, entry)
        if binding is None:
            logger.info(f"Cannot find session by ticket {ticket}, destroying ticket entry")
            if await self._destroy(ticket, "ticket"):
                return SloAcknowledgement.full()
            return SloAcknowledgement.partial()

        logger.info(
            f"Found session by ticket {ticket}, destroying session {binding.session_key[:8]}..."
        )
        session_destroyed = await self._destroy(binding.session_key, "session")
        binding_destroyed = await self._destroy(binding.ticket, "ticket")
        if session_destroyed and binding_destroyed:
            return SloAcknowledgement.full()
        return SloAcknowledgement.partial()

    async def _destroy(self, key: str, kind: str) -> bool:
        try:
            await self.session_store.destroy(key)
            return True
        except Exception as e:
            logger.error(f"Error destroying {kind} {key} in session store: {e}")
            return False
