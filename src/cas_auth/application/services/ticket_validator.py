"""Ticket validation round trip against the CAS server."""

import logging
from typing import Optional, Union
from urllib.parse import urlsplit

import httpx

from ...core.exceptions import AuthenticationFailure, ConfigurationError, NetworkError
from ...core.protocols import ProtocolAdapter
from ...core.value_objects import Ticket, ValidationOutcome, ValidationSuccess

logger = logging.getLogger(__name__)


class CasServerAddress:
    """Scheme, host, port and base path of the CAS server, derived once."""

    def __init__(self, cas_url: str):
        if not cas_url:
            raise ConfigurationError.missing_parameter("cas_url")

        parsed = urlsplit(cas_url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ConfigurationError(
                f"CAS URL must be an absolute http(s) URL, got {cas_url!r}",
                field="cas_url",
            )

        self.scheme = parsed.scheme
        self.host = parsed.hostname
        self.port = parsed.port or (80 if parsed.scheme == "http" else 443)
        self.path = parsed.path.rstrip("/")

    def endpoint(self, suffix: str) -> str:
        """Absolute URL of an endpoint below the CAS base path."""
        return f"{self.scheme}://{self.host}:{self.port}{self.path}{suffix}"


class TicketValidator:
    """Exchanges a service ticket for a validation outcome.

    Handles ONLY the network round trip: exactly one request per call, the
    whole response body buffered, then handed to the protocol adapter.
    Does not retry and does not interpret HTTP status codes.
    """

    def __init__(
        self,
        cas_url: str,
        adapter: ProtocolAdapter,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize ticket validator.

        Args:
            cas_url: CAS server base URL, e.g. ``https://cas.example.com/cas``
            adapter: Protocol adapter for the configured CAS version
            timeout: Request timeout in seconds, None for no timeout
            http_client: Optional pre-built client (used in tests)
        """
        self.address = CasServerAddress(cas_url)
        self.adapter = adapter
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this validator created it."""
        if self._owns_client:
            await self._client.aclose()

    @property
    def validate_url(self) -> str:
        return self.address.endpoint(self.adapter.validate_path)

    async def validate(
        self,
        ticket: Union[str, Ticket],
        service_url: str
    ) -> ValidationOutcome:
        """Validate a ticket with the CAS server.

        Args:
            ticket: Service ticket taken from the request
            service_url: Callback URL the ticket was issued for

        Returns:
            ValidationSuccess or ValidationFailure from the protocol adapter

        Raises:
            NetworkError: If the CAS server could not be reached
        """
        ticket = ticket if isinstance(ticket, Ticket) else Ticket(ticket)
        request = self.adapter.build_request(ticket.value, service_url)
        url = self.validate_url

        logger.debug(
            f"Validating ticket {ticket.masked} with CAS {self.adapter.version.value}: "
            f"{request.method} {url}"
        )

        try:
            response = await self._client.request(
                request.method,
                url,
                params=request.params,
                content=request.content,
                headers=request.headers or None,
            )
            body = response.text
        except httpx.HTTPError as e:
            logger.error(f"Request error with CAS server {url}: {e}")
            raise NetworkError(url=url, cause=e) from e

        outcome = self.adapter.parse(body)
        if outcome.is_success:
            logger.info(f"Ticket {ticket.masked} validated for {outcome.identity}")
        else:
            logger.warning(f"Ticket {ticket.masked} rejected: {outcome.reason}")
        return outcome

    async def authenticate(
        self,
        ticket: Union[str, Ticket],
        service_url: str
    ) -> ValidationSuccess:
        """Validate a ticket and return the success, raising on rejection.

        Raises:
            AuthenticationFailure: If the CAS server rejected the ticket or
                its response could not be understood
            NetworkError: If the CAS server could not be reached
        """
        outcome = await self.validate(ticket, service_url)
        if not outcome.is_success:
            raise AuthenticationFailure(outcome.reason, code=outcome.code)
        return outcome
