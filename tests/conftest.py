"""Pytest configuration and fixtures for cas-auth tests."""

from typing import Any, Callable, Dict, Optional

import httpx
import pytest

from cas_auth.infrastructure.session import ServerSession
from cas_auth.infrastructure.stores import MemorySessionStore


CAS_URL = "https://cas.example.com/cas"
SERVICE_URL = "https://app.example.com"


V2_SUCCESS = """<cas:serviceResponse xmlns:cas="http://www.yale.edu/tp/cas">
  <cas:authenticationSuccess>
    <cas:user>jdoe</cas:user>
    <cas:attributes>
      <cas:email>jdoe@example.com</cas:email>
      <cas:memberOf>staff</cas:memberOf>
      <cas:memberOf>faculty</cas:memberOf>
    </cas:attributes>
  </cas:authenticationSuccess>
</cas:serviceResponse>"""

V2_SUCCESS_NO_ATTRIBUTES = """<cas:serviceResponse xmlns:cas="http://www.yale.edu/tp/cas">
  <cas:authenticationSuccess>
    <cas:user>jdoe</cas:user>
  </cas:authenticationSuccess>
</cas:serviceResponse>"""

V2_FAILURE = """<cas:serviceResponse xmlns:cas="http://www.yale.edu/tp/cas">
  <cas:authenticationFailure code="INVALID_TICKET">
    Ticket ST-1856339-aA5Yuvrxzpv8Tau1cYQ7 not recognized
  </cas:authenticationFailure>
</cas:serviceResponse>"""

SAML_SUCCESS = """<?xml version="1.0" encoding="UTF-8"?>
<SOAP-ENV:Envelope xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">
  <SOAP-ENV:Header/>
  <SOAP-ENV:Body>
    <saml1p:Response xmlns:saml1p="urn:oasis:names:tc:SAML:1.0:protocol"
        xmlns:saml1="urn:oasis:names:tc:SAML:1.0:assertion"
        xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
        IssueInstant="2019-04-19T05:37:57.817Z" MajorVersion="1" MinorVersion="1"
        Recipient="https://app.example.com/dashboard" ResponseID="_5c94b5431c540365e5a70b2874b75996">
      <saml1p:Status>
        <saml1p:StatusCode Value="saml1p:Success"/>
      </saml1p:Status>
      <saml1:Assertion AssertionID="_e5c23ff7a3889e12fa01802a47331653" IssueInstant="2019-04-19T05:37:57.817Z"
          Issuer="localhost" MajorVersion="1" MinorVersion="1">
        <saml1:AttributeStatement>
          <saml1:Subject>
            <saml1:NameIdentifier>jdoe</saml1:NameIdentifier>
          </saml1:Subject>
          <saml1:Attribute AttributeName="uid" AttributeNamespace="http://www.ja-sig.org/products/cas/">
            <saml1:AttributeValue xsi:type="xs:string">12345</saml1:AttributeValue>
          </saml1:Attribute>
          <saml1:Attribute AttributeName="groupMembership" AttributeNamespace="http://www.ja-sig.org/products/cas/">
            <saml1:AttributeValue>middleware.staff</saml1:AttributeValue>
            <saml1:AttributeValue>vt.staff</saml1:AttributeValue>
          </saml1:Attribute>
        </saml1:AttributeStatement>
        <saml1:AuthenticationStatement AuthenticationInstant="2019-04-19T05:37:57.100Z"
            AuthenticationMethod="urn:oasis:names:tc:SAML:1.0:am:password">
          <saml1:Subject>
            <saml1:NameIdentifier>jdoe</saml1:NameIdentifier>
          </saml1:Subject>
        </saml1:AuthenticationStatement>
      </saml1:Assertion>
    </saml1p:Response>
  </SOAP-ENV:Body>
</SOAP-ENV:Envelope>"""

SAML_FAILURE = """<?xml version="1.0" encoding="UTF-8"?>
<SOAP-ENV:Envelope xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">
  <SOAP-ENV:Body>
    <saml1p:Response xmlns:saml1p="urn:oasis:names:tc:SAML:1.0:protocol" MajorVersion="1" MinorVersion="1">
      <saml1p:Status>
        <saml1p:StatusCode Value="saml1p:RequestDenied"/>
      </saml1p:Status>
    </saml1p:Response>
  </SOAP-ENV:Body>
</SOAP-ENV:Envelope>"""


def logout_request(session_index: str) -> str:
    return (
        '<samlp:LogoutRequest xmlns:samlp="urn:oasis:names:tc:SAML:2.0:protocol" '
        'ID="LR-6-1nEuptR9wGcunDut1kpQrju0" Version="2.0" IssueInstant="2019-04-19T05:37:57Z">'
        '<saml:NameID xmlns:saml="urn:oasis:names:tc:SAML:2.0:assertion">jdoe</saml:NameID>'
        f"<samlp:SessionIndex>{session_index}</samlp:SessionIndex>"
        "</samlp:LogoutRequest>"
    )


class FakeRequestContext:
    """Minimal RequestContext for driving the decision engine directly."""

    def __init__(
        self,
        session,
        path: str = "/",
        query: Optional[Dict[str, str]] = None
    ):
        self.session = session
        self.path = path
        self.query = dict(query or {})

    @property
    def full_path(self) -> str:
        if not self.query:
            return self.path
        return self.path + "?" + "&".join(f"{k}={v}" for k, v in self.query.items())


def mock_http_client(
    handler: Callable[[httpx.Request], httpx.Response]
) -> httpx.AsyncClient:
    """HTTP client whose requests are answered by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def respond_with(body: str, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)
    return handler


@pytest.fixture
def memory_store():
    """Empty in-memory session store."""
    return MemorySessionStore()


@pytest.fixture
def session(memory_store):
    """Fresh server-side session backed by the memory store."""
    return ServerSession(memory_store, max_age=24 * 60 * 60)


@pytest.fixture
def make_context(session) -> Callable[..., FakeRequestContext]:
    """Factory for request contexts sharing the fixture session."""

    def factory(path: str = "/", query: Optional[Dict[str, Any]] = None) -> FakeRequestContext:
        return FakeRequestContext(session, path=path, query=query)

    return factory
