"""End-to-end tests of the FastAPI integration."""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from cas_auth import AuthMode, CasClient
from cas_auth.infrastructure.fastapi import CasAuthMiddleware, cas_guard, create_cas_router
from cas_auth.infrastructure.session import ServerSessionMiddleware
from tests.conftest import CAS_URL, V2_FAILURE, V2_SUCCESS, logout_request, mock_http_client


def build_app(cas: CasClient) -> FastAPI:
    app = FastAPI()

    @app.get("/dashboard")
    async def dashboard(request: Request):
        session = request.state.session
        return {"user": session.get("cas_user"), "info": session.get("cas_userinfo")}

    @app.get("/api/me")
    async def me(user: str = Depends(cas_guard(cas, AuthMode.BLOCK))):
        return {"user": user}

    @app.get("/public")
    async def public():
        return {"ok": True}

    app.include_router(create_cas_router(cas), prefix="/cas")

    # Session middleware must wrap the CAS middleware
    app.add_middleware(CasAuthMiddleware, cas=cas, protected_paths=["/dashboard"])
    app.add_middleware(ServerSessionMiddleware, store=cas.session_store)
    return app


@pytest.fixture
def cas_server_requests():
    return []


@pytest.fixture
def cas(cas_server_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        cas_server_requests.append(request)
        if request.url.params.get("ticket") == "ST-5":
            return httpx.Response(200, text=V2_SUCCESS)
        return httpx.Response(200, text=V2_FAILURE)

    return CasClient(
        cas_url=CAS_URL,
        service_url="http://testserver",
        session_info="cas_userinfo",
        single_logout=True,
        http_client=mock_http_client(handler),
    )


@pytest.fixture
def client(cas):
    return TestClient(build_app(cas))


def log_in(client: TestClient) -> None:
    client.get("/dashboard", follow_redirects=False)
    client.get("/dashboard", params={"ticket": "ST-5"}, follow_redirects=False)


class TestBounceFlow:
    """Browser login through the protected route."""

    def test_login_round_trip(self, client, cas_server_requests):
        first = client.get("/dashboard", follow_redirects=False)
        assert first.status_code == 302
        location = urlsplit(first.headers["location"])
        assert f"{location.scheme}://{location.netloc}{location.path}" == f"{CAS_URL}/login"
        assert parse_qs(location.query) == {"service": ["http://testserver/dashboard"]}
        assert "cas_sid" in first.cookies

        second = client.get("/dashboard", params={"ticket": "ST-5"}, follow_redirects=False)
        assert second.status_code == 302
        assert second.headers["location"] == "/dashboard"
        assert cas_server_requests[0].url.params["service"] == "http://testserver/dashboard"

        third = client.get("/dashboard")
        assert third.status_code == 200
        assert third.json() == {
            "user": "jdoe",
            "info": {"email": "jdoe@example.com", "memberof": ["staff", "faculty"]},
        }

    def test_rejected_ticket(self, client):
        client.get("/dashboard", follow_redirects=False)

        response = client.get("/dashboard", params={"ticket": "ST-bad"}, follow_redirects=False)

        assert response.status_code == 401

    def test_unprotected_route(self, client, cas_server_requests):
        assert client.get("/public").json() == {"ok": True}
        assert cas_server_requests == []

    def test_login_endpoint_redirects_when_logged_in(self, client):
        log_in(client)

        response = client.get(
            "/cas/login", params={"redirectTo": "/reports"}, follow_redirects=False
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/reports"

    def test_login_endpoint_bounces(self, client):
        response = client.get("/cas/login", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"].startswith(f"{CAS_URL}/login?service=")


class TestGuardDependency:
    """Per-route protection with cas_guard."""

    def test_blocks_anonymous(self, client):
        assert client.get("/api/me").status_code == 401

    def test_returns_user(self, client):
        log_in(client)

        response = client.get("/api/me")

        assert response.status_code == 200
        assert response.json() == {"user": "jdoe"}


class TestLogout:
    """Local logout endpoint."""

    def test_logout_redirects_and_clears_login(self, client, cas):
        log_in(client)

        response = client.get("/cas/logout", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == f"{CAS_URL}/logout"
        assert "ST-5" not in cas.session_store
        assert client.get("/dashboard", follow_redirects=False).status_code == 302


class TestSingleLogout:
    """Back-channel logout from the CAS server."""

    def test_slo_destroys_session(self, client, cas):
        log_in(client)
        assert client.get("/dashboard").status_code == 200

        response = client.post("/cas/slo", data={"logoutRequest": logout_request("ST-5")})

        assert response.status_code == 200
        assert response.text == "ok"
        assert "ST-5" not in cas.session_store
        assert client.get("/dashboard", follow_redirects=False).status_code == 302

    def test_slo_unknown_ticket(self, client):
        response = client.post("/cas/slo", data={"logoutRequest": logout_request("ST-404")})

        assert response.status_code == 200
        assert response.text == "ok"

    def test_slo_bad_payload(self, client):
        response = client.post("/cas/slo", data={"logoutRequest": "not xml"})

        assert response.status_code == 202
        assert response.text == "ok"

    def test_slo_entity_declaration(self, client):
        payload = '<!DOCTYPE LogoutRequest [<!ENTITY a "b">]>' + logout_request("ST-5&a;")

        response = client.post("/cas/slo", data={"logoutRequest": payload})

        assert response.status_code == 202
        assert response.text == "ok"

    def test_slo_missing_field(self, client):
        response = client.post("/cas/slo", data={})

        assert response.status_code == 202
