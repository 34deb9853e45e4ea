"""Tests for back-channel single logout reconciliation."""

from unittest.mock import AsyncMock

import pytest

from cas_auth.application.services import SingleLogoutReconciler
from cas_auth.application.services.single_logout_reconciler import parse_logout_request
from cas_auth.core.exceptions import ProtocolError, SessionStoreError
from cas_auth.core.value_objects import SloAcknowledgement
from tests.conftest import logout_request


class TestParseLogoutRequest:
    """Test parsing of the SAML LogoutRequest payload."""

    def test_parses_fields(self):
        notification = parse_logout_request(logout_request("ST-8-E1LBqLsi89XF"))

        assert notification.session_index == "ST-8-E1LBqLsi89XF"
        assert notification.name_id == "jdoe"
        assert notification.request_id == "LR-6-1nEuptR9wGcunDut1kpQrju0"

    @pytest.mark.parametrize("payload", [
        None,
        "",
        "<samlp:LogoutRequest",
        "<other/>",
        '<samlp:LogoutRequest xmlns:samlp="urn:oasis:names:tc:SAML:2.0:protocol" ID="x">'
        "<samlp:SessionIndex>  </samlp:SessionIndex></samlp:LogoutRequest>",
        '<!DOCTYPE LogoutRequest [<!ENTITY a "b">]>' + logout_request("ST-1&a;"),
    ])
    def test_rejects_unusable_payload(self, payload):
        with pytest.raises(ProtocolError):
            parse_logout_request(payload)


class TestSingleLogoutReconciler:
    """Test reconciliation against the session store."""

    @pytest.mark.asyncio
    async def test_destroys_bound_session(self, memory_store):
        await memory_store.set("ST-1", {"key": "sess-9"}, 86400)
        await memory_store.set("sess-9", {"cas_user": "jdoe"}, 86400)
        reconciler = SingleLogoutReconciler(memory_store, enabled=True)

        ack = await reconciler.handle(logout_request("ST-1"))

        assert ack == SloAcknowledgement(200, "ok")
        assert "sess-9" not in memory_store
        assert "ST-1" not in memory_store

    @pytest.mark.asyncio
    async def test_unknown_ticket_destroyed_directly(self):
        store = AsyncMock()
        store.get.return_value = None
        reconciler = SingleLogoutReconciler(store, enabled=True)

        ack = await reconciler.handle(logout_request("ST-2"))

        assert ack.status_code == 200
        assert ack.body == "ok"
        store.get.assert_awaited_once_with("ST-2", 86400, {})
        store.destroy.assert_awaited_once_with("ST-2")

    @pytest.mark.asyncio
    async def test_failed_binding_destroy_is_partial(self):
        store = AsyncMock()
        store.get.return_value = {"key": "sess-9"}
        store.destroy.side_effect = [None, SessionStoreError("delete failed")]
        reconciler = SingleLogoutReconciler(store, enabled=True)

        ack = await reconciler.handle(logout_request("ST-1"))

        assert ack.status_code == 202
        assert ack.is_partial
        assert [call.args[0] for call in store.destroy.await_args_list] == ["sess-9", "ST-1"]

    @pytest.mark.asyncio
    async def test_failed_session_destroy_still_drops_binding(self):
        store = AsyncMock()
        store.get.return_value = {"key": "sess-9"}
        store.destroy.side_effect = [SessionStoreError("delete failed"), None]
        reconciler = SingleLogoutReconciler(store, enabled=True)

        ack = await reconciler.handle(logout_request("ST-1"))

        assert ack.status_code == 202
        assert store.destroy.await_count == 2

    @pytest.mark.asyncio
    async def test_failed_lookup_is_partial(self):
        store = AsyncMock()
        store.get.side_effect = SessionStoreError("read failed")
        reconciler = SingleLogoutReconciler(store, enabled=True)

        ack = await reconciler.handle(logout_request("ST-1"))

        assert ack == SloAcknowledgement.partial()
        store.destroy.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_fallback_destroy_is_partial(self):
        store = AsyncMock()
        store.get.return_value = None
        store.destroy.side_effect = SessionStoreError("delete failed")
        reconciler = SingleLogoutReconciler(store, enabled=True)

        ack = await reconciler.handle(logout_request("ST-2"))

        assert ack.status_code == 202
        assert ack.body == "ok"

    @pytest.mark.asyncio
    async def test_disabled_is_noop(self):
        store = AsyncMock()
        reconciler = SingleLogoutReconciler(store, enabled=False)

        ack = await reconciler.handle(logout_request("ST-1"))

        assert ack == SloAcknowledgement.full()
        store.get.assert_not_awaited()
        store.destroy.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_entity_declaration_is_partial(self, memory_store):
        await memory_store.set("ST-1", {"key": "sess-9"}, 86400)
        await memory_store.set("sess-9", {"cas_user": "jdoe"}, 86400)
        reconciler = SingleLogoutReconciler(memory_store, enabled=True)
        payload = '<!DOCTYPE LogoutRequest [<!ENTITY a "">]>' + logout_request("ST-1&a;")

        ack = await reconciler.handle(payload)

        assert ack == SloAcknowledgement(202, "ok")
        assert "sess-9" in memory_store

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, "", "garbage", "<LogoutRequest/>"])
    async def test_bad_payload_is_partial(self, payload):
        store = AsyncMock()
        reconciler = SingleLogoutReconciler(store, enabled=True)

        ack = await reconciler.handle(payload)

        assert ack == SloAcknowledgement(202, "ok")
        store.destroy.assert_not_awaited()

    def test_enabled_requires_store(self):
        with pytest.raises(ValueError):
            SingleLogoutReconciler(None, enabled=True)
