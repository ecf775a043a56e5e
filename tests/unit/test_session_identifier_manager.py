"""Tests for the session identifier manager."""

from unittest.mock import AsyncMock

import pytest

from sso_session.application.services import SessionIdentifierManager
from sso_session.core.entities import AuthenticationTicket, Principal
from sso_session.core.exceptions import InvalidArgumentError
from sso_session.infrastructure.repositories import InMemoryTicketAccessor


class TestEstablishSessionId:
    """Keep-or-rotate decisions on sign-in."""

    @pytest.fixture
    def manager(self, anonymous_accessor):
        return SessionIdentifierManager(anonymous_accessor)

    def test_first_sign_in_mints_id(self, manager, alice):
        properties = {}
        session_id = manager.establish_session_id(None, alice, properties)
        assert properties["session_id"] == session_id
        assert len(session_id) == 32

    def test_repeated_sign_in_same_subject_keeps_id(self, manager, alice):
        properties = {}
        first = manager.establish_session_id(None, alice, properties)
        for _ in range(5):
            assert manager.establish_session_id("alice", alice, properties) == first
        assert properties["session_id"] == first

    def test_subject_change_rotates_id(self, manager, alice, bob):
        properties = {}
        first = manager.establish_session_id(None, alice, properties)
        second = manager.establish_session_id("alice", bob, properties)
        assert second != first
        assert properties["session_id"] == second

    def test_subject_change_never_reuses_previous_ids(self, manager, alice, bob):
        properties = {}
        seen = {manager.establish_session_id(None, alice, properties)}
        previous = "alice"
        for principal in [bob, alice, bob, alice, bob]:
            seen.add(manager.establish_session_id(previous, principal, properties))
            previous = principal.subject_id
        assert len(seen) == 6

    def test_other_properties_untouched(self, manager, alice):
        properties = {"client_list": "abc", ".expires": "soon"}
        manager.establish_session_id(None, alice, properties)
        assert properties["client_list"] == "abc"
        assert properties[".expires"] == "soon"

    def test_custom_id_factory(self, anonymous_accessor, alice):
        manager = SessionIdentifierManager(anonymous_accessor, id_factory=lambda: "FIXED-ID")
        assert manager.establish_session_id(None, alice, {}) == "FIXED-ID"

    def test_configured_byte_length(self, anonymous_accessor, alice):
        manager = SessionIdentifierManager(anonymous_accessor, session_id_bytes=24)
        assert len(manager.establish_session_id(None, alice, {})) == 48

    def test_rejects_weak_byte_length(self, anonymous_accessor):
        with pytest.raises(ValueError):
            SessionIdentifierManager(anonymous_accessor, session_id_bytes=8)

    def test_missing_principal_fails_before_mutation(self, manager):
        properties = {"session_id": "UNCHANGED"}
        with pytest.raises(InvalidArgumentError) as exc_info:
            manager.establish_session_id(None, None, properties)
        assert exc_info.value.argument == "new_principal"
        assert properties == {"session_id": "UNCHANGED"}

    def test_missing_properties_fails(self, manager, alice):
        with pytest.raises(InvalidArgumentError) as exc_info:
            manager.establish_session_id(None, alice, None)
        assert exc_info.value.argument == "properties_out"
        assert isinstance(exc_info.value, ValueError)


class TestCurrentSession:
    """Reading the current session id and principal."""

    @pytest.mark.asyncio
    async def test_no_ticket_means_no_session(self, anonymous_accessor):
        manager = SessionIdentifierManager(anonymous_accessor)
        assert await manager.get_current_session_id() is None
        assert await manager.get_current_principal() is None

    @pytest.mark.asyncio
    async def test_ticket_without_session_key(self, alice):
        accessor = InMemoryTicketAccessor(AuthenticationTicket(principal=alice, properties={}))
        manager = SessionIdentifierManager(accessor)
        assert await manager.get_current_session_id() is None
        assert (await manager.get_current_principal()).subject_id == "alice"

    @pytest.mark.asyncio
    async def test_reads_session_id(self, alice_accessor):
        manager = SessionIdentifierManager(alice_accessor)
        assert await manager.get_current_session_id() == "S1ALICE0000000000"

    @pytest.mark.asyncio
    async def test_accessor_errors_propagate(self):
        accessor = AsyncMock()
        accessor.authenticate.side_effect = ConnectionError("ticket store down")
        manager = SessionIdentifierManager(accessor)
        with pytest.raises(ConnectionError):
            await manager.get_current_session_id()
        accessor.authenticate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_never_signs_in(self):
        accessor = AsyncMock()
        accessor.authenticate.return_value = None
        manager = SessionIdentifierManager(accessor)
        manager.establish_session_id(None, Principal.for_subject("alice"), {})
        await manager.get_current_session_id()
        accessor.sign_in.assert_not_called()
