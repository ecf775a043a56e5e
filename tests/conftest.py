"""Pytest configuration and fixtures for sso-session tests."""

import os
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest

os.environ.setdefault("SSO_SESSION_SKIP_LOGGING_SETUP", "true")

from sso_session.core.entities import AuthenticationTicket, Principal
from sso_session.core.protocols import CookieOptions
from sso_session.infrastructure.repositories import InMemoryTicketAccessor

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeCookieTransport:
    """In-memory CookieTransport recording every response cookie write."""

    def __init__(
        self,
        request_cookies: Optional[Dict[str, str]] = None,
        secure: bool = False,
        base_path: str = ""
    ):
        self.request_cookies = dict(request_cookies or {})
        self.secure = secure
        self._base_path = base_path
        self.writes: List[Tuple[str, str, CookieOptions]] = []

    def get_request_cookie(self, name: str) -> Optional[str]:
        return self.request_cookies.get(name)

    def is_secure_request(self) -> bool:
        return self.secure

    def base_path(self) -> str:
        return self._base_path

    def set_response_cookie(self, name: str, value: str, options: CookieOptions) -> None:
        self.writes.append((name, value, options))


@pytest.fixture
def alice():
    """Principal for subject 'alice'."""
    return Principal.for_subject("alice", name="Alice")


@pytest.fixture
def bob():
    """Principal for subject 'bob'."""
    return Principal.for_subject("bob", name="Bob")


@pytest.fixture
def anonymous_accessor():
    """Ticket accessor with no ticket."""
    return InMemoryTicketAccessor()


@pytest.fixture
def alice_accessor(alice):
    """Ticket accessor holding alice's ticket with an established session."""
    return InMemoryTicketAccessor(
        AuthenticationTicket(principal=alice, properties={"session_id": "S1ALICE0000000000", ".issued": "now"})
    )


@pytest.fixture
def transport():
    """Cookie transport for a plain http request without cookies."""
    return FakeCookieTransport()


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_transport():
    """Factory for cookie transports with custom request state."""
    return FakeCookieTransport
