"""Tests for the session-status cookie mirror."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from sso_session.application.services import SessionCookieMirror, clean_url_path
from sso_session.core.exceptions import InvalidArgumentError

COOKIE = "idsrv.session"


def _mirror(transport, clock=None, cookie_path=None):
    kwargs = {"cookie_name": COOKIE, "cookie_path": cookie_path}
    if clock is not None:
        kwargs["clock"] = clock
    return SessionCookieMirror(transport, **kwargs)


class TestIssueSessionCookie:
    """Issuing the session cookie."""

    def test_writes_when_request_has_no_cookie(self, transport):
        assert _mirror(transport).issue_session_cookie("S1") is True
        assert len(transport.writes) == 1
        name, value, options = transport.writes[0]
        assert (name, value) == (COOKIE, "S1")
        assert options.http_only is False
        assert options.same_site == "none"
        assert options.secure is False
        assert options.path == "/"
        assert options.expires is None

    def test_skips_when_request_already_has_value(self, make_transport):
        transport = make_transport({COOKIE: "S1"})
        assert _mirror(transport).issue_session_cookie("S1") is False
        assert transport.writes == []

    def test_twice_in_a_row_writes_once(self, transport):
        mirror = _mirror(transport)
        mirror.issue_session_cookie("S1")
        mirror.issue_session_cookie("S1")
        assert len(transport.writes) == 1

    def test_writes_when_value_changes(self, make_transport):
        transport = make_transport({COOKIE: "S1"})
        mirror = _mirror(transport)
        assert mirror.issue_session_cookie("S2") is True
        assert mirror.issue_session_cookie("S3") is True
        assert [value for _, value, _ in transport.writes] == ["S2", "S3"]

    def test_secure_follows_request_scheme(self, make_transport):
        transport = make_transport(secure=True)
        _mirror(transport).issue_session_cookie("S1")
        assert transport.writes[0][2].secure is True

    @pytest.mark.parametrize(
        "base_path, expected",
        [("", "/"), ("/", "/"), ("/identity", "/identity"), ("/identity/", "/identity")],
    )
    def test_path_scoped_to_base_path(self, make_transport, base_path, expected):
        transport = make_transport(base_path=base_path)
        _mirror(transport).issue_session_cookie("S1")
        assert transport.writes[0][2].path == expected

    def test_configured_path_wins(self, make_transport):
        transport = make_transport(base_path="/identity")
        _mirror(transport, cookie_path="/sso").issue_session_cookie("S1")
        assert transport.writes[0][2].path == "/sso"

    def test_rejects_blank_session_id(self, transport):
        with pytest.raises(InvalidArgumentError):
            _mirror(transport).issue_session_cookie("")
        assert transport.writes == []

    def test_requires_cookie_name(self, transport):
        with pytest.raises(ValueError):
            SessionCookieMirror(transport, cookie_name="")


class TestRemoveSessionCookie:
    """Removing the session cookie."""

    def test_noop_without_request_cookie(self, transport, fixed_clock):
        assert _mirror(transport, fixed_clock).remove_session_cookie() is False
        assert transport.writes == []

    def test_expires_cookie_present_on_request(self, make_transport, fixed_clock):
        transport = make_transport({COOKIE: "S1"}, secure=True, base_path="/identity")
        assert _mirror(transport, fixed_clock).remove_session_cookie() is True

        name, value, options = transport.writes[0]
        assert (name, value) == (COOKIE, ".")
        assert options.expires == fixed_clock() - timedelta(days=365)
        assert options.expires < fixed_clock()
        assert options.secure is True
        assert options.path == "/identity"
        assert options.same_site == "none"
        assert options.http_only is False

    def test_removes_once_per_request(self, make_transport, fixed_clock):
        transport = make_transport({COOKIE: "S1"})
        mirror = _mirror(transport, fixed_clock)
        mirror.remove_session_cookie()
        assert mirror.remove_session_cookie() is False
        assert len(transport.writes) == 1

    def test_remove_after_reissue_writes_again(self, make_transport, fixed_clock):
        transport = make_transport({COOKIE: "S1"})
        mirror = _mirror(transport, fixed_clock)
        mirror.remove_session_cookie()
        mirror.issue_session_cookie("S2")
        assert mirror.remove_session_cookie() is True
        assert [value for _, value, _ in transport.writes] == [".", "S2", "."]

    def test_naive_clock_is_read_as_utc(self, make_transport):
        transport = make_transport({COOKIE: "S1"})
        _mirror(transport, lambda: datetime(2024, 3, 1, 12, 0, 0)).remove_session_cookie()
        expires = transport.writes[0][2].expires
        assert expires.tzinfo is not None
        assert expires == datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc) - timedelta(days=365)

    def test_issue_after_remove_writes(self, make_transport, fixed_clock):
        transport = make_transport({COOKIE: "S1"})
        mirror = _mirror(transport, fixed_clock)
        mirror.remove_session_cookie()
        assert mirror.issue_session_cookie("S1") is True
        assert [value for _, value, _ in transport.writes] == [".", "S1"]


class TestEnsureSessionCookie:
    """Ensuring the cookie mirrors the current session."""

    @pytest.mark.asyncio
    async def test_issues_current_session(self, transport):
        lookup = AsyncMock(return_value="S1")
        assert await _mirror(transport).ensure_session_cookie(lookup) is True
        lookup.assert_awaited_once()
        assert transport.writes[0][1] == "S1"

    @pytest.mark.asyncio
    async def test_no_session_does_not_delete(self, make_transport):
        transport = make_transport({COOKIE: "S1"})
        lookup = AsyncMock(return_value=None)
        assert await _mirror(transport).ensure_session_cookie(lookup) is False
        assert transport.writes == []


@pytest.mark.parametrize(
    "path, expected",
    [(None, "/"), ("", "/"), ("/", "/"), ("/a/b/", "/a/b"), ("a", "/a"), ("/a//", "/a")],
)
def test_clean_url_path(path, expected):
    assert clean_url_path(path) == expected
