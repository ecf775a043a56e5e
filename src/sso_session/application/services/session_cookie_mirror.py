"""Session-status cookie mirror."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from ...core.exceptions import InvalidArgumentError
from ...core.protocols import CookieOptions, CookieTransport
from ...core.value_objects import mask_session_id

logger = logging.getLogger(__name__)

REMOVED_COOKIE_VALUE = "."
REMOVAL_BACKDATE = timedelta(days=365)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def clean_url_path(path: Optional[str]) -> str:
    """Normalize a base path for use as a cookie path."""
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


class SessionCookieMirror:
    """Mirrors the session id into a browser-readable cookie.

    Client-side session-status checks (e.g. a polling iframe) read this
    cookie, so it is deliberately not HTTP-only and is sent cross-site.
    One instance is bound to a single request through its transport.
    """

    def __init__(
        self,
        transport: CookieTransport,
        cookie_name: str,
        cookie_path: Optional[str] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        """Initialize mirror.

        Args:
            transport: Cookie access for the current request/response
            cookie_name: Name of the session-status cookie
            cookie_path: Explicit cookie path; defaults to the host base path
            clock: Current time source used to backdate removals; naive values are read as UTC
        """
        if not cookie_name:
            raise ValueError("Cookie name is required")

        self._transport = transport
        self._cookie_name = cookie_name
        self._cookie_path = cookie_path
        self._clock = clock
        self._written: Optional[str] = None
        self._removed = False

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def _create_options(self, expires: Optional[datetime] = None) -> CookieOptions:
        return CookieOptions(
            path=clean_url_path(self._cookie_path or self._transport.base_path()),
            secure=self._transport.is_secure_request(),
            http_only=False,
            same_site="none",
            expires=expires,
        )

    def _current_value(self) -> Optional[str]:
        if self._written is not None:
            return self._written
        return self._transport.get_request_cookie(self._cookie_name)

    def issue_session_cookie(self, session_id: str) -> bool:
        """Write the session cookie if the browser does not already hold ``session_id``.

        Returns:
            True if a cookie was written
        """
        if not session_id:
            raise InvalidArgumentError("session_id")

        if self._current_value() == session_id:
            return False

        self._transport.set_response_cookie(self._cookie_name, session_id, self._create_options())
        self._written = session_id
        self._removed = False
        logger.debug(f"Issued session cookie {mask_session_id(session_id)}")
        return True

    def remove_session_cookie(self) -> bool:
        """Expire the session cookie, but only if the request carries it.

        This never runs just because the ticket is gone: during logout the
        ticket may already be cleared while a pending logout notification
        still needs the cookie.

        Returns:
            True if an expiring cookie was written
        """
        if self._removed or self._transport.get_request_cookie(self._cookie_name) is None:
            return False

        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        expires = now.astimezone(timezone.utc) - REMOVAL_BACKDATE
        self._transport.set_response_cookie(
            self._cookie_name,
            REMOVED_COOKIE_VALUE,
            self._create_options(expires=expires),
        )
        self._removed = True
        self._written = REMOVED_COOKIE_VALUE
        logger.debug("Removed session cookie")
        return True

    async def ensure_session_cookie(
        self,
        current_session_id: Callable[[], Awaitable[Optional[str]]]
    ) -> bool:
        """Issue the cookie for the current session, if there is one.

        Without a current session nothing happens; in particular the cookie
        is not removed (see ``remove_session_cookie``).

        Args:
            current_session_id: Looks up the current session id

        Returns:
            True if a cookie was written
        """
        session_id = await current_session_id()
        if session_id is None:
            return False
        return self.issue_session_cookie(session_id)
