"""User session factory."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ...application.services import (
    ClientParticipationTracker,
    SessionCookieMirror,
    SessionIdentifierManager,
    UserSession,
    utc_now,
)
from ...config import SessionSettings, get_session_settings
from ...core.protocols import CookieTransport, TicketAccessor

logger = logging.getLogger(__name__)


class UserSessionFactory:
    """Builds a ``UserSession`` for one request.

    Handles ONLY wiring: settings, clock and the host's collaborators go in,
    a ready-to-use session facade comes out.
    """

    def __init__(
        self,
        settings: Optional[SessionSettings] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.settings = settings or get_session_settings()
        self.clock = clock
        logger.debug(
            f"User session factory configured: cookie={self.settings.check_session_cookie_name}, "
            f"path={self.settings.cookie_path or '<base path>'}"
        )

    def create(self, ticket_accessor: TicketAccessor, transport: CookieTransport) -> UserSession:
        """Create the session facade for one request.

        Args:
            ticket_accessor: Host ticket accessor bound to the request
            transport: Cookie transport bound to the request/response pair
        """
        return UserSession(
            session_ids=SessionIdentifierManager(
                ticket_accessor,
                session_id_bytes=self.settings.session_id_bytes,
            ),
            clients=ClientParticipationTracker(ticket_accessor),
            cookie_mirror=SessionCookieMirror(
                transport,
                cookie_name=self.settings.check_session_cookie_name,
                cookie_path=self.settings.cookie_path,
                clock=self.clock,
            ),
        )
