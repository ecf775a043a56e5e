"""In-memory ticket accessor."""

import asyncio
import copy
import logging
from typing import Dict, Optional

from ...core.entities import AuthenticationTicket, Principal

logger = logging.getLogger(__name__)


class InMemoryTicketAccessor:
    """Ticket accessor holding a single browser's ticket in memory.

    Stands in for a cookie-borne or distributed ticket store in development
    and tests. Reads hand out copies and writes replace the whole ticket, so
    it behaves like a signed cookie that is re-read on every request. Both
    operations yield to the event loop the way real I/O would.
    """

    def __init__(self, ticket: Optional[AuthenticationTicket] = None):
        self._ticket = self._copy(ticket)
        self.sign_in_count = 0

    @staticmethod
    def _copy(ticket: Optional[AuthenticationTicket]) -> Optional[AuthenticationTicket]:
        if ticket is None:
            return None
        return AuthenticationTicket(principal=ticket.principal, properties=copy.deepcopy(ticket.properties))

    @property
    def current(self) -> Optional[AuthenticationTicket]:
        """Copy of the stored ticket, without yielding."""
        return self._copy(self._ticket)

    async def authenticate(self) -> Optional[AuthenticationTicket]:
        snapshot = self._copy(self._ticket)
        await asyncio.sleep(0)
        return snapshot

    async def sign_in(self, principal: Principal, properties: Dict[str, str]) -> None:
        if principal is None:
            raise ValueError("Principal is required")
        ticket = AuthenticationTicket(principal=principal, properties=dict(properties or {}))
        await asyncio.sleep(0)
        self._ticket = ticket
        self.sign_in_count += 1
        logger.debug(f"Ticket issued for subject {principal.subject_id}")

    async def sign_out(self) -> None:
        await asyncio.sleep(0)
        self._ticket = None
