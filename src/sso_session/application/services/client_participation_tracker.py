"""Client participation tracker.

Keeps the list of relying-party clients that have used the current session so
that logout can be fanned out to all of them. The list lives inside the
authentication ticket; every change re-issues the whole ticket.

Concurrent ``add_client`` calls for the same session are not serialized: each
call reads the ticket, adds its client and signs the full property bag back
in, so the last writer wins and an addition made in between can be lost.
"""

import logging
from typing import List, Optional

from ..codec import decode, encode, is_valid_client_id
from ...core.entities import AuthenticationTicket
from ...core.exceptions import InvalidArgumentError, NotAuthenticatedError
from ...core.protocols import TicketAccessor

logger = logging.getLogger(__name__)


class ClientParticipationTracker:
    """Reads and updates the client list held in the authentication ticket."""

    def __init__(self, ticket_accessor: TicketAccessor):
        self._ticket_accessor = ticket_accessor

    async def add_client(self, client_id: str) -> None:
        """Record that ``client_id`` participated in the current session.

        Adding a client that is already listed is a no-op.

        Raises:
            InvalidArgumentError: If ``client_id`` is not a non-blank UTF-8 string
            NotAuthenticatedError: If there is no authenticated ticket
        """
        if not is_valid_client_id(client_id):
            raise InvalidArgumentError("client_id")

        ticket = await self._require_ticket("add_client")
        clients = await self._read_clients(ticket)
        if client_id in clients:
            return

        clients.append(client_id)
        await self._persist(ticket, encode(clients))
        logger.info(f"Client '{client_id}' joined session ({len(clients)} clients)")

    async def get_client_list(self) -> List[str]:
        """Clients that participated in the current session.

        An unauthenticated request or a missing list yields an empty list. A
        corrupted list is logged, removed from the ticket and reported as empty.
        """
        ticket = await self._ticket_accessor.authenticate()
        if ticket is None:
            logger.warning("No authenticated user")
            return []
        return await self._read_clients(ticket)

    async def _read_clients(self, ticket: AuthenticationTicket) -> List[str]:
        result = decode(ticket.view.client_list_value)
        if result.ok:
            return list(result.client_ids)

        logger.error(f"Error decoding client list: {result.error.message}")
        # clear so the next read does not fail again
        await self._persist(ticket, None)
        return []

    async def _require_ticket(self, operation: str) -> AuthenticationTicket:
        ticket = await self._ticket_accessor.authenticate()
        if ticket is None:
            logger.error("No authenticated user")
            raise NotAuthenticatedError(operation=operation)
        return ticket

    async def _persist(self, ticket: AuthenticationTicket, encoded: Optional[str]) -> None:
        updated = ticket.view.with_client_list(encoded).to_dict()
        await self._ticket_accessor.sign_in(ticket.principal, updated)
        ticket.properties = updated
