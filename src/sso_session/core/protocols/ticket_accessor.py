"""Ticket accessor protocol contract."""

from typing import Dict, Optional, Protocol, runtime_checkable

from ..entities import AuthenticationTicket, Principal


@runtime_checkable
class TicketAccessor(Protocol):
    """Protocol for reading and re-issuing the current authentication ticket.

    Defines ONLY the contract. Implementations own persistence and signing
    (cookie ticket, distributed ticket store, etc.). There is no partial
    update: changing one property means signing in again with the full bag.
    """

    async def authenticate(self) -> Optional[AuthenticationTicket]:
        """Read the current ticket.

        Returns:
            The ticket, or None when the request is not authenticated
        """
        ...

    async def sign_in(self, principal: Principal, properties: Dict[str, str]) -> None:
        """Issue (or re-issue) the ticket for ``principal`` with ``properties``.

        Args:
            principal: Principal to persist
            properties: Complete property bag to persist
        """
        ...
