"""Authentication ticket entity."""

from dataclasses import dataclass, field
from typing import Dict

from .principal import Principal
from ..value_objects import TicketProperties


@dataclass
class AuthenticationTicket:
    """Result of a successful ticket authentication.

    Persisting and signing the ticket belongs to the ticket accessor; this is
    just the ``(principal, properties)`` pair it hands out.
    """

    principal: Principal
    properties: Dict[str, str] = field(default_factory=dict)

    @property
    def view(self) -> TicketProperties:
        """Immutable view of the property bag for pure transitions."""
        return TicketProperties(self.properties)
