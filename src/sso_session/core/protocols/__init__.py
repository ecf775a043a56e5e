"""Collaborator contracts for the session core."""

from .ticket_accessor import TicketAccessor
from .cookie_transport import CookieTransport, CookieOptions

__all__ = [
    "TicketAccessor",
    "CookieTransport",
    "CookieOptions",
]
