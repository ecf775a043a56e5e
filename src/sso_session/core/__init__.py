"""Core session correlation domain objects.

Components:
- value_objects: session id and the ticket property bag with its transitions
- exceptions: session-specific exceptions
- protocols: contracts for the ticket accessor and cookie transport
- entities: principal, authentication ticket and derived session snapshot
"""

from .value_objects import SessionId, TicketProperties, SESSION_ID_KEY, CLIENT_LIST_KEY
from .exceptions import (
    SsoSessionError,
    ConfigurationError,
    InvalidArgumentError,
    NotAuthenticatedError,
    ClientListDecodeError,
)
from .protocols import TicketAccessor, CookieTransport, CookieOptions
from .entities import Principal, AuthenticationTicket, SessionSnapshot

__all__ = [
    # Value Objects
    "SessionId",
    "TicketProperties",
    "SESSION_ID_KEY",
    "CLIENT_LIST_KEY",

    # Exceptions
    "SsoSessionError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NotAuthenticatedError",
    "ClientListDecodeError",

    # Protocols
    "TicketAccessor",
    "CookieTransport",
    "CookieOptions",

    # Entities
    "Principal",
    "AuthenticationTicket",
    "SessionSnapshot",
]
