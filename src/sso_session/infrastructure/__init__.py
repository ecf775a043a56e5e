"""Infrastructure for the session core: framework adapters, ticket accessors and factories."""

from .adapters import StarletteCookieTransport
from .repositories import InMemoryTicketAccessor
from .factories import UserSessionFactory

__all__ = [
    "StarletteCookieTransport",
    "InMemoryTicketAccessor",
    "UserSessionFactory",
]
