"""FastAPI dependency injection helpers for the session core.

Hosts register their ticket accessor on ``app.state.ticket_accessor`` (or
override ``get_ticket_accessor``) and then depend on ``get_user_session``:

    @app.post("/connect/authorize")
    async def authorize(client_id: str, session: UserSession = Depends(get_user_session)):
        await session.add_client_id(client_id)
"""

from fastapi import Depends, Request, Response

from ..application.services import UserSession
from ..config import SessionSettings, get_session_settings
from ..core.exceptions import ConfigurationError
from ..core.protocols import TicketAccessor
from ..infrastructure.adapters import StarletteCookieTransport
from ..infrastructure.factories import UserSessionFactory


def get_ticket_accessor(request: Request) -> TicketAccessor:
    """Ticket accessor registered by the host application."""
    accessor = getattr(request.app.state, "ticket_accessor", None)
    if accessor is None:
        raise ConfigurationError(
            "No ticket accessor registered; set app.state.ticket_accessor",
            details={"state_attribute": "ticket_accessor"}
        )
    return accessor


def get_user_session_factory(
    settings: SessionSettings = Depends(get_session_settings)
) -> UserSessionFactory:
    """Factory for per-request session facades."""
    return UserSessionFactory(settings=settings)


def get_user_session(
    request: Request,
    response: Response,
    ticket_accessor: TicketAccessor = Depends(get_ticket_accessor),
    factory: UserSessionFactory = Depends(get_user_session_factory)
) -> UserSession:
    """Session facade bound to the current request and response."""
    return factory.create(ticket_accessor, StarletteCookieTransport(request, response))
