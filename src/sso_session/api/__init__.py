"""FastAPI integration for the session core."""

from .dependencies import get_ticket_accessor, get_user_session_factory, get_user_session

__all__ = [
    "get_ticket_accessor",
    "get_user_session_factory",
    "get_user_session",
]
