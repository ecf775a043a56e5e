"""Session correlation value objects."""

from .session_id import SessionId, mask_session_id
from .ticket_properties import TicketProperties, SESSION_ID_KEY, CLIENT_LIST_KEY

__all__ = [
    "SessionId",
    "mask_session_id",
    "TicketProperties",
    "SESSION_ID_KEY",
    "CLIENT_LIST_KEY",
]
