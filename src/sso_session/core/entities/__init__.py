"""Session correlation entities."""

from .principal import Principal, SUBJECT_CLAIM
from .authentication_ticket import AuthenticationTicket
from .session_snapshot import SessionSnapshot

__all__ = [
    "Principal",
    "SUBJECT_CLAIM",
    "AuthenticationTicket",
    "SessionSnapshot",
]
