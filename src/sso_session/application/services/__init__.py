"""Session correlation services."""

from .session_identifier_manager import SessionIdentifierManager
from .client_participation_tracker import ClientParticipationTracker
from .session_cookie_mirror import SessionCookieMirror, clean_url_path, utc_now, REMOVED_COOKIE_VALUE
from .user_session import UserSession

__all__ = [
    "SessionIdentifierManager",
    "ClientParticipationTracker",
    "SessionCookieMirror",
    "clean_url_path",
    "utc_now",
    "REMOVED_COOKIE_VALUE",
    "UserSession",
]
