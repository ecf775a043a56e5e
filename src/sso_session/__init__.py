"""SSO Session - browser session correlation for federated single sign-on.

Tracks which authenticated subject a browser session belongs to, which
relying-party clients have joined it, and mirrors the session id into a
script-readable cookie for session-status checks. All state lives in the
authentication ticket; nothing is stored on the server.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import SessionSettings, get_session_settings

from .core import (
    SessionId,
    TicketProperties,
    SESSION_ID_KEY,
    CLIENT_LIST_KEY,
    SsoSessionError,
    ConfigurationError,
    InvalidArgumentError,
    NotAuthenticatedError,
    ClientListDecodeError,
    TicketAccessor,
    CookieTransport,
    CookieOptions,
    Principal,
    AuthenticationTicket,
    SessionSnapshot,
)

from .application import (
    ClientListDecodeResult,
    SessionIdentifierManager,
    ClientParticipationTracker,
    SessionCookieMirror,
    UserSession,
)

from .infrastructure import (
    StarletteCookieTransport,
    InMemoryTicketAccessor,
    UserSessionFactory,
)

__all__ = [
    "__version__",

    # Configuration
    "SessionSettings",
    "get_session_settings",

    # Core
    "SessionId",
    "TicketProperties",
    "SESSION_ID_KEY",
    "CLIENT_LIST_KEY",
    "SsoSessionError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NotAuthenticatedError",
    "ClientListDecodeError",
    "TicketAccessor",
    "CookieTransport",
    "CookieOptions",
    "Principal",
    "AuthenticationTicket",
    "SessionSnapshot",

    # Application
    "ClientListDecodeResult",
    "SessionIdentifierManager",
    "ClientParticipationTracker",
    "SessionCookieMirror",
    "UserSession",

    # Infrastructure
    "StarletteCookieTransport",
    "InMemoryTicketAccessor",
    "UserSessionFactory",
]
