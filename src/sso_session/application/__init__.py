"""Session correlation use cases.

- codec: client list encoding for ticket storage
- services: session id decisions, client tracking, cookie mirroring and the
  per-request ``UserSession`` facade that composes them
"""

from .codec import ClientListDecodeResult, encode, decode
from .services import (
    SessionIdentifierManager,
    ClientParticipationTracker,
    SessionCookieMirror,
    UserSession,
)

__all__ = [
    "ClientListDecodeResult",
    "encode",
    "decode",
    "SessionIdentifierManager",
    "ClientParticipationTracker",
    "SessionCookieMirror",
    "UserSession",
]
