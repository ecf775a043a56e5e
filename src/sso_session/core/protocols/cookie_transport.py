"""Cookie transport protocol contract."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class CookieOptions:
    """Attributes written alongside a response cookie."""

    path: str = "/"
    secure: bool = False
    http_only: bool = False
    same_site: str = "none"
    expires: Optional[datetime] = None


@runtime_checkable
class CookieTransport(Protocol):
    """Protocol for request cookie reads and response cookie writes.

    One transport instance is bound to exactly one request/response pair.
    """

    def get_request_cookie(self, name: str) -> Optional[str]:
        """Value of cookie ``name`` on the incoming request, if any."""
        ...

    def is_secure_request(self) -> bool:
        """Whether the incoming request arrived over an encrypted transport."""
        ...

    def base_path(self) -> str:
        """Path the host application is mounted under (may be empty)."""
        ...

    def set_response_cookie(self, name: str, value: str, options: CookieOptions) -> None:
        """Append a ``Set-Cookie`` for ``name`` to the outgoing response."""
        ...
