"""Starlette/FastAPI cookie transport adapter."""

from typing import Optional

from starlette.requests import Request
from starlette.responses import Response

from ...core.protocols import CookieOptions

SECURE_SCHEMES = ("https", "wss")


class StarletteCookieTransport:
    """Cookie transport over a Starlette request/response pair.

    Handles ONLY cookie reads from the request and ``Set-Cookie`` writes to
    the response.
    """

    def __init__(self, request: Request, response: Response):
        self._request = request
        self._response = response

    def get_request_cookie(self, name: str) -> Optional[str]:
        return self._request.cookies.get(name)

    def is_secure_request(self) -> bool:
        return self._request.url.scheme in SECURE_SCHEMES

    def base_path(self) -> str:
        return self._request.scope.get("root_path", "")

    def set_response_cookie(self, name: str, value: str, options: CookieOptions) -> None:
        self._response.set_cookie(
            key=name,
            value=value,
            path=options.path,
            secure=options.secure,
            httponly=options.http_only,
            samesite=options.same_site,
            expires=options.expires,
        )
