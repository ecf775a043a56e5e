"""Framework adapters."""

from .starlette_cookie_transport import StarletteCookieTransport

__all__ = ["StarletteCookieTransport"]
