"""Session correlation exceptions."""

from .base import SsoSessionError, ConfigurationError, create_error_response
from .session import InvalidArgumentError, NotAuthenticatedError, ClientListDecodeError

__all__ = [
    "SsoSessionError",
    "ConfigurationError",
    "create_error_response",
    "InvalidArgumentError",
    "NotAuthenticatedError",
    "ClientListDecodeError",
]
