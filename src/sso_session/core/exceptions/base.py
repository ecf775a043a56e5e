"""Base exceptions for sso-session.

All exceptions inherit from SsoSessionError and carry an error code and
structured details for logging and API responses.
"""

from typing import Any, Dict, Optional


class SsoSessionError(Exception):
    """Base exception for all sso-session errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(SsoSessionError):
    """Raised when the host has not wired a required collaborator."""
    pass


def create_error_response(exception: SsoSessionError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The sso-session exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
