"""Session correlation exceptions."""

from typing import Optional

from .base import SsoSessionError


class InvalidArgumentError(SsoSessionError, ValueError):
    """Raised when a required input is absent or blank.

    Always raised before any ticket I/O or mutation.
    """

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Argument '{argument}' is required",
            details={"argument": argument}
        )
        self.argument = argument


class NotAuthenticatedError(SsoSessionError):
    """Raised when session-scoped state is mutated without an authenticated ticket.

    This is a caller contract violation, not a user-facing condition.
    """

    def __init__(self, message: str = "No authenticated user", *, operation: Optional[str] = None) -> None:
        super().__init__(message, details={"operation": operation} if operation else None)
        self.operation = operation


class ClientListDecodeError(SsoSessionError):
    """Stored client list could not be decoded."""

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message, details={"reason": reason})
        self.reason = reason
