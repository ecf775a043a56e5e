"""Session ID value object with validation and generation."""

import re
import secrets
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SessionId:
    """Session identifier value object with validation.

    Handles ONLY session id representation, validation and minting.
    Whether a session keeps or rotates its id is decided elsewhere.
    """

    value: str

    MIN_BYTES: ClassVar[int] = 16
    MAX_LENGTH: ClassVar[int] = 255
    VALID_PATTERN: ClassVar["re.Pattern[str]"] = re.compile(r"^[A-Za-z0-9_-]+$")

    def __post_init__(self) -> None:
        """Validate session id format."""
        if not isinstance(self.value, str):
            raise TypeError("Session ID must be a string")

        if not self.value:
            raise ValueError("Session ID cannot be empty")

        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(f"Session ID cannot exceed {self.MAX_LENGTH} characters")

        # Mirrored verbatim into a cookie value
        if not self.VALID_PATTERN.match(self.value):
            raise ValueError("Session ID contains invalid characters (only alphanumeric, hyphens, and underscores allowed)")

    @classmethod
    def generate(cls, byte_length: int = MIN_BYTES) -> "SessionId":
        """Generate a cryptographically secure session ID.

        Args:
            byte_length: Bytes of randomness, at least ``MIN_BYTES``

        Returns:
            New SessionId holding the upper-case hex of the random bytes
        """
        if byte_length < cls.MIN_BYTES:
            raise ValueError(f"Session ID needs at least {cls.MIN_BYTES} bytes of randomness")

        return cls(secrets.token_hex(byte_length).upper())

    def mask_for_logging(self) -> str:
        """Return masked session ID safe for logging."""
        return mask_session_id(self.value)

    def __str__(self) -> str:
        """String representation (masked for security)."""
        return f"SessionId({self.mask_for_logging()})"

    def __repr__(self) -> str:
        """Debug representation (masked for security)."""
        return f"SessionId(value='{self.mask_for_logging()}')"


def mask_session_id(value: str) -> str:
    """Mask a raw session id string for logs."""
    if not value or len(value) <= 12:
        return "***"
    return f"{value[:6]}...{value[-6:]}"
