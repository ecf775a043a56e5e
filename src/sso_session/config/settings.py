"""
Session correlation settings.

Host-supplied configuration consumed by the session core: the name and path
scope of the session-status cookie and the size of minted session ids.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHECK_SESSION_COOKIE_NAME = "idsrv.session"
MIN_SESSION_ID_BYTES = 16


class SessionSettings(BaseSettings):
    """Settings for the session-status cookie and session id generation."""

    model_config = SettingsConfigDict(
        env_prefix="SSO_SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    check_session_cookie_name: str = Field(
        default=DEFAULT_CHECK_SESSION_COOKIE_NAME,
        min_length=1,
        description="Name of the browser-readable cookie mirroring the session id"
    )
    cookie_path: Optional[str] = Field(
        default=None,
        description="Cookie path; falls back to the host base path when unset"
    )
    session_id_bytes: int = Field(
        default=MIN_SESSION_ID_BYTES,
        ge=MIN_SESSION_ID_BYTES,
        description="Bytes of randomness in a newly minted session id"
    )

    @field_validator("cookie_path")
    @classmethod
    def validate_cookie_path(cls, v: Optional[str]) -> Optional[str]:
        """Cookie paths must be absolute."""
        if v is not None and v and not v.startswith("/"):
            raise ValueError("Cookie path must start with '/'")
        return v or None


@lru_cache()
def get_session_settings() -> SessionSettings:
    """Get cached session settings instance."""
    return SessionSettings()
