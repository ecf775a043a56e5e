"""Configuration for sso-session: settings and logging."""

from .logging_config import LoggingConfig, LogFormat, LogLevel, LogVerbosity, setup_logging
from .settings import (
    DEFAULT_CHECK_SESSION_COOKIE_NAME,
    MIN_SESSION_ID_BYTES,
    SessionSettings,
    get_session_settings,
)

__all__ = [
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
    "DEFAULT_CHECK_SESSION_COOKIE_NAME",
    "MIN_SESSION_ID_BYTES",
    "SessionSettings",
    "get_session_settings",
]
