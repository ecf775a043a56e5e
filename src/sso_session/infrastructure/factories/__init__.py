"""Factories for wiring the session core."""

from .user_session_factory import UserSessionFactory

__all__ = ["UserSessionFactory"]
