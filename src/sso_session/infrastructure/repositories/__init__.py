"""Ticket accessor implementations."""

from .memory_ticket_accessor import InMemoryTicketAccessor

__all__ = ["InMemoryTicketAccessor"]
