"""Derived session snapshot entity."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class SessionSnapshot:
    """The session as materialized from one ticket read.

    Sessions are never stored on the server, so this is a point-in-time
    derivation; it is what a logout fan-out component consumes.
    """

    session_id: str
    subject_id: str
    client_ids: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_clients(self) -> bool:
        return bool(self.client_ids)
