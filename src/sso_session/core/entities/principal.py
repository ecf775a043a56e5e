"""Authenticated principal entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

SUBJECT_CLAIM = "sub"


@dataclass
class Principal:
    """Authenticated principal as carried by the authentication ticket.

    The session core only ever reads the subject id from it; the remaining
    claims are opaque and are handed back to the ticket accessor unchanged.
    Claims are a plain dict, so principals compare by value but are not hashable.
    """

    claims: Dict[str, Any] = field(default_factory=dict)
    authentication_type: Optional[str] = None

    @classmethod
    def for_subject(cls, subject_id: str, **claims: Any) -> "Principal":
        """Build a principal from a subject id and optional extra claims."""
        return cls(claims={SUBJECT_CLAIM: subject_id, **claims})

    @property
    def subject_id(self) -> Optional[str]:
        """Stable identifier of the principal, or None when the claim is missing."""
        value = self.claims.get(SUBJECT_CLAIM)
        return str(value) if value is not None else None
