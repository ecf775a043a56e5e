"""Ticket properties value object.

The session has no server-side record: its id and client list live in the
authentication ticket's string property bag. Every session event is a pure
transition from one bag to the next; persisting the result is the caller's job.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

SESSION_ID_KEY = "session_id"
CLIENT_LIST_KEY = "client_list"


@dataclass(frozen=True)
class TicketProperties:
    """Immutable view over an authentication ticket's property bag.

    Only the two reserved keys are ever changed by a transition; every
    other key is carried through as-is.
    """

    items: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", MappingProxyType(dict(self.items)))

    @property
    def session_id(self) -> Optional[str]:
        return self.items.get(SESSION_ID_KEY) or None

    @property
    def client_list_value(self) -> Optional[str]:
        return self.items.get(CLIENT_LIST_KEY)

    def with_sign_in(
        self,
        previous_subject_id: Optional[str],
        new_subject_id: Optional[str],
        new_session_id: Callable[[], str]
    ) -> "TicketProperties":
        """Apply a sign-in event.

        A new session id is minted when there was no previous subject, when the
        subject changed, or when no id has been recorded yet. Otherwise the
        existing id is kept so that a refreshed ticket keeps its session.
        """
        if (
            previous_subject_id is None
            or previous_subject_id != new_subject_id
            or self.session_id is None
        ):
            return self._replace(SESSION_ID_KEY, new_session_id())
        return self

    def with_client_list(self, encoded: Optional[str]) -> "TicketProperties":
        """Apply a client list update; ``None`` removes the key."""
        return self._replace(CLIENT_LIST_KEY, encoded)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.items)

    def _replace(self, key: str, value: Optional[str]) -> "TicketProperties":
        updated = dict(self.items)
        if value is None:
            updated.pop(key, None)
        else:
            updated[key] = value
        return TicketProperties(updated)
