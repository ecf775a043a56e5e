"""Session identifier manager."""

import logging
from typing import Callable, MutableMapping, Optional

from ...core.entities import Principal
from ...core.exceptions import InvalidArgumentError
from ...core.protocols import TicketAccessor
from ...core.value_objects import SessionId, TicketProperties, SESSION_ID_KEY, mask_session_id

logger = logging.getLogger(__name__)


class SessionIdentifierManager:
    """Decides whether a sign-in keeps or rotates the session id.

    Handles ONLY session id decisions and lookups. It never signs in itself:
    the id is written into the properties the caller is about to persist.
    """

    def __init__(
        self,
        ticket_accessor: TicketAccessor,
        session_id_bytes: int = SessionId.MIN_BYTES,
        id_factory: Optional[Callable[[], str]] = None
    ):
        """Initialize manager.

        Args:
            ticket_accessor: Reads the current authentication ticket
            session_id_bytes: Randomness in minted ids (at least 16 bytes)
            id_factory: Override for id minting; defaults to ``SessionId.generate``
        """
        if session_id_bytes < SessionId.MIN_BYTES:
            raise ValueError(f"Session id must use at least {SessionId.MIN_BYTES} bytes")

        self._ticket_accessor = ticket_accessor
        self._session_id_bytes = session_id_bytes
        self._id_factory = id_factory or self._generate

    def _generate(self) -> str:
        return SessionId.generate(self._session_id_bytes).value

    def establish_session_id(
        self,
        previous_subject_id: Optional[str],
        new_principal: Principal,
        properties_out: MutableMapping[str, str]
    ) -> str:
        """Keep or rotate the session id for a principal that is signing in.

        Args:
            previous_subject_id: Subject bound to the session before this sign-in
            new_principal: Principal now signing in
            properties_out: Properties that will be persisted into the ticket

        Returns:
            The session id now held in ``properties_out``

        Raises:
            InvalidArgumentError: If ``new_principal`` or ``properties_out`` is None
        """
        if new_principal is None:
            raise InvalidArgumentError("new_principal")
        if properties_out is None:
            raise InvalidArgumentError("properties_out")

        current = TicketProperties(properties_out)
        updated = current.with_sign_in(previous_subject_id, new_principal.subject_id, self._id_factory)
        session_id = updated.session_id

        if session_id != current.session_id:
            properties_out[SESSION_ID_KEY] = session_id
            logger.info(
                f"Minted session id {mask_session_id(session_id)} "
                f"(subject changed: {previous_subject_id != new_principal.subject_id})"
            )
        else:
            logger.debug(f"Keeping session id {mask_session_id(session_id)}")

        return session_id

    async def get_current_principal(self) -> Optional[Principal]:
        """Principal of the current ticket; anonymous callers are modelled as None."""
        ticket = await self._ticket_accessor.authenticate()
        if ticket is None:
            return None
        return ticket.principal

    async def get_current_session_id(self) -> Optional[str]:
        """Session id of the current ticket, or None when there is no session."""
        ticket = await self._ticket_accessor.authenticate()
        if ticket is None:
            return None
        return ticket.view.session_id
