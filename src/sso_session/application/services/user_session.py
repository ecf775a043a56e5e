"""Per-request user session facade."""

import logging
from typing import List, MutableMapping, Optional

from .client_participation_tracker import ClientParticipationTracker
from .session_cookie_mirror import SessionCookieMirror
from .session_identifier_manager import SessionIdentifierManager
from ...core.entities import Principal, SessionSnapshot
from ...core.exceptions import InvalidArgumentError
from ...core.value_objects import SESSION_ID_KEY

logger = logging.getLogger(__name__)


class UserSession:
    """Session correlation for one request.

    Composes the session identifier manager, the client participation tracker
    and the cookie mirror. Holds no state of its own: everything durable is in
    the authentication ticket.
    """

    def __init__(
        self,
        session_ids: SessionIdentifierManager,
        clients: ClientParticipationTracker,
        cookie_mirror: SessionCookieMirror
    ):
        self._session_ids = session_ids
        self._clients = clients
        self._cookie_mirror = cookie_mirror

    async def create_session_id(
        self,
        principal: Principal,
        properties: MutableMapping[str, str]
    ) -> str:
        """Prepare ``properties`` for signing ``principal`` in.

        The subject currently bound to the session is read from the existing
        ticket. When the same subject signs in again the existing session id is
        carried over into ``properties``; otherwise a new id is minted. The
        session cookie is issued for the resulting id. The caller performs the
        actual sign-in with ``properties``.

        Returns:
            The session id written into ``properties``
        """
        if principal is None:
            raise InvalidArgumentError("principal")
        if properties is None:
            raise InvalidArgumentError("properties")

        current = await self._session_ids.get_current_principal()
        previous_subject_id = current.subject_id if current is not None else None

        if previous_subject_id is not None and previous_subject_id == principal.subject_id:
            existing = await self._session_ids.get_current_session_id()
            if existing and not properties.get(SESSION_ID_KEY):
                properties[SESSION_ID_KEY] = existing

        session_id = self._session_ids.establish_session_id(previous_subject_id, principal, properties)
        self._cookie_mirror.issue_session_cookie(session_id)
        return session_id

    async def get_current_principal(self) -> Optional[Principal]:
        return await self._session_ids.get_current_principal()

    async def get_current_session_id(self) -> Optional[str]:
        return await self._session_ids.get_current_session_id()

    async def ensure_session_cookie(self) -> bool:
        return await self._cookie_mirror.ensure_session_cookie(self._session_ids.get_current_session_id)

    def remove_session_cookie(self) -> bool:
        return self._cookie_mirror.remove_session_cookie()

    async def add_client_id(self, client_id: str) -> None:
        await self._clients.add_client(client_id)

    async def get_client_list(self) -> List[str]:
        return await self._clients.get_client_list()

    async def get_snapshot(self) -> Optional[SessionSnapshot]:
        """Session as currently held by the ticket, for logout fan-out.

        Returns:
            The snapshot, or None when there is no authenticated session
        """
        principal = await self._session_ids.get_current_principal()
        session_id = await self._session_ids.get_current_session_id()
        if principal is None or session_id is None or principal.subject_id is None:
            return None

        client_ids = await self._clients.get_client_list()
        return SessionSnapshot(
            session_id=session_id,
            subject_id=principal.subject_id,
            client_ids=tuple(client_ids),
        )
