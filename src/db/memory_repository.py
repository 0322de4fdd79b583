"""Implementation of (Session)Repository keeping the records in a dictionary"""

from copy import deepcopy
from uuid import UUID, uuid4

from src.core.models import SessionModel


class InMemorySessionRepository:
    """Records are copied on the way in and out, so callers never share state with the store."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, SessionModel] = {}

    def get_session(self, session_id: UUID) -> SessionModel | None:
        """Get session by ID, if record exists."""
        session = self._sessions.get(session_id)
        return deepcopy(session) if session is not None else None

    def create_session(self, session: SessionModel) -> tuple[SessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        new_id = uuid4()
        self._sessions[new_id] = deepcopy(session)
        return deepcopy(session), new_id

    def update_session(
        self, session_id: UUID, session: SessionModel
    ) -> SessionModel | None:
        """Replace the record of an existing session."""
        if session_id not in self._sessions:
            return None
        self._sessions[session_id] = deepcopy(session)
        return deepcopy(session)

    def delete_session(self, session_id: UUID) -> SessionModel | None:
        """Remove a session's record."""
        return self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
