"""Orchestration of communication from the outer layers (API models / CLI) to the domain and repository layers (and the reverse direction)."""

from uuid import UUID

from src.api.models import (
    ActionRequest,
    ActionResponse,
    DeleteSessionRequest,
    GetSessionRequest,
    NewSessionRequest,
    PieceResponse,
    SessionResponse,
)
from src.core.config import Settings
from src.core.exceptions import RepositoryError
from src.core.models import PieceModel, SessionModel
from src.db.repository import SessionRepository
from src.pieces.controller import ActionController
from src.pieces.factory import PieceFactory
from src.pieces.piece import Piece


class SessionService:
    """Orchestration of layers for a piece reserve session."""

    def __init__(self, repository: SessionRepository, settings: Settings | None = None) -> None:
        self.repo = repository
        self.settings = settings if settings is not None else Settings()

    # -- request handling --
    def create_session(self, request: NewSessionRequest) -> SessionResponse:
        """Start a session: full queue, empty reserve. Missing request values come from the settings."""
        queue_capacity = request.queue_capacity or self.settings.queue_capacity
        stack_capacity = request.stack_capacity or self.settings.stack_capacity
        seed = request.seed if request.seed is not None else self.settings.seed

        controller = ActionController.new_session(
            queue_capacity, stack_capacity, PieceFactory.seeded(seed)
        )
        stored, session_id = self.repo.create_session(controller.to_model())
        return self._create_session_response(session_id, stored)

    def get_session(self, request: GetSessionRequest) -> SessionResponse:
        """Current state of both containers."""
        model = self._fetch_session(request.session_id)
        return self._create_session_response(request.session_id, model)

    def perform_action(self, request: ActionRequest) -> ActionResponse:
        """Run one action (+ the replenishment that always follows it) and store the result."""

        # Retrieve persisted SessionModel and rebuild the domain objects from it
        stored_model = self._fetch_session(request.session_id)
        controller = ActionController.from_model(stored_model)

        outcome = controller.perform(request.action)

        # store in repository
        after_action = controller.to_model()
        self.repo.update_session(request.session_id, after_action)

        return ActionResponse(
            session_id=request.session_id,
            action=outcome.action,
            succeeded=outcome.succeeded,
            piece=_piece_response(outcome.piece) if outcome.piece else None,
            reason=outcome.reason,
            message=outcome.message,
            replenished_piece=_piece_response(outcome.replenishment.piece),
            replenished=outcome.replenishment.enqueued,
            session=self._create_session_response(request.session_id, after_action),
        )

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to delete a session record. Unknown sessions are reported, not ignored."""
        self._fetch_session(request.session_id)
        self.repo.delete_session(request.session_id)

    # -- Internal helpers --
    def _create_session_response(self, session_id: UUID, model: SessionModel) -> SessionResponse:
        return SessionResponse(
            session_id=session_id,
            queue_capacity=model.queue_capacity,
            stack_capacity=model.stack_capacity,
            queue=[_piece_response(p) for p in model.queue],
            stack=[_piece_response(p) for p in model.stack],
            next_id=model.next_id,
        )

    def _fetch_session(self, session_id: UUID) -> SessionModel:
        """Attempt to find the session in the repository and raise error if it fails."""
        model = self.repo.get_session(session_id)
        if model is None:
            raise RepositoryError(f"Session with {session_id=} not found.")
        return model


def _piece_response(piece: Piece | PieceModel) -> PieceResponse:
    return PieceResponse(kind=piece.kind, id=piece.id)
