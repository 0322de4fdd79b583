"""
The ActionController is the entrypoint into the domain layer for the service layer.

It owns the upcoming-pieces queue, the reserve stack and the factory that feeds the queue.
Every action is followed by exactly one replenishment: one new piece is created and offered to the queue,
whether or not the action itself changed anything.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Self

from src.core.exceptions import SessionStateError
from src.core.models import SessionModel
from src.core.shared_types import ActionType, FailureReason, PieceKind
from src.pieces.bounded_queue import BoundedQueue
from src.pieces.bounded_stack import BoundedStack
from src.pieces.factory import PieceFactory
from src.pieces.piece import Piece

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplenishOutcome:
    piece: Piece
    enqueued: bool

    @property
    def message(self) -> str:
        if self.enqueued:
            return f"New piece {self.piece} added to the end of the queue."
        return f"Queue already full, new piece {self.piece} was discarded."


@dataclass(frozen=True)
class ActionOutcome:
    """Result of one action. `reason` is None exactly when the action had an effect."""

    action: ActionType
    piece: Optional[Piece]
    reason: Optional[FailureReason]
    message: str
    replenishment: ReplenishOutcome

    @property
    def succeeded(self) -> bool:
        return self.reason is None


@dataclass(frozen=True)
class _StepResult:
    """Outcome of the action itself, before the replenishment step is attached."""

    piece: Optional[Piece]
    reason: Optional[FailureReason]
    message: str


class ActionController:
    def __init__(
        self, queue: BoundedQueue, stack: BoundedStack, factory: PieceFactory
    ) -> None:
        self.queue = queue
        self.stack = stack
        self.factory = factory

    # --- DOMAIN LAYER API CALLED BY SERVICE---
    @classmethod
    def new_session(
        cls,
        queue_capacity: int,
        stack_capacity: int,
        factory: Optional[PieceFactory] = None,
    ) -> Self:
        """Empty stack, and a queue that is filled up to capacity with fresh pieces."""
        factory = factory if factory is not None else PieceFactory()
        controller = cls(BoundedQueue(queue_capacity), BoundedStack(stack_capacity), factory)
        while not controller.queue.is_full():
            controller.queue.enqueue(factory.create())
        logger.debug("New session: %s", " ".join(map(str, controller.queue_snapshot())))
        return controller

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        """Rebuild the containers + factory from what the Service layer stores."""
        kinds = _validate_stored_kinds(model)
        queue_pieces = [Piece.from_model(p) for p in model.queue]
        stack_pieces = [Piece.from_model(p) for p in model.stack]
        _validate_stored_pieces(model, queue_pieces, stack_pieces)

        queue = BoundedQueue(model.queue_capacity)
        for piece in queue_pieces:
            queue.enqueue(piece)

        stack = BoundedStack(model.stack_capacity)
        # stored top -> base, so push starting at the base
        for piece in reversed(stack_pieces):
            stack.push(piece)

        factory = PieceFactory.restore(model.next_id, model.rng_state, kinds)
        return cls(queue, stack, factory)

    def to_model(self) -> SessionModel:
        return SessionModel(
            queue_capacity=self.queue.capacity,
            stack_capacity=self.stack.capacity,
            queue=[piece.to_model() for piece in self.queue_snapshot()],
            stack=[piece.to_model() for piece in self.stack_snapshot()],
            next_id=self.factory.next_id,
            kinds=[str(kind) for kind in self.factory.kinds],
            rng_state=self.factory.rng_state(),
        )

    def queue_snapshot(self) -> tuple[Piece, ...]:
        return self.queue.snapshot()

    def stack_snapshot(self) -> tuple[Piece, ...]:
        return self.stack.snapshot()

    def play(self) -> ActionOutcome:
        return self._run(ActionType.PLAY, self._play)

    def reserve(self) -> ActionOutcome:
        return self._run(ActionType.RESERVE, self._reserve)

    def use_reserved(self) -> ActionOutcome:
        return self._run(ActionType.USE_RESERVED, self._use_reserved)

    def perform(self, action: ActionType) -> ActionOutcome:
        actions: dict[ActionType, Callable[[], ActionOutcome]] = {
            ActionType.PLAY: self.play,
            ActionType.RESERVE: self.reserve,
            ActionType.USE_RESERVED: self.use_reserved,
        }
        return actions[action]()

    def replenish(self) -> ReplenishOutcome:
        """Create exactly one piece and attempt exactly one enqueue. A full queue means the new piece is lost."""
        piece = self.factory.create()
        outcome = ReplenishOutcome(piece, self.queue.enqueue(piece))
        logger.info(outcome.message)
        return outcome

    # --- internal helpers ---
    def _run(self, action: ActionType, step: Callable[[], _StepResult]) -> ActionOutcome:
        result = step()
        if result.reason is None:
            logger.info("%s: %s", action, result.message)
        else:
            logger.info("%s rejected (%s): %s", action, result.reason, result.message)
        replenishment = self.replenish()
        return ActionOutcome(
            action=action,
            piece=result.piece,
            reason=result.reason,
            message=result.message,
            replenishment=replenishment,
        )

    def _play(self) -> _StepResult:
        piece = self.queue.dequeue()
        if piece is None:
            return _StepResult(None, FailureReason.CONTAINER_EMPTY, "No pieces in the queue to play.")
        return _StepResult(piece, None, f"Played piece {piece}.")

    def _reserve(self) -> _StepResult:
        # check first: a reservation that cannot succeed must not drain the queue
        if self.stack.is_full():
            return _StepResult(None, FailureReason.CONTAINER_FULL, "Reserve is full, no action taken.")

        piece = self.queue.dequeue()
        if piece is None:
            return _StepResult(None, FailureReason.CONTAINER_EMPTY, "Queue is empty, nothing to reserve.")

        if not self.stack.push(piece):
            # unreachable while only one caller mutates the containers
            logger.error("Reserve filled up between check and push; piece %s was discarded.", piece)
            return _StepResult(
                piece,
                FailureReason.CONTAINER_FULL,
                f"Reserve is full; piece {piece} was not reserved and has been discarded.",
            )
        return _StepResult(piece, None, f"Reserved piece {piece} from the queue.")

    def _use_reserved(self) -> _StepResult:
        piece = self.stack.pop()
        if piece is None:
            return _StepResult(None, FailureReason.CONTAINER_EMPTY, "No reserved pieces to use.")
        return _StepResult(piece, None, f"Used reserved piece {piece}.")


def new_session(
    queue_capacity: int,
    stack_capacity: int,
    factory: Optional[PieceFactory] = None,
) -> ActionController:
    return ActionController.new_session(queue_capacity, stack_capacity, factory)


def _validate_stored_kinds(model: SessionModel) -> tuple[PieceKind, ...]:
    """Kinds the factory draws from, and of every stored piece, must come from the fixed set."""
    unknown = [name for name in model.kinds if name not in PieceKind.__members__]
    if unknown or len(model.kinds) == 0:
        raise SessionStateError(
            f"Invalid piece kinds {model.kinds!r}. \nPick one or more from {','.join(PieceKind.__members__)}"
        )

    stored_kinds = {piece.kind for piece in model.queue + model.stack}
    if not stored_kinds <= set(model.kinds):
        raise SessionStateError(
            f"Stored pieces of kind(s) {sorted(stored_kinds - set(model.kinds))} are not among the session kinds {model.kinds}."
        )
    return tuple(PieceKind[name] for name in model.kinds)


def _validate_stored_pieces(
    model: SessionModel, queue_pieces: list[Piece], stack_pieces: list[Piece]
) -> None:
    """A stored session must be reachable by playing: it fits, ids are unique and follow creation order."""
    if len(queue_pieces) > model.queue_capacity:
        raise SessionStateError(
            f"{len(queue_pieces)} pieces do not fit in a queue of capacity {model.queue_capacity}."
        )
    if len(stack_pieces) > model.stack_capacity:
        raise SessionStateError(
            f"{len(stack_pieces)} pieces do not fit in a stack of capacity {model.stack_capacity}."
        )

    ids = [piece.id for piece in queue_pieces + stack_pieces]
    if len(set(ids)) != len(ids):
        raise SessionStateError("Piece ids must be unique within a session.")
    if any(piece_id >= model.next_id for piece_id in ids):
        raise SessionStateError(f"All piece ids must be lower than next id {model.next_id}.")

    # queue (head -> tail) was filled in creation order; stack (top -> base) holds the latest reservation on top
    queue_ids = [piece.id for piece in queue_pieces]
    stack_ids = [piece.id for piece in stack_pieces]
    if queue_ids != sorted(queue_ids):
        raise SessionStateError("Queue pieces must be stored in creation order.")
    if stack_ids != sorted(stack_ids, reverse=True):
        raise SessionStateError("Stack pieces must be stored with the latest reservation on top.")
