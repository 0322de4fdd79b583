"""Unit tests for src/cli/render.py"""

from uuid import uuid4

import pytest

from src.api.models import ActionResponse, PieceResponse, SessionResponse
from src.cli.render import EMPTY_MARKER, render_menu, render_outcome, render_piece, render_state
from src.core.shared_types import ActionType, FailureReason, PieceKind


def piece(kind: str, piece_id: int) -> PieceResponse:
    return PieceResponse(kind=PieceKind(kind), id=piece_id)


@pytest.fixture
def session() -> SessionResponse:
    return SessionResponse(
        session_id=uuid4(),
        queue_capacity=3,
        stack_capacity=2,
        queue=[piece("I", 2), piece("O", 3), piece("T", 4)],
        stack=[piece("L", 1), piece("I", 0)],
        next_id=5,
    )


def test_render_piece() -> None:
    assert render_piece(piece("T", 12)) == "[T 12]"


def test_state_lists_queue_then_stack_top_first(session: SessionResponse) -> None:
    lines = render_state(session).splitlines()
    assert lines[2] == "Piece queue\t[I 2] [O 3] [T 4]"
    assert lines[3] == "Reserve stack\t(Top -> Base): [L 1] [I 0]"


def test_empty_containers(session: SessionResponse) -> None:
    empty = session.model_copy(update={"queue": [], "stack": []})
    rendered = render_state(empty)
    assert rendered.count(EMPTY_MARKER) == 2


@pytest.mark.parametrize(
    "succeeded, reason, replenished, expected",
    [
        (True, None, True, ["[Action] msg", "[System] New piece added to the end of the queue: [O 5]"]),
        (
            False,
            FailureReason.CONTAINER_FULL,
            False,
            ["[Info] msg", "[System] Queue already full; new piece [O 5] was discarded."],
        ),
    ],
)
def test_render_outcome(
    session: SessionResponse,
    succeeded: bool,
    reason: FailureReason | None,
    replenished: bool,
    expected: list[str],
) -> None:
    response = ActionResponse(
        session_id=session.session_id,
        action=ActionType.RESERVE,
        succeeded=succeeded,
        piece=None,
        reason=reason,
        message="msg",
        replenished_piece=piece("O", 5),
        replenished=replenished,
        session=session,
    )
    assert render_outcome(response).splitlines() == expected


def test_menu_lists_quit_last() -> None:
    lines = render_menu().splitlines()
    assert [line.split("\t")[0] for line in lines[2:]] == ["1", "2", "3", "0"]
