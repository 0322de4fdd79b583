"""Unit tests for /src/pieces/piece.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.models import PieceModel
from src.core.shared_types import PieceKind
from src.pieces.piece import Piece


@pytest.mark.parametrize("kind", [kind for kind in PieceKind])
def test_display_form(kind: PieceKind) -> None:
    assert str(Piece(kind, 7)) == f"[{kind.value} 7]"


def test_pieces_cannot_be_mutated() -> None:
    piece = Piece(PieceKind.T, 0)
    with pytest.raises(FrozenInstanceError):
        piece.id = 1  # type: ignore[misc]


def test_identity_is_the_id() -> None:
    """Same kind does not make pieces equal, a different id makes them distinct."""
    assert Piece(PieceKind.I, 1) != Piece(PieceKind.I, 2)
    assert Piece(PieceKind.I, 1) == Piece(PieceKind.I, 1)


def test_model_conversion() -> None:
    piece = Piece(PieceKind.L, 3)
    model = piece.to_model()
    assert model == PieceModel(kind="L", id=3)
    assert Piece.from_model(model) == piece
