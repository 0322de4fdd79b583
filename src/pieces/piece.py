"""Defines the game pieces"""

from dataclasses import dataclass
from typing import Self

from src.core.models import PieceModel
from src.core.shared_types import PieceKind


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    id: int

    @classmethod
    def from_model(cls, model: PieceModel) -> Self:
        return cls(PieceKind(model.kind), model.id)

    def to_model(self) -> PieceModel:
        return PieceModel(kind=str(self.kind), id=self.id)

    def __str__(self) -> str:
        return f"[{self.kind} {self.id}]"
