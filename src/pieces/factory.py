"""
Creation of new pieces.

The id counter lives on the factory instance, so each session owns its own sequence of ids.
The random source is injected to make the sequence of kinds reproducible in tests.
"""

import random
from typing import Any, Optional, Protocol, Self, Sequence

from src.core.exceptions import InvalidConfigError
from src.core.shared_types import PieceKind
from src.pieces.piece import Piece


class KindChooser(Protocol):
    """Anything that can pick one element of a sequence (random.Random fits)."""

    def choice(self, seq: Sequence[PieceKind]) -> PieceKind: ...


class PieceFactory:
    def __init__(
        self,
        rng: Optional[KindChooser] = None,
        kinds: Sequence[PieceKind] = tuple(PieceKind),
        next_id: int = 0,
    ) -> None:
        if len(kinds) == 0:
            raise InvalidConfigError("A factory needs at least one piece kind.")
        if next_id < 0:
            raise InvalidConfigError(f"Piece ids start at 0, got {next_id=}.")
        self._rng = rng if rng is not None else random.Random()
        self._kinds = tuple(kinds)
        self._next_id = next_id

    @classmethod
    def seeded(cls, seed: Optional[int]) -> Self:
        return cls(rng=random.Random(seed))

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def kinds(self) -> tuple[PieceKind, ...]:
        return self._kinds

    def create(self) -> Piece:
        kind = self._rng.choice(self._kinds)
        piece = Piece(kind, self._next_id)
        self._next_id += 1
        return piece

    def rng_state(self) -> Any:
        """State of the random source, if it can report one (None for custom choosers)."""
        getstate = getattr(self._rng, "getstate", None)
        return getstate() if getstate is not None else None

    @classmethod
    def restore(
        cls,
        next_id: int,
        rng_state: Any = None,
        kinds: Sequence[PieceKind] = tuple(PieceKind),
    ) -> Self:
        """Rebuild a factory that continues where a stored one left off (same kinds, same random state)."""
        rng = random.Random()
        if rng_state is not None:
            rng.setstate(rng_state)
        return cls(rng=rng, kinds=kinds, next_id=next_id)
