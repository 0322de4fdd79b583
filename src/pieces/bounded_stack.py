"""Fixed-capacity LIFO used as the reserve."""

from typing import Optional

from src.core.exceptions import InvalidConfigError
from src.pieces.piece import Piece


class BoundedStack:
    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise InvalidConfigError(f"Stack capacity must be at least 1, got {capacity}.")
        self._slots: list[Optional[Piece]] = [None] * capacity
        # number of stored pieces; the top piece sits at index _top - 1
        self._top = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._top

    def is_full(self) -> bool:
        return self._top == self.capacity

    def is_empty(self) -> bool:
        return self._top == 0

    def push(self, piece: Piece) -> bool:
        if self.is_full():
            return False
        self._slots[self._top] = piece
        self._top += 1
        return True

    def pop(self) -> Optional[Piece]:
        if self.is_empty():
            return None
        self._top -= 1
        piece = self._slots[self._top]
        self._slots[self._top] = None
        return piece

    def snapshot(self) -> tuple[Piece, ...]:
        """Pieces in pop order (top -> base)."""
        return tuple(self._slots[index] for index in range(self._top - 1, -1, -1))
