"""Fixed-capacity FIFO of upcoming pieces, implemented as a ring buffer."""

from typing import Optional

from src.core.exceptions import InvalidConfigError
from src.pieces.piece import Piece


class BoundedQueue:
    """Circular queue: a fixed list of slots, the index of the head and the number of stored pieces.

    The tail slot is never stored, it follows from (head + count) % capacity.
    Enqueue / dequeue are O(1) and never shift the other elements.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise InvalidConfigError(f"Queue capacity must be at least 1, got {capacity}.")
        self._slots: list[Optional[Piece]] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def is_full(self) -> bool:
        return self._count == self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, piece: Piece) -> bool:
        """Append at the tail. Returns False (and changes nothing) when full."""
        if self.is_full():
            return False
        tail = (self._head + self._count) % self.capacity
        self._slots[tail] = piece
        self._count += 1
        return True

    def dequeue(self) -> Optional[Piece]:
        """Remove the head. Returns None (and changes nothing) when empty."""
        if self.is_empty():
            return None
        piece = self._slots[self._head]
        # a removed piece must not stay reachable through the buffer
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return piece

    def snapshot(self) -> tuple[Piece, ...]:
        """Pieces in play order (head -> tail)."""
        return tuple(
            self._slots[(self._head + offset) % self.capacity]
            for offset in range(self._count)
        )
