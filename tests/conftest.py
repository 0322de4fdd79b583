"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import random
from typing import Callable, Sequence

import pytest

from src.core.shared_types import PieceKind
from src.pieces.controller import ActionController
from src.pieces.factory import PieceFactory


class CyclingChooser:
    """Deterministic stand-in for random.Random: returns the kinds in the given order, over and over."""

    def __init__(self, kinds: Sequence[PieceKind]) -> None:
        self._kinds = list(kinds)
        self.calls = 0

    def choice(self, seq: Sequence[PieceKind]) -> PieceKind:
        kind = self._kinds[self.calls % len(self._kinds)]
        self.calls += 1
        return kind


@pytest.fixture
def cycling_factory() -> PieceFactory:
    """Kinds cycle I, O, T, L and ids start at 0."""
    return PieceFactory(rng=CyclingChooser(list(PieceKind)))


@pytest.fixture
def seeded_factory() -> PieceFactory:
    return PieceFactory(rng=random.Random(1234))


@pytest.fixture
def make_session(cycling_factory: PieceFactory) -> Callable[..., ActionController]:
    """Call the inner function with the capacities of the session. Defaults to the standard 5 / 3."""

    def _create_session(queue_capacity: int = 5, stack_capacity: int = 3) -> ActionController:
        return ActionController.new_session(queue_capacity, stack_capacity, cycling_factory)

    return _create_session
