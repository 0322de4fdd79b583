"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The API layer (higher) and the domain / repository layers (lower) both use the model(s) defined here,
so none of them depends on the internal representation of another.
"""

from dataclasses import dataclass, field
from typing import Any

from src.core.shared_types import PieceKind

# Type aliases to make SessionModel easier to read
PieceKindName = str
PieceId = int


@dataclass(frozen=True)
class PieceModel:
    kind: PieceKindName
    id: PieceId


@dataclass
class SessionModel:
    """Transport-safe representation of a session: both containers in display order + the factory state."""

    queue_capacity: int
    stack_capacity: int
    queue: list[PieceModel]  # head -> tail
    stack: list[PieceModel]  # top -> base
    next_id: PieceId
    kinds: list[PieceKindName] = field(default_factory=lambda: [str(kind) for kind in PieceKind])
    rng_state: Any = field(default=None, repr=False)
