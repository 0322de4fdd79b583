"""
Type definitions used across layers
"""

from enum import StrEnum


class PieceKind(StrEnum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    L = "L"


class ActionType(StrEnum):
    PLAY = "play"
    RESERVE = "reserve"
    USE_RESERVED = "use reserved"


# --- NOTE: full / empty are ordinary outcomes of an action, never exceptions. See src/core/exceptions.py for real misuse.
class FailureReason(StrEnum):
    CONTAINER_EMPTY = "container empty"
    CONTAINER_FULL = "container full"
