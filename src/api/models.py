"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ActionType, FailureReason, PieceKind


# --- REQUEST MODELS ---
class NewSessionRequest(BaseModel):
    queue_capacity: Optional[int] = None
    stack_capacity: Optional[int] = None
    seed: Optional[int] = None

    @field_validator(*["queue_capacity", "stack_capacity"])
    @classmethod
    def validate_capacity(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        if value < 1:
            raise InvalidRequestError(f"Capacity must be at least 1, got {value}.")
        return value


class ActionRequest(BaseModel):
    session_id: UUID
    action: ActionType


class GetSessionRequest(BaseModel):
    session_id: UUID


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    kind: PieceKind
    id: int


class SessionResponse(BaseModel):
    session_id: UUID
    queue_capacity: int
    stack_capacity: int
    queue: list[PieceResponse]  # play order: head -> tail
    stack: list[PieceResponse]  # pop order: top -> base
    next_id: int


class ActionResponse(BaseModel):
    session_id: UUID
    action: ActionType
    succeeded: bool
    piece: Optional[PieceResponse]
    reason: Optional[FailureReason]
    message: str
    replenished_piece: PieceResponse
    replenished: bool
    session: SessionResponse
