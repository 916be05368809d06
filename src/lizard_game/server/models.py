"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class PuzzleStatus(str, enum.Enum):
    """Lifecycle states for a puzzle session."""

    ACTIVE = "active"
    SOLVED = "solved"


class MoveDirection(str, enum.Enum):
    """Directions accepted by the move endpoint."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class CreatePuzzleRequest(BaseModel):
    """Request body for POST /puzzles."""

    level: str = Field(min_length=1, max_length=100_000)


class MoveRequest(BaseModel):
    """Request body for POST /puzzles/{puzzle_id}/moves."""

    col: int
    row: int
    direction: MoveDirection


class PuzzleSummary(BaseModel):
    """Compact puzzle info for list endpoints."""

    puzzle_id: str
    status: PuzzleStatus
    width: int
    height: int
    lizard_count: int
    moves: int


class MoveResponse(BaseModel):
    """Outcome of a single move request."""

    puzzle_id: str
    moved: bool
    lizard_count: int
    solved: bool
    messages: list[str]
    state: dict


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
