"""REST API route handlers for puzzle sessions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from lizard_game.level import LevelFormatError
from lizard_game.lizard import Direction
from lizard_game.server.models import (
    CreatePuzzleRequest,
    MoveRequest,
    MoveResponse,
    PuzzleSummary,
)
from lizard_game.server.session_manager import SessionManager

router = APIRouter(prefix="/puzzles", tags=["puzzles"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_puzzle(
    body: CreatePuzzleRequest, request: Request,
) -> PuzzleSummary:
    """Start a new puzzle from level text."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(body.level)
    except LevelFormatError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_puzzles(request: Request) -> list[PuzzleSummary]:
    """List every retained puzzle."""
    return _get_manager(request).list_sessions()


@router.get("/{puzzle_id}")
async def get_puzzle(puzzle_id: str, request: Request) -> dict:
    """Get puzzle metadata and full engine state."""
    session = _get_manager(request).get_session(puzzle_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Puzzle not found.")
    result = session.summary().model_dump(mode="json")
    result["state"] = session.game.get_state()
    return result


@router.post("/{puzzle_id}/moves")
async def move(
    puzzle_id: str, body: MoveRequest, request: Request,
) -> MoveResponse:
    """Grab the segment at (col, row) and push it one cell."""
    manager = _get_manager(request)
    try:
        outcome = manager.move(
            puzzle_id, body.col, body.row, Direction[body.direction.name],
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0]) from exc
    game = outcome.session.game
    return MoveResponse(
        puzzle_id=puzzle_id,
        moved=outcome.moved,
        lizard_count=len(game.lizards),
        solved=game.solved,
        messages=outcome.messages,
        state=game.get_state(),
    )
