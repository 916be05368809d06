"""In-memory puzzle session registry and move dispatch."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from lizard_game.config import ServerConfig
from lizard_game.engine import LizardGame
from lizard_game.level import apply_level, parse_level
from lizard_game.lizard import Direction
from lizard_game.server.models import PuzzleStatus, PuzzleSummary

logger = logging.getLogger(__name__)


@dataclass
class PuzzleSession:
    """All state for a single puzzle being played."""

    puzzle_id: str
    game: LizardGame | None = None
    moves: int = 0
    score_history: list[int] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    solved_at: float | None = None

    @property
    def status(self) -> PuzzleStatus:
        if self.game is not None and self.game.solved:
            return PuzzleStatus.SOLVED
        return PuzzleStatus.ACTIVE

    def summary(self) -> PuzzleSummary:
        assert self.game is not None  # noqa: S101
        return PuzzleSummary(
            puzzle_id=self.puzzle_id,
            status=self.status,
            width=self.game.width,
            height=self.game.height,
            lizard_count=len(self.game.lizards),
            moves=self.moves,
        )


@dataclass
class MoveOutcome:
    """Result of applying one move to a session."""

    session: PuzzleSession
    moved: bool
    messages: list[str]


class SessionManager:
    """Central registry managing all puzzle sessions."""

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config = config or ServerConfig()
        self._sessions: dict[str, PuzzleSession] = {}

    def create_session(self, level_text: str) -> PuzzleSession:
        """Parse *level_text* and start a new session for it.

        Raises ``LevelFormatError`` for a bad level and ``ValueError`` when
        the registry is full.
        """
        level = parse_level(level_text)
        self._prune_solved_sessions()
        if len(self._sessions) >= self.config.max_sessions:
            raise ValueError("Session limit reached. Try again later.")

        session = PuzzleSession(puzzle_id=uuid.uuid4().hex[:12])
        game = LizardGame(
            level.width,
            level.height,
            score_listener=session.score_history.append,
            dialog_listener=session.messages.append,
        )
        apply_level(level, game)
        session.game = game
        self._sessions[session.puzzle_id] = session
        logger.info(
            "Puzzle %s created (%dx%d, %d lizards).",
            session.puzzle_id, level.width, level.height, len(game.lizards),
        )
        return session

    def get_session(self, puzzle_id: str) -> PuzzleSession | None:
        return self._sessions.get(puzzle_id)

    def list_sessions(self) -> list[PuzzleSummary]:
        return [s.summary() for s in self._sessions.values()]

    def move(
        self, puzzle_id: str, col: int, row: int, direction: Direction,
    ) -> MoveOutcome:
        """Apply one move to a session and report what changed."""
        session = self._sessions.get(puzzle_id)
        if session is None:
            raise KeyError(f"Puzzle {puzzle_id} not found.")
        game = session.game
        assert game is not None  # noqa: S101

        before = [lizard.cells for lizard in game.lizards]
        seen_messages = len(session.messages)
        game.move(col, row, direction)
        moved = before != [lizard.cells for lizard in game.lizards]

        if moved:
            session.moves += 1
            if game.solved and session.solved_at is None:
                session.solved_at = time.monotonic()
                logger.info(
                    "Puzzle %s solved in %d moves.",
                    puzzle_id, session.moves,
                )
        return MoveOutcome(
            session=session,
            moved=moved,
            messages=session.messages[seen_messages:],
        )

    def _prune_solved_sessions(self) -> None:
        """Bound retained solved sessions to avoid unbounded registry growth."""
        solved = [
            s for s in self._sessions.values()
            if s.status == PuzzleStatus.SOLVED
        ]
        overflow = len(solved) - self.config.max_solved_sessions
        if overflow <= 0:
            return

        solved.sort(
            key=lambda s: s.solved_at if s.solved_at is not None else s.created_at,
        )
        for stale in solved[:overflow]:
            self._sessions.pop(stale.puzzle_id, None)
        logger.info(
            "Pruned %d solved puzzles (retaining up to %d).",
            overflow,
            self.config.max_solved_sessions,
        )
