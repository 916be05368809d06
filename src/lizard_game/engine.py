"""Move-based puzzle engine composing grid, lizard roster, and listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from lizard_game.grid import Cell, Exit, Grid, Wall
from lizard_game.level import LevelFormatError, apply_level, read_level
from lizard_game.lizard import Direction, Lizard
from lizard_game.render import render_text

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You win!"

ScoreListener = Callable[[int], None]
DialogListener = Callable[[str], None]


class LizardGame:
    """Single-player sliding puzzle engine.

    The game owns the grid and the roster of lizards still on it. Each
    call to :meth:`move` either leaves the puzzle untouched or applies a
    complete one-cell shift of a single lizard, then settles exits and the
    win condition before returning.

    Two listeners are injected by the caller: *score_listener* receives
    the roster size after every roster change, and *dialog_listener*
    receives :data:`WIN_MESSAGE` once when the last lizard leaves.
    """

    def __init__(
        self,
        width: int,
        height: int,
        score_listener: ScoreListener | None = None,
        dialog_listener: DialogListener | None = None,
    ) -> None:
        self.grid = Grid(width, height)
        self.lizards: list[Lizard] = []
        self.exited = 0
        self.score_listener = score_listener
        self.dialog_listener = dialog_listener
        self._next_id = 0

    def set_listeners(
        self,
        dialog_listener: DialogListener | None,
        score_listener: ScoreListener | None,
    ) -> None:
        """Replace both notification sinks."""
        self.dialog_listener = dialog_listener
        self.score_listener = score_listener

    # --- grid surface ---

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def get_cell(self, col: int, row: int) -> Cell | None:
        return self.grid.get_cell(col, row)

    def get_adjacent_cell(
        self, col: int, row: int, direction: Direction,
    ) -> Cell | None:
        return self.grid.get_adjacent_cell(col, row, direction)

    def is_available(self, col: int, row: int) -> bool:
        return self.grid.is_available(col, row)

    def add_wall(self, wall: Wall) -> None:
        self.grid.add_wall(wall)

    def add_exit(self, exit_: Exit) -> None:
        self.grid.add_exit(exit_)

    def reset_grid(self, width: int, height: int) -> None:
        """Discard every cell, wall, exit and lizard for a fresh empty grid."""
        self.grid = Grid(width, height)
        self.lizards.clear()
        self.exited = 0

    # --- roster ---

    def add_lizard(self, lizard: Lizard) -> None:
        """Put *lizard* on the grid and notify the score listener.

        Raises ``ValueError`` if any of its segments would land outside the
        grid, on a wall, or on another lizard.
        """
        for cell in lizard.cells:
            if not self.grid.is_available(cell.col, cell.row):
                raise ValueError(f"Cell {cell} is not available for a lizard.")
        lizard.lizard_id = self._next_id
        self._next_id += 1
        self.grid.place(lizard)
        self.lizards.append(lizard)
        self._notify_score()

    def remove_lizard(self, lizard: Lizard) -> None:
        """Clear the lizard's cells, drop it from the roster, notify score."""
        self.grid.release(lizard)
        self.lizards.remove(lizard)
        self._notify_score()

    def lizard_at(self, col: int, row: int) -> Lizard | None:
        """Return the lizard resting on (col, row), if any."""
        lizard_id = self.grid.occupant_at(col, row)
        if lizard_id is None:
            return None
        for lizard in self.lizards:
            if lizard.lizard_id == lizard_id:
                return lizard
        return None

    @property
    def solved(self) -> bool:
        """True once every lizard has left through an exit."""
        return not self.lizards and self.exited > 0

    # --- movement ---

    def move(self, col: int, row: int, direction: Direction) -> None:
        """Push or pull the segment at (col, row) one cell in *direction*.

        The whole body follows in-line: it either advances one cell past the
        head or retreats one cell past the tail. Requests that are out of
        bounds, grab an empty cell, bend the body, or are blocked do nothing.
        """
        cell = self.grid.get_cell(col, row)
        if cell is None:
            logger.debug("Move rejected: (%d, %d) is off the grid.", col, row)
            return
        lizard = self.lizard_at(col, row)
        if lizard is None:
            logger.debug("Move rejected: no lizard at %s.", cell)
            return
        target = self.grid.get_adjacent_cell(col, row, direction)
        if target is None:
            logger.debug(
                "Move rejected: %s from %s leaves the grid.",
                direction.name, cell,
            )
            return

        segment = lizard.get_segment_at(cell)
        ahead = lizard.get_segment_ahead(segment)
        behind = lizard.get_segment_behind(segment)

        if lizard.is_head(segment):
            if behind is not None and behind.cell == target:
                moved = self._retreat(lizard)
            else:
                moved = self._try_forward(lizard, target)
        elif lizard.is_tail(segment):
            if ahead.cell == target:
                moved = self._advance(lizard)
            else:
                moved = self._try_backward(lizard, target)
        elif target == ahead.cell:
            moved = self._advance(lizard)
        elif target == behind.cell:
            moved = self._retreat(lizard)
        else:
            logger.debug(
                "Move rejected: %s at %s would bend the body.",
                direction.name, cell,
            )
            return

        if moved:
            self._settle_exit(lizard)

    def move_forward(self, lizard: Lizard, new_head_cell: Cell) -> None:
        """Shift *lizard* one slot toward the head, head onto *new_head_cell*."""
        self.grid.release(lizard)
        lizard.shift_forward(new_head_cell)
        self.grid.place(lizard)

    def move_backward(self, lizard: Lizard, new_tail_cell: Cell) -> None:
        """Shift *lizard* one slot toward the tail, tail onto *new_tail_cell*."""
        self.grid.release(lizard)
        lizard.shift_backward(new_tail_cell)
        self.grid.place(lizard)

    def _advance(self, lizard: Lizard) -> bool:
        """Forward shift into the cell beyond the head, along its direction."""
        head = lizard.get_head_segment().cell
        direction = lizard.get_head_direction()
        if direction is None:
            return False
        return self._try_forward(
            lizard, self.grid.get_adjacent_cell(head.col, head.row, direction),
        )

    def _retreat(self, lizard: Lizard) -> bool:
        """Backward shift into the cell beyond the tail, along its direction."""
        tail = lizard.get_tail_segment().cell
        direction = lizard.get_tail_direction()
        if direction is None:
            return False
        return self._try_backward(
            lizard, self.grid.get_adjacent_cell(tail.col, tail.row, direction),
        )

    def _try_forward(self, lizard: Lizard, cell: Cell | None) -> bool:
        if cell is None or not self.grid.is_available(cell.col, cell.row):
            logger.debug("Forward shift of lizard %s blocked.", lizard.lizard_id)
            return False
        self.move_forward(lizard, cell)
        return True

    def _try_backward(self, lizard: Lizard, cell: Cell | None) -> bool:
        if cell is None or not self.grid.is_available(cell.col, cell.row):
            logger.debug("Backward shift of lizard %s blocked.", lizard.lizard_id)
            return False
        self.move_backward(lizard, cell)
        return True

    def _settle_exit(self, lizard: Lizard) -> None:
        """Remove *lizard* if an end rests on an exit; announce a win."""
        head = lizard.get_head_segment().cell
        tail = lizard.get_tail_segment().cell
        on_exit = (
            self.grid.exit_at(head.col, head.row) is not None
            or self.grid.exit_at(tail.col, tail.row) is not None
        )
        if not on_exit:
            return

        self.remove_lizard(lizard)
        self.exited += 1
        logger.info(
            "Lizard %s exited; %d remaining.",
            lizard.lizard_id, len(self.lizards),
        )
        if not self.lizards:
            logger.info("Puzzle solved after %d exits.", self.exited)
            if self.dialog_listener is not None:
                self.dialog_listener(WIN_MESSAGE)

    def _notify_score(self) -> None:
        if self.score_listener is not None:
            self.score_listener(len(self.lizards))

    # --- loading and state ---

    def load(self, path: str | Path) -> bool:
        """Load the level file at *path* into this game.

        Returns ``False`` and leaves the game untouched if the file cannot
        be read or is malformed.
        """
        try:
            level = read_level(path)
        except (OSError, LevelFormatError) as exc:
            logger.warning("Could not load level %s: %s", path, exc)
            return False
        apply_level(level, self)
        logger.info(
            "Loaded level %s (%dx%d, %d lizards).",
            path, level.width, level.height, len(self.lizards),
        )
        return True

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "grid": self.grid.to_dict(),
            "lizards": [lizard.to_dict() for lizard in self.lizards],
            "lizard_count": len(self.lizards),
            "exited": self.exited,
            "solved": self.solved,
        }

    def __str__(self) -> str:
        return render_text(self)
