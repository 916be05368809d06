"""Grid representation for the lizard puzzle."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from lizard_game.lizard import Direction, Lizard

# Occupancy value for a cell with no lizard on it.
NO_OCCUPANT = -1


class CellFlag(enum.IntFlag):
    """Terrain bits stored in the grid array."""

    EMPTY = 0
    WALL = 1
    EXIT = 2


@dataclass(frozen=True)
class Cell:
    """A single grid position, addressed by (col, row)."""

    col: int
    row: int

    def __str__(self) -> str:
        return f"({self.col},{self.row})"


@dataclass(frozen=True)
class Wall:
    """Immovable obstacle attached to one cell."""

    cell: Cell


@dataclass(frozen=True)
class Exit:
    """Goal marker attached to one cell. Exits never block movement."""

    cell: Cell


class Grid:
    """NumPy-backed puzzle grid.

    Terrain (walls and exits) lives in an ``int8`` array of
    :class:`CellFlag` bits. Occupancy lives in an ``int32`` array holding
    the id of the lizard resting on each cell, or ``NO_OCCUPANT``.

    Occupancy is never written directly: :meth:`place` and
    :meth:`release` copy it from a lizard's own segment cells, so the
    lizard stays the single source of truth for where its body is.
    Arrays are indexed ``[row, col]``; the public API takes ``(col, row)``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.width = width
        self.height = height
        self._cells = [
            [Cell(col, row) for col in range(width)] for row in range(height)
        ]
        self.terrain = np.zeros((height, width), dtype=np.int8)
        self.occupancy = np.full((height, width), NO_OCCUPANT, dtype=np.int32)

    def in_bounds(self, col: int, row: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= col < self.width and 0 <= row < self.height

    def get_cell(self, col: int, row: int) -> Cell | None:
        """Return the cell at (col, row), or ``None`` when out of range."""
        if not self.in_bounds(col, row):
            return None
        return self._cells[row][col]

    def get_adjacent_cell(
        self, col: int, row: int, direction: Direction,
    ) -> Cell | None:
        """Return the cell one step in *direction*, or ``None`` off-grid."""
        dc, dr = direction.value
        return self.get_cell(col + dc, row + dr)

    def add_wall(self, wall: Wall) -> None:
        """Attach *wall* to the cell it was built against."""
        cell = wall.cell
        self._check_in_bounds(cell)
        self.terrain[cell.row, cell.col] |= CellFlag.WALL

    def add_exit(self, exit_: Exit) -> None:
        """Attach *exit_* to the cell it was built against."""
        cell = exit_.cell
        self._check_in_bounds(cell)
        self.terrain[cell.row, cell.col] |= CellFlag.EXIT

    def _check_in_bounds(self, cell: Cell) -> None:
        if not self.in_bounds(cell.col, cell.row):
            raise ValueError(f"Cell {cell} is outside the grid.")

    def wall_at(self, col: int, row: int) -> Wall | None:
        cell = self.get_cell(col, row)
        if cell is None or not self.terrain[row, col] & CellFlag.WALL:
            return None
        return Wall(cell)

    def exit_at(self, col: int, row: int) -> Exit | None:
        cell = self.get_cell(col, row)
        if cell is None or not self.terrain[row, col] & CellFlag.EXIT:
            return None
        return Exit(cell)

    def occupant_at(self, col: int, row: int) -> int | None:
        """Return the id of the lizard resting on (col, row), if any."""
        if not self.in_bounds(col, row):
            return None
        lizard_id = int(self.occupancy[row, col])
        return None if lizard_id == NO_OCCUPANT else lizard_id

    def is_available(self, col: int, row: int) -> bool:
        """True iff the cell exists and holds neither a wall nor a lizard.

        Exits do not affect availability.
        """
        if not self.in_bounds(col, row):
            return False
        if self.terrain[row, col] & CellFlag.WALL:
            return False
        return bool(self.occupancy[row, col] == NO_OCCUPANT)

    def place(self, lizard: Lizard) -> None:
        """Mark every cell of *lizard* as occupied by it."""
        for cell in lizard.cells:
            self.occupancy[cell.row, cell.col] = lizard.lizard_id

    def release(self, lizard: Lizard) -> None:
        """Clear occupancy on every cell currently held by *lizard*."""
        for cell in lizard.cells:
            if self.occupancy[cell.row, cell.col] == lizard.lizard_id:
                self.occupancy[cell.row, cell.col] = NO_OCCUPANT

    def walls(self) -> list[Cell]:
        """Return every walled cell in row-major order."""
        return self._cells_with(CellFlag.WALL)

    def exits(self) -> list[Cell]:
        """Return every exit cell in row-major order."""
        return self._cells_with(CellFlag.EXIT)

    def _cells_with(self, flag: CellFlag) -> list[Cell]:
        rows, cols = np.nonzero(self.terrain & flag)
        return [
            self._cells[r][c]
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "walls": [[c.col, c.row] for c in self.walls()],
            "exits": [[c.col, c.row] for c in self.exits()],
            "terrain": self.terrain.tolist(),
            "occupancy": self.occupancy.tolist(),
        }
