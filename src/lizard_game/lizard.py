"""Lizard representation: an ordered chain of body segments."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from lizard_game.grid import Cell


class Direction(enum.Enum):
    """Cardinal directions with (col_delta, row_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


_BY_DELTA: dict[tuple[int, int], Direction] = {d.value: d for d in Direction}


def direction_between(start: Cell, end: Cell) -> Direction | None:
    """Return the direction that steps from *start* onto *end*.

    Only 4-adjacent cells have one; diagonal, distant or identical
    cells give ``None``.
    """
    return _BY_DELTA.get((end.col - start.col, end.row - start.row))


@dataclass(frozen=True)
class BodySegment:
    """One unit of a lizard's body, addressed by its index in the chain.

    Index 0 is the tail. The segment's cell is always read from the
    owning lizard, so a segment never holds a stale position.
    """

    lizard: Lizard
    index: int

    @property
    def cell(self) -> Cell:
        return self.lizard.cells[self.index]

    def __str__(self) -> str:
        return str(self.cell)


class Lizard:
    """A lizard represented as an ordered list of segment cells.

    The tail is ``cells[0]``; the head is ``cells[-1]``. The list is the
    only record of where the body is: the grid derives its occupancy from
    it, and only :meth:`shift_forward` / :meth:`shift_backward` rewrite it.
    """

    def __init__(self, cells: list[Cell]) -> None:
        cells = list(cells)
        if len(cells) < 1:
            raise ValueError("Lizard must have at least 1 segment.")
        if len(set(cells)) != len(cells):
            raise ValueError("Lizard segments must occupy distinct cells.")
        for behind, ahead in zip(cells, cells[1:]):
            if direction_between(behind, ahead) is None:
                raise ValueError(
                    f"Lizard segments {behind} and {ahead} are not adjacent."
                )
        self._cells = cells
        # Assigned by the game when the lizard joins the roster.
        self.lizard_id: int | None = None

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> list[Cell]:
        """Segment cells ordered tail to head (a copy)."""
        return list(self._cells)

    @property
    def segments(self) -> list[BodySegment]:
        """Segments ordered tail to head."""
        return [BodySegment(self, i) for i in range(len(self._cells))]

    def get_head_segment(self) -> BodySegment:
        return BodySegment(self, len(self._cells) - 1)

    def get_tail_segment(self) -> BodySegment:
        return BodySegment(self, 0)

    def is_head(self, segment: BodySegment) -> bool:
        return segment.index == len(self._cells) - 1

    def is_tail(self, segment: BodySegment) -> bool:
        return segment.index == 0

    def occupies(self, cell: Cell) -> bool:
        return cell in self._cells

    def get_segment_at(self, cell: Cell) -> BodySegment | None:
        """Return the segment resting on *cell*, or ``None``."""
        try:
            return BodySegment(self, self._cells.index(cell))
        except ValueError:
            return None

    def get_segment_ahead(self, segment: BodySegment) -> BodySegment | None:
        """Return the next segment toward the head, or ``None`` at the head."""
        if segment.index + 1 >= len(self._cells):
            return None
        return BodySegment(self, segment.index + 1)

    def get_segment_behind(self, segment: BodySegment) -> BodySegment | None:
        """Return the next segment toward the tail, or ``None`` at the tail."""
        if segment.index < 1:
            return None
        return BodySegment(self, segment.index - 1)

    def get_direction_to_segment_ahead(
        self, segment: BodySegment,
    ) -> Direction | None:
        ahead = self.get_segment_ahead(segment)
        if ahead is None:
            return None
        return direction_between(segment.cell, ahead.cell)

    def get_direction_to_segment_behind(
        self, segment: BodySegment,
    ) -> Direction | None:
        behind = self.get_segment_behind(segment)
        if behind is None:
            return None
        return direction_between(segment.cell, behind.cell)

    def get_head_direction(self) -> Direction | None:
        """Direction from the neck to the head; ``None`` for one segment."""
        if len(self._cells) < 2:
            return None
        return direction_between(self._cells[-2], self._cells[-1])

    def get_tail_direction(self) -> Direction | None:
        """Direction from the second segment to the tail; ``None`` for one."""
        if len(self._cells) < 2:
            return None
        return direction_between(self._cells[1], self._cells[0])

    def shift_forward(self, new_head_cell: Cell) -> Cell:
        """Advance every segment one slot toward the head.

        The head moves onto *new_head_cell*. Returns the vacated tail cell.
        """
        vacated = self._cells[0]
        self._cells = self._cells[1:] + [new_head_cell]
        return vacated

    def shift_backward(self, new_tail_cell: Cell) -> Cell:
        """Retreat every segment one slot toward the tail.

        The tail moves onto *new_tail_cell*. Returns the vacated head cell.
        """
        vacated = self._cells[-1]
        self._cells = [new_tail_cell] + self._cells[:-1]
        return vacated

    def to_dict(self) -> dict:
        """Serialize lizard state to a dictionary."""
        return {
            "id": self.lizard_id,
            "segments": [[c.col, c.row] for c in self._cells],
        }

    def __str__(self) -> str:
        return " ".join(str(c) for c in self._cells)

    def __repr__(self) -> str:
        return f"Lizard(id={self.lizard_id}, segments=[{self}])"
