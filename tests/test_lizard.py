"""Tests for the Lizard module."""

import pytest

from lizard_game.grid import Cell
from lizard_game.lizard import BodySegment, Direction, Lizard, direction_between


def _cells(*coords):
    return [Cell(c, r) for c, r in coords]


class TestDirection:
    def test_direction_between_adjacent(self):
        assert direction_between(Cell(1, 1), Cell(2, 1)) == Direction.RIGHT
        assert direction_between(Cell(1, 1), Cell(0, 1)) == Direction.LEFT
        assert direction_between(Cell(1, 1), Cell(1, 2)) == Direction.DOWN
        assert direction_between(Cell(1, 1), Cell(1, 0)) == Direction.UP

    def test_direction_between_not_adjacent(self):
        assert direction_between(Cell(1, 1), Cell(2, 2)) is None
        assert direction_between(Cell(1, 1), Cell(3, 1)) is None
        assert direction_between(Cell(1, 1), Cell(1, 1)) is None


class TestLizardInit:
    def test_segments_tail_to_head(self):
        lizard = Lizard(_cells((1, 1), (2, 1), (3, 1)))
        assert len(lizard) == 3
        assert lizard.get_tail_segment().cell == Cell(1, 1)
        assert lizard.get_head_segment().cell == Cell(3, 1)
        assert [s.cell for s in lizard.segments] == lizard.cells

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Lizard([])

    def test_repeated_cell_rejected(self):
        with pytest.raises(ValueError, match="distinct"):
            Lizard(_cells((1, 1), (2, 1), (1, 1)))

    def test_gap_rejected(self):
        with pytest.raises(ValueError, match="not adjacent"):
            Lizard(_cells((1, 1), (3, 1)))

    def test_diagonal_rejected(self):
        with pytest.raises(ValueError, match="not adjacent"):
            Lizard(_cells((1, 1), (2, 2)))

    def test_cells_is_a_copy(self):
        lizard = Lizard(_cells((1, 1), (2, 1)))
        lizard.cells.append(Cell(9, 9))
        assert len(lizard) == 2


class TestLizardQueries:
    def test_segment_at(self):
        lizard = Lizard(_cells((1, 1), (2, 1), (3, 1)))
        assert lizard.get_segment_at(Cell(2, 1)) == BodySegment(lizard, 1)
        assert lizard.get_segment_at(Cell(0, 0)) is None

    def test_ahead_and_behind(self):
        lizard = Lizard(_cells((1, 1), (2, 1), (3, 1)))
        middle = lizard.get_segment_at(Cell(2, 1))
        assert lizard.get_segment_ahead(middle).cell == Cell(3, 1)
        assert lizard.get_segment_behind(middle).cell == Cell(1, 1)
        assert lizard.get_segment_ahead(lizard.get_head_segment()) is None
        assert lizard.get_segment_behind(lizard.get_tail_segment()) is None

    def test_head_and_tail_flags(self):
        lizard = Lizard(_cells((1, 1), (2, 1), (3, 1)))
        assert lizard.is_head(lizard.get_head_segment())
        assert lizard.is_tail(lizard.get_tail_segment())
        middle = BodySegment(lizard, 1)
        assert not lizard.is_head(middle)
        assert not lizard.is_tail(middle)

    def test_direction_to_neighbours(self):
        lizard = Lizard(_cells((1, 2), (1, 1), (2, 1)))
        middle = BodySegment(lizard, 1)
        assert lizard.get_direction_to_segment_ahead(middle) == Direction.RIGHT
        assert lizard.get_direction_to_segment_behind(middle) == Direction.DOWN
        head = lizard.get_head_segment()
        assert lizard.get_direction_to_segment_ahead(head) is None

    def test_head_and_tail_direction(self):
        lizard = Lizard(_cells((1, 2), (1, 1), (2, 1)))
        assert lizard.get_head_direction() == Direction.RIGHT
        assert lizard.get_tail_direction() == Direction.DOWN

    def test_single_segment_has_no_direction(self):
        lizard = Lizard(_cells((2, 2)))
        assert lizard.get_head_direction() is None
        assert lizard.get_tail_direction() is None
        assert lizard.get_head_segment() == lizard.get_tail_segment()

    def test_occupies(self):
        lizard = Lizard(_cells((1, 1), (2, 1)))
        assert lizard.occupies(Cell(2, 1))
        assert not lizard.occupies(Cell(3, 1))


class TestLizardShift:
    def test_shift_forward(self):
        lizard = Lizard(_cells((1, 1), (2, 1), (3, 1)))
        vacated = lizard.shift_forward(Cell(4, 1))
        assert vacated == Cell(1, 1)
        assert lizard.cells == _cells((2, 1), (3, 1), (4, 1))

    def test_shift_backward(self):
        lizard = Lizard(_cells((1, 1), (2, 1), (3, 1)))
        vacated = lizard.shift_backward(Cell(0, 1))
        assert vacated == Cell(3, 1)
        assert lizard.cells == _cells((0, 1), (1, 1), (2, 1))

    def test_segment_view_follows_shift(self):
        lizard = Lizard(_cells((1, 1), (2, 1)))
        head = lizard.get_head_segment()
        lizard.shift_forward(Cell(2, 2))
        assert head.cell == Cell(2, 2)


class TestLizardSerialization:
    def test_str(self):
        lizard = Lizard(_cells((1, 1), (2, 1)))
        assert str(lizard) == "(1,1) (2,1)"
        assert str(lizard.get_head_segment()) == "(2,1)"

    def test_to_dict(self):
        lizard = Lizard(_cells((1, 1), (2, 1)))
        lizard.lizard_id = 3
        assert lizard.to_dict() == {"id": 3, "segments": [[1, 1], [2, 1]]}
