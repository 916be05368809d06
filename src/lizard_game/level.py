"""Text level format: parsing, validation, and loading into a game.

A level file looks like::

    5x4
    WWWWW
    W...E
    W...W
    WWWWW
    L 1,1 2,1 3,1

The first line gives ``width x height``. The next *height* lines hold
*width* characters each: ``W`` is a wall, ``E`` an exit, anything else an
empty cell. Each remaining line starting with the token ``L`` lists one
lizard's segments as ``col,row`` pairs, tail first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lizard_game.grid import Cell, Exit, Wall
from lizard_game.lizard import Lizard

if TYPE_CHECKING:
    from lizard_game.engine import LizardGame

logger = logging.getLogger(__name__)

WALL_CHAR = "W"
EXIT_CHAR = "E"
EMPTY_CHAR = "."
LIZARD_TOKEN = "L"

Coord = tuple[int, int]


class LevelFormatError(ValueError):
    """Raised when level text is malformed or describes an invalid puzzle."""


@dataclass(frozen=True)
class Level:
    """A validated, game-independent level description.

    All coordinates are ``(col, row)``.
    """

    width: int
    height: int
    walls: tuple[Coord, ...] = ()
    exits: tuple[Coord, ...] = ()
    lizards: tuple[tuple[Coord, ...], ...] = ()

    def to_text(self) -> str:
        """Render the level back into the text format."""
        rows = [[EMPTY_CHAR] * self.width for _ in range(self.height)]
        for col, row in self.exits:
            rows[row][col] = EXIT_CHAR
        for col, row in self.walls:
            rows[row][col] = WALL_CHAR
        lines = [f"{self.width}x{self.height}"]
        lines.extend("".join(r) for r in rows)
        for segments in self.lizards:
            coords = " ".join(f"{c},{r}" for c, r in segments)
            lines.append(f"{LIZARD_TOKEN} {coords}")
        return "\n".join(lines) + "\n"


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise LevelFormatError(f"Invalid {what}: {token!r}.") from None


def _parse_dimensions(line: str) -> tuple[int, int]:
    parts = line.strip().split("x")
    if len(parts) != 2:
        raise LevelFormatError(
            f"Expected dimensions as 'WIDTHxHEIGHT', got {line.strip()!r}."
        )
    width = _parse_int(parts[0], "width")
    height = _parse_int(parts[1], "height")
    if width < 1 or height < 1:
        raise LevelFormatError("Level dimensions must be at least 1x1.")
    return width, height


def _parse_lizard(tokens: list[str], line_no: int) -> tuple[Coord, ...]:
    if not tokens:
        raise LevelFormatError(f"Line {line_no}: lizard has no segments.")
    segments: list[Coord] = []
    for token in tokens:
        parts = token.split(",")
        if len(parts) != 2:
            raise LevelFormatError(
                f"Line {line_no}: expected 'col,row', got {token!r}."
            )
        segments.append(
            (_parse_int(parts[0], "column"), _parse_int(parts[1], "row"))
        )
    return tuple(segments)


def _validate(level: Level) -> None:
    """Check the lizards fit the grid before anything touches a game."""
    walls = set(level.walls)
    taken: set[Coord] = set()
    for n, segments in enumerate(level.lizards, start=1):
        for col, row in segments:
            if not (0 <= col < level.width and 0 <= row < level.height):
                raise LevelFormatError(
                    f"Lizard {n}: segment ({col},{row}) is outside the grid."
                )
            if (col, row) in walls:
                raise LevelFormatError(
                    f"Lizard {n}: segment ({col},{row}) is on a wall."
                )
            if (col, row) in taken:
                raise LevelFormatError(
                    f"Lizard {n}: segment ({col},{row}) is already occupied."
                )
            taken.add((col, row))
        try:
            Lizard([Cell(c, r) for c, r in segments])
        except ValueError as exc:
            raise LevelFormatError(f"Lizard {n}: {exc}") from None


def parse_level(text: str) -> Level:
    """Parse level text into a validated :class:`Level`.

    Raises :class:`LevelFormatError` on any malformed or inconsistent input.
    """
    lines = text.splitlines()
    if not lines:
        raise LevelFormatError("Level text is empty.")
    width, height = _parse_dimensions(lines[0])

    if len(lines) < height + 1:
        raise LevelFormatError(
            f"Expected {height} grid rows, found {len(lines) - 1}."
        )
    walls: list[Coord] = []
    exits: list[Coord] = []
    for row in range(height):
        line = lines[row + 1]
        if len(line) < width:
            raise LevelFormatError(
                f"Grid row {row} has {len(line)} characters, expected {width}."
            )
        for col, char in enumerate(line[:width]):
            if char == WALL_CHAR:
                walls.append((col, row))
            elif char == EXIT_CHAR:
                exits.append((col, row))

    lizards: list[tuple[Coord, ...]] = []
    for line_no, line in enumerate(lines[height + 1:], start=height + 2):
        tokens = line.split()
        if not tokens or tokens[0] != LIZARD_TOKEN:
            continue
        lizards.append(_parse_lizard(tokens[1:], line_no))

    level = Level(
        width=width,
        height=height,
        walls=tuple(walls),
        exits=tuple(exits),
        lizards=tuple(lizards),
    )
    _validate(level)
    return level


def read_level(path: str | Path) -> Level:
    """Read and parse the level file at *path*."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LevelFormatError(f"Level file is not valid text: {exc}") from None
    return parse_level(text)


def apply_level(level: Level, game: LizardGame) -> None:
    """Reset *game* to *level*'s grid and populate walls, exits and lizards."""
    game.reset_grid(level.width, level.height)
    for col, row in level.walls:
        game.add_wall(Wall(game.get_cell(col, row)))
    for col, row in level.exits:
        game.add_exit(Exit(game.get_cell(col, row)))
    for segments in level.lizards:
        game.add_lizard(Lizard([game.get_cell(c, r) for c, r in segments]))
    logger.debug(
        "Applied %dx%d level with %d walls, %d exits, %d lizards.",
        level.width, level.height,
        len(level.walls), len(level.exits), len(level.lizards),
    )
