"""Plain-text debug rendering of a game."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lizard_game.config import RenderConfig
from lizard_game.grid import NO_OCCUPANT, CellFlag

if TYPE_CHECKING:
    from lizard_game.engine import LizardGame

_RULE = "--------------------------"


def render_layout(
    game: LizardGame, config: RenderConfig | None = None,
) -> list[str]:
    """Return one string of cell symbols per grid row."""
    cfg = config or RenderConfig()
    grid = game.grid
    rows: list[str] = []
    for row in range(grid.height):
        chars: list[str] = []
        for col in range(grid.width):
            terrain = grid.terrain[row, col]
            # A lizard resting on an exit is drawn as the lizard.
            if grid.occupancy[row, col] != NO_OCCUPANT:
                chars.append(cfg.lizard)
            elif terrain & CellFlag.WALL:
                chars.append(cfg.wall)
            elif terrain & CellFlag.EXIT:
                chars.append(cfg.exit)
            else:
                chars.append(cfg.empty)
        rows.append("".join(chars))
    return rows


def render_text(game: LizardGame, config: RenderConfig | None = None) -> str:
    """Render dimensions, the cell layout and each lizard's segments."""
    lines = [
        "---------- GRID ----------",
        "Dimensions:",
        f"{game.width} {game.height}",
        "Layout:",
        *render_layout(game, config),
        "Lizards:",
        *(str(lizard) for lizard in game.lizards),
        _RULE,
    ]
    return "\n".join(lines) + "\n"
