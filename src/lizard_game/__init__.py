"""Lizard Game — sliding-puzzle engine."""

from lizard_game.config import RenderConfig, ServerConfig
from lizard_game.engine import WIN_MESSAGE, LizardGame
from lizard_game.grid import Cell, CellFlag, Exit, Grid, Wall
from lizard_game.level import Level, LevelFormatError, parse_level, read_level
from lizard_game.lizard import BodySegment, Direction, Lizard
from lizard_game.render import render_text

__all__ = [
    "WIN_MESSAGE",
    "BodySegment",
    "Cell",
    "CellFlag",
    "Direction",
    "Exit",
    "Grid",
    "Level",
    "LevelFormatError",
    "Lizard",
    "LizardGame",
    "RenderConfig",
    "ServerConfig",
    "Wall",
    "parse_level",
    "read_level",
    "render_text",
]
