"""Tests for the debug text rendering."""

from lizard_game.config import RenderConfig
from lizard_game.engine import LizardGame
from lizard_game.level import apply_level, parse_level
from lizard_game.lizard import Direction
from lizard_game.render import render_layout, render_text

LEVEL = "4x3\nWWWW\n...E\nWWWW\nL 0,1 1,1\n"


def _game():
    game = LizardGame(1, 1)
    apply_level(parse_level(LEVEL), game)
    return game


class TestRenderLayout:
    def test_symbols(self):
        assert render_layout(_game()) == ["WWWW", "LL.E", "WWWW"]

    def test_custom_symbols(self):
        cfg = RenderConfig(wall="#", exit="@", lizard="s", empty=" ")
        assert render_layout(_game(), cfg) == ["####", "ss @", "####"]

    def test_follows_moves(self):
        game = _game()
        game.move(1, 1, Direction.RIGHT)
        assert render_layout(game)[1] == ".LLE"


class TestRenderText:
    def test_full_block(self):
        assert render_text(_game()) == (
            "---------- GRID ----------\n"
            "Dimensions:\n"
            "4 3\n"
            "Layout:\n"
            "WWWW\n"
            "LL.E\n"
            "WWWW\n"
            "Lizards:\n"
            "(0,1) (1,1)\n"
            "--------------------------\n"
        )

    def test_no_lizards(self):
        game = _game()
        game.move(1, 1, Direction.RIGHT)
        game.move(2, 1, Direction.RIGHT)
        text = render_text(game)
        assert "Lizards:\n--------------------------\n" in text
        assert "WWWW\n...E\nWWWW" in text
