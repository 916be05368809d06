"""Tests for the command-line front end."""

import io

import pytest

from lizard_game.cli import _build_parser, _parse_move, main
from lizard_game.lizard import Direction

LEVEL = "4x3\nWWWW\n...E\nWWWW\nL 0,1 1,1\n"


@pytest.fixture()
def level_file(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(LEVEL)
    return path


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_show_args(self):
        args = _build_parser().parse_args(["show", "level.txt"])
        assert args.command == "show"
        assert args.level == "level.txt"
        assert args.render_config is None

    def test_play_args(self):
        args = _build_parser().parse_args(
            ["--log-level", "DEBUG", "play", "level.txt", "--quiet"],
        )
        assert args.command == "play"
        assert args.quiet is True
        assert args.log_level == "DEBUG"

    def test_parse_move(self):
        assert _parse_move("3 1 right") == (3, 1, Direction.RIGHT)
        assert _parse_move("0 2 UP") == (0, 2, Direction.UP)
        assert _parse_move("3 1") is None
        assert _parse_move("a 1 up") is None
        assert _parse_move("1 1 sideways") is None


class TestCLIShow:
    def test_show_prints_board(self, level_file, capsys):
        assert main(["show", str(level_file)]) == 0
        out = capsys.readouterr().out
        assert "LL.E" in out
        assert "(0,1) (1,1)" in out

    def test_show_with_render_config(self, level_file, tmp_path, capsys):
        from lizard_game.config import RenderConfig

        cfg_path = tmp_path / "render.json"
        RenderConfig(lizard="s").save(cfg_path)
        assert main([
            "show", str(level_file), "--render-config", str(cfg_path),
        ]) == 0
        assert "ss.E" in capsys.readouterr().out

    def test_show_missing_level(self, tmp_path, capsys):
        assert main(["show", str(tmp_path / "missing.txt")]) == 2
        assert "Could not load" in capsys.readouterr().err


class TestCLIPlay:
    def test_play_to_win(self, level_file, capsys, monkeypatch):
        monkeypatch.setattr(
            "sys.stdin", io.StringIO("1 1 right\n\nbogus\n2 1 right\n"),
        )
        assert main(["play", str(level_file), "--quiet"]) == 0
        out = capsys.readouterr().out
        assert "Lizards left: 1" in out
        assert "Ignoring malformed move: 'bogus'" in out
        assert "Lizards left: 0" in out
        assert out.rstrip().endswith("You win!")

    def test_play_prints_board(self, level_file, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("1 1 right\n"))
        assert main(["play", str(level_file)]) == 0
        out = capsys.readouterr().out
        assert "LL.E" in out
        assert ".LLE" in out
