"""Command-line front end for playing and inspecting puzzle levels."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lizard_game.config import RenderConfig
    from lizard_game.engine import LizardGame
    from lizard_game.lizard import Direction

logger = logging.getLogger(__name__)

_DIRECTION_NAMES = ("up", "down", "left", "right")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lizard-game",
        description="Lizard sliding-puzzle tools.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- show ---
    show_p = sub.add_parser("show", help="Print a level's debug rendering.")
    show_p.add_argument("level", help="Path to the level file.")
    show_p.add_argument(
        "--render-config", type=str, default=None,
        help="Path to a JSON render config with custom symbols.",
    )

    # --- play ---
    play_p = sub.add_parser(
        "play", help="Play a level, reading 'col row direction' moves.",
    )
    play_p.add_argument("level", help="Path to the level file.")
    play_p.add_argument("--render-config", type=str, default=None)
    play_p.add_argument(
        "--quiet", action="store_true",
        help="Do not print the board after each move.",
    )

    return parser


def _load_game(
    args: argparse.Namespace, **listeners,
) -> LizardGame | None:
    from lizard_game.engine import LizardGame

    game = LizardGame(1, 1, **listeners)
    if not game.load(args.level):
        print(f"Could not load level {args.level}", file=sys.stderr)  # noqa: T201
        return None
    return game


def _load_render_config(args: argparse.Namespace) -> RenderConfig:
    from lizard_game.config import RenderConfig

    if args.render_config:
        return RenderConfig.load(args.render_config)
    return RenderConfig()


def _parse_move(line: str) -> tuple[int, int, Direction] | None:
    """Parse ``col row direction``; return ``None`` if malformed."""
    from lizard_game.lizard import Direction

    parts = line.split()
    if len(parts) != 3 or parts[2].lower() not in _DIRECTION_NAMES:
        return None
    try:
        col, row = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return col, row, Direction[parts[2].upper()]


def _run_show(args: argparse.Namespace) -> int:
    from lizard_game.render import render_text

    game = _load_game(args)
    if game is None:
        return 2
    print(render_text(game, _load_render_config(args)), end="")  # noqa: T201
    return 0


def _run_play(args: argparse.Namespace) -> int:
    from lizard_game.render import render_text

    game = _load_game(
        args,
        score_listener=lambda n: print(f"Lizards left: {n}"),  # noqa: T201
        dialog_listener=print,  # noqa: T201
    )
    if game is None:
        return 2
    render_config = _load_render_config(args)
    if not args.quiet:
        print(render_text(game, render_config), end="")  # noqa: T201

    requests = 0
    for line in sys.stdin:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parsed = _parse_move(line)
        if parsed is None:
            print(f"Ignoring malformed move: {line!r}")  # noqa: T201
            continue
        game.move(*parsed)
        requests += 1
        if not args.quiet:
            print(render_text(game, render_config), end="")  # noqa: T201
        if game.solved:
            break
    logger.info(
        "Play ended after %d move requests (%d lizards left).",
        requests, len(game.lizards),
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``lizard-game`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "show": _run_show,
        "play": _run_play,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
