from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import MazeError
from .logging_config import configure_logging
from .maze import START_ORIGIN, START_RANDOM, Maze
from .render import TextMaze
from .settings import MazeSettings

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="mazegen",
        description="Generate a perfect maze and print it with its two most distant cells marked.",
    )
    parser.add_argument("--width", type=int, default=None, help="Number of columns.")
    parser.add_argument("--height", type=int, default=None, help="Number of rows.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze.")
    parser.add_argument(
        "--start",
        choices=(START_RANDOM, START_ORIGIN),
        default=None,
        help="Carve from a random cell or from the top-left cell.",
    )
    parser.add_argument("--cell-width", type=int, default=None, help="Characters per cell, horizontally.")
    parser.add_argument("--cell-height", type=int, default=None, help="Lines per cell.")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--no-marker", action="store_true", help="Do not mark the terminus cells.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> MazeSettings:
    settings = MazeSettings.load(user_path=args.settings_path)
    for attr in ("width", "height", "seed", "start"):
        value = getattr(args, attr)
        if value is not None:
            setattr(settings.maze, attr, value)
    if args.cell_width is not None:
        settings.render.cell_width = args.cell_width
    if args.cell_height is not None:
        settings.render.cell_height = args.cell_height
    if args.no_marker:
        settings.render.terminus_char = None
    settings.validate()
    return settings


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = build_settings(args)
        m = settings.maze
        maze = Maze.build(m.width, m.height, m.seed, start=m.start)
        view = TextMaze(maze, terminus_char=settings.render.terminus_char)
        lines = view.lines(settings.render.cell_width, settings.render.cell_height)
    except MazeError as exc:
        logger.error("%s", exc)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
