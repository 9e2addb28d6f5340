"""Command-line front end for carving and printing mazes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analysis import solve
from .carvers import CARVERS, RecursiveBacktrackerCarver
from .maze import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_SEED, Maze
from .render import DEFAULT_CELL_SIZE, DEFAULT_DELAY, TerminalAnimator, render_image

logger = logging.getLogger(__name__)

DEFAULT_ANIMATE = False
DEFAULT_ALGORITHM = RecursiveBacktrackerCarver.name


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be 1 or greater, got {number}")
    return number


def _seed(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if not 0 <= number < MAX_SEED:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_SEED - 1}, got {number}")
    return number


def _delay(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number of seconds, got '{value}'") from None
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {seconds}")
    return seconds


def build_parser(prog: Optional[str] = None, *, algorithm: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the option parser; ``algorithm`` fixes the carver and hides ``--algorithm``."""

    parser = argparse.ArgumentParser(
        prog=prog,
        description="Carve a random perfect maze and draw it in ASCII.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument(
        "-w", "--width", type=_positive_int, default=DEFAULT_WIDTH,
        help=f"Width of maze (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-h", "--height", type=_positive_int, default=DEFAULT_HEIGHT,
        help=f"Height of maze (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "-s", "--seed", type=_seed, default=None,
        help="Seed for deterministic output (default: random)",
    )
    if algorithm is None:
        parser.add_argument(
            "-A", "--algorithm", choices=sorted(CARVERS), default=DEFAULT_ALGORITHM,
            help=f"Carving algorithm (default: {DEFAULT_ALGORITHM})",
        )
    parser.add_argument(
        "-a", "--animate", action=argparse.BooleanOptionalAction, default=DEFAULT_ANIMATE,
        help="Redraw the maze after every carving step",
    )
    parser.add_argument(
        "-d", "--delay", type=_delay, default=DEFAULT_DELAY,
        help=f"Seconds to pause between animation frames (default: {DEFAULT_DELAY})",
    )
    parser.add_argument("--inspect", action="store_true", help="Also print the raw cell values")
    parser.add_argument("--json", action="store_true", help="Print the maze as JSON instead of ASCII")
    parser.add_argument("--image", type=Path, default=None, help="Also save the maze as a PNG image")
    parser.add_argument(
        "--cell-size", type=_positive_int, default=DEFAULT_CELL_SIZE,
        help=f"Pixel size of one cell in --image output (default: {DEFAULT_CELL_SIZE})",
    )
    parser.add_argument("--solution", action="store_true", help="Draw the solution path in --image output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    return parser


def _parse_args(
    argv: Optional[List[str]] = None,
    *,
    algorithm: Optional[str] = None,
    prog: Optional[str] = None,
) -> argparse.Namespace:
    parser = build_parser(prog, algorithm=algorithm)
    args = parser.parse_args(argv)
    if algorithm is not None:
        args.algorithm = algorithm
    if args.json and args.animate:
        parser.error("--json cannot be combined with --animate")
    if args.solution and args.image is None:
        parser.error("--solution requires --image")
    if args.image is not None and args.cell_size < 4:
        parser.error("--cell-size must be at least 4")
    return args


def run(
    argv: Optional[List[str]] = None,
    *,
    algorithm: Optional[str] = None,
    prog: Optional[str] = None,
) -> int:
    args = _parse_args(argv, algorithm=algorithm, prog=prog)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("mazes").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    maze = Maze(args.width, args.height, args.seed)
    observer = None
    if args.animate:
        observer = TerminalAnimator(maze.render, delay=args.delay, stream=sys.stdout)
    try:
        maze.carve(args.algorithm, observer=observer)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130

    if args.json:
        print(json.dumps(maze.to_dict(), indent=2))
    elif not args.animate:
        sys.stdout.write(maze.render())
    if args.inspect:
        sys.stdout.write(maze.inspect())

    if args.image is not None:
        path = solve(maze.grid) if args.solution else None
        image = render_image(maze.grid, cell_size=args.cell_size, path=path)
        args.image.parent.mkdir(parents=True, exist_ok=True)
        image.save(args.image)
        logger.debug("wrote %s", args.image)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(argv, prog="maze")


if __name__ == "__main__":
    raise SystemExit(main())
