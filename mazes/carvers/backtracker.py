"""Recursive-backtracker maze carver."""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from ..analysis import count_passages
from ..base import AbstractMazeCarver, CarveObserver
from ..directions import DIRECTIONS, neighbor
from ..grid import Grid

logger = logging.getLogger(__name__)


def shuffled_directions(rng: random.Random) -> List[int]:
    """Return ``[N, S, E, W]`` shuffled with exactly three draws."""

    directions = list(DIRECTIONS)
    for i in range(len(directions) - 1):
        r = i + rng.randrange(len(directions) - i)
        directions[i], directions[r] = directions[r], directions[i]
    return directions


class RecursiveBacktrackerCarver(AbstractMazeCarver):
    """Randomised depth-first walk starting at the top-left cell.

    On entering a cell the four directions are shuffled; each is tried in
    turn and, when it leads to an in-bounds cell with no flags set yet, the
    passage is opened and the walk descends into that cell before trying the
    next direction. The walk keeps its own stack of pending direction
    iterators instead of recursing, which keeps the draw order of the
    recursive formulation while allowing corridors longer than the
    interpreter's recursion limit.
    """

    name = "backtracker"

    def carve(
        self,
        grid: Grid,
        rng: random.Random,
        *,
        observer: Optional[CarveObserver] = None,
    ) -> None:
        stack: List[Tuple[int, int, Iterator[int]]] = [
            (0, 0, iter(shuffled_directions(rng)))
        ]
        deepest = 1
        while stack:
            x, y, pending = stack[-1]
            for direction in pending:
                nx, ny = neighbor(x, y, direction)
                if grid.in_bounds(nx, ny) and grid.is_unvisited(nx, ny):
                    grid.carve(x, y, direction)
                    if observer is not None:
                        observer(grid)
                    stack.append((nx, ny, iter(shuffled_directions(rng))))
                    deepest = max(deepest, len(stack))
                    break
            else:
                stack.pop()
        if observer is not None:
            observer(grid)
        logger.debug(
            "backtracker carved %dx%d grid (%d passages, max depth %d)",
            grid.width,
            grid.height,
            count_passages(grid),
            deepest,
        )


__all__ = ["RecursiveBacktrackerCarver", "shuffled_directions"]


def main(argv: Optional[List[str]] = None) -> int:
    from ..cli import run

    return run(argv, algorithm=RecursiveBacktrackerCarver.name, prog="backtracker-maze")


if __name__ == "__main__":
    raise SystemExit(main())
