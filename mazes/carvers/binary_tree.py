"""Binary-tree maze carver."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from ..analysis import count_passages
from ..base import AbstractMazeCarver, CarveObserver
from ..directions import N, W
from ..grid import Grid

logger = logging.getLogger(__name__)


class BinaryTreeCarver(AbstractMazeCarver):
    """Sweep the grid once, opening each cell either north or west.

    Cells are visited row by row, left to right. Each cell other than the
    top-left one picks uniformly between the candidates it has (north when
    not on the top row, west when not on the left column) with a single
    ``rng.randrange`` draw. The result always has one unbroken corridor along
    the north and west borders and a diagonal bias towards the top-left.
    """

    name = "binary-tree"

    def carve(
        self,
        grid: Grid,
        rng: random.Random,
        *,
        observer: Optional[CarveObserver] = None,
    ) -> None:
        for y in range(grid.height):
            for x in range(grid.width):
                candidates: List[int] = []
                if y > 0:
                    candidates.append(N)
                if x > 0:
                    candidates.append(W)
                if candidates:
                    direction = candidates[rng.randrange(len(candidates))]
                    grid.carve(x, y, direction)
                if observer is not None:
                    observer(grid)
        if observer is not None:
            observer(grid)
        logger.debug(
            "binary tree carved %dx%d grid (%d passages)",
            grid.width,
            grid.height,
            count_passages(grid),
        )


__all__ = ["BinaryTreeCarver"]


def main(argv: Optional[List[str]] = None) -> int:
    from ..cli import run

    return run(argv, algorithm=BinaryTreeCarver.name, prog="binary-tree-maze")


if __name__ == "__main__":
    raise SystemExit(main())
