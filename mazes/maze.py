"""The maze model: a grid, its dimensions and the seed that carved it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Union

from .base import AbstractMazeCarver, CarveObserver
from .carvers import get_carver
from .grid import Grid
from .render import render_ascii, render_cells

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
MAX_SEED = 0xFFFF_FFFF


def random_seed() -> int:
    """Pick a process-random seed in ``[0, MAX_SEED)``."""

    return random.randrange(MAX_SEED)


@dataclass
class Maze:
    """A width x height maze carved from a reproducible random source.

    The grid starts with every flag clear. :meth:`carve` fills it in one
    pass; afterwards the maze is only read. ``seed`` defaults to a
    process-random value so that it can always be reported and replayed.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    algorithm: Optional[str] = field(default=None, init=False)
    grid: Grid = field(init=False, repr=False)
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = random_seed()
        self.grid = Grid(self.width, self.height)
        self._rng = random.Random(self.seed)

    @classmethod
    def generate(
        cls,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        seed: Optional[int] = None,
        *,
        algorithm: Union[str, AbstractMazeCarver] = "backtracker",
        observer: Optional[CarveObserver] = None,
    ) -> "Maze":
        maze = cls(width, height, seed)
        maze.carve(algorithm, observer=observer)
        return maze

    @property
    def carved(self) -> bool:
        return self.algorithm is not None

    def carve(
        self,
        carver: Union[str, AbstractMazeCarver],
        *,
        observer: Optional[CarveObserver] = None,
    ) -> None:
        """Run ``carver`` (an instance or a registered name) over the grid."""

        if self.carved:
            raise RuntimeError(f"Maze has already been carved with {self.algorithm}")
        if isinstance(carver, str):
            carver = get_carver(carver)
        logger.debug(
            "carving %dx%d maze with %s (seed=%d)",
            self.width,
            self.height,
            carver.name,
            self.seed,
        )
        carver.carve(self.grid, self._rng, observer=observer)
        self.algorithm = carver.name

    def render(self) -> str:
        """ASCII drawing of the maze followed by its metadata line."""

        return render_ascii(self.grid) + self.metadata_line() + "\n"

    def metadata_line(self) -> str:
        return f" width: {self.width}, height: {self.height}, seed: {self.seed}"

    def inspect(self) -> str:
        """Raw cell values, one grid row per line."""

        return render_cells(self.grid)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "algorithm": self.algorithm,
            "grid": self.grid.to_list(),
        }


__all__ = ["Maze", "DEFAULT_WIDTH", "DEFAULT_HEIGHT", "MAX_SEED", "random_seed"]
