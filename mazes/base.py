"""Abstract interface for maze carving strategies."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .grid import Grid

CarveObserver = Callable[[Grid], None]


class AbstractMazeCarver(ABC):
    """Base class for algorithms that carve passages into an empty grid.

    A carver mutates the grid in place and draws all of its randomness from
    the ``rng`` it is handed, so the same grid size and seed always carve the
    same maze. When an ``observer`` is supplied it is called with the grid
    after every mutation and once more when carving is finished.
    """

    #: Registry name, also used on the command line.
    name: str = ""

    @abstractmethod
    def carve(
        self,
        grid: Grid,
        rng: random.Random,
        *,
        observer: Optional[CarveObserver] = None,
    ) -> None:
        """Carve a perfect maze into ``grid``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["AbstractMazeCarver", "CarveObserver"]
