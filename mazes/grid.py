"""Fixed-size grid of per-cell passage flags."""

from __future__ import annotations

import operator
from typing import List, Tuple

import numpy as np

from .directions import OPPOSITE, neighbor


class Grid:
    """A width x height array of passage bitmasks indexed by ``(x, y)``.

    Each cell holds the union of the direction flags (see
    :mod:`mazes.directions`) through which it has an open passage. Flags are
    only ever merged in, never cleared.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = _dimension("width", width)
        self._height = _dimension("height", height)
        self._cells = np.zeros((self._height, self._width), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flags, shaped ``(height, width)``."""

        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"cell ({x}, {y}) is outside a {self._width}x{self._height} grid"
            )

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self._cells[y, x])

    def set(self, x: int, y: int, flags: int) -> None:
        """Merge ``flags`` into the cell at (x, y)."""

        self._check(x, y)
        self._cells[y, x] |= flags

    def is_unvisited(self, x: int, y: int) -> bool:
        return self.get(x, y) == 0

    def carve(self, x: int, y: int, direction: int) -> Tuple[int, int]:
        """Open a passage from (x, y) towards ``direction`` on both sides.

        Returns the coordinates of the neighbour that was opened into.
        """

        nx, ny = neighbor(x, y, direction)
        self._check(nx, ny)
        self.set(x, y, direction)
        self.set(nx, ny, OPPOSITE[direction])
        return nx, ny

    def copy(self) -> "Grid":
        clone = Grid(self._width, self._height)
        clone._cells[:] = self._cells
        return clone

    def to_list(self) -> List[List[int]]:
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"


def _dimension(name: str, value: int) -> int:
    try:
        size = operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be a positive integer") from None
    if size < 1:
        raise ValueError(f"{name} must be a positive integer")
    return size


__all__ = ["Grid"]
