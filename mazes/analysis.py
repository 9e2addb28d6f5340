"""Structural checks on carved grids and shortest-path solving."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from .directions import DIRECTIONS, E, N, S, W, neighbor
from .grid import Grid

Cell = Tuple[int, int]


def count_passages(grid: Grid) -> int:
    """Number of open passages, each shared pair counted once."""

    cells = grid.cells
    return int(np.count_nonzero(cells & E) + np.count_nonzero(cells & S))


def is_symmetric(grid: Grid) -> bool:
    """True when every open flag is matched by its neighbour's opposite flag.

    Flags pointing off the edge of the grid count as violations.
    """

    cells = grid.cells
    east = (cells[:, :-1] & E) != 0
    west = (cells[:, 1:] & W) != 0
    south = (cells[:-1, :] & S) != 0
    north = (cells[1:, :] & N) != 0
    if not (np.array_equal(east, west) and np.array_equal(south, north)):
        return False
    border = (
        np.any(cells[0, :] & N)
        or np.any(cells[-1, :] & S)
        or np.any(cells[:, 0] & W)
        or np.any(cells[:, -1] & E)
    )
    return not border


def _open_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
    x, y = cell
    flags = grid.get(x, y)
    result = []
    for direction in DIRECTIONS:
        if flags & direction:
            nx, ny = neighbor(x, y, direction)
            if grid.in_bounds(nx, ny):
                result.append((nx, ny))
    return result


def _walk(grid: Grid, start: Cell, goal: Optional[Cell] = None) -> Dict[Cell, Optional[Cell]]:
    queue: deque[Cell] = deque([start])
    parents: Dict[Cell, Optional[Cell]] = {start: None}
    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        for nxt in _open_neighbors(grid, cell):
            if nxt not in parents:
                parents[nxt] = cell
                queue.append(nxt)
    return parents


def reachable_cells(grid: Grid, start: Cell = (0, 0)) -> Set[Cell]:
    if not grid.in_bounds(*start):
        raise IndexError(f"start cell {start} is outside the grid")
    return set(_walk(grid, start))


def is_perfect(grid: Grid) -> bool:
    """True when the passages form a spanning tree over every cell."""

    total = grid.width * grid.height
    if not is_symmetric(grid):
        return False
    if count_passages(grid) != total - 1:
        return False
    return len(reachable_cells(grid)) == total


def solve(grid: Grid, start: Cell = (0, 0), goal: Optional[Cell] = None) -> List[Cell]:
    """Shortest path of cells from ``start`` to ``goal`` (default bottom-right).

    Returns an empty list when the goal cannot be reached.
    """

    if goal is None:
        goal = (grid.width - 1, grid.height - 1)
    for cell in (start, goal):
        if not grid.in_bounds(*cell):
            raise IndexError(f"cell {cell} is outside the grid")
    parents = _walk(grid, start, goal)
    if goal not in parents:
        return []
    node: Optional[Cell] = goal
    path: List[Cell] = []
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


__all__ = ["count_passages", "is_symmetric", "reachable_cells", "is_perfect", "solve"]
