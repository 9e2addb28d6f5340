"""Text, terminal and image renderings of a maze grid."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, Sequence, TextIO, Tuple

from PIL import Image, ImageDraw

from .directions import E, N, S, W
from .grid import Grid

DEFAULT_DELAY = 0.04
DEFAULT_CELL_SIZE = 16

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)


def render_ascii(grid: Grid) -> str:
    """Draw the grid with underscores for floors and bars for walls.

    A cell's floor is open when it has a south passage; its east side is a
    wall unless it has an east passage, in which case the gap is drawn as a
    floor segment only when neither it nor its east neighbour opens south.
    """

    cells = grid.cells
    lines = [" " + "_" * (grid.width * 2 - 1)]
    for y in range(grid.height):
        row = ["|"]
        for x in range(grid.width):
            flags = int(cells[y, x])
            row.append(" " if flags & S else "_")
            if flags & E:
                below = flags | int(cells[y, x + 1])
                row.append(" " if below & S else "_")
            else:
                row.append("|")
        lines.append("".join(row))
    return "\n".join(lines) + "\n"


def render_cells(grid: Grid) -> str:
    """Dump the raw flag values, one row per line."""

    return "".join(" ".join(str(value) for value in row) + "\n" for row in grid.to_list())


class TerminalAnimator:
    """Carve observer that redraws the maze in place after every step.

    ``frame`` produces the text to show (usually :meth:`Maze.render`). The
    screen is cleared before the first frame; every frame then homes the
    cursor, writes the text and pauses for ``delay`` seconds.
    """

    def __init__(
        self,
        frame: Callable[[], str],
        *,
        delay: float = DEFAULT_DELAY,
        stream: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.frame = frame
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self._sleep = sleep if sleep is not None else time.sleep
        self.frames = 0

    def __call__(self, grid: Grid) -> None:
        if self.frames == 0:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(CURSOR_HOME + self.frame())
        self.stream.flush()
        self.frames += 1
        if self.delay:
            self._sleep(self.delay)


def render_image(
    grid: Grid,
    *,
    cell_size: int = DEFAULT_CELL_SIZE,
    path: Optional[Sequence[Tuple[int, int]]] = None,
) -> Image.Image:
    """Draw the maze as an RGB image with the start and goal cells coloured.

    ``path`` is an optional sequence of ``(x, y)`` cells drawn as a red line
    through the cell centres.
    """

    if cell_size < 4:
        raise ValueError("cell_size must be at least 4")
    wall = max(1, cell_size // 8)
    margin = wall
    canvas_dims = (grid.width * cell_size + 2 * margin, grid.height * cell_size + 2 * margin)
    canvas = Image.new("RGB", canvas_dims, PATH_COLOR)
    draw = ImageDraw.Draw(canvas)

    goal = (grid.width - 1, grid.height - 1)
    for cell, color in (((0, 0), START_COLOR), (goal, GOAL_COLOR)):
        left, top = _cell_origin(cell, cell_size, margin)
        draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=color)

    cells = grid.cells
    for y in range(grid.height):
        for x in range(grid.width):
            flags = int(cells[y, x])
            left, top = _cell_origin((x, y), cell_size, margin)
            right, bottom = left + cell_size, top + cell_size
            if not flags & N:
                draw.line((left, top, right, top), fill=WALL_COLOR, width=wall)
            if not flags & W:
                draw.line((left, top, left, bottom), fill=WALL_COLOR, width=wall)
            if not flags & S:
                draw.line((left, bottom, right, bottom), fill=WALL_COLOR, width=wall)
            if not flags & E:
                draw.line((right, top, right, bottom), fill=WALL_COLOR, width=wall)

    if path:
        thickness = max(2, cell_size // 3)
        points = [
            (
                margin + x * cell_size + cell_size / 2,
                margin + y * cell_size + cell_size / 2,
            )
            for x, y in path
        ]
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            cx, cy = points[0]
            half = thickness / 2
            draw.ellipse((cx - half, cy - half, cx + half, cy + half), fill=LINE_COLOR)
    return canvas


def _cell_origin(cell: Tuple[int, int], cell_size: int, margin: int) -> Tuple[int, int]:
    x, y = cell
    return margin + x * cell_size, margin + y * cell_size


__all__ = [
    "render_ascii",
    "render_cells",
    "render_image",
    "TerminalAnimator",
    "DEFAULT_DELAY",
    "DEFAULT_CELL_SIZE",
]
