"""Maze carving, rendering and analysis toolkit."""

__all__ = [
    "AbstractMazeCarver",
    "BinaryTreeCarver",
    "RecursiveBacktrackerCarver",
    "CARVERS",
    "get_carver",
    "Grid",
    "Maze",
    "TerminalAnimator",
    "render_ascii",
    "render_image",
    "is_perfect",
    "solve",
]

from .base import AbstractMazeCarver
from .grid import Grid
from .carvers import BinaryTreeCarver, RecursiveBacktrackerCarver, CARVERS, get_carver
from .maze import Maze
from .render import TerminalAnimator, render_ascii, render_image
from .analysis import is_perfect, solve
