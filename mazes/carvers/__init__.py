"""Maze carving algorithms and a registry to look them up by name."""

__all__ = [
    "BinaryTreeCarver",
    "RecursiveBacktrackerCarver",
    "CARVERS",
    "get_carver",
]

from ..base import AbstractMazeCarver
from .backtracker import RecursiveBacktrackerCarver
from .binary_tree import BinaryTreeCarver

CARVERS = {
    BinaryTreeCarver.name: BinaryTreeCarver,
    RecursiveBacktrackerCarver.name: RecursiveBacktrackerCarver,
}


def get_carver(name: str) -> AbstractMazeCarver:
    """Instantiate the carver registered under ``name``."""

    try:
        return CARVERS[name]()
    except KeyError as exc:
        known = ", ".join(sorted(CARVERS))
        raise KeyError(f"Unknown maze algorithm '{name}' (known: {known})") from exc
