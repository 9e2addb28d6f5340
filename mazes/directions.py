"""Compass direction flags and their lookup tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

N, S, E, W = 1, 2, 4, 8

DIRECTIONS: Tuple[int, ...] = (N, S, E, W)

DX: Mapping[int, int] = MappingProxyType({E: 1, W: -1, N: 0, S: 0})
DY: Mapping[int, int] = MappingProxyType({E: 0, W: 0, N: -1, S: 1})
OPPOSITE: Mapping[int, int] = MappingProxyType({E: W, W: E, N: S, S: N})

NAMES: Mapping[int, str] = MappingProxyType({N: "N", S: "S", E: "E", W: "W"})


def neighbor(x: int, y: int, direction: int) -> Tuple[int, int]:
    """Return the coordinates one step from (x, y) towards ``direction``."""

    return x + DX[direction], y + DY[direction]


__all__ = ["N", "S", "E", "W", "DIRECTIONS", "DX", "DY", "OPPOSITE", "NAMES", "neighbor"]
