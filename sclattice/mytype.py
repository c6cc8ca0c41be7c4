"""Coordinate and identifier helpers for the layout generator."""

from __future__ import annotations

from typing import NamedTuple


class Coord2D(NamedTuple):
    x: float
    y: float


class GridPos(NamedTuple):
    """Local (row, col) position inside a patch."""

    row: int
    col: int


# (x, y) fractions of an element box, used for triangle clip paths
FracPoint = tuple[float, float]
