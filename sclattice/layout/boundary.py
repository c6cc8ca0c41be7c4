"""Boundary stabilizer placement for rotated surface code patches.

A side of boundary type ``T`` closes the lattice with weight-2 stabilizers of
type ``T``. They sit next to the bulk plaquettes of the opposite type, so
along each side they alternate with the checkerboard and every X or Z side of
a distance-``d`` patch carries ``(d - 1) / 2`` of them. Open (``O``) sides
carry none.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sclattice.consts import DEFAULT_BOUNDARY, BoundarySide, EdgeSpecValue
from sclattice.layout.params import check_distance
from sclattice.mytype import GridPos

if TYPE_CHECKING:
    from collections.abc import Mapping


def cell_type(row: int, col: int) -> EdgeSpecValue:
    """Stabilizer type of bulk plaquette ``(row, col)`` (checkerboard parity)."""
    return EdgeSpecValue.X if (row + col) % 2 == 0 else EdgeSpecValue.Z


def adjacent_cell(distance: int, side: BoundarySide, index: int) -> GridPos:
    """Bulk plaquette touching position ``index`` along ``side``."""
    last = distance - 2
    match side:
        case BoundarySide.TOP:
            return GridPos(0, index)
        case BoundarySide.BOTTOM:
            return GridPos(last, index)
        case BoundarySide.LEFT:
            return GridPos(index, 0)
        case BoundarySide.RIGHT:
            return GridPos(index, last)
        case _:
            msg = f"Invalid boundary side: {side}"
            raise ValueError(msg)


def boundary_triangle_positions(
    distance: int,
    side: BoundarySide,
    boundary: Mapping[BoundarySide, EdgeSpecValue] | None = None,
) -> frozenset[int]:
    """Return the indices along ``side`` that carry a boundary triangle.

    Parameters
    ----------
    distance : int
        Code distance (odd, >= 3).
    side : BoundarySide
        Patch side; indices run left to right (top/bottom) or top to bottom
        (left/right) over the ``distance - 1`` boundary cells.
    boundary : Mapping[BoundarySide, EdgeSpecValue] | None
        Boundary type per side. Defaults to X on top/bottom and Z on
        left/right.

    Returns
    -------
    frozenset[int]
        Cell indices whose adjacent bulk plaquette has the opposite type to
        the side's boundary type.

    Examples
    --------
    >>> sorted(boundary_triangle_positions(5, BoundarySide.TOP))
    [1, 3]
    >>> sorted(boundary_triangle_positions(3, BoundarySide.BOTTOM))
    [0]
    """
    check_distance(distance)
    side = BoundarySide(side)
    spec = (boundary or DEFAULT_BOUNDARY).get(side, EdgeSpecValue.O)
    if spec == EdgeSpecValue.O:
        return frozenset()
    return frozenset(
        k for k in range(distance - 1) if cell_type(*adjacent_cell(distance, side, k)) != spec
    )
