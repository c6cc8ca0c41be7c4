"""Placement of logical-qubit patches on the canvas."""

from __future__ import annotations

from dataclasses import dataclass

from sclattice.layout.params import check_distance, check_positive


@dataclass(frozen=True, slots=True)
class Patch:
    """One logical qubit's lattice instance.

    Attributes
    ----------
    offset_x : int
        x coordinate of the patch's top-left data qubit.
    offset_y : int
        y coordinate of the patch's top-left data qubit.
    distance : int
        Code distance of the patch.
    row : int
        Row of the patch in the patch grid.
    col : int
        Column of the patch in the patch grid.
    """

    offset_x: int
    offset_y: int
    distance: int
    row: int = 0
    col: int = 0

    @property
    def cells(self) -> int:
        """Number of bulk plaquettes along one side."""
        return self.distance - 1


def build_patches(rows: int, cols_per_row: int, distance: int, cell_size: int, gap: int) -> tuple[Patch, ...]:
    """Lay out ``rows * cols_per_row`` patches in row-major order.

    Patch ``(row, col)`` sits at ``(col * step, row * step)`` with
    ``step = (distance - 1) * cell_size + gap``, so neighbouring patches are
    separated by exactly ``gap`` pixels and never overlap.

    Parameters
    ----------
    rows : int
        Number of patch rows (>= 1).
    cols_per_row : int
        Number of patches per row (>= 1).
    distance : int
        Code distance (odd, >= 3).
    cell_size : int
        Plaquette edge length (>= 1).
    gap : int
        Spacing between patches (>= 1).

    Returns
    -------
    tuple[Patch, ...]
        Patches in row-major order.

    Raises
    ------
    InvalidParameterError
        If any argument violates its constraint.
    """
    check_distance(distance)
    check_positive("rows", rows)
    check_positive("cols_per_row", cols_per_row)
    check_positive("cell_size", cell_size)
    check_positive("gap", gap)

    step = (distance - 1) * cell_size + gap
    return tuple(
        Patch(offset_x=col * step, offset_y=row * step, distance=distance, row=row, col=col)
        for row in range(rows)
        for col in range(cols_per_row)
    )
