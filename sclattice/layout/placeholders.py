"""Decorative "unused circuit" placeholder layer."""

from __future__ import annotations

import math
from dataclasses import replace

from sclattice.consts import ElementKind, PlaceholderMode
from sclattice.consts.consts import (
    DEFAULT_STABILIZER_SIZE,
    MEASUREMENT_COLOR,
    PLACEHOLDER_GRID_COLUMNS,
    PLACEHOLDER_MARGIN,
    PLACEHOLDER_SCATTER_COLUMNS,
    PLACEHOLDER_SPACING,
    PLACEHOLDER_TOP,
)
from sclattice.exceptions import InvalidParameterError
from sclattice.layout.elements import Element, make_element
from sclattice.layout.params import check_non_negative, check_positive


def build_placeholders(
    count: int,
    anchor_width: float,
    anchor_height: float,
    mode: PlaceholderMode | str,
    *,
    marker_size: int = DEFAULT_STABILIZER_SIZE,
    columns: int | None = None,
) -> tuple[Element, ...]:
    """Tile ``count`` placeholder markers around or across an anchor box.

    Parameters
    ----------
    count : int
        Number of placeholders (>= 0).
    anchor_width, anchor_height : float
        Size of the box the layer is anchored to, usually the lattice
        bounding box.
    mode : PlaceholderMode | str
        ``grid_beside`` starts ``150`` px right of the box, ``grid_below``
        ``150`` px below it; both use a fixed pitch of marker + 40 px.
        ``background_scatter`` spreads the markers evenly over the box.
    marker_size : int
        Marker diameter.
    columns : int | None
        Column count; 8 for grid modes and 40 for the scatter by default.

    Returns
    -------
    tuple[Element, ...]
        Placeholders in row-major order. Their negative z-index keeps them
        below every lattice element.
    """
    try:
        mode = PlaceholderMode(mode)
    except ValueError:
        msg = f"placeholder mode must be one of {[m.value for m in PlaceholderMode]}, got {mode!r}"
        raise InvalidParameterError("placeholder_mode", msg) from None
    check_non_negative("placeholder_count", count)
    check_positive("marker_size", marker_size)
    if anchor_width < 0 or anchor_height < 0:
        msg = f"anchor box must have non-negative size, got {anchor_width}x{anchor_height}"
        raise InvalidParameterError("anchor", msg)
    if columns is not None:
        check_positive("columns", columns)
    if count == 0:
        return ()

    if mode == PlaceholderMode.BACKGROUND_SCATTER:
        cols = columns or PLACEHOLDER_SCATTER_COLUMNS
        rows = math.ceil(count / cols)
        spacing_x = anchor_width / cols
        spacing_y = anchor_height / rows
        return tuple(
            make_element(
                f"unused-bg-{i}",
                ElementKind.UNUSED_PLACEHOLDER,
                (i % cols) * spacing_x,
                (i // cols) * spacing_y,
                marker_size,
                marker_size,
            )
            for i in range(count)
        )

    cols = columns or PLACEHOLDER_GRID_COLUMNS
    pitch = marker_size + PLACEHOLDER_SPACING
    if mode == PlaceholderMode.GRID_BESIDE:
        start_x, start_y = anchor_width + PLACEHOLDER_MARGIN, PLACEHOLDER_TOP
    else:
        start_x, start_y = 0, anchor_height + PLACEHOLDER_MARGIN

    placeholders = []
    for i in range(count):
        row, col = divmod(i, cols)
        element = make_element(
            f"unused-{i}",
            ElementKind.UNUSED_PLACEHOLDER,
            start_x + col * pitch,
            start_y + row * pitch,
            marker_size,
            marker_size,
        )
        # Grid placeholders read as dimmed measurement markers
        placeholders.append(replace(element, color=MEASUREMENT_COLOR, border=None, opacity=0.5))
    return tuple(placeholders)
