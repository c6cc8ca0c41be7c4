# This module stores constants shared by the layout generator and its renderers

from __future__ import annotations

import enum

# Default geometry (pixels)
DEFAULT_CELL_SIZE = 100
DEFAULT_QUBIT_SIZE = 24
DEFAULT_STABILIZER_SIZE = 32
DEFAULT_GAP = 120
DEFAULT_DISTANCE = 5
DEFAULT_ROWS = 2
DEFAULT_COLS_PER_ROW = 4

MIN_DISTANCE = 3

# Placeholder ("unused circuit") layer
UNUSED_PER_LOGICAL = 16
PLACEHOLDER_GRID_COLUMNS = 8
PLACEHOLDER_SCATTER_COLUMNS = 40
PLACEHOLDER_MARGIN = 150
PLACEHOLDER_SPACING = 40
PLACEHOLDER_TOP = 100
SCATTER_PADDING = 300

# Colors
X_COLOR = "#fca5a5"
Z_COLOR = "#86efac"
MEASUREMENT_COLOR = "#64748b"
DATA_COLOR = "#ffffff"
DATA_BORDER = "3px solid #1e293b"
PLACEHOLDER_BORDER = "1.5px dashed #e2e8f0"

# Triangle clip paths as (x, y) fractions of the element box
TRIANGLE_UP: tuple[tuple[float, float], ...] = ((0.0, 1.0), (0.5, 0.0), (1.0, 1.0))
TRIANGLE_DOWN: tuple[tuple[float, float], ...] = ((0.0, 0.0), (0.5, 1.0), (1.0, 0.0))
TRIANGLE_LEFT: tuple[tuple[float, float], ...] = ((1.0, 0.0), (0.0, 0.5), (1.0, 1.0))
TRIANGLE_RIGHT: tuple[tuple[float, float], ...] = ((0.0, 0.0), (1.0, 0.5), (0.0, 1.0))


# ---------------------------------------------------------------------
# Type-safe string enums for constants used across the codebase
# Using str mixin allows enums to be used in string contexts
# ---------------------------------------------------------------------


class ElementKind(str, enum.Enum):  # noqa: UP042
    """Kind of a positioned lattice element.

    DATA_QUBIT: Data qubit at a lattice vertex
    X_STABILIZER: X-type stabilizer measurement marker
    Z_STABILIZER: Z-type stabilizer measurement marker
    BOUNDARY_QUBIT: Measurement marker just outside a patch edge
    BACKGROUND_CELL: Colored plaquette behind a bulk stabilizer
    BOUNDARY_TRIANGLE: Weight-2 boundary stabilizer wedge
    UNUSED_PLACEHOLDER: Decorative unused circuit marker
    """

    DATA_QUBIT = "data-qubit"
    X_STABILIZER = "x-stabilizer"
    Z_STABILIZER = "z-stabilizer"
    BOUNDARY_QUBIT = "boundary-qubit"
    BACKGROUND_CELL = "stabilizer-bg"
    BOUNDARY_TRIANGLE = "boundary-triangle"
    UNUSED_PLACEHOLDER = "unused-placeholder"


class ElementShape(str, enum.Enum):  # noqa: UP042
    """Drawing primitive for an element."""

    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class EdgeSpecValue(str, enum.Enum):  # noqa: UP042
    """Boundary type of a patch side.

    X: X-type boundary (X weight-2 stabilizers on this side)
    Z: Z-type boundary (Z weight-2 stabilizers on this side)
    O: Open boundary (no boundary stabilizers)
    """

    X = "X"
    Z = "Z"
    O = "O"  # noqa: E741


class BoundarySide(str, enum.Enum):  # noqa: UP042
    """Spatial boundary sides for patch edges."""

    TOP = "TOP"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class PlaceholderMode(str, enum.Enum):  # noqa: UP042
    """Where the placeholder layer is tiled relative to the lattice.

    GRID_BELOW: Grid below the lattice bounding box
    GRID_BESIDE: Grid to the right of the lattice bounding box
    BACKGROUND_SCATTER: Evenly spread across the lattice bounding box
    """

    GRID_BELOW = "grid_below"
    GRID_BESIDE = "grid_beside"
    BACKGROUND_SCATTER = "background_scatter"


class PlaceholderView(str, enum.Enum):  # noqa: UP042
    """Which layers a layout includes.

    SHOW_ALL: Lattice and placeholders
    ONLY_PLACEHOLDERS: Placeholders only
    HIDE_PLACEHOLDERS: Lattice only
    """

    SHOW_ALL = "show_all"
    ONLY_PLACEHOLDERS = "only_placeholders"
    HIDE_PLACEHOLDERS = "hide_placeholders"


DEFAULT_BOUNDARY: dict[BoundarySide, EdgeSpecValue] = {
    BoundarySide.TOP: EdgeSpecValue.X,
    BoundarySide.BOTTOM: EdgeSpecValue.X,
    BoundarySide.LEFT: EdgeSpecValue.Z,
    BoundarySide.RIGHT: EdgeSpecValue.Z,
}

# Stacking order used by renderers
Z_INDEX: dict[ElementKind, int] = {
    ElementKind.BACKGROUND_CELL: 1,
    ElementKind.BOUNDARY_TRIANGLE: 1,
    ElementKind.BOUNDARY_QUBIT: 5,
    ElementKind.X_STABILIZER: 10,
    ElementKind.Z_STABILIZER: 10,
    ElementKind.DATA_QUBIT: 20,
    ElementKind.UNUSED_PLACEHOLDER: -10,
}
