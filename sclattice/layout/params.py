"""Layout parameters, visibility flags and their validation.

Both records are immutable. Construction validates every field and raises
:class:`~sclattice.exceptions.InvalidParameterError` naming the first invalid
field, so an instance that exists is always usable by the generator.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sclattice.consts import DEFAULT_BOUNDARY, BoundarySide, EdgeSpecValue, PlaceholderMode, PlaceholderView
from sclattice.consts.consts import (
    DEFAULT_CELL_SIZE,
    DEFAULT_COLS_PER_ROW,
    DEFAULT_DISTANCE,
    DEFAULT_GAP,
    DEFAULT_QUBIT_SIZE,
    DEFAULT_ROWS,
    DEFAULT_STABILIZER_SIZE,
    MIN_DISTANCE,
)
from sclattice.exceptions import InvalidParameterError

_BOUNDARY_STRING_ORDER = (BoundarySide.TOP, BoundarySide.BOTTOM, BoundarySide.LEFT, BoundarySide.RIGHT)


def check_distance(distance: int) -> None:
    if not _is_int(distance) or distance < MIN_DISTANCE or distance % 2 == 0:
        msg = f"distance must be odd and >= {MIN_DISTANCE}, got {distance!r}"
        raise InvalidParameterError("distance", msg)


def check_positive(name: str, value: int) -> None:
    if not _is_int(value) or value < 1:
        msg = f"{name} must be a positive integer, got {value!r}"
        raise InvalidParameterError(name, msg)


def check_non_negative(name: str, value: int) -> None:
    if not _is_int(value) or value < 0:
        msg = f"{name} must be a non-negative integer, got {value!r}"
        raise InvalidParameterError(name, msg)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_edge_spec(value: object) -> EdgeSpecValue:
    if isinstance(value, EdgeSpecValue):
        return value
    try:
        return EdgeSpecValue(str(value).upper())
    except ValueError:
        msg = f"boundary type must be one of X, Z, O, got {value!r}"
        raise InvalidParameterError("boundary", msg) from None


def _parse_side(value: object) -> BoundarySide:
    if isinstance(value, BoundarySide):
        return value
    try:
        return BoundarySide(str(value).upper())
    except ValueError:
        msg = f"boundary side must be one of TOP, BOTTOM, LEFT, RIGHT, got {value!r}"
        raise InvalidParameterError("boundary", msg) from None


def parse_boundary(spec: object | None) -> dict[BoundarySide, EdgeSpecValue]:
    """Normalize a boundary specification.

    Parameters
    ----------
    spec : object | None
        ``None`` for the default (X on top/bottom, Z on left/right), a
        four-character string in TOP, BOTTOM, LEFT, RIGHT order such as
        ``"XXZZ"``, or a mapping from side to boundary type. Missing sides
        in a mapping fall back to the default.

    Returns
    -------
    dict[BoundarySide, EdgeSpecValue]
        Boundary type for each of the four sides.

    Raises
    ------
    InvalidParameterError
        If the string has the wrong length or contains unknown characters.
    """
    if spec is None:
        return dict(DEFAULT_BOUNDARY)

    # String form e.g., "XXZZ" (T, B, L, R)
    if isinstance(spec, str):
        cleaned = spec.strip().replace(" ", "")
        if len(cleaned) != len(_BOUNDARY_STRING_ORDER):
            msg = f"boundary string must have 4 chars (T,B,L,R order), got: {spec!r}"
            raise InvalidParameterError("boundary", msg)
        return {side: _parse_edge_spec(ch) for side, ch in zip(_BOUNDARY_STRING_ORDER, cleaned, strict=True)}

    if isinstance(spec, Mapping):
        result = dict(DEFAULT_BOUNDARY)
        for key, value in spec.items():
            result[_parse_side(key)] = _parse_edge_spec(value)
        return result

    msg = f"boundary must be a string or mapping, got {type(spec).__name__}"
    raise InvalidParameterError("boundary", msg)


def boundary_to_string(boundary: Mapping[BoundarySide, EdgeSpecValue]) -> str:
    """Encode a boundary mapping as a T,B,L,R string (inverse of :func:`parse_boundary`)."""
    return "".join(boundary[side].value for side in _BOUNDARY_STRING_ORDER)


@dataclass(frozen=True)
class LayoutParams:
    """Geometry of a multi-patch surface code layout.

    Attributes
    ----------
    cell_size : int
        Edge length of one stabilizer plaquette in pixels.
    qubit_size : int
        Diameter of a data qubit marker.
    stabilizer_size : int
        Diameter of stabilizer, boundary and placeholder markers.
    gap : int
        Space between neighbouring patches.
    distance : int
        Code distance of every patch (odd, >= 3).
    rows : int
        Number of patch rows.
    cols_per_row : int
        Number of patches per row.
    boundary : Mapping[BoundarySide, EdgeSpecValue]
        Boundary type of each patch side (read-only view).
    """

    cell_size: int = DEFAULT_CELL_SIZE
    qubit_size: int = DEFAULT_QUBIT_SIZE
    stabilizer_size: int = DEFAULT_STABILIZER_SIZE
    gap: int = DEFAULT_GAP
    distance: int = DEFAULT_DISTANCE
    rows: int = DEFAULT_ROWS
    cols_per_row: int = DEFAULT_COLS_PER_ROW
    boundary: Mapping[BoundarySide, EdgeSpecValue] = field(default_factory=lambda: dict(DEFAULT_BOUNDARY), hash=False)

    def __post_init__(self) -> None:
        check_distance(self.distance)
        for name in ("cell_size", "qubit_size", "stabilizer_size", "gap", "rows", "cols_per_row"):
            check_positive(name, getattr(self, name))
        object.__setattr__(self, "boundary", MappingProxyType(parse_boundary(self.boundary)))

    @property
    def logical_qubits(self) -> int:
        return self.rows * self.cols_per_row

    @property
    def patch_step(self) -> int:
        """Offset between neighbouring patch origins."""
        return (self.distance - 1) * self.cell_size + self.gap


@dataclass(frozen=True)
class VisibilityFlags:
    """Which optional layers a layout includes.

    Attributes
    ----------
    view : PlaceholderView
        Lattice and/or placeholder selection.
    placeholder_mode : PlaceholderMode
        Where placeholders are tiled.
    placeholder_count : int | None
        Number of placeholders. ``None`` means 16 per logical qubit.
    """

    view: PlaceholderView = PlaceholderView.HIDE_PLACEHOLDERS
    placeholder_mode: PlaceholderMode = PlaceholderMode.GRID_BESIDE
    placeholder_count: int | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "view", PlaceholderView(self.view))
        except ValueError:
            msg = f"view must be one of {[v.value for v in PlaceholderView]}, got {self.view!r}"
            raise InvalidParameterError("view", msg) from None
        try:
            object.__setattr__(self, "placeholder_mode", PlaceholderMode(self.placeholder_mode))
        except ValueError:
            msg = f"placeholder_mode must be one of {[m.value for m in PlaceholderMode]}, got {self.placeholder_mode!r}"
            raise InvalidParameterError("placeholder_mode", msg) from None
        if self.placeholder_count is not None:
            check_non_negative("placeholder_count", self.placeholder_count)

    @property
    def show_lattice(self) -> bool:
        return self.view != PlaceholderView.ONLY_PLACEHOLDERS

    @property
    def show_placeholders(self) -> bool:
        return self.view != PlaceholderView.HIDE_PLACEHOLDERS
