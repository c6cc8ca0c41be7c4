"""Positioned lattice elements and the single-patch element builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

from sclattice.consts import Z_INDEX, BoundarySide, EdgeSpecValue, ElementKind, ElementShape
from sclattice.consts.consts import (
    DATA_BORDER,
    DATA_COLOR,
    MEASUREMENT_COLOR,
    PLACEHOLDER_BORDER,
    TRIANGLE_DOWN,
    TRIANGLE_LEFT,
    TRIANGLE_RIGHT,
    TRIANGLE_UP,
    X_COLOR,
    Z_COLOR,
)
from sclattice.layout.boundary import boundary_triangle_positions, cell_type
from sclattice.layout.params import LayoutParams, check_distance
from sclattice.mytype import Coord2D

if TYPE_CHECKING:
    from sclattice.layout.patches import Patch
    from sclattice.mytype import FracPoint


class ElementStyleSpec(TypedDict):
    """Style specification for an element kind.

    Attributes
    ----------
    color : str
        Fill color.
    border : str | None
        CSS-like border, ``None`` for no border.
    shape : ElementShape
        Drawing primitive.
    opacity : float
        Fill opacity (0.0 to 1.0).
    label : str
        Display label for legends.
    """

    color: str
    border: str | None
    shape: ElementShape
    opacity: float
    label: str


STYLE_MAP: dict[ElementKind, ElementStyleSpec] = {
    ElementKind.DATA_QUBIT: {
        "color": DATA_COLOR,
        "border": DATA_BORDER,
        "shape": ElementShape.CIRCLE,
        "opacity": 1.0,
        "label": "Data qubit",
    },
    ElementKind.X_STABILIZER: {
        "color": MEASUREMENT_COLOR,
        "border": None,
        "shape": ElementShape.CIRCLE,
        "opacity": 1.0,
        "label": "X stabilizer",
    },
    ElementKind.Z_STABILIZER: {
        "color": MEASUREMENT_COLOR,
        "border": None,
        "shape": ElementShape.CIRCLE,
        "opacity": 1.0,
        "label": "Z stabilizer",
    },
    ElementKind.BOUNDARY_QUBIT: {
        "color": MEASUREMENT_COLOR,
        "border": None,
        "shape": ElementShape.CIRCLE,
        "opacity": 1.0,
        "label": "Boundary qubit",
    },
    ElementKind.BACKGROUND_CELL: {
        "color": X_COLOR,
        "border": None,
        "shape": ElementShape.SQUARE,
        "opacity": 1.0,
        "label": "Stabilizer plaquette",
    },
    ElementKind.BOUNDARY_TRIANGLE: {
        "color": X_COLOR,
        "border": None,
        "shape": ElementShape.TRIANGLE,
        "opacity": 1.0,
        "label": "Boundary stabilizer",
    },
    ElementKind.UNUSED_PLACEHOLDER: {
        "color": "transparent",
        "border": PLACEHOLDER_BORDER,
        "shape": ElementShape.CIRCLE,
        "opacity": 0.35,
        "label": "Unused circuit",
    },
}

STABILIZER_COLORS: dict[EdgeSpecValue, str] = {
    EdgeSpecValue.X: X_COLOR,
    EdgeSpecValue.Z: Z_COLOR,
}

_TRIANGLE_CLIP: dict[BoundarySide, tuple[FracPoint, ...]] = {
    BoundarySide.TOP: TRIANGLE_UP,
    BoundarySide.BOTTOM: TRIANGLE_DOWN,
    BoundarySide.LEFT: TRIANGLE_LEFT,
    BoundarySide.RIGHT: TRIANGLE_RIGHT,
}

_SIDES = (BoundarySide.TOP, BoundarySide.BOTTOM, BoundarySide.LEFT, BoundarySide.RIGHT)


@dataclass(frozen=True, slots=True)
class Element:
    """A positioned, typed shape ready to be drawn.

    ``(x, y)`` is the top-left corner of the element box in canvas pixels,
    with y growing downwards.
    """

    id: str
    kind: ElementKind
    x: float
    y: float
    width: float
    height: float
    color: str
    shape: ElementShape
    z_index: int
    border: str | None = None
    opacity: float = 1.0
    clip_path: tuple[FracPoint, ...] | None = None
    patch: int | None = None
    side: BoundarySide | None = None

    @property
    def center(self) -> Coord2D:
        return Coord2D(self.x + self.width / 2, self.y + self.height / 2)

    def polygon(self) -> list[Coord2D]:
        """Absolute vertices of the clip path (the box corners when unclipped)."""
        if self.clip_path is None:
            return [
                Coord2D(self.x, self.y),
                Coord2D(self.x + self.width, self.y),
                Coord2D(self.x + self.width, self.y + self.height),
                Coord2D(self.x, self.y + self.height),
            ]
        return [Coord2D(self.x + fx * self.width, self.y + fy * self.height) for fx, fy in self.clip_path]

    def clip_path_css(self) -> str | None:
        """Clip path as a CSS ``polygon(...)`` string."""
        if self.clip_path is None:
            return None
        points = ", ".join(f"{_pct(fx)} {_pct(fy)}" for fx, fy in self.clip_path)
        return f"polygon({points})"


def _pct(frac: float) -> str:
    return f"{frac * 100:g}%"


def make_element(
    id_: str,
    kind: ElementKind,
    x: float,
    y: float,
    width: float,
    height: float,
    *,
    color: str | None = None,
    clip_path: tuple[FracPoint, ...] | None = None,
    patch: int | None = None,
    side: BoundarySide | None = None,
) -> Element:
    """Create an element with the default style of ``kind``."""
    spec = STYLE_MAP[kind]
    return Element(
        id=id_,
        kind=kind,
        x=x,
        y=y,
        width=width,
        height=height,
        color=spec["color"] if color is None else color,
        shape=spec["shape"],
        z_index=Z_INDEX[kind],
        border=spec["border"],
        opacity=spec["opacity"],
        clip_path=clip_path,
        patch=patch,
        side=side,
    )


def _marker(
    id_: str,
    kind: ElementKind,
    cx: float,
    cy: float,
    size: int,
    index: int,
    side: BoundarySide | None = None,
) -> Element:
    return make_element(id_, kind, cx - size / 2, cy - size / 2, size, size, patch=index, side=side)


def _boundary_center(patch: Patch, side: BoundarySide, k: int, cell: int) -> Coord2D:
    """Center of the boundary position ``k`` half a cell beyond ``side``."""
    ox, oy, n = patch.offset_x, patch.offset_y, patch.cells
    along = k * cell + cell / 2
    match side:
        case BoundarySide.TOP:
            return Coord2D(ox + along, oy - cell / 2)
        case BoundarySide.BOTTOM:
            return Coord2D(ox + along, oy + n * cell + cell / 2)
        case BoundarySide.LEFT:
            return Coord2D(ox - cell / 2, oy + along)
        case _:
            return Coord2D(ox + n * cell + cell / 2, oy + along)


def _triangle_box(patch: Patch, side: BoundarySide, k: int, cell: int) -> tuple[float, float, float, float]:
    ox, oy, n = patch.offset_x, patch.offset_y, patch.cells
    match side:
        case BoundarySide.TOP:
            return ox + k * cell, oy - cell / 2, cell, cell / 2
        case BoundarySide.BOTTOM:
            return ox + k * cell, oy + n * cell, cell, cell / 2
        case BoundarySide.LEFT:
            return ox - cell / 2, oy + k * cell, cell / 2, cell
        case _:
            return ox + n * cell, oy + k * cell, cell / 2, cell


def build_patch_elements(patch: Patch, index: int, params: LayoutParams | None = None) -> tuple[Element, ...]:
    """Generate every element of one patch.

    Parameters
    ----------
    patch : Patch
        Patch to render; its distance overrides ``params.distance``.
    index : int
        Ordinal of the patch in the layout, embedded in every element id.
    params : LayoutParams | None
        Sizes and boundary types. Defaults to the standard sizes with the
        default boundary.

    Returns
    -------
    tuple[Element, ...]
        Background cells and stabilizers (interleaved per plaquette), data
        qubits, boundary qubits, then boundary triangles each followed by the
        boundary qubit on its outer vertex.
    """
    check_distance(patch.distance)
    if params is None:
        params = LayoutParams(distance=patch.distance)
    cell = params.cell_size
    qsize = params.qubit_size
    ssize = params.stabilizer_size
    ox, oy, n = patch.offset_x, patch.offset_y, patch.cells
    elements: list[Element] = []

    def eid(base: str, r: int, c: int) -> str:
        return f"{base}-{index}-{r}-{c}"

    # Plaquettes and their stabilizer markers
    for r in range(n):
        for c in range(n):
            x = ox + c * cell
            y = oy + r * cell
            is_x = cell_type(r, c) == EdgeSpecValue.X
            elements.append(
                make_element(
                    eid("bg", r, c),
                    ElementKind.BACKGROUND_CELL,
                    x,
                    y,
                    cell,
                    cell,
                    color=X_COLOR if is_x else Z_COLOR,
                    patch=index,
                )
            )
            kind = ElementKind.X_STABILIZER if is_x else ElementKind.Z_STABILIZER
            elements.append(_marker(eid("stab", r, c), kind, x + cell / 2, y + cell / 2, ssize, index))

    # Data qubits on the vertices
    for r in range(n + 1):
        for c in range(n + 1):
            elements.append(_marker(eid("data", r, c), ElementKind.DATA_QUBIT, ox + c * cell, oy + r * cell, qsize, index))

    # Boundary qubits, one per boundary cell on every side
    for k in range(n):
        for side in (BoundarySide.TOP, BoundarySide.BOTTOM):
            cx, cy = _boundary_center(patch, side, k, cell)
            elements.append(_boundary_qubit(side, index, k, cx, cy, ssize))
    for k in range(n):
        for side in (BoundarySide.LEFT, BoundarySide.RIGHT):
            cx, cy = _boundary_center(patch, side, k, cell)
            elements.append(_boundary_qubit(side, index, k, cx, cy, ssize))

    # Weight-2 boundary stabilizers
    for side in _SIDES:
        spec = params.boundary[side]
        name = side.value.lower()
        for k in sorted(boundary_triangle_positions(patch.distance, side, params.boundary)):
            x, y, w, h = _triangle_box(patch, side, k, cell)
            elements.append(
                make_element(
                    f"tri-{name}-{index}-{k}",
                    ElementKind.BOUNDARY_TRIANGLE,
                    x,
                    y,
                    w,
                    h,
                    color=STABILIZER_COLORS[spec],
                    clip_path=_TRIANGLE_CLIP[side],
                    patch=index,
                    side=side,
                )
            )
            cx, cy = _boundary_center(patch, side, k, cell)
            elements.append(
                _marker(f"boundary-{name}-apex-{index}-{k}", ElementKind.BOUNDARY_QUBIT, cx, cy, ssize, index, side)
            )

    return tuple(elements)


def _boundary_qubit(side: BoundarySide, index: int, k: int, cx: float, cy: float, size: int) -> Element:
    return _marker(f"boundary-{side.value.lower()}-{index}-{k}", ElementKind.BOUNDARY_QUBIT, cx, cy, size, index, side)
