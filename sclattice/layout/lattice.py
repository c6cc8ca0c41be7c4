"""Layout orchestration: patches, elements, bounding box, placeholders and stats."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sclattice.consts import UNUSED_PER_LOGICAL, PlaceholderMode
from sclattice.consts.consts import SCATTER_PADDING
from sclattice.layout.elements import Element, build_patch_elements
from sclattice.layout.params import LayoutParams, VisibilityFlags, boundary_to_string
from sclattice.layout.patches import Patch, build_patches
from sclattice.layout.placeholders import build_placeholders
from sclattice.stats import LayoutStats

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    """Complete positioned element list of a layout.

    Attributes
    ----------
    elements : tuple[Element, ...]
        Elements in generation order (patch by patch, then placeholders).
    total_width, total_height : float
        Lattice bounding box used to anchor the placeholder layer.
    stats : LayoutStats
        Closed-form summary.
    """

    elements: tuple[Element, ...]
    total_width: float
    total_height: float
    stats: LayoutStats

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def ids(self) -> list[str]:
        return [e.id for e in self.elements]

    def by_id(self, element_id: str) -> Element:
        for element in self.elements:
            if element.id == element_id:
                return element
        msg = f"No element with id {element_id!r}"
        raise KeyError(msg)


def bounding_box(elements: Iterable[Element], cell_size: int) -> tuple[float, float]:
    """Return ``(max x + cell_size, max y + cell_size)`` over ``elements``."""
    elements = list(elements)
    if not elements:
        return 0.0, 0.0
    width = max(e.x for e in elements) + cell_size
    height = max(e.y for e in elements) + cell_size
    return width, height


def layout_patches(params: LayoutParams) -> tuple[Patch, ...]:
    return build_patches(params.rows, params.cols_per_row, params.distance, params.cell_size, params.gap)


def compute_layout(params: LayoutParams | None = None, visibility: VisibilityFlags | None = None) -> LayoutResult:
    """Compute the full element list of a multi-patch surface code layout.

    Parameters
    ----------
    params : LayoutParams | None
        Geometry; defaults to ``LayoutParams()``.
    visibility : VisibilityFlags | None
        Layer selection; defaults to the lattice without placeholders.

    Returns
    -------
    LayoutResult
        A fresh result; equal inputs give equal results.

    Raises
    ------
    InvalidParameterError
        Raised while constructing ``params``/``visibility`` or while building
        patches, always before any element is produced.
    """
    if params is None:
        params = LayoutParams()
    if visibility is None:
        visibility = VisibilityFlags()

    patches = layout_patches(params)
    lattice: list[Element] = []
    for index, patch in enumerate(patches):
        lattice.extend(build_patch_elements(patch, index, params))

    width, height = bounding_box(lattice, params.cell_size)
    count = visibility.placeholder_count
    if count is None:
        count = UNUSED_PER_LOGICAL * len(patches)

    elements: list[Element] = lattice if visibility.show_lattice else []
    if visibility.show_placeholders:
        anchor_w, anchor_h = width, height
        if visibility.placeholder_mode == PlaceholderMode.BACKGROUND_SCATTER:
            anchor_w, anchor_h = width + SCATTER_PADDING, height + SCATTER_PADDING
        elements = elements + list(
            build_placeholders(
                count,
                anchor_w,
                anchor_h,
                visibility.placeholder_mode,
                marker_size=params.stabilizer_size,
            )
        )

    stats = LayoutStats.from_layout(
        distance=params.distance,
        rows=params.rows,
        cols_per_row=params.cols_per_row,
        view=visibility.view,
        placeholders=count,
        boundary=params.boundary,
    )
    logger.debug(
        "Computed layout d=%d %dx%d boundary=%s view=%s: %d elements, bbox %.0fx%.0f",
        params.distance,
        params.rows,
        params.cols_per_row,
        boundary_to_string(params.boundary),
        visibility.view.value,
        len(elements),
        width,
        height,
    )
    return LayoutResult(elements=tuple(elements), total_width=width, total_height=height, stats=stats)
