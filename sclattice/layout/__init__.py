"""Surface code lattice layout generator."""

from sclattice.layout.boundary import adjacent_cell, boundary_triangle_positions, cell_type
from sclattice.layout.elements import STYLE_MAP, Element, build_patch_elements, make_element
from sclattice.layout.lattice import LayoutResult, bounding_box, compute_layout, layout_patches
from sclattice.layout.params import LayoutParams, VisibilityFlags, boundary_to_string, parse_boundary
from sclattice.layout.patches import Patch, build_patches
from sclattice.layout.placeholders import build_placeholders

__all__ = [
    "STYLE_MAP",
    "Element",
    "LayoutParams",
    "LayoutResult",
    "Patch",
    "VisibilityFlags",
    "adjacent_cell",
    "boundary_to_string",
    "boundary_triangle_positions",
    "bounding_box",
    "build_patch_elements",
    "build_patches",
    "build_placeholders",
    "cell_type",
    "compute_layout",
    "layout_patches",
    "make_element",
    "parse_boundary",
]
