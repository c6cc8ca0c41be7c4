"""Constants used across sclattice.

Expose constant enums and tables from `consts.py`.
"""

from __future__ import annotations

from sclattice.consts.consts import (
    DEFAULT_BOUNDARY,
    UNUSED_PER_LOGICAL,
    Z_INDEX,
    BoundarySide,
    EdgeSpecValue,
    ElementKind,
    ElementShape,
    PlaceholderMode,
    PlaceholderView,
)

__all__ = [
    "DEFAULT_BOUNDARY",
    "UNUSED_PER_LOGICAL",
    "Z_INDEX",
    "BoundarySide",
    "EdgeSpecValue",
    "ElementKind",
    "ElementShape",
    "PlaceholderMode",
    "PlaceholderView",
]
