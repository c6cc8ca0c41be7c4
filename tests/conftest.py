from __future__ import annotations

import matplotlib
import pytest

from sclattice.layout import LayoutParams, LayoutResult, VisibilityFlags, compute_layout

# Headless rendering for visualizer tests
matplotlib.use("Agg")


@pytest.fixture
def d3_params() -> LayoutParams:
    return LayoutParams(distance=3, rows=2, cols_per_row=4, gap=180)


@pytest.fixture
def d5_params() -> LayoutParams:
    return LayoutParams(distance=5, rows=2, cols_per_row=4, gap=120)


@pytest.fixture
def small_result() -> LayoutResult:
    """A 1x2 distance-3 layout with placeholders beside it."""
    return compute_layout(
        LayoutParams(distance=3, rows=1, cols_per_row=2),
        VisibilityFlags(view="show_all", placeholder_count=4),
    )
