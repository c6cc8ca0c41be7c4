"""Tests for the layout orchestrator."""

from __future__ import annotations

import logging

import pytest

from sclattice.consts import ElementKind, PlaceholderMode, PlaceholderView
from sclattice.exceptions import InvalidParameterError
from sclattice.layout import LayoutParams, LayoutResult, VisibilityFlags, bounding_box, compute_layout
from sclattice.stats import tally_elements
from sclattice.testing import LayoutFingerprint

# =============================================================================
# Reference layouts
# =============================================================================


class TestDistanceFiveGrid:
    """Eight distance-5 patches in two rows of four."""

    def test_element_count(self, d5_params: LayoutParams) -> None:
        result = compute_layout(d5_params)
        assert len(result) == 8 * 89

    def test_totals(self, d5_params: LayoutParams) -> None:
        result = compute_layout(d5_params)
        tally = tally_elements(result.elements)
        assert tally[ElementKind.DATA_QUBIT] == 200
        assert tally[ElementKind.X_STABILIZER] + tally[ElementKind.Z_STABILIZER] == 128
        assert result.stats.total_data_qubits == 200
        assert result.stats.total_stabilizers == 128

    def test_bounding_box(self, d5_params: LayoutParams) -> None:
        result = compute_layout(d5_params)
        # Rightmost boundary qubit at x=1994, lowest at y=954, plus one cell
        assert result.total_width == 2094
        assert result.total_height == 1054

    def test_grid_beside_placeholders(self, d5_params: LayoutParams) -> None:
        result = compute_layout(d5_params, VisibilityFlags(view=PlaceholderView.SHOW_ALL, placeholder_count=16))
        placeholders = [e for e in result.elements if e.kind == ElementKind.UNUSED_PLACEHOLDER]
        assert len(placeholders) == 16
        assert (placeholders[0].x, placeholders[0].y) == (2094 + 150, 100)
        assert result.elements[-16:] == tuple(placeholders)


class TestDistanceThreeGrid:
    """Eight distance-3 patches over a background scatter."""

    def test_counts(self, d3_params: LayoutParams) -> None:
        result = compute_layout(d3_params)
        assert len(result) == 8 * 33
        stats = result.stats
        assert stats.logical_qubits == 8
        assert stats.total_data_qubits == 72
        assert stats.per_patch.ancilla_qubits == 8
        assert stats.per_patch.x_ancilla_qubits == 4
        assert stats.per_patch.z_ancilla_qubits == 4
        assert stats.per_patch.stabilizers == 4
        assert stats.total_physical_qubits == 136

    def test_bounding_box(self, d3_params: LayoutParams) -> None:
        result = compute_layout(d3_params)
        assert (result.total_width, result.total_height) == (1474, 714)

    def test_background_scatter(self, d3_params: LayoutParams) -> None:
        visibility = VisibilityFlags(view="show_all", placeholder_mode=PlaceholderMode.BACKGROUND_SCATTER)
        result = compute_layout(d3_params, visibility)
        placeholders = [e for e in result.elements if e.kind == ElementKind.UNUSED_PLACEHOLDER]
        # Default of 16 per logical qubit
        assert len(placeholders) == 128
        assert placeholders[0].id == "unused-bg-0"
        # Spread over the bounding box padded by 300
        assert placeholders[1].x == pytest.approx((1474 + 300) / 40)
        assert placeholders[40].y == pytest.approx((714 + 300) / 4)
        assert all(e.z_index < 0 for e in placeholders)


# =============================================================================
# Views and stats
# =============================================================================


class TestViews:
    """Tests for the three layer selections."""

    def test_default_view_hides_placeholders(self) -> None:
        result = compute_layout()
        assert all(e.kind != ElementKind.UNUSED_PLACEHOLDER for e in result.elements)
        assert result.stats.placeholders == 0

    def test_only_placeholders(self) -> None:
        result = compute_layout(LayoutParams(distance=3), VisibilityFlags(view="only_placeholders"))
        assert len(result) == 128
        assert {e.kind for e in result.elements} == {ElementKind.UNUSED_PLACEHOLDER}
        # The anchor box still comes from the lattice
        assert result.total_width > 0

    def test_show_all_is_union(self) -> None:
        params = LayoutParams(distance=3, rows=1, cols_per_row=2)
        lattice = compute_layout(params, VisibilityFlags(view="hide_placeholders"))
        placeholders = compute_layout(params, VisibilityFlags(view="only_placeholders"))
        both = compute_layout(params, VisibilityFlags(view="show_all"))
        assert both.elements == lattice.elements + placeholders.elements

    @pytest.mark.parametrize(("distance", "rows", "cols_per_row"), [(3, 2, 4), (5, 2, 4), (7, 1, 3), (3, 1, 1)])
    @pytest.mark.parametrize("view", list(PlaceholderView))
    @pytest.mark.parametrize("mode", list(PlaceholderMode))
    def test_stats_match_tally(
        self, distance: int, rows: int, cols_per_row: int, view: PlaceholderView, mode: PlaceholderMode
    ) -> None:
        result = compute_layout(
            LayoutParams(distance=distance, rows=rows, cols_per_row=cols_per_row),
            VisibilityFlags(view=view, placeholder_mode=mode),
        )
        assert result.stats.element_counts == tally_elements(result.elements)
        assert result.stats.total_elements == len(result)

    def test_zero_placeholders(self) -> None:
        result = compute_layout(LayoutParams(distance=3), VisibilityFlags(view="show_all", placeholder_count=0))
        assert result.stats.element_counts[ElementKind.UNUSED_PLACEHOLDER] == 0
        assert len(result) == 8 * 33


# =============================================================================
# Identity, determinism and errors
# =============================================================================


class TestLayoutResult:
    """Tests for LayoutResult behaviour."""

    @pytest.mark.parametrize("view", list(PlaceholderView))
    def test_ids_unique(self, view: PlaceholderView) -> None:
        result = compute_layout(LayoutParams(distance=5), VisibilityFlags(view=view))
        assert len(set(result.ids)) == len(result)

    def test_ids_unique_across_modes(self) -> None:
        for mode in PlaceholderMode:
            result = compute_layout(LayoutParams(distance=3), VisibilityFlags(view="show_all", placeholder_mode=mode))
            assert len(set(result.ids)) == len(result)

    def test_by_id(self, small_result: LayoutResult) -> None:
        element = small_result.by_id("data-1-0-0")
        assert element.patch == 1
        assert element.center.x == 320
        with pytest.raises(KeyError, match="nope"):
            small_result.by_id("nope")

    def test_deterministic(self) -> None:
        first = compute_layout(LayoutParams(distance=5), VisibilityFlags(view="show_all"))
        second = compute_layout(LayoutParams(distance=5), VisibilityFlags(view="show_all"))
        assert first == second
        assert first is not second

    def test_toggle_round_trip(self) -> None:
        params = LayoutParams(distance=3)
        hidden = compute_layout(params, VisibilityFlags(view="hide_placeholders"))
        shown = compute_layout(params, VisibilityFlags(view="show_all"))
        hidden_again = compute_layout(params, VisibilityFlags(view="hide_placeholders"))
        assert shown != hidden
        assert hidden_again == hidden
        assert LayoutFingerprint.from_result("x", hidden_again) == LayoutFingerprint.from_result("x", hidden)

    def test_even_distance_raises(self) -> None:
        with pytest.raises(InvalidParameterError, match="distance must be odd and >= 3, got 4"):
            compute_layout(LayoutParams(distance=4))

    def test_logs_debug_line(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sclattice.layout.lattice"):
            compute_layout(LayoutParams(distance=3, rows=1, cols_per_row=1))
        assert any("Computed layout d=3 1x1 boundary=XXZZ" in r.getMessage() for r in caplog.records)


def test_bounding_box_empty() -> None:
    assert bounding_box([], 100) == (0.0, 0.0)
