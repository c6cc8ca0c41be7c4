"""Tests for closed-form layout statistics."""

from __future__ import annotations

import json

import pytest

from sclattice.consts import EdgeSpecValue, ElementKind, PlaceholderView
from sclattice.layout.elements import build_patch_elements
from sclattice.layout.params import LayoutParams, parse_boundary
from sclattice.layout.patches import Patch
from sclattice.stats import LayoutStats, PatchCounts, tally_elements, triangles_per_side


class TestPatchCounts:
    """Tests for per-patch counts."""

    def test_d3(self) -> None:
        counts = PatchCounts.from_distance(3)
        assert counts.data_qubits == 9
        assert (counts.x_stabilizers, counts.z_stabilizers) == (2, 2)
        assert counts.stabilizers == 4
        assert counts.boundary_triangles == 4
        # Bulk plus weight-2 boundary stabilizers: 4 X and 4 Z
        assert (counts.x_ancilla_qubits, counts.z_ancilla_qubits) == (4, 4)
        assert counts.ancilla_qubits == 8
        assert counts.physical_qubits == 17
        assert counts.boundary_qubits == 12

    def test_d5(self) -> None:
        counts = PatchCounts.from_distance(5)
        assert counts.data_qubits == 25
        assert (counts.x_stabilizers, counts.z_stabilizers) == (8, 8)
        assert counts.ancilla_qubits == 24
        assert counts.physical_qubits == 49

    @pytest.mark.parametrize("distance", [3, 5, 7, 9, 11])
    def test_rotated_code_qubit_count(self, distance: int) -> None:
        counts = PatchCounts.from_distance(distance)
        assert counts.ancilla_qubits == distance**2 - 1
        assert counts.physical_qubits == 2 * distance**2 - 1

    def test_open_boundary(self) -> None:
        counts = PatchCounts.from_distance(5, parse_boundary("OOZZ"))
        assert counts.x_boundary_stabilizers == 0
        assert counts.z_boundary_stabilizers == 4
        assert counts.boundary_qubits == 20

    def test_triangles_per_side(self) -> None:
        assert triangles_per_side(5, EdgeSpecValue.X) == 2
        assert triangles_per_side(9, EdgeSpecValue.Z) == 4
        assert triangles_per_side(9, EdgeSpecValue.O) == 0

    @pytest.mark.parametrize("distance", [3, 5, 7])
    @pytest.mark.parametrize("boundary", ["XXZZ", "ZZXX", "OXZO", "OOOO"])
    def test_element_counts_match_builder(self, distance: int, boundary: str) -> None:
        params = LayoutParams(distance=distance, boundary=boundary)
        elements = build_patch_elements(Patch(0, 0, distance), 0, params)
        expected = PatchCounts.from_distance(distance, params.boundary).element_counts()
        assert tally_elements(elements) == expected


class TestLayoutStats:
    """Tests for LayoutStats."""

    def test_d3_grid(self) -> None:
        stats = LayoutStats.from_layout(
            distance=3, rows=2, cols_per_row=4, view=PlaceholderView.HIDE_PLACEHOLDERS, placeholders=128
        )
        assert stats.logical_qubits == 8
        assert stats.total_data_qubits == 72
        assert stats.total_ancilla_qubits == 64
        assert stats.total_physical_qubits == 136
        assert stats.total_stabilizers == 32
        assert stats.placeholders == 0

    def test_d5_grid(self) -> None:
        stats = LayoutStats.from_layout(
            distance=5, rows=2, cols_per_row=4, view=PlaceholderView.SHOW_ALL, placeholders=16
        )
        assert stats.total_data_qubits == 200
        assert stats.total_stabilizers == 128
        assert stats.placeholders == 16
        assert stats.element_counts[ElementKind.UNUSED_PLACEHOLDER] == 16
        assert stats.total_elements == 8 * 89 + 16

    def test_only_placeholders(self) -> None:
        stats = LayoutStats.from_layout(
            distance=5, rows=1, cols_per_row=1, view=PlaceholderView.ONLY_PLACEHOLDERS, placeholders=16
        )
        assert stats.total_elements == 16
        # Code totals do not depend on the view
        assert stats.total_data_qubits == 25

    def test_element_counts_read_only(self) -> None:
        stats = LayoutStats.from_layout(
            distance=3, rows=1, cols_per_row=1, view=PlaceholderView.SHOW_ALL, placeholders=4
        )
        with pytest.raises(TypeError):
            stats.element_counts[ElementKind.DATA_QUBIT] = 0  # type: ignore[index]
        assert stats.element_counts[ElementKind.DATA_QUBIT] == 9

    def test_to_dict(self) -> None:
        stats = LayoutStats.from_layout(
            distance=3, rows=2, cols_per_row=4, view=PlaceholderView.SHOW_ALL, placeholders=128
        )
        data = stats.to_dict()
        assert data["layout"] == "2 rows × 4 logical qubits"
        assert data["logical_qubits"] == 8
        assert data["distance"] == 3
        assert data["per_logical"]["physical_qubits"] == 17
        assert data["total"] == {
            "data_qubits": 72,
            "x_stabilizers": 16,
            "z_stabilizers": 16,
            "ancilla_qubits": 64,
            "physical_qubits": 136,
            "unused_circuits": 128,
        }
        assert data["elements"]["unused-placeholder"] == 128
        assert data["view"] == "show_all"
        json.dumps(data)


def test_tally_elements_empty() -> None:
    tally = tally_elements([])
    assert set(tally) == set(ElementKind)
    assert sum(tally.values()) == 0
