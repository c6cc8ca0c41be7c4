"""Tests for layout parameter records and their validation."""

from __future__ import annotations

import dataclasses

import pytest

from sclattice.consts import BoundarySide, EdgeSpecValue, PlaceholderMode, PlaceholderView
from sclattice.exceptions import InvalidParameterError
from sclattice.layout.params import (
    LayoutParams,
    VisibilityFlags,
    boundary_to_string,
    check_distance,
    parse_boundary,
)

# =============================================================================
# Tests for distance validation
# =============================================================================


class TestCheckDistance:
    """Tests for check_distance."""

    @pytest.mark.parametrize("distance", [3, 5, 7, 11])
    def test_valid(self, distance: int) -> None:
        check_distance(distance)

    @pytest.mark.parametrize("distance", [-1, 0, 1, 2, 4, 6])
    def test_invalid(self, distance: int) -> None:
        with pytest.raises(InvalidParameterError, match="distance must be odd") as exc_info:
            check_distance(distance)
        assert exc_info.value.field == "distance"

    def test_rejects_non_int(self) -> None:
        with pytest.raises(InvalidParameterError):
            check_distance(5.0)  # type: ignore[arg-type]
        with pytest.raises(InvalidParameterError):
            check_distance(True)  # type: ignore[arg-type]

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="got 4"):
            check_distance(4)


# =============================================================================
# Tests for boundary parsing
# =============================================================================


class TestParseBoundary:
    """Tests for parse_boundary and boundary_to_string."""

    def test_default(self) -> None:
        boundary = parse_boundary(None)
        assert boundary[BoundarySide.TOP] == EdgeSpecValue.X
        assert boundary[BoundarySide.LEFT] == EdgeSpecValue.Z

    def test_string_order_is_top_bottom_left_right(self) -> None:
        boundary = parse_boundary("ZXOX")
        assert boundary == {
            BoundarySide.TOP: EdgeSpecValue.Z,
            BoundarySide.BOTTOM: EdgeSpecValue.X,
            BoundarySide.LEFT: EdgeSpecValue.O,
            BoundarySide.RIGHT: EdgeSpecValue.X,
        }

    def test_string_is_case_insensitive(self) -> None:
        assert parse_boundary("xxzz") == parse_boundary("XXZZ")

    def test_mapping_fills_missing_sides(self) -> None:
        boundary = parse_boundary({"top": "Z"})
        assert boundary[BoundarySide.TOP] == EdgeSpecValue.Z
        assert boundary[BoundarySide.BOTTOM] == EdgeSpecValue.X
        assert boundary[BoundarySide.RIGHT] == EdgeSpecValue.Z

    def test_round_trip_string(self) -> None:
        assert boundary_to_string(parse_boundary("XZOZ")) == "XZOZ"

    @pytest.mark.parametrize("spec", ["XXZZ", "ZZXX", "OXZO", "OOOO"])
    def test_string_round_trip_through_mapping(self, spec: str) -> None:
        boundary = parse_boundary(spec)
        assert parse_boundary(boundary_to_string(boundary)) == boundary
        assert boundary_to_string(parse_boundary({side.value: value for side, value in boundary.items()})) == spec

    @pytest.mark.parametrize("spec", ["XXZ", "XXZZZ", "XXZY"])
    def test_invalid_string(self, spec: str) -> None:
        with pytest.raises(InvalidParameterError, match="boundary") as exc_info:
            parse_boundary(spec)
        assert exc_info.value.field == "boundary"

    def test_invalid_side(self) -> None:
        with pytest.raises(InvalidParameterError, match="boundary side"):
            parse_boundary({"UP": "X"})

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidParameterError, match="string or mapping"):
            parse_boundary(42)


# =============================================================================
# Tests for LayoutParams
# =============================================================================


class TestLayoutParams:
    """Tests for the LayoutParams record."""

    def test_defaults(self) -> None:
        params = LayoutParams()
        assert params.cell_size == 100
        assert params.qubit_size == 24
        assert params.stabilizer_size == 32
        assert params.gap == 120
        assert params.distance == 5
        assert (params.rows, params.cols_per_row) == (2, 4)
        assert params.logical_qubits == 8

    def test_patch_step(self) -> None:
        assert LayoutParams(distance=3, gap=180).patch_step == 380
        assert LayoutParams(distance=5, gap=120).patch_step == 520

    def test_boundary_string_is_normalized(self) -> None:
        params = LayoutParams(boundary="ZZXX")
        assert params.boundary[BoundarySide.TOP] == EdgeSpecValue.Z

    def test_boundary_is_read_only(self) -> None:
        params = LayoutParams()
        with pytest.raises(TypeError):
            params.boundary[BoundarySide.TOP] = EdgeSpecValue.Z  # type: ignore[index]
        assert boundary_to_string(params.boundary) == "XXZZ"

    def test_frozen(self) -> None:
        params = LayoutParams()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.distance = 7  # type: ignore[misc]

    def test_equality(self) -> None:
        assert LayoutParams(boundary="XXZZ") == LayoutParams()

    def test_replace_revalidates(self) -> None:
        with pytest.raises(InvalidParameterError, match="distance"):
            dataclasses.replace(LayoutParams(), distance=4)

    @pytest.mark.parametrize(
        ("field_name", "value"),
        [
            ("rows", 0),
            ("cols_per_row", 0),
            ("cell_size", 0),
            ("qubit_size", -3),
            ("stabilizer_size", 0),
            ("gap", 0),
        ],
    )
    def test_non_positive_sizes(self, field_name: str, value: int) -> None:
        with pytest.raises(InvalidParameterError, match="positive integer") as exc_info:
            LayoutParams(**{field_name: value})
        assert exc_info.value.field == field_name


# =============================================================================
# Tests for VisibilityFlags
# =============================================================================


class TestVisibilityFlags:
    """Tests for the VisibilityFlags record."""

    def test_defaults_hide_placeholders(self) -> None:
        flags = VisibilityFlags()
        assert flags.view == PlaceholderView.HIDE_PLACEHOLDERS
        assert flags.placeholder_mode == PlaceholderMode.GRID_BESIDE
        assert flags.placeholder_count is None
        assert flags.show_lattice
        assert not flags.show_placeholders

    @pytest.mark.parametrize(
        ("view", "lattice", "placeholders"),
        [
            ("show_all", True, True),
            ("only_placeholders", False, True),
            ("hide_placeholders", True, False),
        ],
    )
    def test_layers(self, view: str, lattice: bool, placeholders: bool) -> None:
        flags = VisibilityFlags(view=view)
        assert isinstance(flags.view, PlaceholderView)
        assert flags.show_lattice is lattice
        assert flags.show_placeholders is placeholders

    def test_invalid_view(self) -> None:
        with pytest.raises(InvalidParameterError, match="view must be one of") as exc_info:
            VisibilityFlags(view="everything")
        assert exc_info.value.field == "view"

    def test_invalid_mode(self) -> None:
        with pytest.raises(InvalidParameterError, match="placeholder_mode"):
            VisibilityFlags(placeholder_mode="spiral")

    def test_negative_count(self) -> None:
        with pytest.raises(InvalidParameterError, match="non-negative") as exc_info:
            VisibilityFlags(placeholder_count=-1)
        assert exc_info.value.field == "placeholder_count"

    def test_zero_count_is_valid(self) -> None:
        assert VisibilityFlags(placeholder_count=0).placeholder_count == 0
