"""Closed-form statistics for surface code layouts.

The counts here are derived from the code distance and boundary types alone,
independently of the element builder. ``tally_elements`` counts an actual
element list so the two can be compared.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sclattice.consts import DEFAULT_BOUNDARY, BoundarySide, EdgeSpecValue, ElementKind, PlaceholderView

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from sclattice.layout.elements import Element


def triangles_per_side(distance: int, spec: EdgeSpecValue) -> int:
    """Closed-form boundary triangle count for one side of type ``spec``."""
    return 0 if spec == EdgeSpecValue.O else (distance - 1) // 2


@dataclass(frozen=True, slots=True)
class PatchCounts:
    """Element and qubit counts of one distance-``d`` patch.

    Attributes
    ----------
    distance : int
        Code distance.
    data_qubits : int
        ``d**2`` data qubits.
    x_stabilizers, z_stabilizers : int
        Bulk stabilizers, ``ceil((d-1)**2 / 2)`` and ``floor((d-1)**2 / 2)``.
    x_boundary_stabilizers, z_boundary_stabilizers : int
        Weight-2 boundary stabilizers (triangles) of each type.
    """

    distance: int
    data_qubits: int
    x_stabilizers: int
    z_stabilizers: int
    x_boundary_stabilizers: int
    z_boundary_stabilizers: int

    @classmethod
    def from_distance(
        cls,
        distance: int,
        boundary: Mapping[BoundarySide, EdgeSpecValue] | None = None,
    ) -> PatchCounts:
        boundary = boundary or DEFAULT_BOUNDARY
        bulk = (distance - 1) ** 2
        boundary_counts = {EdgeSpecValue.X: 0, EdgeSpecValue.Z: 0, EdgeSpecValue.O: 0}
        for side in BoundarySide:
            spec = boundary.get(side, EdgeSpecValue.O)
            boundary_counts[spec] += triangles_per_side(distance, spec)
        return cls(
            distance=distance,
            data_qubits=distance * distance,
            x_stabilizers=(bulk + 1) // 2,
            z_stabilizers=bulk // 2,
            x_boundary_stabilizers=boundary_counts[EdgeSpecValue.X],
            z_boundary_stabilizers=boundary_counts[EdgeSpecValue.Z],
        )

    @property
    def stabilizers(self) -> int:
        """Bulk stabilizer markers, ``(d-1)**2``."""
        return self.x_stabilizers + self.z_stabilizers

    @property
    def boundary_triangles(self) -> int:
        return self.x_boundary_stabilizers + self.z_boundary_stabilizers

    @property
    def background_cells(self) -> int:
        return self.stabilizers

    @property
    def boundary_qubits(self) -> int:
        """One per boundary cell on each side plus one per triangle apex."""
        return 4 * (self.distance - 1) + self.boundary_triangles

    @property
    def x_ancilla_qubits(self) -> int:
        return self.x_stabilizers + self.x_boundary_stabilizers

    @property
    def z_ancilla_qubits(self) -> int:
        return self.z_stabilizers + self.z_boundary_stabilizers

    @property
    def ancilla_qubits(self) -> int:
        """Measurement qubits, bulk plus boundary stabilizers."""
        return self.x_ancilla_qubits + self.z_ancilla_qubits

    @property
    def physical_qubits(self) -> int:
        return self.data_qubits + self.ancilla_qubits

    def element_counts(self) -> dict[ElementKind, int]:
        """Number of elements of each kind the builder emits for one patch."""
        return {
            ElementKind.DATA_QUBIT: self.data_qubits,
            ElementKind.X_STABILIZER: self.x_stabilizers,
            ElementKind.Z_STABILIZER: self.z_stabilizers,
            ElementKind.BOUNDARY_QUBIT: self.boundary_qubits,
            ElementKind.BACKGROUND_CELL: self.background_cells,
            ElementKind.BOUNDARY_TRIANGLE: self.boundary_triangles,
            ElementKind.UNUSED_PLACEHOLDER: 0,
        }

    def to_dict(self) -> dict[str, int]:
        return {
            "distance": self.distance,
            "data_qubits": self.data_qubits,
            "x_stabilizers": self.x_stabilizers,
            "z_stabilizers": self.z_stabilizers,
            "boundary_stabilizers": self.boundary_triangles,
            "x_ancilla_qubits": self.x_ancilla_qubits,
            "z_ancilla_qubits": self.z_ancilla_qubits,
            "ancilla_qubits": self.ancilla_qubits,
            "physical_qubits": self.physical_qubits,
        }


@dataclass(frozen=True)
class LayoutStats:
    """Read-only summary of a layout.

    ``per_patch`` and the ``total_*`` properties describe the code itself and
    do not depend on the view. ``element_counts`` describes the element list
    of the result the stats belong to.
    """

    rows: int
    cols_per_row: int
    per_patch: PatchCounts
    view: PlaceholderView
    placeholders: int
    element_counts: Mapping[ElementKind, int] = field(hash=False)

    @classmethod
    def from_layout(
        cls,
        *,
        distance: int,
        rows: int,
        cols_per_row: int,
        view: PlaceholderView,
        placeholders: int,
        boundary: Mapping[BoundarySide, EdgeSpecValue] | None = None,
    ) -> LayoutStats:
        per_patch = PatchCounts.from_distance(distance, boundary)
        logical = rows * cols_per_row
        show_lattice = view != PlaceholderView.ONLY_PLACEHOLDERS
        shown = placeholders if view != PlaceholderView.HIDE_PLACEHOLDERS else 0
        counts = {kind: (n * logical if show_lattice else 0) for kind, n in per_patch.element_counts().items()}
        counts[ElementKind.UNUSED_PLACEHOLDER] = shown
        return cls(
            rows=rows,
            cols_per_row=cols_per_row,
            per_patch=per_patch,
            view=view,
            placeholders=shown,
            element_counts=MappingProxyType(counts),
        )

    @property
    def logical_qubits(self) -> int:
        return self.rows * self.cols_per_row

    @property
    def total_data_qubits(self) -> int:
        return self.per_patch.data_qubits * self.logical_qubits

    @property
    def total_stabilizers(self) -> int:
        return self.per_patch.stabilizers * self.logical_qubits

    @property
    def total_ancilla_qubits(self) -> int:
        return self.per_patch.ancilla_qubits * self.logical_qubits

    @property
    def total_physical_qubits(self) -> int:
        return self.per_patch.physical_qubits * self.logical_qubits

    @property
    def total_elements(self) -> int:
        return sum(self.element_counts.values())

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable summary for display and debugging."""
        return {
            "layout": f"{self.rows} rows × {self.cols_per_row} logical qubits",
            "logical_qubits": self.logical_qubits,
            "distance": self.per_patch.distance,
            "per_logical": self.per_patch.to_dict(),
            "total": {
                "data_qubits": self.total_data_qubits,
                "x_stabilizers": self.per_patch.x_stabilizers * self.logical_qubits,
                "z_stabilizers": self.per_patch.z_stabilizers * self.logical_qubits,
                "ancilla_qubits": self.total_ancilla_qubits,
                "physical_qubits": self.total_physical_qubits,
                "unused_circuits": self.placeholders,
            },
            "elements": {kind.value: n for kind, n in self.element_counts.items()},
            "view": self.view.value,
        }


def tally_elements(elements: Iterable[Element]) -> dict[ElementKind, int]:
    """Count elements by kind; every kind is present in the result."""
    counter = Counter(e.kind for e in elements)
    return {kind: counter.get(kind, 0) for kind in ElementKind}
