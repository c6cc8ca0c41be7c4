"""
YAML loader for layout presets and user configurations.

A layout file names a layout, its geometry, its boundary types and the
visibility of the placeholder layer::

    name: surface_code_d5
    description: Eight distance-5 patches in two rows
    layout:
      distance: 5
      rows: 2
      cols_per_row: 4
      gap: 120
    boundary: XXZZ          # TOP, BOTTOM, LEFT, RIGHT
    visibility:
      view: hide_placeholders
      placeholder_mode: grid_beside
      placeholder_count: 16

Files are looked up by explicit path first, then in user search paths, then
among the presets packaged in :mod:`sclattice.presets`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, Field

from sclattice.consts import PlaceholderMode, PlaceholderView
from sclattice.consts.consts import (
    DEFAULT_CELL_SIZE,
    DEFAULT_COLS_PER_ROW,
    DEFAULT_DISTANCE,
    DEFAULT_GAP,
    DEFAULT_QUBIT_SIZE,
    DEFAULT_ROWS,
    DEFAULT_STABILIZER_SIZE,
)
from sclattice.layout.params import LayoutParams, VisibilityFlags

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from importlib.abc import Traversable

logger = logging.getLogger(__name__)

_PRESET_PACKAGE = "sclattice.presets"


@dataclass(frozen=True)
class LayoutConfig:
    """A named layout: geometry plus layer visibility."""

    name: str
    description: str
    params: LayoutParams
    visibility: VisibilityFlags


# Pydantic models for YAML validation


class LayoutSectionValidator(BaseModel):
    """Pydantic validator for the ``layout`` section."""

    distance: int = Field(default=DEFAULT_DISTANCE, description="Code distance of every patch")
    rows: int = Field(default=DEFAULT_ROWS, description="Number of patch rows")
    cols_per_row: int = Field(default=DEFAULT_COLS_PER_ROW, description="Patches per row")
    cell_size: int = Field(default=DEFAULT_CELL_SIZE, description="Plaquette edge length")
    qubit_size: int = Field(default=DEFAULT_QUBIT_SIZE, description="Data qubit marker diameter")
    stabilizer_size: int = Field(default=DEFAULT_STABILIZER_SIZE, description="Stabilizer marker diameter")
    gap: int = Field(default=DEFAULT_GAP, description="Spacing between patches")


class VisibilitySectionValidator(BaseModel):
    """Pydantic validator for the ``visibility`` section."""

    view: PlaceholderView = Field(default=PlaceholderView.HIDE_PLACEHOLDERS, description="Layer selection")
    placeholder_mode: PlaceholderMode = Field(
        default=PlaceholderMode.GRID_BESIDE,
        description="Where placeholders are tiled",
    )
    placeholder_count: int | None = Field(default=None, description="Placeholder count (default 16 per patch)")


class LayoutConfigValidator(BaseModel):
    """Pydantic validator for a layout YAML file."""

    name: str = Field(description="Layout name")
    description: str = Field(default="", description="Layout description")
    layout: LayoutSectionValidator = Field(default_factory=LayoutSectionValidator)
    boundary: str | dict[str, str] | None = Field(default=None, description="Boundary types (T,B,L,R)")
    visibility: VisibilitySectionValidator = Field(default_factory=VisibilitySectionValidator)


def _candidate_filenames(name: str) -> list[str]:
    path = Path(name)
    exts = [path.suffix] if path.suffix else [".yml", ".yaml"]
    return [f"{path.stem}{suffix}" for suffix in exts]


def _iter_search_paths(paths: Iterable[Path | str]) -> Iterable[Path]:
    for p in paths:
        yield Path(p)


def resolve_layout_yaml(name: str | Path, extra_paths: Sequence[Path | str] = ()) -> Traversable | Path:
    """Resolve a layout YAML by name from user dirs first, then packaged presets."""

    # Explicit path
    candidate_path = Path(name)
    if candidate_path.is_file():
        return candidate_path

    candidates = _candidate_filenames(str(name))

    # User-provided search paths
    for root in _iter_search_paths(extra_paths):
        for candidate in candidates:
            path = root / candidate
            if path.is_file():
                return path

    # Packaged presets
    for candidate in candidates:
        traversable = resources.files(_PRESET_PACKAGE).joinpath(candidate)
        if traversable.is_file():
            return traversable

    msg = f"YAML '{name}' not found in {list(_iter_search_paths(extra_paths))} or packaged {_PRESET_PACKAGE}"
    raise FileNotFoundError(msg)


def list_presets() -> list[str]:
    """Names of the packaged layout presets."""
    return sorted(
        Path(entry.name).stem
        for entry in resources.files(_PRESET_PACKAGE).iterdir()
        if entry.name.endswith((".yml", ".yaml"))
    )


def parse_layout_config(raw_config: object, *, source: str = "<memory>") -> LayoutConfig:
    """Validate a decoded YAML document and build a :class:`LayoutConfig`.

    Raises
    ------
    TypeError
        If the document is not a mapping.
    pydantic.ValidationError
        If a section has the wrong structure or types.
    InvalidParameterError
        If a value violates a layout constraint (e.g. even distance).
    """
    if not isinstance(raw_config, dict):
        msg = f"Invalid YAML structure in {source}: expected dict, got {type(raw_config)}"
        raise TypeError(msg)

    validated = LayoutConfigValidator(**raw_config)
    layout = validated.layout
    params = LayoutParams(
        cell_size=layout.cell_size,
        qubit_size=layout.qubit_size,
        stabilizer_size=layout.stabilizer_size,
        gap=layout.gap,
        distance=layout.distance,
        rows=layout.rows,
        cols_per_row=layout.cols_per_row,
        boundary=validated.boundary,
    )
    visibility = VisibilityFlags(
        view=validated.visibility.view,
        placeholder_mode=validated.visibility.placeholder_mode,
        placeholder_count=validated.visibility.placeholder_count,
    )
    return LayoutConfig(
        name=validated.name,
        description=validated.description,
        params=params,
        visibility=visibility,
    )


def load_layout_config(name: str | Path, *, extra_paths: Sequence[Path | str] = ()) -> LayoutConfig:
    """
    Load and validate a layout configuration by path or preset name.

    Parameters
    ----------
    name : str | Path
        File path, or a name resolved against ``extra_paths`` and the
        packaged presets (``.yml``/``.yaml`` may be omitted).
    extra_paths : Sequence[Path | str]
        Directories searched before the packaged presets.

    Returns
    -------
    LayoutConfig
        Validated configuration.

    Raises
    ------
    FileNotFoundError
        If the YAML file cannot be found.
    yaml.YAMLError
        If the YAML file is malformed.

    Examples
    --------
    >>> config = load_layout_config("surface_code_d3")
    >>> config.params.distance
    3
    """
    traversable = resolve_layout_yaml(name, extra_paths)
    with traversable.open("r", encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)
    config = parse_layout_config(raw_config, source=str(name))
    logger.info("Loaded layout config '%s' from %s", config.name, traversable)
    return config
