"""Command line entry point: build a layout, print its stats, export or plot it.

Usage:
    sclattice --preset surface_code_d3 --view show_all --plot lattice.html
    sclattice --distance 7 --rows 1 --cols-per-row 2 --export lattice.json
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from sclattice.consts import PlaceholderMode, PlaceholderView
from sclattice.exceptions import InvalidParameterError
from sclattice.exporter import save_to_flow_json
from sclattice.layout import LayoutParams, VisibilityFlags, compute_layout
from sclattice.loader import list_presets, load_layout_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sclattice.layout.lattice import LayoutResult

logger = logging.getLogger(__name__)

_PARAM_OVERRIDES = ("distance", "rows", "cols_per_row", "gap")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sclattice", description="Generate surface code lattice layouts")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", type=str, default=None, help=f"Packaged preset ({', '.join(list_presets())})")
    source.add_argument("--config", type=Path, default=None, help="Layout YAML file")
    parser.add_argument("--distance", type=int, default=None, help="Code distance (odd, >= 3)")
    parser.add_argument("--rows", type=int, default=None, help="Number of patch rows")
    parser.add_argument("--cols-per-row", type=int, default=None, help="Patches per row")
    parser.add_argument("--gap", type=int, default=None, help="Spacing between patches")
    parser.add_argument("--view", choices=[v.value for v in PlaceholderView], default=None, help="Layer selection")
    parser.add_argument(
        "--placeholder-mode",
        choices=[m.value for m in PlaceholderMode],
        default=None,
        help="Where unused-circuit placeholders are tiled",
    )
    parser.add_argument("--placeholders", type=int, default=None, help="Number of placeholders")
    parser.add_argument("--export", type=Path, default=None, help="Write sclattice-flow JSON to this path")
    parser.add_argument("--plot", type=Path, default=None, help="Write a plot (.html via plotly, else matplotlib)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _resolve(args: argparse.Namespace) -> tuple[str, LayoutParams, VisibilityFlags]:
    if args.preset is not None or args.config is not None:
        config = load_layout_config(args.preset if args.preset is not None else args.config)
        name, params, visibility = config.name, config.params, config.visibility
    else:
        name, params, visibility = "custom", LayoutParams(), VisibilityFlags()

    overrides = {key: getattr(args, key) for key in _PARAM_OVERRIDES if getattr(args, key) is not None}
    if overrides:
        params = dataclasses.replace(params, **overrides)

    vis_overrides: dict[str, object] = {}
    if args.view is not None:
        vis_overrides["view"] = args.view
    if args.placeholder_mode is not None:
        vis_overrides["placeholder_mode"] = args.placeholder_mode
    if args.placeholders is not None:
        vis_overrides["placeholder_count"] = args.placeholders
    if vis_overrides:
        visibility = dataclasses.replace(visibility, **vis_overrides)
    return name, params, visibility


def _plot(result: LayoutResult, name: str, path: Path) -> None:
    if path.suffix.lower() == ".html":
        from sclattice.visualizers import visualize_layout_plotly  # noqa: PLC0415

        visualize_layout_plotly(result, title=name).write_html(str(path))
    else:
        import matplotlib.pyplot as plt  # noqa: PLC0415

        from sclattice.visualizers import visualize_layout_matplotlib  # noqa: PLC0415

        fig = visualize_layout_matplotlib(result, title=name)
        fig.savefig(path, bbox_inches="tight")
        plt.close(fig)
    logger.info("Wrote plot to %s", path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        name, params, visibility = _resolve(args)
        result = compute_layout(params, visibility)
    except InvalidParameterError as exc:
        print(f"sclattice: invalid {exc.field}: {exc}", file=sys.stderr)
        return 2
    except (FileNotFoundError, TypeError, ValidationError, yaml.YAMLError) as exc:
        print(f"sclattice: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(result.stats.to_dict(), indent=2, ensure_ascii=False))

    if args.export is not None:
        save_to_flow_json(result, name, args.export)
    if args.plot is not None:
        _plot(result, name, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
