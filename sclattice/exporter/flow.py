"""Export a LayoutResult to sclattice-flow JSON format.

The format is the node list consumed by node/edge diagram widgets: every
node carries an id, a top-left position and a CSS-like style, and is marked
non-draggable and non-selectable because the diagram is read-only.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from sclattice.consts import ElementShape

if TYPE_CHECKING:
    from pathlib import Path

    from sclattice.exporter.types import FlowDocumentDict, FlowNodeDict, NodeStyleDict, PositionDict
    from sclattice.layout.elements import Element
    from sclattice.layout.lattice import LayoutResult

logger = logging.getLogger(__name__)

SCHEMA = "sclattice-flow/v1"

_BORDER_RADIUS: dict[ElementShape, str] = {
    ElementShape.CIRCLE: "50%",
    ElementShape.SQUARE: "0px",
}


def element_to_position(element: Element) -> PositionDict:
    """Convert an element's top-left corner to a position dictionary.

    Parameters
    ----------
    element : Element
        The element to convert.

    Returns
    -------
    PositionDict
        Position dictionary with x, y fields.
    """
    return {"x": float(element.x), "y": float(element.y)}


def element_to_style(element: Element) -> NodeStyleDict:
    """Convert an element's geometry and style to a CSS-like style dictionary.

    Parameters
    ----------
    element : Element
        The element to convert.

    Returns
    -------
    NodeStyleDict
        Style with background, border, size and stacking order. Circles and
        squares get a ``borderRadius``; triangles get a ``clipPath``.
        ``opacity`` is only present when it differs from 1.
    """
    style: NodeStyleDict = {
        "background": element.color,
        "border": element.border or "none",
        "width": float(element.width),
        "height": float(element.height),
        "zIndex": element.z_index,
    }
    radius = _BORDER_RADIUS.get(element.shape)
    if radius is not None:
        style["borderRadius"] = radius
    clip = element.clip_path_css()
    if clip is not None:
        style["clipPath"] = clip
    if element.opacity != 1.0:
        style["opacity"] = element.opacity
    return style


def element_to_node(element: Element) -> FlowNodeDict:
    """Convert an element to a read-only flow node."""
    return {
        "id": element.id,
        "type": "default",
        "position": element_to_position(element),
        "data": {"label": "", "kind": element.kind.value},
        "style": element_to_style(element),
        "draggable": False,
        "selectable": False,
    }


def export_to_flow(result: LayoutResult, name: str) -> FlowDocumentDict:
    """Export a LayoutResult to sclattice-flow JSON format.

    Parameters
    ----------
    result : LayoutResult
        The layout to export.
    name : str
        Name for the exported diagram.

    Returns
    -------
    FlowDocumentDict
        JSON-serializable dictionary in sclattice-flow/v1 format. Nodes keep
        the element order; the lattice has no edges.
    """
    return {
        "$schema": SCHEMA,
        "name": name,
        "width": float(result.total_width),
        "height": float(result.total_height),
        "nodes": [element_to_node(e) for e in result.elements],
        "edges": [],
        "stats": result.stats.to_dict(),
    }


def save_to_flow_json(
    result: LayoutResult,
    name: str,
    path: Path,
    *,
    indent: int = 2,
) -> None:
    """Save a LayoutResult to a sclattice-flow JSON file.

    Parameters
    ----------
    result : LayoutResult
        The layout to export.
    name : str
        Name for the exported diagram.
    path : Path
        Output file path.
    indent : int
        JSON indentation level (default 2).
    """
    data = export_to_flow(result, name)
    path.write_text(json.dumps(data, indent=indent, ensure_ascii=False), encoding="utf-8")
    logger.info("Wrote %d nodes to %s", len(data["nodes"]), path)
