"""TypedDict definitions for the sclattice-flow/v1 JSON schema."""

from __future__ import annotations

from typing import Any, Literal, TypedDict


class PositionDict(TypedDict):
    """Top-left position of a node."""

    x: float
    y: float


class NodeDataDict(TypedDict):
    """Payload carried by a node."""

    label: str
    kind: str


class NodeStyleDict(TypedDict, total=False):
    """CSS-like node style understood by node/edge diagram widgets."""

    background: str
    border: str
    borderRadius: str
    width: float
    height: float
    zIndex: int
    clipPath: str
    opacity: float


class FlowNodeDict(TypedDict):
    """Node dictionary."""

    id: str
    type: Literal["default"]
    position: PositionDict
    data: NodeDataDict
    style: NodeStyleDict
    draggable: bool
    selectable: bool


class FlowEdgeDict(TypedDict):
    """Edge dictionary."""

    id: str
    source: str
    target: str


# Functional form because "$schema" is not a valid identifier
FlowDocumentDict = TypedDict(
    "FlowDocumentDict",
    {
        "$schema": str,
        "name": str,
        "width": float,
        "height": float,
        "nodes": list[FlowNodeDict],
        "edges": list[FlowEdgeDict],
        "stats": dict[str, Any],
    },
)
"""sclattice-flow/v1 document dictionary."""
