from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Any

import plotly.graph_objects as go

from sclattice.consts import ElementKind, ElementShape
from sclattice.layout.elements import STYLE_MAP
from sclattice.visualizers.matplotlib_2d import parse_border

if TYPE_CHECKING:
    from sclattice.layout.elements import Element
    from sclattice.layout.lattice import LayoutResult

_PLOTLY_DASH = {"-": "solid", "--": "dash", ":": "dot"}
_LEGEND_SYMBOL = {ElementShape.CIRCLE: "circle", ElementShape.SQUARE: "square", ElementShape.TRIANGLE: "triangle-up"}


def _plotly_color(color: str) -> str:
    return "rgba(0,0,0,0)" if color == "transparent" else color


def element_shape(element: Element) -> dict[str, Any]:
    """Build a plotly layout shape for ``element`` in data coordinates."""
    border = parse_border(element.border)
    if border is None:
        line: dict[str, Any] = {"width": 0}
    else:
        width, style, color = border
        line = {"width": width, "color": color, "dash": _PLOTLY_DASH.get(style, "solid")}

    shape: dict[str, Any] = {
        "xref": "x",
        "yref": "y",
        "fillcolor": _plotly_color(element.color),
        "opacity": element.opacity,
        "line": line,
        "layer": "below" if element.z_index < 0 else "above",
    }
    if element.shape == ElementShape.TRIANGLE:
        pts = element.polygon()
        path = "M " + " L ".join(f"{p.x},{p.y}" for p in pts) + " Z"
        shape.update(type="path", path=path)
    else:
        shape.update(
            type="circle" if element.shape == ElementShape.CIRCLE else "rect",
            x0=element.x,
            y0=element.y,
            x1=element.x + element.width,
            y1=element.y + element.height,
        )
    return shape


def legend_marker(kind: ElementKind) -> dict[str, Any]:
    """Visible legend symbol for ``kind``, drawn from its default style."""
    spec = STYLE_MAP[kind]
    marker: dict[str, Any] = {"size": 12, "symbol": _LEGEND_SYMBOL[spec["shape"]], "color": _plotly_color(spec["color"])}
    border = parse_border(spec["border"])
    if border is not None:
        marker["line"] = {"width": border[0], "color": border[2]}
    return marker


def visualize_layout_plotly(
    result: LayoutResult,
    *,
    width: int = 1200,
    height: int = 700,
    title: str | None = None,
    show_legend: bool = True,
) -> go.Figure:
    """LayoutResult visualization (Plotly 2D, pannable and zoomable).

    - Every element is a layout shape, added in stacking order.
    - One invisible marker trace per element kind provides hover ids; a
      legend-only trace per kind shows its symbol.
    - The y axis is reversed to match screen coordinates.
    """
    fig = go.Figure()
    ordered = sorted(result.elements, key=lambda e: e.z_index)
    fig.update_layout(shapes=[element_shape(e) for e in ordered])

    centers: dict[ElementKind, list[Element]] = defaultdict(list)
    for element in ordered:
        centers[element.kind].append(element)

    for kind, members in centers.items():
        spec = STYLE_MAP[kind]
        fig.add_trace(
            go.Scatter(
                x=[e.center.x for e in members],
                y=[e.center.y for e in members],
                mode="markers",
                marker={"size": 6, "color": _plotly_color(spec["color"]), "opacity": 0},
                name=spec["label"],
                legendgroup=kind.value,
                text=[e.id for e in members],
                hovertemplate="<b>%{text}</b><br>x: %{x}<br>y: %{y}<extra></extra>",
                showlegend=False,
            )
        )
        if show_legend:
            # Legend-only entry; the hover trace above stays invisible
            fig.add_trace(
                go.Scatter(
                    x=[None],
                    y=[None],
                    mode="markers",
                    marker=legend_marker(kind),
                    name=spec["label"],
                    legendgroup=kind.value,
                    hoverinfo="skip",
                    showlegend=True,
                )
            )

    fig.update_layout(
        title=title,
        width=width,
        height=height,
        dragmode="pan",
        plot_bgcolor="white",
        xaxis={"visible": False, "scaleanchor": "y", "scaleratio": 1},
        yaxis={"visible": False, "autorange": "reversed"},
        margin={"l": 10, "r": 10, "t": 40 if title else 10, "b": 10},
    )
    return fig
