from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Patch, Polygon, Rectangle

from sclattice.consts import ElementKind, ElementShape
from sclattice.consts.consts import DATA_COLOR, MEASUREMENT_COLOR, X_COLOR, Z_COLOR

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from matplotlib.patches import Patch as MplPatch

    from sclattice.layout.elements import Element
    from sclattice.layout.lattice import LayoutResult

# Points per CSS pixel
_PX_TO_PT = 0.75


def _mpl_color(color: str) -> str:
    return "none" if color == "transparent" else color


def parse_border(border: str | None) -> tuple[float, str, str] | None:
    """Split a CSS-like border (``"3px solid #1e293b"``) into matplotlib terms.

    Returns
    -------
    tuple[float, str, str] | None
        ``(linewidth in points, linestyle, color)``, or ``None`` for no border.
    """
    if not border or border == "none":
        return None
    parts = border.split()
    width = float(parts[0].removesuffix("px")) if parts else 1.0
    style = parts[1] if len(parts) > 1 else "solid"
    color = parts[2] if len(parts) > 2 else "black"  # noqa: PLR2004
    linestyle = {"solid": "-", "dashed": "--", "dotted": ":"}.get(style, "-")
    return width * _PX_TO_PT, linestyle, color


def element_artist(element: Element) -> MplPatch:
    """Build the matplotlib patch drawing ``element``."""
    border = parse_border(element.border)
    kwargs = {
        "facecolor": _mpl_color(element.color),
        "alpha": element.opacity,
        "zorder": element.z_index,
    }
    if border is None:
        kwargs["edgecolor"] = "none"
        kwargs["linewidth"] = 0
    else:
        kwargs["linewidth"], kwargs["linestyle"], kwargs["edgecolor"] = border

    match element.shape:
        case ElementShape.CIRCLE:
            return Circle(tuple(element.center), radius=element.width / 2, **kwargs)
        case ElementShape.TRIANGLE:
            return Polygon([tuple(p) for p in element.polygon()], closed=True, **kwargs)
        case _:
            return Rectangle((element.x, element.y), element.width, element.height, **kwargs)


def _legend_handles(kinds: set[ElementKind]) -> list[Line2D | Patch]:
    handles: list[Line2D | Patch] = []
    if kinds & {ElementKind.BACKGROUND_CELL, ElementKind.BOUNDARY_TRIANGLE}:
        handles.append(Patch(facecolor=X_COLOR, label="X stabilizers"))
        handles.append(Patch(facecolor=Z_COLOR, label="Z stabilizers"))
    if ElementKind.DATA_QUBIT in kinds:
        handles.append(
            Line2D([], [], marker="o", linestyle="none", markerfacecolor=DATA_COLOR, markeredgecolor="#1e293b", label="Data qubits")
        )
    if kinds & {ElementKind.X_STABILIZER, ElementKind.Z_STABILIZER, ElementKind.BOUNDARY_QUBIT}:
        handles.append(
            Line2D([], [], marker="o", linestyle="none", markerfacecolor=MEASUREMENT_COLOR, markeredgecolor="none", label="Measurements")
        )
    if ElementKind.UNUSED_PLACEHOLDER in kinds:
        handles.append(
            Line2D(
                [],
                [],
                marker="o",
                linestyle="none",
                markerfacecolor=MEASUREMENT_COLOR,
                markeredgecolor="none",
                alpha=0.4,
                label="Unused circuits",
            )
        )
    return handles


def visualize_layout_matplotlib(
    result: LayoutResult,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (12, 7),
    title: str | None = None,
    show_legend: bool = True,
    margin: float = 60.0,
) -> Figure:
    """Draw a LayoutResult with matplotlib.

    Elements are drawn in stacking order (``z_index``), then by generation
    order. The y axis points down as on a screen canvas.

    Parameters
    ----------
    result : LayoutResult
        Layout to draw.
    ax : Axes | None
        Target axes; a new figure is created when omitted.
    figsize : tuple[float, float]
        Figure size in inches for a new figure.
    title : str | None
        Axes title.
    show_legend : bool
        Whether to add a legend for the element kinds present.
    margin : float
        Padding around the elements in canvas pixels.

    Returns
    -------
    Figure
        The figure containing the drawing.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ordered = sorted(result.elements, key=lambda e: e.z_index)
    for element in ordered:
        ax.add_patch(element_artist(element))

    if ordered:
        x_min = min(e.x for e in ordered) - margin
        y_min = min(e.y for e in ordered) - margin
        x_max = max(e.x + e.width for e in ordered) + margin
        y_max = max(e.y + e.height for e in ordered) + margin
        ax.set_xlim(x_min, x_max)
        ax.set_ylim(y_max, y_min)

    ax.set_aspect("equal", adjustable="box")
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    if show_legend:
        handles = _legend_handles({e.kind for e in ordered})
        if handles:
            ax.legend(handles=handles, loc="upper left", bbox_to_anchor=(1.0, 1.0))

    return fig
