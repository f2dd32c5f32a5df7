"""Matplotlib drawing of engine structures with the current highlight.

Uses matplotlib.figure.Figure directly so drawing works without a GUI
backend; interactive callers pass their own Axes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from matplotlib.figure import Figure
from matplotlib.patches import Circle, FancyArrowPatch, Rectangle

from ..core.plans import family_of
from ..core.types import StructureFamily
from . import layout

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from ..core.plans import Highlight

logger = logging.getLogger(__name__)

BASE_FACE = "#e8e8ee"
BASE_EDGE = "#55556a"
HIGHLIGHT_FACE = "#b48ae6"
HIGHLIGHT_EDGE = "#6b21a8"
NODE_RADIUS = 0.3


def _targets(highlight: Highlight | None, *kinds: str) -> set[Any]:
    if highlight is None or highlight.kind not in kinds:
        return set()
    return set(highlight.targets)


def _colors(on: bool) -> dict[str, str]:
    return {
        "facecolor": HIGHLIGHT_FACE if on else BASE_FACE,
        "edgecolor": HIGHLIGHT_EDGE if on else BASE_EDGE,
    }


def _draw_linear(ax: Axes, items: list[Any], highlight: Highlight | None, vertical: bool) -> None:
    marked = _targets(highlight, "index")
    for i, (x, y) in enumerate(layout.linear_layout(len(items), vertical=vertical)):
        ax.add_patch(Rectangle((x - 0.4, y - 0.3), 0.8, 0.6, linewidth=2, **_colors(i in marked)))
        ax.text(x, y, str(items[i]), ha="center", va="center", fontsize=11)
    if not vertical:
        for i in range(len(items) - 1):
            ax.annotate("", xy=(i + 0.6, 0), xytext=(i + 0.4, 0), arrowprops={"arrowstyle": "->"})


def _draw_tree(ax: Axes, tree: Any, highlight: Highlight | None) -> None:
    positions = layout.tree_layout(tree)
    marked = _targets(highlight, "node", "path")
    for parent, child in layout.tree_edges(tree):
        (x1, y1), (x2, y2) = positions[parent], positions[child]
        ax.plot([x1, x2], [y1, y2], color=BASE_EDGE, linewidth=1.5, zorder=1)
    for value, (x, y) in positions.items():
        ax.add_patch(Circle((x, y), NODE_RADIUS, linewidth=2, zorder=2, **_colors(value in marked)))
        ax.text(x, y, str(value), ha="center", va="center", fontsize=10, zorder=3)


def _draw_graph(ax: Axes, graph: Any, highlight: Highlight | None) -> None:
    positions = layout.graph_layout(graph, radius=2.0)
    marked_vertices = _targets(highlight, "vertex", "path")
    marked_edges = _targets(highlight, "edge")
    for edge in graph.edges():
        key = (edge["source"], edge["target"])
        on = key in marked_edges
        arrow = FancyArrowPatch(
            positions[edge["source"]], positions[edge["target"]],
            arrowstyle="-|>", mutation_scale=14, shrinkA=14, shrinkB=14,
            color=HIGHLIGHT_EDGE if on else BASE_EDGE, linewidth=2.5 if on else 1.2, zorder=1,
            connectionstyle="arc3,rad=0.1",
        )
        ax.add_patch(arrow)
    for node in graph.graph_data()["nodes"]:
        x, y = positions[node["id"]]
        ax.add_patch(Circle((x, y), NODE_RADIUS, linewidth=2, zorder=2, **_colors(node["id"] in marked_vertices)))
        ax.text(x, y, node["label"], ha="center", va="center", fontsize=10, zorder=3)


def _draw_hash_table(ax: Axes, table: Any, highlight: Highlight | None) -> None:
    marked_buckets = _targets(highlight, "bucket")
    marked_entries = _targets(highlight, "entry")
    for index, row in enumerate(layout.bucket_layout(table)):
        y = float(-index)
        ax.add_patch(Rectangle((-0.4, y - 0.3), 0.8, 0.6, linewidth=2, **_colors(index in marked_buckets)))
        ax.text(0, y, str(index), ha="center", va="center", fontsize=10)
        for (x, ey), entry in row:
            on = (index, entry["key"]) in marked_entries
            ax.add_patch(Rectangle((x - 0.45, ey - 0.3), 0.9, 0.6, linewidth=1.5, **_colors(on)))
            ax.text(x, ey, f"{entry['key']}: {entry['value']}", ha="center", va="center", fontsize=8)


def draw_structure(
    structure: Any,
    highlight: Highlight | None = None,
    ax: Axes | None = None,
    title: str | None = None,
) -> Figure:
    """Draw structure onto ax (or a new Figure) and return the figure."""
    family = family_of(structure)
    if ax is None:
        fig = Figure(figsize=(8, 6))
        ax = fig.add_subplot()
    else:
        fig = ax.figure
        ax.clear()

    if family is StructureFamily.STACK:
        _draw_linear(ax, structure.items(), highlight, vertical=True)
    elif family is StructureFamily.QUEUE:
        _draw_linear(ax, structure.items(), highlight, vertical=False)
    elif family is StructureFamily.LINKED_LIST:
        _draw_linear(ax, structure.to_list(), highlight, vertical=False)
    elif family is StructureFamily.BINARY_TREE:
        _draw_tree(ax, structure, highlight)
    elif family is StructureFamily.GRAPH:
        _draw_graph(ax, structure, highlight)
    else:
        _draw_hash_table(ax, structure, highlight)

    ax.set_aspect("equal")
    ax.autoscale_view()
    ax.margins(0.15)
    ax.axis("off")
    ax.set_title(title or family.value.replace("_", " ").title(), fontsize=12, fontweight="bold")
    return fig


def save_structure(structure: Any, path: Path, highlight: Highlight | None = None, title: str | None = None) -> Path:
    """Render structure to an image file (format from the suffix)."""
    fig = draw_structure(structure, highlight=highlight, title=title)
    fig.savefig(path, dpi=120, bbox_inches="tight")
    logger.info(f"Saved {family_of(structure).value} rendering to {path}")
    return path
