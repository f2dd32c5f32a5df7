"""Pure layout computation for drawing structures.

Coordinates are abstract units; the drawing layer scales them.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..components.bst import BinarySearchTree, TreeNode
    from ..components.graph import Graph
    from ..components.hash_table import HashTable
    from ..core.types import Number, VertexId

Point = tuple[float, float]


def linear_layout(count: int, vertical: bool = False) -> list[Point]:
    """Slots for stack (vertical, bottom first) or queue/list (horizontal) items."""
    if vertical:
        return [(0.0, float(i)) for i in range(count)]
    return [(float(i), 0.0) for i in range(count)]


def tree_layout(tree: BinarySearchTree) -> dict[Number, Point]:
    """Position every node: x is its in-order rank, y is minus its depth.

    In-order ranks never collide, so no two nodes overlap and every left
    subtree sits left of its parent.
    """
    positions: dict[Number, Point] = {}
    stack: list[tuple[TreeNode, int]] = []
    node, depth = tree.root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[node.value] = (float(len(positions)), float(-depth))
        node, depth = node.right, depth + 1
    return positions


def tree_edges(tree: BinarySearchTree) -> list[tuple[Number, Number]]:
    """(parent, child) value pairs in pre-order, left child first."""
    edges: list[tuple[Number, Number]] = []
    stack: list[tuple[TreeNode, TreeNode]] = []

    def _push_children(node: TreeNode) -> None:
        for child in (node.right, node.left):
            if child is not None:
                stack.append((node, child))

    if tree.root is not None:
        _push_children(tree.root)
    while stack:
        parent, child = stack.pop()
        edges.append((parent.value, child.value))
        _push_children(child)
    return edges


def circle_layout(vertex_ids: list[VertexId], radius: float = 1.0) -> dict[VertexId, Point]:
    """Vertices evenly spaced on a circle, first vertex at the top, clockwise."""
    n = len(vertex_ids)
    if n == 1:
        return {vertex_ids[0]: (0.0, 0.0)}
    positions: dict[VertexId, Point] = {}
    for i, vid in enumerate(vertex_ids):
        angle = math.pi / 2 - 2 * math.pi * i / n
        positions[vid] = (round(radius * math.cos(angle), 9), round(radius * math.sin(angle), 9))
    return positions


def graph_layout(graph: Graph, radius: float = 1.0) -> dict[VertexId, Point]:
    return circle_layout(graph.vertices(), radius)


def bucket_layout(table: HashTable) -> list[list[tuple[Point, dict[str, Any]]]]:
    """One row per bucket; entries follow left to right in chain order."""
    rows = []
    for index, bucket in enumerate(table.buckets()):
        y = float(-index)
        rows.append([((float(pos + 1), y), entry) for pos, entry in enumerate(bucket)])
    return rows
