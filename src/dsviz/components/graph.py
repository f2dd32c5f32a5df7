"""Directed weighted graph stored as adjacency maps keyed by vertex id.

Vertices are plain ids; edges live in ``{source: {target: weight}}``. No
node objects hold references to each other.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import GraphData, GraphEdge, VertexId, Weight


class Graph:
    """Directed weighted graph with BFS and DFS.

    Invariants:
        - every edge endpoint is a present vertex
        - at most one edge per (source, target); adding again overwrites the weight
        - neighbor iteration follows edge insertion order

    Failures are reported with False / None / [] rather than exceptions.
    """

    def __init__(self) -> None:
        self._adjacency: dict[VertexId, dict[VertexId, Weight]] = {}
        self._labels: dict[VertexId, str] = {}

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._adjacency)}, edges={self.edge_count()})"

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_vertex(self, vertex_id: VertexId, label: str | None = None) -> bool:
        """Add a vertex. Returns False if the id is already present. O(1)."""
        if vertex_id in self._adjacency:
            return False
        self._adjacency[vertex_id] = {}
        self._labels[vertex_id] = label if label else vertex_id
        return True

    def add_edge(self, source: VertexId, target: VertexId, weight: Weight = 1) -> bool:
        """Set the directed edge source -> target. Returns False if an endpoint is missing."""
        if source not in self._adjacency or target not in self._adjacency:
            return False
        self._adjacency[source][target] = weight
        return True

    def remove_vertex(self, vertex_id: VertexId) -> bool:
        """Remove a vertex with its outgoing and incoming edges.

        Incoming edges are not indexed, so every adjacency map is scanned: O(V + E).
        """
        if vertex_id not in self._adjacency:
            return False

        for edges in self._adjacency.values():
            edges.pop(vertex_id, None)

        del self._adjacency[vertex_id]
        del self._labels[vertex_id]
        return True

    def remove_edge(self, source: VertexId, target: VertexId) -> bool:
        edges = self._adjacency.get(source)
        if edges is None or target not in edges:
            return False
        del edges[target]
        return True

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._adjacency

    def has_edge(self, source: VertexId, target: VertexId) -> bool:
        return source in self._adjacency and target in self._adjacency[source]

    def neighbors(self, vertex_id: VertexId) -> dict[VertexId, Weight] | None:
        """Copy of the outgoing edges of a vertex, or None if it is absent."""
        edges = self._adjacency.get(vertex_id)
        return dict(edges) if edges is not None else None

    def vertices(self) -> list[VertexId]:
        return list(self._adjacency)

    def vertex_label(self, vertex_id: VertexId) -> str | None:
        return self._labels.get(vertex_id)

    def edges(self) -> list[GraphEdge]:
        return [
            {"source": source, "target": target, "weight": weight}
            for source, targets in self._adjacency.items()
            for target, weight in targets.items()
        ]

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def bfs(self, start: VertexId) -> list[VertexId]:
        """Breadth-first visit order from start; [] if start is absent."""
        if start not in self._adjacency:
            return []

        visited = {start}
        frontier: deque[VertexId] = deque([start])
        order: list[VertexId] = []

        while frontier:
            current = frontier.popleft()
            order.append(current)
            for neighbor in self._adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    frontier.append(neighbor)

        return order

    def dfs(self, start: VertexId) -> list[VertexId]:
        """Depth-first (preorder) visit order from start; [] if start is absent."""
        if start not in self._adjacency:
            return []

        visited: set[VertexId] = set()
        order: list[VertexId] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            # Reversed so the first-added neighbor is popped first
            stack.extend(n for n in reversed(self._adjacency[vertex]) if n not in visited)
        return order

    def graph_data(self) -> GraphData:
        """Vertices with labels and all edges, for rendering."""
        return {
            "nodes": [{"id": vid, "label": label} for vid, label in self._labels.items()],
            "edges": self.edges(),
        }
