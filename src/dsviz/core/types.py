"""Common type definitions for dsviz.

Defines the primitive aliases and the export shapes shared by structures,
the sequencer and the renderer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypedDict

# Core primitive types
Number = int | float
VertexId = str
Key = str
Weight = int | float


class StructureFamily(str, Enum):
    """Structure families the sequencer knows how to animate."""

    STACK = "stack"
    QUEUE = "queue"
    LINKED_LIST = "linked_list"
    BINARY_TREE = "binary_tree"
    GRAPH = "graph"
    HASH_TABLE = "hash_table"


class Phase(str, Enum):
    """Sequencer states. IDLE is the resting state between operations."""

    IDLE = "idle"
    PREPARE = "prepare"
    MUTATE = "mutate"
    CONFIRM = "confirm"


class GraphNode(TypedDict):
    """A vertex as exported for visualization."""
    id: VertexId
    label: str


class GraphEdge(TypedDict):
    """A directed weighted edge as exported for visualization."""
    source: VertexId
    target: VertexId
    weight: Weight


class GraphData(TypedDict):
    """Vertex and edge lists describing a whole graph."""
    nodes: list[GraphNode]
    edges: list[GraphEdge]


class HashEntry(TypedDict):
    """A key/value pair stored in a hash table bucket."""
    key: Key
    value: Any
