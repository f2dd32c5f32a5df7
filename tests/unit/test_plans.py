"""Unit tests for phase plans, validators and code excerpts."""

import pytest

from dsviz.components.bst import BinarySearchTree
from dsviz.components.graph import Graph
from dsviz.components.hash_table import HashTable
from dsviz.components.linked_list import LinkedList
from dsviz.components.queue import Queue
from dsviz.components.stack import Stack
from dsviz.core.config import SequencerConfig
from dsviz.core.errors import UnknownOperationError
from dsviz.core.plans import PLAN_BUILDERS, OperationContext, build_plan, family_of, validate
from dsviz.core.snippets import EMPTY_SNIPPETS, get_snippet, snippet_ids
from dsviz.core.types import Phase, StructureFamily


@pytest.fixture
def graph():
    """Graph A -> B."""
    g = Graph()
    g.add_vertex("A")
    g.add_vertex("B")
    g.add_edge("A", "B")
    return g


def _phases(structure, operation, operand=None):
    ctx = OperationContext(family_of(structure), operation, operand, structure)
    return [step.phase for step in build_plan(ctx, SequencerConfig())]


def test_family_of():
    """Test every engine container maps to its family."""
    assert family_of(Stack()) is StructureFamily.STACK
    assert family_of(Queue()) is StructureFamily.QUEUE
    assert family_of(LinkedList()) is StructureFamily.LINKED_LIST
    assert family_of(BinarySearchTree()) is StructureFamily.BINARY_TREE
    assert family_of(Graph()) is StructureFamily.GRAPH
    assert family_of(HashTable()) is StructureFamily.HASH_TABLE


def test_phase_shapes(graph):
    """Test which phases each kind of operation walks through."""
    full = [Phase.PREPARE, Phase.MUTATE, Phase.CONFIRM]
    lookup = [Phase.PREPARE, Phase.CONFIRM]

    assert _phases(Stack(), "push", 1) == full
    assert _phases(Stack([1]), "peek") == [Phase.CONFIRM]
    assert _phases(Queue([1]), "peek") == [Phase.CONFIRM]
    assert _phases(LinkedList([1]), "search", 1) == lookup
    assert _phases(BinarySearchTree([1]), "find", 1) == lookup
    assert _phases(BinarySearchTree([1]), "post_order") == full
    assert _phases(graph, "bfs", "A") == full
    assert _phases(HashTable(), "get", "k") == lookup
    assert _phases(HashTable(), "set", ("k", 1)) == full


def test_building_a_plan_does_not_mutate(graph):
    """Test plan builders only inspect the structure."""
    stack = Stack([1, 2])
    _phases(stack, "pop")
    _phases(graph, "remove_vertex", "A")

    assert stack.items() == [1, 2]
    assert graph.has_vertex("A")


def test_remove_vertex_highlights_incident_edges(graph):
    """Test remove_vertex prepares by highlighting the edges that go with it."""
    ctx = OperationContext(StructureFamily.GRAPH, "remove_vertex", "B", graph)
    prepare = build_plan(ctx, SequencerConfig())[0]

    highlight = prepare.highlight(ctx)
    assert highlight.kind == "edge"
    assert highlight.targets == (("A", "B"),)


def test_unknown_operation_lists_alternatives():
    """Test build_plan names the valid operations."""
    ctx = OperationContext(StructureFamily.QUEUE, "push", 1, Queue())
    with pytest.raises(UnknownOperationError, match="enqueue, dequeue, peek"):
        build_plan(ctx, SequencerConfig())


@pytest.mark.parametrize(
    "structure, operation, operand, message",
    [
        (Stack(), "pop", None, "Stack is empty"),
        (Stack(), "peek", None, "Stack is empty"),
        (Queue(), "dequeue", None, "Queue is empty"),
        (LinkedList([1]), "delete", 2, "Value 2 not found in the list"),
        (BinarySearchTree([1]), "remove", 9, "Value 9 not found in the tree"),
        (HashTable(), "get", "k", 'Key "k" not found'),
        (HashTable(), "delete", "k", 'Key "k" not found'),
    ],
)
def test_validation_messages(structure, operation, operand, message):
    """Test blocking messages for failed preconditions."""
    assert validate(family_of(structure), structure, operation, operand) == message


def test_graph_validation(graph):
    """Test graph preconditions."""
    family = StructureFamily.GRAPH

    assert validate(family, graph, "bfs", "Z") == "Vertex Z does not exist"
    assert validate(family, graph, "add_edge", ("A", "Z")) == "Vertex Z does not exist"
    assert validate(family, graph, "add_vertex", "A") == "Vertex A already exists"
    assert validate(family, graph, "remove_edge", ("B", "A")) == "Edge from B to A does not exist"
    assert validate(family, graph, "add_edge", ("A", "B", 4)) is None
    assert validate(family, graph, "dfs", "A") is None


def test_every_operation_has_snippets():
    """Test every plan step references an excerpt that exists."""
    samples = {
        StructureFamily.STACK: Stack([1]),
        StructureFamily.QUEUE: Queue([1]),
        StructureFamily.LINKED_LIST: LinkedList([1]),
        StructureFamily.BINARY_TREE: BinarySearchTree([1]),
        StructureFamily.GRAPH: Graph(),
        StructureFamily.HASH_TABLE: HashTable(),
    }
    operands = {
        "insert_at_position": (1, 0),
        "add_edge": ("A", "B"),
        "remove_edge": ("A", "B"),
        "set": ("k", 1),
    }
    for family, builders in PLAN_BUILDERS.items():
        for operation in builders:
            default = "k" if family is StructureFamily.HASH_TABLE else 1
            ctx = OperationContext(family, operation, operands.get(operation, default), samples[family])
            for step in build_plan(ctx, SequencerConfig()):
                assert step.snippet in snippet_ids(family)
                assert get_snippet(family, step.snippet)


def test_snippets_come_from_engine_source():
    """Test excerpts show the engine's own code."""
    assert get_snippet(StructureFamily.GRAPH, "bfs").startswith("def bfs(")
    assert "def hash(" in get_snippet(StructureFamily.HASH_TABLE, "hash")
    assert "_remove_node" in get_snippet(StructureFamily.BINARY_TREE, "remove")


def test_empty_and_unknown_snippets():
    """Test the empty-state text and unknown excerpt ids."""
    assert get_snippet(StructureFamily.STACK, "empty") == EMPTY_SNIPPETS[StructureFamily.STACK]
    with pytest.raises(UnknownOperationError):
        get_snippet(StructureFamily.STACK, "enqueue")
