"""Phase plans for every animated operation.

A plan builder turns one logical operation into the ordered steps the
sequencer walks through. Each step names its phase, how long it is held,
the code excerpt to show, a description, an optional highlight and an
optional action. The action of the MUTATE step is the only place a plan
changes its structure; read-only operations compute their result in an
action on CONFIRM (or on MUTATE for traversals).

Validators return the message a caller shows instead of starting an
operation whose precondition fails (empty container, missing key, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from ..components.bst import BinarySearchTree
from ..components.graph import Graph
from ..components.hash_table import HashTable
from ..components.linked_list import LinkedList
from ..components.queue import Queue
from ..components.stack import Stack
from .config import SequencerConfig
from .errors import UnknownOperationError, UnsupportedStructureError
from .types import Phase, StructureFamily

if TYPE_CHECKING:
    from ..interfaces.structures import LinearContainer


@dataclass(frozen=True)
class Highlight:
    """What a renderer should emphasize.

    kind is one of "index" (stack/queue/list slot), "node" (tree value),
    "path" (ordered tree values or vertex ids), "vertex", "edge"
    ((source, target) pairs), "bucket" (bucket index) or "entry"
    ((bucket index, key) pairs).
    """

    kind: str
    targets: tuple[Any, ...]


@dataclass
class OperationContext:
    """Mutable scratch space shared by the steps of one operation."""

    family: StructureFamily
    operation: str
    operand: Any
    structure: Any
    result: Any = None


def _no_highlight(ctx: OperationContext) -> Highlight | None:
    return None


@dataclass(frozen=True)
class PhaseStep:
    phase: Phase
    hold_ms: int
    snippet: str
    describe: Callable[[OperationContext], str]
    highlight: Callable[[OperationContext], Highlight | None] = _no_highlight
    action: Callable[[OperationContext], Any] | None = None


PlanBuilder = Callable[[OperationContext, SequencerConfig], list[PhaseStep]]
Validator = Callable[[Any, Any], str | None]


def _index(i: int) -> Highlight | None:
    return Highlight("index", (i,)) if i >= 0 else None


def _const(text: str) -> Callable[[OperationContext], str]:
    return lambda ctx: text


def _call(fn: Callable[..., Any], *args: Any) -> Callable[[OperationContext], None]:
    """Action running fn(*args) for its side effect only."""

    def run(ctx: OperationContext) -> None:
        fn(*args)

    return run


# -----------------------------
# Stack
# -----------------------------
def _stack_push(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    stack: Stack = ctx.structure
    value = ctx.operand
    top = lambda c: _index(stack.size() - 1)  # noqa: E731
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "push", _const(f"Pushing {value} onto the stack")),
        PhaseStep(
            Phase.MUTATE, cfg.mutate_ms, "push", _const(f"Pushing {value} onto the stack"),
            top, action=_call(stack.push, value),
        ),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "push", _const(f"Pushed {value} onto the stack"), top),
    ]


def _stack_pop(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    stack: Stack = ctx.structure
    top_item = stack.peek()
    top_index = stack.size() - 1
    return [
        PhaseStep(
            Phase.PREPARE, cfg.prepare_ms, "pop", _const(f"Popping {top_item} from the stack"),
            lambda c: _index(top_index),
        ),
        PhaseStep(
            Phase.MUTATE, cfg.mutate_ms, "pop", _const(f"Popping {top_item} from the stack"),
            action=lambda c: stack.pop(),
        ),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "pop", lambda c: f"Popped {c.result} from the stack"),
    ]


def _stack_peek(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    stack: Stack = ctx.structure
    return [
        PhaseStep(
            Phase.CONFIRM, cfg.peek_confirm_ms, "peek",
            lambda c: f"Peeking at the top item: {c.result}",
            lambda c: _index(stack.size() - 1), action=lambda c: stack.peek(),
        ),
    ]


def _empty_check(message: str) -> Validator:
    def check(container: LinearContainer, operand: Any) -> str | None:
        return message if container.is_empty() else None

    return check


# -----------------------------
# Queue
# -----------------------------
def _queue_enqueue(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    queue: Queue = ctx.structure
    value = ctx.operand
    rear = lambda c: _index(queue.size() - 1)  # noqa: E731
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "enqueue", _const(f"Enqueuing {value} to the queue")),
        PhaseStep(
            Phase.MUTATE, cfg.mutate_ms, "enqueue", _const(f"Enqueuing {value} to the queue"),
            rear, action=_call(queue.enqueue, value),
        ),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "enqueue", _const(f"Enqueued {value} to the queue"), rear),
    ]


def _queue_dequeue(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    queue: Queue = ctx.structure
    front_item = queue.peek()
    return [
        PhaseStep(
            Phase.PREPARE, cfg.prepare_ms, "dequeue", _const(f"Dequeuing {front_item} from the queue"),
            lambda c: _index(0),
        ),
        PhaseStep(
            Phase.MUTATE, cfg.mutate_ms, "dequeue", _const(f"Dequeuing {front_item} from the queue"),
            action=lambda c: queue.dequeue(),
        ),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "dequeue", lambda c: f"Dequeued {c.result} from the queue"),
    ]


def _queue_peek(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    queue: Queue = ctx.structure
    return [
        PhaseStep(
            Phase.CONFIRM, cfg.peek_confirm_ms, "peek",
            lambda c: f"Peeking at the front item: {c.result}",
            lambda c: _index(0), action=lambda c: queue.peek(),
        ),
    ]


# -----------------------------
# Linked list
# -----------------------------
def _list_insert(where: str) -> PlanBuilder:
    def build(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
        lst: LinkedList = ctx.structure
        if where == "position":
            value, position = ctx.operand
            target = min(max(position, 0), lst.len())
            mutate = _call(lst.insert_at_position, value, position)
            phrase = f"at position {target}"
        elif where == "beginning":
            value, target = ctx.operand, 0
            mutate = _call(lst.insert_at_beginning, value)
            phrase = "at the beginning of the list"
        else:
            value, target = ctx.operand, lst.len()
            mutate = _call(lst.insert_at_end, value)
            phrase = "at the end of the list"
        snippet = f"insert_at_{where}"
        return [
            PhaseStep(
                Phase.PREPARE, cfg.prepare_ms, snippet, _const(f"Inserting {value} {phrase}"),
                lambda c: _index(target - 1),
            ),
            PhaseStep(
                Phase.MUTATE, cfg.mutate_ms, snippet, _const(f"Linking the new node for {value}"),
                lambda c: _index(target), action=mutate,
            ),
            PhaseStep(
                Phase.CONFIRM, cfg.confirm_ms, snippet,
                _const(f"Inserted {value} at position {target} successfully"), lambda c: _index(target),
            ),
        ]

    return build


def _list_delete(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    lst: LinkedList = ctx.structure
    value = ctx.operand
    position = lst.search(value)
    return [
        PhaseStep(
            Phase.PREPARE, cfg.prepare_ms, "delete", _const(f"Deleting {value} from the list"),
            lambda c: _index(position),
        ),
        PhaseStep(
            Phase.MUTATE, cfg.mutate_ms, "delete", _const(f"Unlinking the node at position {position}"),
            action=lambda c: lst.delete(value),
        ),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "delete", _const(f"Deleted {value} successfully")),
    ]


def _list_search(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    lst: LinkedList = ctx.structure
    value = ctx.operand

    def outcome(c: OperationContext) -> str:
        if c.result < 0:
            return f"{value} not found in the list"
        return f"Found {value} at position {c.result}"

    return [
        PhaseStep(Phase.PREPARE, cfg.find_prepare_ms, "search", _const(f"Searching for {value} in the list")),
        PhaseStep(
            Phase.CONFIRM, cfg.find_confirm_ms, "search", outcome,
            lambda c: _index(c.result), action=lambda c: lst.search(value),
        ),
    ]


def _list_validate_delete(lst: LinkedList, value: Any) -> str | None:
    return None if lst.search(value) >= 0 else f"Value {value} not found in the list"


# -----------------------------
# Binary search tree
# -----------------------------
def _tree_path(tree: BinarySearchTree, value: Any) -> Highlight | None:
    path = tree.search_path(value)
    return Highlight("path", tuple(path)) if path else None


def _tree_insert(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    tree: BinarySearchTree = ctx.structure
    value = ctx.operand
    duplicate = tree.contains(value)
    path = _tree_path(tree, value)
    done = f"{value} is already in the tree" if duplicate else f"Inserted {value} successfully"
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "insert", _const(f"Inserting {value} into the tree"),
                  lambda c: path),
        PhaseStep(
            Phase.MUTATE, cfg.mutate_ms, "insert", _const(f"Inserting {value} into the tree"),
            lambda c: Highlight("node", (value,)), action=_call(tree.insert, value),
        ),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "insert", _const(done), lambda c: Highlight("node", (value,))),
    ]


def _tree_find(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    tree: BinarySearchTree = ctx.structure
    value = ctx.operand
    path = _tree_path(tree, value)

    def outcome(c: OperationContext) -> str:
        return f"Found {value} in the tree" if c.result else f"{value} not found in the tree"

    return [
        PhaseStep(Phase.PREPARE, cfg.find_prepare_ms, "find", _const(f"Finding {value} in the tree"),
                  lambda c: path),
        PhaseStep(
            Phase.CONFIRM, cfg.find_confirm_ms, "find", outcome,
            lambda c: Highlight("node", (value,)) if c.result else path,
            action=lambda c: tree.contains(value),
        ),
    ]


def _tree_remove(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    tree: BinarySearchTree = ctx.structure
    value = ctx.operand
    node = tree.find(value)
    path = _tree_path(tree, value)
    successor = None
    if node is None:
        case = f"{value} is not in the tree"
    elif node.is_leaf():
        case = f"Removing leaf {value}"
    elif node.left is None or node.right is None:
        case = f"Removing {value} and splicing in its only child"
    else:
        cursor = node.right
        while cursor.left is not None:
            cursor = cursor.left
        successor = cursor.value
        case = f"Replacing {value} with its in-order successor {successor}"
    after = (lambda c: Highlight("node", (successor,))) if successor is not None else _no_highlight
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "remove", _const(f"Removing {value} from the tree"),
                  lambda c: path),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "remove", _const(case), after,
                  action=_call(tree.remove, value)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "remove", _const(f"Removed {value} successfully"), after),
    ]


def _tree_traversal(order: str) -> PlanBuilder:
    label = {"in_order": "In-order", "pre_order": "Pre-order", "post_order": "Post-order"}[order]

    def build(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
        tree: BinarySearchTree = ctx.structure
        walk = getattr(tree, order)
        root = tree.root
        start = (lambda c: Highlight("node", (root.value,))) if root is not None else _no_highlight
        visited = lambda c: Highlight("path", tuple(c.result))  # noqa: E731
        return [
            PhaseStep(Phase.PREPARE, cfg.prepare_ms, "traversal", _const(f"Starting {label.lower()} traversal"),
                      start),
            PhaseStep(Phase.MUTATE, cfg.traversal_mutate_ms, "traversal", _const(f"{label} traversal"),
                      visited, action=lambda c: walk()),
            PhaseStep(
                Phase.CONFIRM, cfg.traversal_confirm_ms, "traversal",
                lambda c: f"{label} traversal result: {' → '.join(str(v) for v in c.result)}", visited,
            ),
        ]

    return build


def _tree_validate_remove(tree: BinarySearchTree, value: Any) -> str | None:
    return None if tree.contains(value) else f"Value {value} not found in the tree"


# -----------------------------
# Graph
# -----------------------------
def _vertex_operand(operand: Any) -> tuple[str, str | None]:
    if isinstance(operand, (tuple, list)):
        vertex_id, label = operand
        return vertex_id, label
    return operand, None


def _edge_operand(operand: Any) -> tuple[str, str, Any]:
    if len(operand) == 3:
        return operand[0], operand[1], operand[2]
    return operand[0], operand[1], 1


def _graph_add_vertex(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    graph: Graph = ctx.structure
    vertex_id, label = _vertex_operand(ctx.operand)
    here = lambda c: Highlight("vertex", (vertex_id,))  # noqa: E731
    text = f"Adding vertex {vertex_id} ({label or vertex_id})"
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "add_vertex", _const(text)),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "add_vertex", _const(text), here,
                  action=lambda c: graph.add_vertex(vertex_id, label)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "add_vertex",
                  _const(f"Added vertex {vertex_id} successfully"), here),
    ]


def _graph_add_edge(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    graph: Graph = ctx.structure
    source, target, weight = _edge_operand(ctx.operand)
    ends = lambda c: Highlight("vertex", (source, target))  # noqa: E731
    edge = lambda c: Highlight("edge", ((source, target),))  # noqa: E731
    text = f"Adding edge from {source} to {target}"
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "add_edge", _const(text), ends),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "add_edge", _const(text), edge,
                  action=lambda c: graph.add_edge(source, target, weight)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "add_edge",
                  _const(f"Added edge from {source} to {target} successfully"), edge),
    ]


def _graph_remove_vertex(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    graph: Graph = ctx.structure
    vertex_id = ctx.operand
    incident = tuple(
        (e["source"], e["target"]) for e in graph.edges()
        if vertex_id in (e["source"], e["target"])
    )
    text = f"Removing vertex {vertex_id}"
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "remove_vertex", _const(text),
                  lambda c: Highlight("edge", incident) if incident else Highlight("vertex", (vertex_id,))),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "remove_vertex", _const(text),
                  action=lambda c: graph.remove_vertex(vertex_id)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "remove_vertex",
                  _const(f"Removed vertex {vertex_id} successfully")),
    ]


def _graph_remove_edge(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    graph: Graph = ctx.structure
    source, target, _ = _edge_operand(ctx.operand)
    text = f"Removing edge from {source} to {target}"
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "remove_edge", _const(text),
                  lambda c: Highlight("edge", ((source, target),))),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "remove_edge", _const(text),
                  lambda c: Highlight("vertex", (source, target)),
                  action=lambda c: graph.remove_edge(source, target)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "remove_edge",
                  _const(f"Removed edge from {source} to {target} successfully")),
    ]


def _graph_traversal(kind: str) -> PlanBuilder:
    name = kind.upper()

    def build(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
        graph: Graph = ctx.structure
        start = ctx.operand
        walk = getattr(graph, kind)
        visited = lambda c: Highlight("path", tuple(c.result))  # noqa: E731
        return [
            PhaseStep(Phase.PREPARE, cfg.prepare_ms, kind, _const(f"Starting {name} traversal from {start}"),
                      lambda c: Highlight("vertex", (start,))),
            PhaseStep(Phase.MUTATE, cfg.traversal_mutate_ms, kind, _const(f"{name} traversal from {start}"),
                      visited, action=lambda c: walk(start)),
            PhaseStep(Phase.CONFIRM, cfg.traversal_confirm_ms, kind,
                      lambda c: f"{name} traversal result: {' → '.join(c.result)}", visited),
        ]

    return build


def _graph_validate_vertex(graph: Graph, operand: Any) -> str | None:
    return None if graph.has_vertex(operand) else f"Vertex {operand} does not exist"


def _graph_validate_add_vertex(graph: Graph, operand: Any) -> str | None:
    vertex_id, _ = _vertex_operand(operand)
    return f"Vertex {vertex_id} already exists" if graph.has_vertex(vertex_id) else None


def _graph_validate_add_edge(graph: Graph, operand: Any) -> str | None:
    source, target, _ = _edge_operand(operand)
    for vertex_id in (source, target):
        if not graph.has_vertex(vertex_id):
            return f"Vertex {vertex_id} does not exist"
    return None


def _graph_validate_remove_edge(graph: Graph, operand: Any) -> str | None:
    source, target, _ = _edge_operand(operand)
    return None if graph.has_edge(source, target) else f"Edge from {source} to {target} does not exist"


# -----------------------------
# Hash table
# -----------------------------
def _hash_set(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    table: HashTable = ctx.structure
    key, value = ctx.operand
    index = table.hash(key)
    existed = table.has(key)
    entry = lambda c: Highlight("entry", ((index, key),))  # noqa: E731
    text = f"Setting {key}: {value} (Hash: {index})"
    done = f"Updated {key}: {value} successfully" if existed else f"Set {key}: {value} successfully"
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "hash", _const(text), lambda c: Highlight("bucket", (index,))),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "set", _const(text), entry,
                  action=lambda c: table.set(key, value)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "set", _const(done), entry),
    ]


def _hash_get(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    table: HashTable = ctx.structure
    key = ctx.operand
    index = table.hash(key)
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "hash",
                  _const(f'Getting value for key "{key}" (Hash: {index})'),
                  lambda c: Highlight("bucket", (index,))),
        PhaseStep(
            Phase.CONFIRM, cfg.confirm_ms, "get",
            lambda c: f"Found value: {c.result}" if table.has(key) else f'Key "{key}" not found',
            lambda c: Highlight("entry", ((index, key),)), action=lambda c: table.get(key),
        ),
    ]


def _hash_delete(ctx: OperationContext, cfg: SequencerConfig) -> list[PhaseStep]:
    table: HashTable = ctx.structure
    key = ctx.operand
    index = table.hash(key)
    text = f'Deleting key "{key}" (Hash: {index})'
    return [
        PhaseStep(Phase.PREPARE, cfg.prepare_ms, "hash", _const(text),
                  lambda c: Highlight("entry", ((index, key),))),
        PhaseStep(Phase.MUTATE, cfg.mutate_ms, "delete", _const(text),
                  lambda c: Highlight("bucket", (index,)), action=lambda c: table.delete(key)),
        PhaseStep(Phase.CONFIRM, cfg.confirm_ms, "delete", _const(f'Deleted key "{key}" successfully')),
    ]


def _hash_validate_key(table: HashTable, key: Any) -> str | None:
    return None if table.has(key) else f'Key "{key}" not found'


# -----------------------------
# Registry
# -----------------------------
PLAN_BUILDERS: dict[StructureFamily, dict[str, PlanBuilder]] = {
    StructureFamily.STACK: {"push": _stack_push, "pop": _stack_pop, "peek": _stack_peek},
    StructureFamily.QUEUE: {"enqueue": _queue_enqueue, "dequeue": _queue_dequeue, "peek": _queue_peek},
    StructureFamily.LINKED_LIST: {
        "insert_at_beginning": _list_insert("beginning"),
        "insert_at_end": _list_insert("end"),
        "insert_at_position": _list_insert("position"),
        "delete": _list_delete,
        "search": _list_search,
    },
    StructureFamily.BINARY_TREE: {
        "insert": _tree_insert,
        "find": _tree_find,
        "remove": _tree_remove,
        "in_order": _tree_traversal("in_order"),
        "pre_order": _tree_traversal("pre_order"),
        "post_order": _tree_traversal("post_order"),
    },
    StructureFamily.GRAPH: {
        "add_vertex": _graph_add_vertex,
        "add_edge": _graph_add_edge,
        "remove_vertex": _graph_remove_vertex,
        "remove_edge": _graph_remove_edge,
        "bfs": _graph_traversal("bfs"),
        "dfs": _graph_traversal("dfs"),
    },
    StructureFamily.HASH_TABLE: {"set": _hash_set, "get": _hash_get, "delete": _hash_delete},
}

VALIDATORS: dict[StructureFamily, dict[str, Validator]] = {
    StructureFamily.STACK: {"pop": _empty_check("Stack is empty"), "peek": _empty_check("Stack is empty")},
    StructureFamily.QUEUE: {"dequeue": _empty_check("Queue is empty"), "peek": _empty_check("Queue is empty")},
    StructureFamily.LINKED_LIST: {"delete": _list_validate_delete},
    StructureFamily.BINARY_TREE: {"remove": _tree_validate_remove},
    StructureFamily.GRAPH: {
        "add_vertex": _graph_validate_add_vertex,
        "add_edge": _graph_validate_add_edge,
        "remove_vertex": _graph_validate_vertex,
        "remove_edge": _graph_validate_remove_edge,
        "bfs": _graph_validate_vertex,
        "dfs": _graph_validate_vertex,
    },
    StructureFamily.HASH_TABLE: {"get": _hash_validate_key, "delete": _hash_validate_key},
}

_FAMILIES: tuple[tuple[type, StructureFamily], ...] = (
    (Stack, StructureFamily.STACK),
    (Queue, StructureFamily.QUEUE),
    (LinkedList, StructureFamily.LINKED_LIST),
    (BinarySearchTree, StructureFamily.BINARY_TREE),
    (Graph, StructureFamily.GRAPH),
    (HashTable, StructureFamily.HASH_TABLE),
)


def family_of(structure: Any) -> StructureFamily:
    """Structure family of an engine instance.

    Raises:
        UnsupportedStructureError: If structure is not an engine container
    """
    for cls, family in _FAMILIES:
        if isinstance(structure, cls):
            return family
    raise UnsupportedStructureError(f"Cannot animate {type(structure).__name__}")


def operations(family: StructureFamily) -> list[str]:
    return list(PLAN_BUILDERS[family])


def build_plan(ctx: OperationContext, config: SequencerConfig) -> list[PhaseStep]:
    """
    Raises:
        UnknownOperationError: If the family has no such operation
    """
    try:
        builder = PLAN_BUILDERS[ctx.family][ctx.operation]
    except KeyError:
        raise UnknownOperationError(
            f"Unknown {ctx.family.value} operation {ctx.operation!r}; "
            f"expected one of {', '.join(operations(ctx.family))}"
        ) from None
    return builder(ctx, config)


def validate(family: StructureFamily, structure: Any, operation: str, operand: Any) -> str | None:
    """Blocking message for an operation whose precondition fails, else None."""
    if operation not in PLAN_BUILDERS[family]:
        raise UnknownOperationError(f"Unknown {family.value} operation {operation!r}")
    check = VALIDATORS[family].get(operation)
    return check(structure, operand) if check else None
