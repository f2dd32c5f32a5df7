"""End-to-end tests driving structures through the sequencer.

Covers:
1. Full operation sessions per family
2. Supersession under real timers
3. Asyncio playback
4. Rendering each published highlight
"""

import asyncio
import threading

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from dsviz import (  # noqa: E402
    AsyncioScheduler,
    BinarySearchTree,
    Graph,
    HashTable,
    LinkedList,
    ManualScheduler,
    OperationSequencer,
    Phase,
    SequencerConfig,
    Stack,
    ThreadingScheduler,
)
from dsviz.render.mpl import draw_structure  # noqa: E402


@pytest.fixture
def scheduler():
    """Create a virtual-clock scheduler."""
    return ManualScheduler()


def run(seq, scheduler, operation, operand=None):
    """Validate, invoke and play one operation to completion."""
    message = seq.validate(operation, operand)
    if message is not None:
        return message
    seq.invoke(operation, operand)
    scheduler.run_until_idle()
    return seq.last_result


def test_tree_session(scheduler):
    """Test building, querying and pruning a tree."""
    tree = BinarySearchTree()
    seq = OperationSequencer(tree, scheduler=scheduler)

    for value in [10, 5, 15, 3, 7]:
        run(seq, scheduler, "insert", value)

    assert run(seq, scheduler, "in_order") == [3, 5, 7, 10, 15]
    assert run(seq, scheduler, "find", 7) is True
    run(seq, scheduler, "remove", 5)
    assert run(seq, scheduler, "pre_order") == [10, 7, 3, 15]
    assert run(seq, scheduler, "remove", 99) == "Value 99 not found in the tree"
    assert seq.phase is Phase.IDLE


def test_graph_session(scheduler):
    """Test building a graph, traversing and removing a vertex."""
    graph = Graph()
    seq = OperationSequencer(graph, scheduler=scheduler)

    for vertex_id in "ABCDE":
        run(seq, scheduler, "add_vertex", vertex_id)
    for edge in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E")]:
        run(seq, scheduler, "add_edge", edge)

    assert run(seq, scheduler, "bfs", "A") == ["A", "B", "C", "D", "E"]
    assert run(seq, scheduler, "dfs", "A") == ["A", "B", "D", "E", "C"]

    run(seq, scheduler, "remove_vertex", "E")
    assert graph.edge_count() == 3
    assert run(seq, scheduler, "bfs", "E") == "Vertex E does not exist"
    run(seq, scheduler, "remove_edge", ("A", "C"))
    assert run(seq, scheduler, "bfs", "A") == ["A", "B", "D"]


def test_hash_table_session(scheduler):
    """Test set, update, get and delete with colliding keys."""
    table = HashTable()
    seq = OperationSequencer(table, scheduler=scheduler)
    descriptions = []
    seq.on_phase(lambda u: descriptions.append(u.description))

    run(seq, scheduler, "set", ("age", 30))
    run(seq, scheduler, "set", ("gae", 31))
    run(seq, scheduler, "set", ("age", 32))

    assert "Updated age: 32 successfully" in descriptions
    assert run(seq, scheduler, "get", "gae") == 31
    assert run(seq, scheduler, "delete", "gae") is True
    assert run(seq, scheduler, "get", "gae") == 'Key "gae" not found'
    assert table.entries() == [{"key": "age", "value": 32}]


def test_linked_list_session(scheduler):
    """Test every linked list operation through the sequencer."""
    lst = LinkedList()
    seq = OperationSequencer(lst, scheduler=scheduler)

    run(seq, scheduler, "insert_at_end", 2)
    run(seq, scheduler, "insert_at_beginning", 1)
    run(seq, scheduler, "insert_at_position", (3, 10))
    assert lst.to_list() == [1, 2, 3]

    assert run(seq, scheduler, "search", 3) == 2
    assert run(seq, scheduler, "search", 9) == -1
    run(seq, scheduler, "delete", 2)
    assert lst.to_list() == [1, 3]


def test_threading_supersession():
    """Test a superseded operation leaves no trace under real timers."""
    config = SequencerConfig(time_scale=0.01)
    stack = Stack()
    seq = OperationSequencer(stack, scheduler=ThreadingScheduler(), config=config)
    done = threading.Event()
    ends = []

    def on_end(end):
        ends.append(end)
        if not end.cancelled:
            done.set()

    seq.on_end(on_end)
    seq.invoke("push", 1)
    seq.invoke("push", 2)

    assert done.wait(timeout=5.0)
    seq.close()

    assert stack.items() == [2]
    assert [e.cancelled for e in ends] == [True, False]


def test_asyncio_playback():
    """Test the sequencer running on an asyncio loop."""

    async def scenario():
        loop = asyncio.get_running_loop()
        finished = loop.create_future()
        stack = Stack([1])
        seq = OperationSequencer(
            stack, scheduler=AsyncioScheduler(), config=SequencerConfig(time_scale=0.001)
        )
        seq.on_end(lambda end: finished.set_result(end))
        seq.invoke("pop")
        end = await asyncio.wait_for(finished, timeout=5.0)
        seq.close()
        return end, stack

    end, stack = asyncio.run(scenario())
    assert end.result == 1
    assert stack.is_empty()


def test_every_published_highlight_renders(scheduler):
    """Test each phase of a session can be drawn."""
    tree = BinarySearchTree([50, 30, 70])
    seq = OperationSequencer(tree, scheduler=scheduler)
    figures = []
    seq.on_phase(lambda u: figures.append(draw_structure(tree, highlight=u.highlight, title=u.description)))

    for operation, operand in [("insert", 42), ("find", 42), ("remove", 30), ("post_order", None)]:
        seq.invoke(operation, operand)
        scheduler.run_until_idle()

    assert len(figures) == 3 + 2 + 3 + 3
