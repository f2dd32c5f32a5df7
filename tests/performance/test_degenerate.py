"""Degenerate-shape and scaling checks for the engine."""

import random
import time

from dsviz.components.bst import BinarySearchTree
from dsviz.components.graph import Graph
from dsviz.components.hash_table import HashTable
from dsviz.components.scheduler import ManualScheduler
from dsviz.components.stack import Stack
from dsviz.core.sequencer import OperationSequencer
from dsviz.render import layout


def test_sorted_inserts_degenerate_to_a_chain():
    """Test sorted insertion gives height n since the tree never rebalances."""
    n = 500
    tree = BinarySearchTree(list(range(n)))

    assert tree.height() == n
    assert tree.in_order() == list(range(n))


def test_deep_sorted_tree_operations():
    """Test every walk and remove on a chain deeper than the recursion limit."""
    n = 1500
    tree = BinarySearchTree(list(range(n)))

    assert tree.size() == n
    assert tree.height() == n
    assert tree.in_order() == list(range(n))
    assert tree.pre_order() == list(range(n))
    assert tree.post_order() == list(reversed(range(n)))

    positions = layout.tree_layout(tree)
    assert positions[n - 1] == (float(n - 1), float(-(n - 1)))
    assert len(layout.tree_edges(tree)) == n - 1

    tree.remove(n // 2)
    tree.remove(n - 1)
    tree.remove(0)
    assert tree.size() == n - 3
    assert tree.in_order() == [v for v in range(1, n - 1) if v != n // 2]
    assert tree.height() == n - 3


def test_random_inserts_stay_shallow():
    """Test random insertion order keeps the tree far shallower than n."""
    values = list(range(2000))
    random.Random(7).shuffle(values)
    tree = BinarySearchTree(values)

    assert tree.height() < 60


def test_single_bucket_table():
    """Test capacity 1 chains every key into one bucket."""
    table = HashTable(1)
    for i in range(1000):
        table.set(f"key{i}", i)

    assert len(table.buckets()[0]) == 1000
    assert table.get("key999") == 999
    assert table.load_factor() == 1000.0


def test_large_graph_bfs():
    """Benchmark BFS over a long chain with shortcuts."""
    graph = Graph()
    n = 5000
    for i in range(n):
        graph.add_vertex(str(i))
    for i in range(n - 1):
        graph.add_edge(str(i), str(i + 1))
        if i + 10 < n:
            graph.add_edge(str(i), str(i + 10))

    start_time = time.time()
    order = graph.bfs("0")
    elapsed = time.time() - start_time

    print(f"\nBFS over {n} vertices: {elapsed * 1000:.1f} ms")
    assert len(order) == n
    assert elapsed < 2.0


def test_long_chain_dfs():
    """Test DFS walks a chain deeper than the recursion limit in order."""
    graph = Graph()
    n = 1500
    for i in range(n):
        graph.add_vertex(str(i))
    for i in range(n - 1):
        graph.add_edge(str(i), str(i + 1))

    assert graph.dfs("0") == [str(i) for i in range(n)]


def test_many_sequenced_operations():
    """Benchmark sequencing thousands of operations on a virtual clock."""
    scheduler = ManualScheduler()
    stack = Stack()
    seq = OperationSequencer(stack, scheduler=scheduler)

    start_time = time.time()
    for i in range(2000):
        seq.invoke("push", i)
        scheduler.run_until_idle()
    elapsed = time.time() - start_time

    print(f"\n2000 sequenced pushes: {elapsed * 1000:.1f} ms")
    assert stack.size() == 2000
    assert seq.generation == 2000
