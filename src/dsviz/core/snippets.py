"""Reference code excerpts shown next to each animated operation.

Excerpts are read from the engine's own source so the displayed code is
the code that runs. They are opaque display text to consumers.
"""

from __future__ import annotations

import inspect
import textwrap
from functools import lru_cache
from typing import Callable

from ..components.bst import BinarySearchTree
from ..components.graph import Graph
from ..components.hash_table import HashTable
from ..components.linked_list import LinkedList
from ..components.queue import Queue
from ..components.stack import Stack
from .errors import UnknownOperationError
from .types import StructureFamily

_SOURCES: dict[StructureFamily, dict[str, tuple[Callable, ...]]] = {
    StructureFamily.STACK: {
        "push": (Stack.push,),
        "pop": (Stack.pop,),
        "peek": (Stack.peek,),
    },
    StructureFamily.QUEUE: {
        "enqueue": (Queue.enqueue,),
        "dequeue": (Queue.dequeue,),
        "peek": (Queue.peek,),
    },
    StructureFamily.LINKED_LIST: {
        "insert_at_beginning": (LinkedList.insert_at_beginning,),
        "insert_at_end": (LinkedList.insert_at_end,),
        "insert_at_position": (LinkedList.insert_at_position,),
        "delete": (LinkedList.delete,),
        "search": (LinkedList.search, LinkedList.find_node),
    },
    StructureFamily.BINARY_TREE: {
        "insert": (BinarySearchTree.insert,),
        "find": (BinarySearchTree.find,),
        "remove": (BinarySearchTree.remove, BinarySearchTree._remove_node),
        "traversal": (BinarySearchTree._walk,),
    },
    StructureFamily.GRAPH: {
        "add_vertex": (Graph.add_vertex,),
        "add_edge": (Graph.add_edge,),
        "remove_vertex": (Graph.remove_vertex,),
        "remove_edge": (Graph.remove_edge,),
        "bfs": (Graph.bfs,),
        "dfs": (Graph.dfs,),
    },
    StructureFamily.HASH_TABLE: {
        "hash": (HashTable.hash,),
        "set": (HashTable.set, HashTable._find),
        "get": (HashTable.get, HashTable._find),
        "delete": (HashTable.delete, HashTable._find),
    },
}

# Shown while a structure is empty and nothing is animating.
EMPTY_SNIPPETS: dict[StructureFamily, str] = {
    StructureFamily.STACK: "# The stack is empty.\n# Use push to add items.",
    StructureFamily.QUEUE: "# The queue is empty.\n# Use enqueue to add items.",
    StructureFamily.LINKED_LIST: "# The list is empty.\n# Use insert_at_beginning or insert_at_end to add nodes.",
    StructureFamily.BINARY_TREE: "# The tree is empty.\n# Use insert to add nodes.",
    StructureFamily.GRAPH: "# The graph is empty.\n# Use add_vertex and add_edge to build it.",
    StructureFamily.HASH_TABLE: "# Every bucket is empty.\n# Use set to add key/value pairs.",
}


def snippet_ids(family: StructureFamily) -> list[str]:
    return list(_SOURCES[family])


@lru_cache(maxsize=None)
def get_snippet(family: StructureFamily, snippet_id: str) -> str:
    """Return the excerpt for snippet_id, or the family's empty-state text for "empty".

    Raises:
        UnknownOperationError: If the family has no such excerpt
    """
    if snippet_id == "empty":
        return EMPTY_SNIPPETS[family]
    try:
        sources = _SOURCES[family][snippet_id]
    except KeyError:
        raise UnknownOperationError(f"No code snippet {snippet_id!r} for {family.value}") from None
    return "\n\n".join(textwrap.dedent(inspect.getsource(fn)).rstrip() for fn in sources)
