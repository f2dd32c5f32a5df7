"""Data-structure engine and timer back-ends."""

from .bst import BinarySearchTree, TreeNode
from .graph import Graph
from .hash_table import HashTable
from .linked_list import LinkedList, ListNode
from .queue import Queue
from .scheduler import AsyncioScheduler, ManualScheduler, ThreadingScheduler
from .stack import Stack

__all__ = [
    "BinarySearchTree",
    "TreeNode",
    "Graph",
    "HashTable",
    "LinkedList",
    "ListNode",
    "Queue",
    "Stack",
    "AsyncioScheduler",
    "ManualScheduler",
    "ThreadingScheduler",
]
