"""dsviz - Data-structure engine and operation animation sequencer."""

from .components.bst import BinarySearchTree, TreeNode
from .components.graph import Graph
from .components.hash_table import HashTable
from .components.linked_list import LinkedList
from .components.queue import Queue
from .components.scheduler import AsyncioScheduler, ManualScheduler, ThreadingScheduler
from .components.stack import Stack
from .core.config import SequencerConfig
from .core.errors import (
    DSVizError,
    UnknownOperationError,
    UnsupportedStructureError,
    ConfigError,
)
from .core.plans import Highlight
from .core.sequencer import OperationEnd, OperationSequencer, PhaseUpdate
from .core.types import Phase, StructureFamily

__all__ = [
    "BinarySearchTree",
    "TreeNode",
    "Graph",
    "HashTable",
    "LinkedList",
    "Queue",
    "Stack",
    "AsyncioScheduler",
    "ManualScheduler",
    "ThreadingScheduler",
    "SequencerConfig",
    "DSVizError",
    "UnknownOperationError",
    "UnsupportedStructureError",
    "ConfigError",
    "Highlight",
    "OperationEnd",
    "OperationSequencer",
    "PhaseUpdate",
    "Phase",
    "StructureFamily",
]
