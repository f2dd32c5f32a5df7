"""FIFO queue backed by a Python list.

Time Complexity:
enqueue/peek: O(1)
dequeue: O(n), every remaining element shifts one slot forward.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import Number


class Queue:
    """First-in first-out container of numeric values.

    dequeue() and peek() on an empty queue return None.
    """

    def __init__(self, initial: list[Number] | None = None) -> None:
        self._items: list[Number] = list(initial) if initial else []

    def __repr__(self) -> str:
        return f"Queue({self._items})"

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: Number) -> Queue:
        self._items.append(value)
        return self

    def dequeue(self) -> Number | None:
        if self.is_empty():
            return None
        return self._items.pop(0)

    def peek(self) -> Number | None:
        if self.is_empty():
            return None
        return self._items[0]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def size(self) -> int:
        return len(self._items)

    def items(self) -> list[Number]:
        """Returns a copy of the contents, front first."""
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()
