"""LIFO stack backed by a Python list.

Time Complexity:
push/pop/peek: O(1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import Number


class Stack:
    """Last-in first-out container of numeric values.

    pop() and peek() on an empty stack return None instead of raising;
    callers check is_empty() first or treat None as a no-op.
    """

    def __init__(self, initial: list[Number] | None = None) -> None:
        self._items: list[Number] = list(initial) if initial else []

    def __repr__(self) -> str:
        return f"Stack({self._items})"

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Number) -> Stack:
        self._items.append(value)
        return self

    def pop(self) -> Number | None:
        if self.is_empty():
            return None
        return self._items.pop()

    def peek(self) -> Number | None:
        if self.is_empty():
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def size(self) -> int:
        return len(self._items)

    def items(self) -> list[Number]:
        """Returns a copy of the contents, bottom first."""
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()
