"""
A singly linked list of numeric values.

Time Complexity:
Search: O(n)
Insert at beginning: O(1)
Insert at end / position, delete: O(n) to find the insertion point
"""

from __future__ import annotations  # allows forward-referencing without quotes

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from ..core.types import Number


class ListNode:
    """
    A node holds a value and the next node it is linked to.
    """

    def __init__(self, value: Number) -> None:
        self.value: Number = value
        self.next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"[ListNode] {self.value}"

    def set_next(self, node: Optional[ListNode]):
        self.next = node

    def get_next(self) -> Optional[ListNode]:
        return self.next


class LinkedList:
    """
    LinkedList owns a chain of ListNodes starting at head.

    It implements insert (beginning, end, position), delete, search.
    """

    def __init__(self, initial: list[Number] | None = None) -> None:
        self.head: Optional[ListNode] = None
        for value in initial or []:
            self.insert_at_end(value)

    def __repr__(self) -> str:
        if self.head is None:
            return "[Head] [Tail]"
        output = "[Head] " + " -> ".join(str(v) for v in self.to_list()) + " [Tail]"
        return output

    def __len__(self) -> int:
        return self.len()

    def len(self) -> int:
        """Returns the number of elements in the linked list"""
        count = 0
        current = self.head
        while current is not None:
            count += 1
            current = current.get_next()
        return count

    def is_empty(self) -> bool:
        return self.head is None

    def get(self, index: int) -> Optional[ListNode]:
        """
        Returns the node at the index specified, or None when the
        index is negative or past the end of the list.
        """
        if index < 0:
            return None
        current = self.head
        for _ in range(index):
            if current is None:
                break
            current = current.get_next()
        return current

    def insert_at_beginning(self, value: Number) -> LinkedList:
        """
        Inserts a new element at the head of the linked list.
        O(1) since no scanning is involved.
        """
        new_node = ListNode(value)
        new_node.set_next(self.head)
        self.head = new_node
        return self

    def insert_at_end(self, value: Number) -> LinkedList:
        new_node = ListNode(value)
        if self.head is None:
            self.head = new_node
            return self

        current = self.head
        while current.get_next() is not None:
            current = current.get_next()
        current.set_next(new_node)
        return self

    def insert_at_position(self, value: Number, position: int) -> LinkedList:
        """
        Inserts an element so that it ends up at the index specified.
        Positions at or before 0 insert at the head; positions past the
        end append to the tail.
        """
        if position <= 0:
            return self.insert_at_beginning(value)

        prior = self.get(position - 1)
        if prior is None:
            return self.insert_at_end(value)

        new_node = ListNode(value)
        new_node.set_next(prior.get_next())
        prior.set_next(new_node)
        return self

    def find_node(self, value: Number) -> Optional[Tuple[ListNode, int]]:
        """
        Returns the first node holding value and its index, or None.
        O(n), since in the worst case it must scan the entire list
        """
        counter = 0
        current = self.head
        while current is not None:
            if current.value == value:
                return current, counter
            current = current.get_next()
            counter += 1
        return None

    def search(self, value: Number) -> int:
        """Returns the index of the first node holding value, or -1."""
        found = self.find_node(value)
        return -1 if found is None else found[1]

    def delete(self, value: Number) -> bool:
        """
        Unlinks the first node holding value.
        Returns False if the value does not exist.
        """
        if self.head is None:
            return False

        if self.head.value == value:
            self.head = self.head.get_next()
            return True

        prior = self.head
        current = prior.get_next()
        while current is not None:
            if current.value == value:
                prior.set_next(current.get_next())
                return True
            prior = current
            current = current.get_next()

        return False

    def to_list(self) -> list[Number]:
        values: list[Number] = []
        current = self.head
        while current is not None:
            values.append(current.value)
            current = current.get_next()
        return values
