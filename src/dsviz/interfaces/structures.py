"""Protocol definitions for the containers the sequencer animates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.types import Number


class LinearContainer(Protocol):
    """Stack- or queue-like container with an empty sentinel."""

    def peek(self) -> Number | None:
        """Return the next value to be removed, or None when empty."""
        ...

    def is_empty(self) -> bool:
        ...

    def size(self) -> int:
        ...

    def items(self) -> list[Number]:
        """Return a copy of the contents in storage order."""
        ...
