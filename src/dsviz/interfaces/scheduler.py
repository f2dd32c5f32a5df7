"""Protocol definition for timer schedulers driving the sequencer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable


class TimerHandle(Protocol):
    """A pending callback that can be cancelled before it fires."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        ...


class Scheduler(Protocol):
    """Runs callbacks after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback after delay seconds; return a handle to cancel it."""
        ...

    def close(self) -> None:
        """Cancel everything still pending and release resources."""
        ...
