"""Timer back-ends for the operation sequencer.

- ManualScheduler: virtual clock advanced explicitly (tests, instant playback)
- ThreadingScheduler: one threading.Timer per callback
- AsyncioScheduler: callbacks on an asyncio event loop
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class ManualTimer:
    """Handle for a callback registered on a ManualScheduler."""

    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler driven by a virtual clock.

    Nothing fires until advance() or run_until_idle() is called. Callbacks
    run on the caller's thread in due-time order; ties fire in
    registration order.
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._seq = itertools.count()
        self._heap: list[tuple[float, int, ManualTimer]] = []

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._now + max(delay, 0.0), callback)
        heapq.heappush(self._heap, (timer.due, next(self._seq), timer))
        return timer

    def pending(self) -> int:
        """Number of callbacks that have not fired and are not cancelled."""
        return sum(1 for _, _, timer in self._heap if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every callback that becomes due.

        Returns:
            Number of callbacks fired
        """
        deadline = self._now + seconds
        fired = 0
        while self._heap and self._heap[0][0] <= deadline:
            due, _, timer = heapq.heappop(self._heap)
            self._now = due
            if timer.cancelled:
                continue
            timer.cancelled = True
            timer.callback()
            fired += 1
        self._now = deadline
        return fired

    def run_until_idle(self, max_callbacks: int = 10_000) -> int:
        """Fire callbacks until nothing is pending.

        Raises:
            RuntimeError: If callbacks keep rescheduling past max_callbacks
        """
        fired = 0
        while self._heap:
            due, _, timer = heapq.heappop(self._heap)
            self._now = max(self._now, due)
            if timer.cancelled:
                continue
            timer.cancelled = True
            timer.callback()
            fired += 1
            if fired >= max_callbacks:
                raise RuntimeError(f"Scheduler still busy after {fired} callbacks")  # noqa: TRY003
        return fired

    def close(self) -> None:
        for _, _, timer in self._heap:
            timer.cancel()
        self._heap.clear()


class ThreadingScheduler:
    """Scheduler backed by daemon threading.Timer objects.

    Callbacks run on timer threads. Exceptions raised by a callback are
    logged, since there is no caller to propagate them to.
    """

    def __init__(self) -> None:
        self._timers: set[threading.Timer] = set()
        self._lock = threading.Lock()
        self._closed = False

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer: threading.Timer

        def _run() -> None:
            with self._lock:
                self._timers.discard(timer)
            try:
                callback()
            except Exception:
                logger.exception("Scheduled callback failed")

        timer = threading.Timer(max(delay, 0.0), _run)
        timer.daemon = True
        with self._lock:
            if self._closed:
                raise RuntimeError("Scheduler is closed")  # noqa: TRY003
            self._timers.add(timer)
        timer.start()
        return timer

    def pending(self) -> int:
        with self._lock:
            return sum(1 for timer in self._timers if not timer.finished.is_set())

    def close(self) -> None:
        with self._lock:
            self._closed = True
            timers = list(self._timers)
            self._timers.clear()
        for timer in timers:
            timer.cancel()
        logger.debug(f"Cancelled {len(timers)} pending timers")


class AsyncioScheduler:
    """Scheduler running callbacks on an asyncio event loop.

    Must be used from the loop's own thread.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._handles: set[asyncio.TimerHandle] = set()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        handle: asyncio.TimerHandle

        def _run() -> None:
            self._handles.discard(handle)
            callback()

        handle = self._loop.call_later(max(delay, 0.0), _run)
        self._handles.add(handle)
        return handle

    def pending(self) -> int:
        return sum(1 for handle in self._handles if not handle.cancelled())

    def close(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
