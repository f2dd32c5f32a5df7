"""Operation sequencer - drives one animated operation at a time.

Walks a phase plan (prepare -> mutate -> confirm), publishing a
PhaseUpdate on entry to every step and an OperationEnd when the
operation finishes or is superseded.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any, Callable

from . import plans
from .config import SequencerConfig
from .snippets import get_snippet
from .types import Phase, StructureFamily
from ..components.scheduler import ThreadingScheduler

if TYPE_CHECKING:
    from ..interfaces.scheduler import Scheduler, TimerHandle
    from .plans import Highlight, OperationContext, PhaseStep

logger = logging.getLogger(__name__)

_STEP_NUMBERS = {Phase.PREPARE: 1, Phase.MUTATE: 2, Phase.CONFIRM: 3}


@dataclass(frozen=True)
class PhaseUpdate:
    """Everything a view needs to render one phase of an operation."""

    generation: int
    family: StructureFamily
    operation: str
    operand: Any
    phase: Phase
    step: int
    description: str
    snippet_id: str
    code: str
    highlight: Highlight | None
    result: Any = None


@dataclass(frozen=True)
class OperationEnd:
    """Published once per operation, after which views return to rest."""

    generation: int
    family: StructureFamily
    operation: str
    operand: Any
    result: Any
    cancelled: bool


PhaseListener = Callable[[PhaseUpdate], None]
EndListener = Callable[[OperationEnd], None]


class OperationSequencer:
    """Animation driver for one structure instance.

    Args:
        structure: Engine container to animate
        scheduler: Timer back-end (defaults to a ThreadingScheduler owned by the sequencer)
        config: Phase timings
        family: Structure family, inferred from structure when omitted

    Public API:
        - invoke(operation, operand): Start an operation, superseding any in flight
        - validate(operation, operand): Blocking message for a failed precondition
        - cancel(): Abort the in-flight operation
        - on_phase(listener) / on_end(listener): Subscribe to notifications

    Invariants:
        - At most one operation is active; a new invoke cancels the old one
        - Callbacks from an older generation never publish or mutate
        - The structure only changes inside the action of a MUTATE step
    """

    def __init__(
        self,
        structure: Any,
        scheduler: Scheduler | None = None,
        config: SequencerConfig | None = None,
        family: StructureFamily | None = None,
    ):
        self.structure = structure
        self.family = family or plans.family_of(structure)
        self.config = config or SequencerConfig()
        self._owns_scheduler = scheduler is None
        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.RLock()

        self._generation: int = 0
        self._phase: Phase = Phase.IDLE
        self._current: PhaseUpdate | None = None
        self._ctx: OperationContext | None = None
        self._steps: list[PhaseStep] = []
        self._handle: TimerHandle | None = None
        self._last_result: Any = None

        self._phase_listeners: list[PhaseListener] = []
        self._end_listeners: list[EndListener] = []

        logger.info(f"Initialized {self.family.value} sequencer")

    # -------------------------------
    # Subscriptions
    # -------------------------------
    def on_phase(self, listener: PhaseListener) -> Callable[[], None]:
        """Subscribe to phase changes. Returns a function that unsubscribes."""
        self._phase_listeners.append(listener)
        return partial(self._unsubscribe, self._phase_listeners, listener)

    def on_end(self, listener: EndListener) -> Callable[[], None]:
        """Subscribe to operation ends. Returns a function that unsubscribes."""
        self._end_listeners.append(listener)
        return partial(self._unsubscribe, self._end_listeners, listener)

    @staticmethod
    def _unsubscribe(listeners: list, listener: Callable) -> None:
        if listener in listeners:
            listeners.remove(listener)

    # -------------------------------
    # State
    # -------------------------------
    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current(self) -> PhaseUpdate | None:
        """Latest published phase, or None while idle."""
        return self._current

    @property
    def last_result(self) -> Any:
        """Result of the most recently completed operation."""
        return self._last_result

    def is_animating(self) -> bool:
        return self._phase is not Phase.IDLE

    def operations(self) -> list[str]:
        return plans.operations(self.family)

    # -------------------------------
    # Control
    # -------------------------------
    def validate(self, operation: str, operand: Any = None) -> str | None:
        """Message to show instead of invoking, or None when the operation can run."""
        return plans.validate(self.family, self.structure, operation, operand)

    def invoke(self, operation: str, operand: Any = None) -> int:
        """Start operation, cancelling whatever is in flight.

        Preconditions are not checked here; call validate() first.

        Returns:
            Generation number identifying this operation

        Raises:
            UnknownOperationError: If the family has no such operation
        """
        with self._lock:
            # An end listener may start another operation while we abort.
            while self._phase is not Phase.IDLE:
                self._abort()

            ctx = plans.OperationContext(self.family, operation, operand, self.structure)
            steps = plans.build_plan(ctx, self.config)

            self._generation += 1
            generation = self._generation
            self._ctx = ctx
            self._steps = steps
            logger.debug(f"[gen {generation}] {self.family.value}.{operation}({operand!r}) started")
            self._enter(generation, 0)
            return generation

    def cancel(self) -> bool:
        """Abort the in-flight operation. Returns False if nothing was running."""
        with self._lock:
            if self._phase is Phase.IDLE:
                return False
            self._abort()
            return True

    def close(self) -> None:
        """Cancel any operation; shut down the scheduler if the sequencer created it."""
        self.cancel()
        if self._owns_scheduler:
            self._scheduler.close()

    # -------------------------------
    # Phase machine
    # -------------------------------
    def _enter(self, generation: int, index: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.warning(f"Dropped stale phase callback for generation {generation}")
                return

            self._handle = None
            ctx = self._ctx
            step = self._steps[index]
            try:
                if step.action is not None:
                    ctx.result = step.action(ctx)

                update = PhaseUpdate(
                    generation=generation,
                    family=self.family,
                    operation=ctx.operation,
                    operand=ctx.operand,
                    phase=step.phase,
                    step=_STEP_NUMBERS[step.phase],
                    description=step.describe(ctx),
                    snippet_id=step.snippet,
                    code=get_snippet(self.family, step.snippet),
                    highlight=step.highlight(ctx),
                    result=ctx.result,
                )
                self._phase = step.phase
                self._current = update
                logger.debug(f"[gen {generation}] {step.phase.value}: {update.description}")

                for listener in list(self._phase_listeners):
                    listener(update)
            except Exception:
                # No timer is pending, so return to idle before re-raising.
                if generation == self._generation:
                    logger.error(f"[gen {generation}] {step.phase.value} failed; cancelling")
                    self._abort()
                raise

            # A listener may have started another operation.
            if generation != self._generation:
                return

            if index + 1 < len(self._steps):
                next_callback = partial(self._enter, generation, index + 1)
            else:
                next_callback = partial(self._finish, generation)
            self._handle = self._scheduler.call_later(self.config.seconds(step.hold_ms), next_callback)

    def _finish(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.warning(f"Dropped stale completion for generation {generation}")
                return
            ctx = self._ctx
            self._last_result = ctx.result
            self._reset()
            logger.debug(f"[gen {generation}] {self.family.value}.{ctx.operation} completed")
            self._publish_end(OperationEnd(
                generation, self.family, ctx.operation, ctx.operand, ctx.result, cancelled=False,
            ))

    def _abort(self) -> None:
        """Cancel the pending timer and publish a cancelled end. Caller holds the lock."""
        if self._handle is not None:
            self._handle.cancel()
        ctx = self._ctx
        generation = self._generation
        # Invalidate callbacks that already escaped cancellation.
        self._generation += 1
        self._reset()
        logger.debug(f"[gen {generation}] {self.family.value}.{ctx.operation} cancelled")
        self._publish_end(OperationEnd(
            generation, self.family, ctx.operation, ctx.operand, ctx.result, cancelled=True,
        ))

    def _reset(self) -> None:
        self._handle = None
        self._phase = Phase.IDLE
        self._current = None
        self._ctx = None
        self._steps = []

    def _publish_end(self, end: OperationEnd) -> None:
        for listener in list(self._end_listeners):
            listener(end)
