"""dsviz core: configuration, phase plans and the operation sequencer."""

from .sequencer import OperationEnd, OperationSequencer, PhaseUpdate

__all__ = ["OperationSequencer", "PhaseUpdate", "OperationEnd"]
