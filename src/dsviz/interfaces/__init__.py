"""Protocols shared by dsviz components."""

from .scheduler import Scheduler, TimerHandle
from .structures import LinearContainer

__all__ = ["Scheduler", "TimerHandle", "LinearContainer"]
