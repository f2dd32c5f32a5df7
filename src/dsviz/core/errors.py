"""Exception hierarchy for dsviz.

Structures never raise for empty or missing state; they return sentinel
values. These exceptions signal programming and configuration mistakes.
"""

from __future__ import annotations


class DSVizError(Exception):
    """Base exception for all dsviz errors."""
    pass


class UnknownOperationError(DSVizError):
    """Raised when an operation name has no phase plan for a structure family."""
    pass


class UnsupportedStructureError(DSVizError):
    """Raised when an object is not one of the supported structures."""
    pass


class ConfigError(DSVizError):
    """Raised when configuration values are missing or invalid."""
    pass
