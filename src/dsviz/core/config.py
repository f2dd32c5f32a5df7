"""Configuration for the operation sequencer.

Defines the phase timings and structure defaults. Timings are chosen for
visual legibility; they never affect correctness.
"""

from __future__ import annotations

import tomllib  # Python 3.11+
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError


@dataclass
class SequencerConfig:
    """Configuration parameters for the operation sequencer.

    Attributes:
        prepare_ms: How long the prepare phase is held
        mutate_ms: How long the mutate phase is held
        confirm_ms: How long the confirm phase is held before clearing
        find_prepare_ms: Prepare hold for lookups that walk a structure (BST find, list search)
        find_confirm_ms: Confirm hold for those lookups
        peek_confirm_ms: Confirm hold for peek, which skips prepare and mutate
        traversal_mutate_ms: Mutate hold for BFS/DFS and tree traversals
        traversal_confirm_ms: Confirm hold for BFS/DFS and tree traversals
        time_scale: Multiplier applied to every hold (0 plays back instantly)
        hash_table_capacity: Default bucket count for new hash tables
    """

    prepare_ms: int = 1000
    mutate_ms: int = 1000
    confirm_ms: int = 1000
    find_prepare_ms: int = 1500
    find_confirm_ms: int = 2000
    peek_confirm_ms: int = 2000
    traversal_mutate_ms: int = 2000
    traversal_confirm_ms: int = 2000
    time_scale: float = 1.0
    hash_table_capacity: int = 10

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
            if value < 0:
                raise ConfigError(f"{f.name} must be non-negative, got {value}")
        if self.hash_table_capacity < 1:
            raise ConfigError("hash_table_capacity must be at least 1")

    def seconds(self, ms: int) -> float:
        """Convert a hold in milliseconds to scaled seconds for a scheduler."""
        return ms * self.time_scale / 1000.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> SequencerConfig:
        known = {f.name for f in fields(SequencerConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigError(f"Unknown sequencer settings: {', '.join(unknown)}")
        return SequencerConfig(**d)

    @staticmethod
    def from_toml(path: Path) -> SequencerConfig:
        """Load the ``[sequencer]`` table of a TOML file.

        A file without the table yields the defaults.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        return SequencerConfig.from_dict(data.get("sequencer", {}))
