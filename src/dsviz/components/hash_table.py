"""Separate-chaining hash table with a fixed number of buckets.

The hash function sums character code points, so anagrams such as "age"
and "gae" always collide. The table never resizes: with n keys in m
buckets a lookup scans n/m entries on average and all n in the worst
case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..core.types import HashEntry, Key


class HashTable:
    """Key/value store using chaining.

    Invariants:
        - a key appears at most once across all buckets
        - a key always lives in bucket ``hash(key)``
        - capacity is fixed at construction
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")  # noqa: TRY003
        self._capacity = capacity
        self._buckets: list[list[HashEntry]] = [[] for _ in range(capacity)]

    def __repr__(self) -> str:
        return f"HashTable(capacity={self._capacity}, size={len(self)})"

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: Key) -> bool:
        return self.has(key)

    @property
    def capacity(self) -> int:
        return self._capacity

    def hash(self, key: Key) -> int:
        """Bucket index for key: sum of code points mod capacity. O(len(key))."""
        return sum(ord(ch) for ch in key) % self._capacity

    def _find(self, key: Key) -> tuple[list[HashEntry], int]:
        bucket = self._buckets[self.hash(key)]
        for i, entry in enumerate(bucket):
            if entry["key"] == key:
                return bucket, i
        return bucket, -1

    def set(self, key: Key, value: Any) -> None:
        """Insert key, or update its value in place if already present."""
        bucket, i = self._find(key)
        if i >= 0:
            bucket[i]["value"] = value
        else:
            bucket.append({"key": key, "value": value})

    def get(self, key: Key) -> Any:
        """Value stored for key, or None if absent."""
        bucket, i = self._find(key)
        return bucket[i]["value"] if i >= 0 else None

    def delete(self, key: Key) -> bool:
        bucket, i = self._find(key)
        if i < 0:
            return False
        del bucket[i]
        return True

    def has(self, key: Key) -> bool:
        return self._find(key)[1] >= 0

    def keys(self) -> list[Key]:
        return [entry["key"] for bucket in self._buckets for entry in bucket]

    def entries(self) -> list[HashEntry]:
        return [
            {"key": entry["key"], "value": entry["value"]}
            for bucket in self._buckets
            for entry in bucket
        ]

    def buckets(self) -> list[list[HashEntry]]:
        """Copy of every bucket in index order."""
        return [[dict(entry) for entry in bucket] for bucket in self._buckets]  # type: ignore[misc]

    def load_factor(self) -> float:
        return len(self) / self._capacity
