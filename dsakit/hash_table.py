"""A string hash table with separate chaining."""

from __future__ import annotations

from typing import Optional


class HashTable:
    """Maps string keys to string values using a character-sum hash."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: dict[int, list[list[str]]] = {}

    def _hash(self, key: str) -> int:
        return sum(ord(ch) for ch in key) % self.size

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any value already under the key."""
        bucket = self._buckets.setdefault(self._hash(key), [])
        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                return
        bucket.append([key, value])

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under the key, or None if absent."""
        for stored_key, value in self._buckets.get(self._hash(key), ()):
            if stored_key == key:
                return value
        return None

    def delete(self, key: str) -> bool:
        """Remove the key; return whether it was present."""
        bucket = self._buckets.get(self._hash(key))
        if bucket is None:
            return False
        for i, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[i]
                return True
        return False

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(k == key for k, _ in self._buckets.get(self._hash(key), ()))