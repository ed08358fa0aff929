"""Separate-chaining hashtable used as the graph's node store.

Keys are bucketed by ``hash(key) % capacity``; each bucket is a list of
``Pair`` entries. Once an insert brings the load factor to 0.8 or above,
the capacity doubles and every pair is rehashed before ``put`` returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, List, Optional, TypeVar

from ..domain.errors import DuplicateKeyError, KeyNotFoundError, NullKeyError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 64
LOAD_FACTOR_THRESHOLD = 0.8

logger = logging.getLogger(__name__)


@dataclass
class Pair(Generic[K, V]):
    """A key/value binding stored in a bucket chain."""

    key: K
    value: V


class HashtableMap(Generic[K, V]):
    """Unique-key mapping with amortized O(1) operations.

    Example:
        table = HashtableMap[str, int](capacity=8)
        table.put("library", 1)
        table.get("library")  # -> 1
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._size = 0
        self._table: List[Optional[List[Pair[K, V]]]] = [None] * capacity

    def _index(self, key: K) -> int:
        return hash(key) % self._capacity

    def _find(self, key: K) -> Optional[Pair[K, V]]:
        bucket = self._table[self._index(key)]
        if bucket is None:
            return None
        for pair in bucket:
            if pair.key == key:
                return pair
        return None

    def put(self, key: K, value: V) -> None:
        """Bind ``key`` to ``value``.

        Raises:
            NullKeyError: If key is None.
            DuplicateKeyError: If key is already bound; the stored value
                is left untouched.
        """
        if key is None:
            raise NullKeyError("Key cannot be None")

        index = self._index(key)
        bucket = self._table[index]
        if bucket is None:
            bucket = self._table[index] = []

        for pair in bucket:
            if pair.key == key:
                raise DuplicateKeyError(f"Key already exists: {key!r}", key=key)

        bucket.append(Pair(key, value))
        self._size += 1

        if self.load_factor >= LOAD_FACTOR_THRESHOLD:
            self._resize_and_rehash()

    def _resize_and_rehash(self) -> None:
        old_capacity = self._capacity
        self._capacity *= 2
        new_table: List[Optional[List[Pair[K, V]]]] = [None] * self._capacity

        for bucket in self._table:
            if bucket is None:
                continue
            for pair in bucket:
                index = self._index(pair.key)
                if new_table[index] is None:
                    new_table[index] = []
                new_table[index].append(pair)  # type: ignore[union-attr]

        self._table = new_table
        logger.debug(
            "Hashtable resized",
            extra={"old_capacity": old_capacity, "capacity": self._capacity},
        )

    def contains_key(self, key: K) -> bool:
        """Return True iff a pair with an equal key exists."""
        if key is None:
            return False
        return self._find(key) is not None

    def get(self, key: K) -> V:
        """Return the value bound to ``key``.

        Raises:
            KeyNotFoundError: If key is not bound.
        """
        pair = self._find(key) if key is not None else None
        if pair is None:
            raise KeyNotFoundError(f"Key not found: {key!r}", key=key)
        return pair.value

    def remove(self, key: K) -> V:
        """Delete the binding for ``key`` and return its value.

        Raises:
            KeyNotFoundError: If key is not bound.
        """
        if key is not None:
            bucket = self._table[self._index(key)]
            if bucket is not None:
                for i, pair in enumerate(bucket):
                    if pair.key == key:
                        del bucket[i]
                        self._size -= 1
                        return pair.value
        raise KeyNotFoundError(f"Key not found: {key!r}", key=key)

    def clear(self) -> None:
        """Remove every pair; the capacity is kept."""
        self._table = [None] * self._capacity
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def keys(self) -> List[K]:
        """Return all keys in bucket order (not sorted)."""
        return [pair.key for bucket in self._table if bucket for pair in bucket]

    def values(self) -> List[V]:
        return [pair.value for bucket in self._table if bucket for pair in bucket]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"HashtableMap(size={self._size}, capacity={self._capacity})"
