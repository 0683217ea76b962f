"""A thread-safe mapping with load-or-store style operations."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SyncMap(Generic[K, V]):
    """A dictionary guarded by a lock.

    A missing key and a key stored with the value None are different things:
    the boolean returned alongside a value tells them apart.
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def load(self, key: K) -> tuple[V | None, bool]:
        """Return (value, True), or (None, False) when the key is absent."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def store(self, key: K, value: V) -> None:
        """Set the value for key."""
        with self._lock:
            self._data[key] = value

    def load_or_store(self, key: K, value: V) -> tuple[V, bool]:
        """Return (existing, True) if present; otherwise store value and return (value, False)."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = value
            return value, False

    def load_or_store_func(self, key: K, fn: Callable[[], V]) -> tuple[V, bool]:
        """Like load_or_store, but builds the value with fn only when the key is absent.

        An exception raised by fn propagates and nothing is stored.
        """
        value, ok = self.load(key)
        if ok:
            return value, True  # type: ignore[return-value]
        return self.load_or_store(key, fn())

    def load_and_delete(self, key: K) -> tuple[V | None, bool]:
        """Remove key and return (value, True), or (None, False) if it was absent."""
        with self._lock:
            if key in self._data:
                return self._data.pop(key), True
            return None, False

    def delete(self, key: K) -> None:
        """Remove key if present."""
        with self._lock:
            self._data.pop(key, None)

    def range(self, fn: Callable[[K, V], Any]) -> None:
        """Call fn(key, value) for each entry; stop when fn returns False."""
        with self._lock:
            items = list(self._data.items())
        for key, value in items:
            if fn(key, value) is False:
                return