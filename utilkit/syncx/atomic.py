"""A value that is read and replaced atomically."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicValue(Generic[T]):
    """Holds one value; every operation on it is atomic."""

    def __init__(self, value: T | None = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> T | None:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value

    def swap(self, new: T) -> T | None:
        """Replace the current value and return the previous one."""
        with self._lock:
            old, self._value = self._value, new
            return old

    def compare_and_swap(self, old: T | None, new: T) -> bool:
        """Replace the value with new only if it currently equals old."""
        with self._lock:
            current = self._value
            if current is old or current == old:
                self._value = new
                return True
            return False