"""A condition variable whose wait can give up after a timeout."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Protocol


class _Lock(Protocol):
    def acquire(self, *args: Any, **kwargs: Any) -> Any: ...

    def release(self) -> None: ...


class Cond:
    """A condition variable tied to ``lock``.

    The lock must be held when calling :meth:`wait`. Waiters are woken in the
    order in which they started waiting.
    """

    def __init__(self, lock: _Lock | None = None) -> None:
        self.lock: _Lock = lock if lock is not None else threading.Lock()
        self._mutex = threading.Lock()
        self._waiters: deque[threading.Event] = deque()

    def __enter__(self) -> Cond:
        self.lock.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.lock.release()

    def wait(self, timeout: float | None = None) -> None:
        """Release the lock, wait for a signal, then take the lock again.

        Raises TimeoutError when ``timeout`` seconds pass without a signal;
        the lock is held again in either case.
        """
        waiter = threading.Event()
        with self._mutex:
            # Registered before the lock is released, so no signal is missed.
            self._waiters.append(waiter)
        self.lock.release()
        try:
            if waiter.wait(timeout):
                return
            with self._mutex:
                if waiter.is_set():
                    # Signalled just as the wait gave up: hand the signal on.
                    if self._waiters:
                        self._notify_next()
                else:
                    self._waiters.remove(waiter)
            raise TimeoutError("Cond.wait timed out")
        finally:
            self.lock.acquire()

    def signal(self) -> None:
        """Wake the longest-waiting waiter, if any."""
        with self._mutex:
            if self._waiters:
                self._notify_next()

    def broadcast(self) -> None:
        """Wake every waiter."""
        with self._mutex:
            while self._waiters:
                self._notify_next()

    def _notify_next(self) -> None:
        self._waiters.popleft().set()