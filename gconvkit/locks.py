"""Locks that can be switched off for single-threaded use."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class Mutex:
    """A mutual-exclusion lock that is a no-op unless created with ``safe=True``."""

    def __init__(self, safe: bool = False) -> None:
        self._lock: threading.Lock | None = threading.Lock() if safe else None

    def is_safe(self) -> bool:
        """Tell whether this mutex really locks."""
        return self._lock is not None

    def lock(self) -> None:
        """Acquire the lock; does nothing when not safe."""
        if self._lock is not None:
            self._lock.acquire()

    def unlock(self) -> None:
        """Release the lock; does nothing when not safe.

        Raises RuntimeError when a safe mutex is not locked.
        """
        if self._lock is not None:
            self._lock.release()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()


class _ReadWriteLock:
    """A readers-writer lock in which waiting writers hold off new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writing:
                raise RuntimeError("unlock of unlocked RWMutex")
            self._writing = False
            self._cond.notify_all()

    def acquire_read(self) -> None:
        with self._cond:
            while self._writing or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("runlock of unlocked RWMutex")
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()


class RWMutex:
    """A readers-writer lock that is a no-op unless created with ``safe=True``."""

    def __init__(self, safe: bool = False) -> None:
        self._lock: _ReadWriteLock | None = _ReadWriteLock() if safe else None

    def is_safe(self) -> bool:
        """Tell whether this mutex really locks."""
        return self._lock is not None

    def lock(self) -> None:
        """Acquire the lock for writing; does nothing when not safe."""
        if self._lock is not None:
            self._lock.acquire_write()

    def unlock(self) -> None:
        """Release the write lock; does nothing when not safe."""
        if self._lock is not None:
            self._lock.release_write()

    def rlock(self) -> None:
        """Acquire the lock for reading; does nothing when not safe."""
        if self._lock is not None:
            self._lock.acquire_read()

    def runlock(self) -> None:
        """Release a read lock; does nothing when not safe."""
        if self._lock is not None:
            self._lock.release_read()

    def __enter__(self) -> RWMutex:
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()

    @contextmanager
    def read_locked(self) -> Iterator[RWMutex]:
        """Hold the read lock for the duration of a ``with`` block."""
        self.rlock()
        try:
            yield self
        finally:
            self.runlock()