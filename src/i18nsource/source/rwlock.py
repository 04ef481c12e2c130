"""Readers-writer lock guarding the MessageSource cache.

Cache lookups vastly outnumber cache fills, so lookups share the lock
while storing a loaded table or a missing-key sentinel is exclusive.

- Multiple concurrent readers (cache lookups)
- Exclusive writer (cache fills)
- Writer preference: new readers wait while a writer is queued
- Reentrant reads for the same thread

Read-to-write upgrades and nested write acquisition raise RuntimeError;
MessageSource always releases the read lock before loading and storing.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        """Initialize an unlocked readers-writer lock."""
        self._condition = threading.Condition(threading.Lock())
        # thread id -> reentrant read depth
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the lock in shared mode for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds the write lock
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the lock in exclusive mode for the duration of the block.

        Raises:
            RuntimeError: If the calling thread already holds the lock
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            while self._writer is not None or self._waiting_writers:
                self._condition.wait()
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._readers.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._readers[me] = depth - 1
                return
            del self._readers[me]
            if not self._readers:
                self._condition.notify_all()

    def _acquire_write(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                while self._readers or self._writer is not None:
                    self._condition.wait()
                self._writer = me
            finally:
                self._waiting_writers -= 1

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding the read lock."""
        with self._condition:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        """True if a thread currently holds the write lock."""
        with self._condition:
            return self._writer is not None
