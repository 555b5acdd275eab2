"""Shared-read / exclusive-write guard for the current-locale cell.

A CurrentLocaleCell is owned by one thread, so the lock never sees real
contention. It exists to give same-thread aliasing the discipline of a
borrow checker:

- Any number of read guards may be open at once (reentrant per thread).
- A write guard is exclusive: it waits for every reader to leave.
- Opening a write guard while the same thread holds a read guard raises
  RuntimeError instead of deadlocking (no upgrade).
- Opening a read guard inside a write guard raises RuntimeError (no
  downgrade), and write guards do not nest.

The lock is still safe across threads, so a handle passed to another thread
by mistake degrades to blocking rather than to torn reads.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with per-thread reentrant reads.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # same thread may nest reads
        ...         pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # thread id -> nesting depth of read guards held by that thread
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold a shared read guard for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits indefinitely, 0.0 does not wait.

        Raises:
            RuntimeError: If this thread holds the write guard.
            TimeoutError: If the guard cannot be acquired in time.
            ValueError: If timeout is negative.
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the exclusive write guard for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits indefinitely, 0.0 does not wait.

        Raises:
            RuntimeError: If this thread holds a read guard or the write guard.
            TimeoutError: If the guard cannot be acquired in time.
            ValueError: If timeout is negative.
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    @staticmethod
    def _deadline(timeout: float | None) -> float | None:
        if timeout is None:
            return None
        if timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)
        return time.monotonic() + timeout

    def _wait(self, deadline: float | None, what: str) -> None:
        """Wait on the condition once; caller holds it and loops."""
        if deadline is None:
            self._condition.wait()
            return
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            msg = f"Timed out waiting for {what} lock"
            raise TimeoutError(msg)
        self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = (
                    "Cannot read the cell while replacing it. "
                    "Finish the replacement before reading."
                )
                raise RuntimeError(msg)
            # Waiting writers block new readers so replacement is not starved.
            while self._writer is not None or self._waiting_writers:
                self._wait(deadline, "read")
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

    def _acquire_write(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                msg = (
                    "Cannot replace the cell while it is borrowed for reading. "
                    "Close the read guard first."
                )
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                while self._readers or self._writer is not None:
                    self._wait(deadline, "write")
                self._writer = me
            finally:
                # Readers blocked on _waiting_writers must re-check, also on timeout.
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read guards."""
        with self._condition:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write guard."""
        with self._condition:
            return self._writer is not None
