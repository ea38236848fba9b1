"""Counting and weighted semaphores, and a permit-based rate limiter."""

from __future__ import annotations

import threading
import time
from typing import Optional


class SemaphoreError(RuntimeError):
    """Misuse of a semaphore."""


def _wait_for(cond: threading.Condition, ready, timeout: Optional[float]) -> None:
    if not cond.wait_for(ready, timeout):
        raise TimeoutError("timed out waiting for a permit")


class Semaphore:
    """Limits concurrent holders to a fixed number of permits."""

    def __init__(self, max_concurrency: int) -> None:
        self._capacity = max(1, max_concurrency)
        self._held = 0
        self._cond = threading.Condition()

    def acquire(self, timeout: Optional[float] = None) -> None:
        """Take a permit, blocking up to timeout seconds; raises TimeoutError."""
        with self._cond:
            _wait_for(self._cond, lambda: self._held < self._capacity, timeout)
            self._held += 1

    def try_acquire(self) -> bool:
        """Take a permit without blocking; False if none is free."""
        with self._cond:
            if self._held < self._capacity:
                self._held += 1
                return True
            return False

    def _release_one(self) -> bool:
        with self._cond:
            if self._held == 0:
                return False
            self._held -= 1
            self._cond.notify()
            return True

    def release(self) -> None:
        """Return a permit; raises SemaphoreError if none is held."""
        if not self._release_one():
            raise SemaphoreError("release called more times than acquire")

    def available(self) -> int:
        with self._cond:
            return self._capacity - self._held

    def capacity(self) -> int:
        return self._capacity

    def wait(self) -> None:
        """Return every held permit at once."""
        with self._cond:
            self._held = 0
            self._cond.notify_all()

    def __enter__(self) -> "Semaphore":
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class WeightedSemaphore:
    """Semaphore whose holders take a chosen number of permits."""

    def __init__(self, maximum: int) -> None:
        self._max = max(1, maximum)
        self._current = 0
        self._cond = threading.Condition()

    def acquire(self, n: int, timeout: Optional[float] = None) -> None:
        """Take n permits, blocking up to timeout seconds; raises TimeoutError."""
        if n <= 0:
            return
        if n > self._max:
            raise SemaphoreError("acquire exceeds maximum capacity")
        with self._cond:
            _wait_for(self._cond, lambda: self._current + n <= self._max, timeout)
            self._current += n

    def release(self, n: int) -> None:
        """Return n permits; never drops below zero held."""
        if n <= 0:
            return
        with self._cond:
            self._current = max(0, self._current - n)
            self._cond.notify_all()

    def available(self) -> int:
        with self._cond:
            return self._max - self._current


class PermitRateLimiter:
    """Allows up to ``rate`` operations, returning one permit every 1/rate seconds once started."""

    def __init__(self, rate: int) -> None:
        rate = max(1, rate)
        self._sem = Semaphore(rate)
        self._interval = 1.0 / rate
        self._lock = threading.Lock()
        self._stop: Optional[threading.Event] = None

    def start(self) -> None:
        """Begin returning permits in the background; no effect if running."""
        with self._lock:
            if self._stop is not None:
                return
            stop = threading.Event()
            self._stop = stop
        threading.Thread(target=self._refill, args=(stop,), daemon=True).start()

    def _refill(self, stop: threading.Event) -> None:
        next_tick = time.monotonic() + self._interval
        while not stop.wait(max(0.0, next_tick - time.monotonic())):
            self._sem._release_one()
            next_tick += self._interval

    def stop(self) -> None:
        """Stop returning permits; no effect if not running."""
        with self._lock:
            if self._stop is None:
                return
            self._stop.set()
            self._stop = None

    def allow(self) -> bool:
        """True if an operation may proceed now."""
        return self._sem.try_acquire()

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until an operation may proceed; raises TimeoutError."""
        self._sem.acquire(timeout)