"""Rate limiters: token bucket, leaky bucket and a per-key visit counter."""

from __future__ import annotations

import queue
import threading
import time
from collections import Counter
from typing import Callable, Hashable, Optional


class TokenBucket:
    """Thread-safe token bucket.

    Tokens refill continuously at ``rate`` per second up to ``capacity``.
    The bucket starts full.
    """

    def __init__(
        self,
        rate: float,
        capacity: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._rate = float(rate)
        self._capacity = float(capacity)
        self._tokens = float(capacity)
        self._clock = clock
        self._last = clock()
        self._lock = threading.Lock()

    def _refill(self) -> None:
        now = self._clock()
        self._tokens = min(self._capacity, self._tokens + (now - self._last) * self._rate)
        self._last = now

    def allow(self) -> bool:
        """Consume one token if available."""
        return self.allow_n(1)

    def allow_n(self, n: float) -> bool:
        """Consume n tokens if that many are available; otherwise consume none."""
        with self._lock:
            self._refill()
            if self._tokens >= n:
                self._tokens -= n
                return True
            return False

    def wait(self, n: float = 1) -> None:
        """Block until n tokens could be consumed, then consume them."""
        if n > self._capacity:
            raise ValueError("cannot wait for more tokens than the bucket holds")
        while not self.allow_n(n):
            with self._lock:
                needed = n - self._tokens
                rate = self._rate
            if rate <= 0:
                raise ValueError("bucket does not refill; rate must be positive")
            time.sleep(max(needed / rate, 0.001))

    def tokens(self) -> float:
        """Approximate number of tokens available right now."""
        with self._lock:
            elapsed = self._clock() - self._last
            return min(self._capacity, self._tokens + elapsed * self._rate)

    def set_rate(self, rate: float) -> None:
        """Change the refill rate in tokens per second."""
        with self._lock:
            self._rate = float(rate)


class LeakyBucket:
    """Bounded bucket drained by a background thread at a fixed pace."""

    def __init__(self, capacity: int, rate_per_sec: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if rate_per_sec <= 0:
            raise ValueError("rate must be positive")
        self.capacity = capacity
        self.interval = 1.0 / rate_per_sec
        self._queue: queue.Queue[None] = queue.Queue(maxsize=capacity)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._drip, daemon=True)
        self._thread.start()

    def _drip(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self._queue.get_nowait()
            except queue.Empty:
                pass

    def allow(self) -> bool:
        """Add a request; False if the bucket is full."""
        try:
            self._queue.put_nowait(None)
        except queue.Full:
            return False
        return True

    def close(self) -> None:
        """Stop draining."""
        self._stop.set()
        self._thread.join()

    def __enter__(self) -> "LeakyBucket":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class VisitLimiter:
    """Counts visits per key and refuses a key once it passes ``limit``.

    Counts are never reset; ``window`` is recorded but not applied.
    """

    def __init__(self, limit: int, window: Optional[float] = None) -> None:
        self.limit = limit
        self.window = window
        self._visits: Counter[Hashable] = Counter()
        self._lock = threading.Lock()

    def allow(self, key: Hashable) -> bool:
        """Record a visit from key; True while its count is within the limit."""
        with self._lock:
            self._visits[key] += 1
            count = self._visits[key]
        return count <= self.limit