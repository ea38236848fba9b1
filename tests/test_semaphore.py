import threading
import time

import pytest

from practicekit.semaphore import (
    PermitRateLimiter,
    Semaphore,
    SemaphoreError,
    WeightedSemaphore,
)


def test_capacity_normalised():
    assert Semaphore(0).capacity() == 1
    assert Semaphore(3).capacity() == 3


def test_try_acquire_until_full():
    sem = Semaphore(2)
    assert sem.try_acquire() is True
    assert sem.try_acquire() is True
    assert sem.try_acquire() is False
    assert sem.available() == 0
    sem.release()
    assert sem.available() == sem.capacity() - 1


def test_release_without_acquire_raises():
    with pytest.raises(SemaphoreError):
        Semaphore(1).release()


def test_acquire_times_out():
    sem = Semaphore(1)
    sem.acquire()
    with pytest.raises(TimeoutError):
        sem.acquire(timeout=0.05)


def test_acquire_unblocks_after_release():
    sem = Semaphore(1)
    sem.acquire()
    timer = threading.Timer(0.05, sem.release)
    timer.start()
    sem.acquire(timeout=2)
    timer.join()
    assert sem.available() == 0


def test_wait_returns_all_permits():
    sem = Semaphore(3)
    sem.acquire()
    sem.acquire()
    sem.wait()
    assert sem.available() == sem.capacity()


def test_context_manager_holds_permit():
    sem = Semaphore(2)
    with sem:
        assert sem.available() == 1
    assert sem.available() == 2


def test_weighted_acquire_and_release():
    sem = WeightedSemaphore(5)
    sem.acquire(3)
    assert sem.available() == 2
    with pytest.raises(TimeoutError):
        sem.acquire(3, timeout=0.05)
    sem.release(3)
    assert sem.available() == 5


def test_weighted_exceeds_max():
    with pytest.raises(SemaphoreError):
        WeightedSemaphore(5).acquire(6)


def test_weighted_non_positive_is_noop():
    sem = WeightedSemaphore(4)
    sem.acquire(0)
    sem.release(-1)
    assert sem.available() == 4


def test_weighted_release_clamps():
    sem = WeightedSemaphore(4)
    sem.acquire(1)
    sem.release(10)
    assert sem.available() == 4


def test_weighted_zero_max_normalised():
    assert WeightedSemaphore(0).available() == 1


def test_weighted_blocks_until_release():
    sem = WeightedSemaphore(3)
    sem.acquire(3)
    timer = threading.Timer(0.05, sem.release, args=(2,))
    timer.start()
    sem.acquire(2, timeout=2)
    timer.join()
    assert sem.available() == 0


def test_rate_limiter_allows_burst_then_refuses():
    limiter = PermitRateLimiter(2)
    assert limiter.allow() is True
    assert limiter.allow() is True
    assert limiter.allow() is False
    with pytest.raises(TimeoutError):
        limiter.wait(timeout=0.05)


def test_rate_limiter_refills_when_started():
    limiter = PermitRateLimiter(50)
    while limiter.allow():
        pass
    limiter.start()
    try:
        limiter.wait(timeout=2)
        deadline = time.monotonic() + 2
        allowed = False
        while time.monotonic() < deadline and not allowed:
            time.sleep(0.01)
            allowed = limiter.allow()
        assert allowed is True
    finally:
        limiter.stop()