"""Concurrent stream stages: generation, squaring, fan-in merging and a worker pool."""

from __future__ import annotations

import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class _SharedIterator(Iterator[T]):
    """Iterator that several threads may consume at once."""

    def __init__(self, items: Iterable[T]) -> None:
        self._it = iter(items)
        self._lock = threading.Lock()

    def __iter__(self) -> "_SharedIterator[T]":
        return self

    def __next__(self) -> T:
        with self._lock:
            return next(self._it)


def generate(*args: T) -> Iterator[T]:
    """Stream of the given values, safe to share between consumers."""
    return _SharedIterator(args)


def square(numbers: Iterable[int]) -> Iterator[int]:
    """Stream of the squares of numbers."""
    for n in numbers:
        yield n * n


_DONE = object()


class _Failure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


def fan_in(*args: Iterable[T]) -> Iterator[T]:
    """Merge several streams, each consumed in its own thread, in arrival order."""
    channel: queue.Queue = queue.Queue()

    def pump(source: Iterable[T]) -> None:
        try:
            for item in source:
                channel.put(item)
        except BaseException as error:  # handed to the consumer
            channel.put(_Failure(error))
        finally:
            channel.put(_DONE)

    for source in args:
        threading.Thread(target=pump, args=(source,), daemon=True).start()

    remaining = len(args)
    while remaining:
        item = channel.get()
        if item is _DONE:
            remaining -= 1
        elif isinstance(item, _Failure):
            raise item.error
        else:
            yield item


def process_pool(jobs: Iterable[T], func: Callable[[T], R], workers: int = 3) -> list[R]:
    """Run func over jobs on a pool of worker threads; results keep job order."""
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(func, jobs))