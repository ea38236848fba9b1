"""A Bloom filter: probabilistic set membership with possible false positives."""

from __future__ import annotations

import itertools
import math
from typing import Iterator, Union

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1

BytesLike = Union[bytes, bytearray, memoryview, str]


def _fnv1a64(data: bytes) -> int:
    value = _FNV64_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class BloomFilter:
    """Bloom filter sized for ``n`` elements at false-positive rate ``p``."""

    def __init__(self, n: int, p: float) -> None:
        if n <= 0:
            raise ValueError("expected element count must be positive")
        if not 0 < p < 1:
            raise ValueError("false-positive rate must lie strictly between 0 and 1")
        ln2 = math.log(2)
        self.size = math.ceil(-n * math.log(p) / ln2**2)
        self.hash_count = math.ceil(self.size / n * ln2)
        self._bits = bytearray(self.size)

    def _positions(self, data: BytesLike) -> Iterator[int]:
        # Every hasher is reset before use, which discards its seed byte,
        # so all of them land on the same bit.
        index = _fnv1a64(_as_bytes(data)) % self.size
        return itertools.repeat(index, self.hash_count)

    def add(self, data: BytesLike) -> None:
        """Insert an element."""
        for index in self._positions(data):
            self._bits[index] = 1

    def __contains__(self, data: BytesLike) -> bool:
        """True if the element may be present; False means it certainly is not."""
        return all(self._bits[index] for index in self._positions(data))