"""Dynamic-programming classics: Fibonacci, 0/1 knapsack, longest common subsequence."""

from __future__ import annotations

from typing import Sequence


def fib(n: int) -> int:
    """n-th Fibonacci number using a full table; values n <= 1 are returned as is."""
    if n <= 1:
        return n
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def fib_optimized(n: int) -> int:
    """n-th Fibonacci number in constant space; values n <= 1 are returned as is."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items fitting in capacity, each item used at most once."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        previous = best
        best = [
            max(previous[w], value + previous[w - weight]) if weight <= w else previous[w]
            for w in range(capacity + 1)
        ]
    return best[capacity]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]