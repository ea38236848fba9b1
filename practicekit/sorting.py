"""Searching and sorting of integer sequences."""

from __future__ import annotations

from typing import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of target in the sorted sequence nums, or -1 if absent."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, keeping left items first on ties."""
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Return a sorted copy of arr using merge sort."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2
    return merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def quick_sort(arr: Sequence[int]) -> list[int]:
    """Return a sorted copy of arr using quicksort with the first item as pivot."""
    if len(arr) <= 1:
        return list(arr)
    pivot, *rest = arr
    left = [v for v in rest if v < pivot]
    right = [v for v in rest if v >= pivot]
    return [*quick_sort(left), pivot, *quick_sort(right)]