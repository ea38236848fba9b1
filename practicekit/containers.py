"""Classic containers: hash map, binary search tree, graph, heap, list, queue and stack."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


def _fnv1a32(data: bytes) -> int:
    value = _FNV32_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV32_PRIME) & _MASK32
    return value


class HashMap:
    """Fixed-bucket hash map from strings to values, chaining on collision."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("bucket count must be positive")
        self.size = size
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]

    def _bucket(self, key: str) -> list[list[Any]]:
        return self._buckets[_fnv1a32(key.encode("utf-8")) % self.size]

    def put(self, key: str, value: Any) -> None:
        """Store value under key, replacing any earlier value."""
        bucket = self._bucket(key)
        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                return
        bucket.append([key, value])

    def get(self, key: str) -> Any:
        """Value stored under key; raises KeyError if absent."""
        for stored, value in self._bucket(key):
            if stored == key:
                return value
        raise KeyError(key)


@dataclass
class _TreeNode:
    value: Any
    left: Optional["_TreeNode"] = None
    right: Optional["_TreeNode"] = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self._root: Optional[_TreeNode] = None

    def insert(self, value: Any) -> None:
        """Add a value."""
        new = _TreeNode(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right


class Graph:
    """Undirected graph stored as adjacency lists."""

    def __init__(self) -> None:
        self._nodes: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Connect u and v in both directions."""
        self._nodes.setdefault(u, []).append(v)
        self._nodes.setdefault(v, []).append(u)

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Nodes in breadth-first order from start."""
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._nodes.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order


class MinHeap(Generic[T]):
    """Binary min-heap."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items = list(items)
        heapq.heapify(self._items)

    def push(self, item: T) -> None:
        heapq.heappush(self._items, item)

    def pop(self) -> T:
        """Remove and return the smallest item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _ListNode:
    value: Any
    next: Optional["_ListNode"] = None


class LinkedList:
    """Singly linked list with appends at the tail."""

    def __init__(self) -> None:
        self._head: Optional[_ListNode] = None
        self._tail: Optional[_ListNode] = None

    def insert(self, value: Any) -> None:
        """Append value at the end."""
        node = _ListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "nil"


class Queue(Generic[T]):
    """First-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the oldest item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class Stack(Generic[T]):
    """Last-in first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the newest item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Newest item without removing it; raises IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)