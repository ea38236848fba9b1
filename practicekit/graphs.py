"""Graph algorithms: A* on grids, all-pairs and single-source shortest paths, topological order."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Mapping, NamedTuple, Optional, Sequence

INF = (2**31 - 1) >> 1
"""Marker for a missing edge in an adjacency matrix; small enough that adding two never overflows."""

UNREACHABLE = 2**31 - 1
"""Distance reported by :func:`dijkstra` for nodes that cannot be reached."""

Cell = tuple[int, int]

_DIRECTIONS: tuple[Cell, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass
class _Node:
    x: int
    y: int
    g: float
    parent: Optional["_Node"] = None


class AStar:
    """Shortest paths on a grid where 0 is walkable and 1 is an obstacle."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        if not grid:
            raise ValueError("grid must have at least one row")
        self.grid = grid
        self.rows = len(grid)
        self.cols = len(grid[0])

    @staticmethod
    def _heuristic(x1: int, y1: int, x2: int, y2: int) -> float:
        return float(abs(x1 - x2) + abs(y1 - y2))

    def _neighbors(self, x: int, y: int) -> Iterable[Cell]:
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.rows and 0 <= ny < self.cols and self.grid[nx][ny] == 0:
                yield nx, ny

    def find_path(self, sx: int, sy: int, gx: int, gy: int) -> Optional[list[Cell]]:
        """Return the cells from start to goal inclusive, or None when no path exists."""
        counter = itertools.count()
        start = _Node(sx, sy, 0.0)
        open_set = [(self._heuristic(sx, sy, gx, gy), next(counter), start)]
        visited: set[Cell] = set()
        g_score: dict[Cell, float] = {(sx, sy): 0.0}

        while open_set:
            _, _, current = heapq.heappop(open_set)
            key = (current.x, current.y)

            if key == (gx, gy):
                path: list[Cell] = []
                node: Optional[_Node] = current
                while node is not None:
                    path.append((node.x, node.y))
                    node = node.parent
                path.reverse()
                return path

            if key in visited:
                continue
            visited.add(key)

            for nb in self._neighbors(current.x, current.y):
                if nb in visited:
                    continue
                tentative = g_score[key] + 1
                old = g_score.get(nb)
                if old is None or tentative < old:
                    g_score[nb] = tentative
                    neighbor = _Node(nb[0], nb[1], tentative, current)
                    f = tentative + self._heuristic(nb[0], nb[1], gx, gy)
                    heapq.heappush(open_set, (f, next(counter), neighbor))

        return None


@dataclass
class ShortestPaths:
    """Result of :func:`floyd_warshall`."""

    distances: list[list[int]]
    next_hop: list[list[int]]
    has_negative_cycle: bool = field(default=False)


def floyd_warshall(dist: Sequence[Sequence[int]]) -> ShortestPaths:
    """All-pairs shortest distances for an adjacency matrix using ``INF`` for missing edges."""
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("adjacency matrix must be square")

    shortest = [list(row) for row in dist]
    next_hop = [
        [j if weight != INF and i != j else -1 for j, weight in enumerate(row)]
        for i, row in enumerate(dist)
    ]

    for k in range(n):
        row_k = shortest[k]
        for i in range(n):
            row_i = shortest[i]
            via = row_i[k]
            if via == INF:
                continue
            for j, onward in enumerate(row_k):
                if onward == INF:
                    continue
                candidate = via + onward
                if candidate < row_i[j]:
                    row_i[j] = candidate
                    next_hop[i][j] = next_hop[i][k]

    negative = any(shortest[i][i] < 0 for i in range(n))
    return ShortestPaths(shortest, next_hop, negative)


def reconstruct_path(next_hop: Sequence[Sequence[int]], u: int, v: int) -> Optional[list[int]]:
    """Rebuild the vertex sequence from u to v, or None if there is no path."""
    if next_hop[u][v] == -1:
        return None
    path = [u]
    while u != v:
        u = next_hop[u][v]
        path.append(u)
    return path


class CycleError(ValueError):
    """Raised when a graph given for topological ordering has a cycle."""

    def __init__(self, processed: int, total: int) -> None:
        super().__init__(f"graph contains a cycle: {processed}/{total} nodes processed")
        self.processed = processed
        self.total = total


def topological_sort(nodes: int, edges: Mapping[int, Iterable[int]]) -> list[int]:
    """Order nodes 0..nodes-1 so every edge points forward (Kahn's algorithm)."""
    in_degree = [0] * nodes
    for targets in edges.values():
        for v in targets:
            in_degree[v] += 1

    queue = deque(i for i, degree in enumerate(in_degree) if degree == 0)
    result: list[int] = []
    while queue:
        u = queue.popleft()
        result.append(u)
        for v in edges.get(u, ()):
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)

    if len(result) != nodes:
        raise CycleError(len(result), nodes)
    return result


class Edge(NamedTuple):
    """A weighted directed edge."""

    to: Hashable
    weight: int


def dijkstra(graph: Mapping[Hashable, Iterable[tuple[Hashable, int]]], start: Hashable) -> dict:
    """Shortest distances from start; nodes that cannot be reached map to ``UNREACHABLE``."""
    dist = {node: UNREACHABLE for node in graph}
    dist[start] = 0
    counter = itertools.count()
    queue = [(0, next(counter), start)]

    while queue:
        d, _, node = heapq.heappop(queue)
        if d > dist[node]:
            continue
        for to, weight in graph.get(node, ()):
            candidate = d + weight
            if candidate < dist.get(to, UNREACHABLE):
                dist[to] = candidate
                heapq.heappush(queue, (candidate, next(counter), to))
    return dist