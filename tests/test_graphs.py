import pytest

from practicekit.graphs import (
    INF,
    UNREACHABLE,
    AStar,
    CycleError,
    dijkstra,
    floyd_warshall,
    reconstruct_path,
    topological_sort,
)

SAMPLE_GRAPH = {
    0: [(1, 4), (2, 1)],
    1: [(3, 1)],
    2: [(1, 2), (3, 5)],
    3: [],
}


def _matrix_from(graph):
    n = len(graph)
    matrix = [[INF] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for u, edges in graph.items():
        for v, w in edges:
            matrix[u][v] = w
    return matrix


def _assert_valid_grid_path(grid, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
        assert grid[x2][y2] == 0


def test_astar_open_grid_path_is_manhattan_length():
    grid = [[0] * 5 for _ in range(5)]
    path = AStar(grid).find_path(0, 0, 4, 3)
    _assert_valid_grid_path(grid, path, (0, 0), (4, 3))
    assert len(path) == 4 + 3 + 1


def test_astar_routes_around_wall():
    grid = [
        [0, 0, 0, 0],
        [1, 1, 1, 0],
        [0, 0, 0, 0],
    ]
    path = AStar(grid).find_path(0, 0, 2, 0)
    _assert_valid_grid_path(grid, path, (0, 0), (2, 0))
    assert (1, 3) in path
    assert len(path) > 2 + 1


def test_astar_start_equals_goal():
    assert AStar([[0]]).find_path(0, 0, 0, 0) == [(0, 0)]


def test_astar_no_path():
    grid = [
        [0, 1, 0],
        [1, 1, 0],
        [0, 0, 0],
    ]
    assert AStar(grid).find_path(0, 0, 2, 2) is None


def test_astar_empty_grid_rejected():
    with pytest.raises(ValueError):
        AStar([])


def test_dijkstra_sample_graph():
    assert dijkstra(SAMPLE_GRAPH, 0) == {0: 0, 1: 3, 2: 1, 3: 4}


def test_dijkstra_distances_are_relaxed():
    dist = dijkstra(SAMPLE_GRAPH, 0)
    for u, edges in SAMPLE_GRAPH.items():
        for v, w in edges:
            assert dist[v] <= dist[u] + w


def test_dijkstra_unreachable_node():
    graph = {0: [(1, 2)], 1: [], 2: []}
    dist = dijkstra(graph, 0)
    assert dist[2] == UNREACHABLE
    assert dist[1] == 2


def test_floyd_warshall_matches_dijkstra():
    result = floyd_warshall(_matrix_from(SAMPLE_GRAPH))
    assert result.has_negative_cycle is False
    for source in SAMPLE_GRAPH:
        expected = dijkstra(SAMPLE_GRAPH, source)
        for target, d in expected.items():
            got = result.distances[source][target]
            assert got == (INF if d == UNREACHABLE else d)


def test_reconstruct_path_follows_shortest_distance():
    matrix = _matrix_from(SAMPLE_GRAPH)
    result = floyd_warshall(matrix)
    path = reconstruct_path(result.next_hop, 0, 3)
    assert path[0] == 0 and path[-1] == 3
    weight = sum(matrix[a][b] for a, b in zip(path, path[1:]))
    assert weight == result.distances[0][3]


def test_reconstruct_path_none_without_route():
    result = floyd_warshall(_matrix_from(SAMPLE_GRAPH))
    assert reconstruct_path(result.next_hop, 3, 0) is None


def test_floyd_warshall_negative_cycle():
    matrix = [
        [0, 1, INF],
        [INF, 0, -1],
        [-1, INF, 0],
    ]
    assert floyd_warshall(matrix).has_negative_cycle is True


def test_floyd_warshall_does_not_modify_input():
    matrix = _matrix_from(SAMPLE_GRAPH)
    snapshot = [row[:] for row in matrix]
    floyd_warshall(matrix)
    assert matrix == snapshot


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_topological_sort_respects_edges():
    edges = {0: [1, 2], 1: [3], 2: [3], 4: [0]}
    order = topological_sort(5, edges)
    assert sorted(order) == list(range(5))
    position = {node: i for i, node in enumerate(order)}
    for u, targets in edges.items():
        for v in targets:
            assert position[u] < position[v]


def test_topological_sort_cycle():
    with pytest.raises(CycleError, match="graph contains a cycle") as info:
        topological_sort(3, {0: [1], 1: [2], 2: [1]})
    assert info.value.total == 3
    assert info.value.processed < info.value.total