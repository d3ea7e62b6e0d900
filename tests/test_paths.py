import pytest

from algokit.paths import INF, dijkstra, dijkstra_heap, floyd_warshall

GRAPH_MATRIX = [
    [0, 2, 5, 1, INF, INF],
    [2, 0, 3, 2, INF, INF],
    [5, 3, 0, 3, 1, 5],
    [1, 2, 3, 0, 1, INF],
    [INF, INF, 1, 1, 0, 2],
    [INF, INF, 5, INF, 2, 0],
]

FLOYD_MATRIX = [
    [0, 5, INF, 8],
    [7, 0, 9, INF],
    [2, INF, 0, 4],
    [INF, INF, 3, 0],
]


def _as_adjacency(matrix):
    return {
        source + 1: [
            (target + 1, weight)
            for target, weight in enumerate(row)
            if target != source and weight < INF
        ]
        for source, row in enumerate(matrix)
    }


def test_dijkstra_sample():
    assert dijkstra(GRAPH_MATRIX, 0) == [0, 2, 3, 1, 2, 4]


def test_dijkstra_heap_matches_matrix_version():
    adjacency = _as_adjacency(GRAPH_MATRIX)
    for start in range(len(GRAPH_MATRIX)):
        heap_result = dijkstra_heap(adjacency, start + 1)
        matrix_result = dijkstra(GRAPH_MATRIX, start)
        assert [heap_result[node + 1] for node in range(6)] == matrix_result


def test_dijkstra_never_exceeds_direct_edges():
    for start, row in enumerate(GRAPH_MATRIX):
        distances = dijkstra(GRAPH_MATRIX, start)
        assert distances[start] == 0
        assert all(best <= direct for best, direct in zip(distances, row))


def test_dijkstra_unreachable_stays_infinite():
    matrix = [[0, 1, INF], [1, 0, INF], [INF, INF, 0]]
    assert dijkstra(matrix, 0)[2] == INF


def test_dijkstra_heap_unreachable_node():
    graph = {1: [(2, 4)], 2: [], 3: [(1, 1)]}
    assert dijkstra_heap(graph, 1) == {1: 0, 2: 4, 3: INF}


def test_floyd_rows_match_dijkstra():
    result = floyd_warshall(GRAPH_MATRIX)
    for start in range(len(GRAPH_MATRIX)):
        assert result[start] == dijkstra(GRAPH_MATRIX, start)


def test_floyd_satisfies_triangle_inequality():
    result = floyd_warshall(FLOYD_MATRIX)
    size = len(result)
    for i in range(size):
        assert result[i][i] == 0
        for j in range(size):
            for k in range(size):
                assert result[i][j] <= result[i][k] + result[k][j]


def test_floyd_does_not_modify_input():
    original = [list(row) for row in FLOYD_MATRIX]
    floyd_warshall(FLOYD_MATRIX)
    assert FLOYD_MATRIX == original


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])
    with pytest.raises(ValueError):
        dijkstra([[0, 1, 2], [1, 0, 3]], 0)