"""Shortest paths: Dijkstra on a matrix or with a heap, and Floyd-Warshall."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Mapping, Sequence
from itertools import count

INF = 1_000_000_000

Matrix = Sequence[Sequence[int]]


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the distance matrix must be square")
    return size


def dijkstra(matrix: Matrix, start: int) -> list[int]:
    """Return the shortest distances from start in a dense distance matrix.

    Missing edges are given as INF; unreachable nodes keep INF.
    """
    size = _check_square(matrix)
    distances = list(matrix[start])
    visited = [False] * size
    visited[start] = True
    for _ in range(size - 1):
        current = min(
            (node for node, done in enumerate(visited) if not done),
            key=distances.__getitem__,
        )
        visited[current] = True
        for node, weight in enumerate(matrix[current]):
            if not visited[node] and distances[current] + weight < distances[node]:
                distances[node] = distances[current] + weight
    return distances


def dijkstra_heap(
    graph: Mapping[Hashable, Sequence[tuple[Hashable, int]]], start: Hashable
) -> dict[Hashable, int]:
    """Return the shortest distance from start to every node of an adjacency list.

    graph maps each node to (neighbour, weight) pairs. Unreachable nodes get INF.
    """
    distances: dict[Hashable, int] = {}
    for node, edges in graph.items():
        distances.setdefault(node, INF)
        for neighbour, _ in edges:
            distances.setdefault(neighbour, INF)
    distances[start] = 0
    tiebreak = count()
    heap = [(0, next(tiebreak), start)]
    while heap:
        distance, _, current = heapq.heappop(heap)
        if distances[current] < distance:
            continue
        for neighbour, weight in graph.get(current, ()):
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tiebreak), neighbour))
    return distances


def floyd_warshall(matrix: Matrix) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of nodes."""
    _check_square(matrix)
    distances = [list(row) for row in matrix]
    for k, via in enumerate(distances):
        for row in distances:
            to_via = row[k]
            for target, onward in enumerate(via):
                if to_via + onward < row[target]:
                    row[target] = to_via + onward
    return distances