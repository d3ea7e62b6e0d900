"""Bipartite matching by augmenting paths and maximum flow by Edmonds-Karp."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Mapping, Sequence


def bipartite_matching(
    preferences: Mapping[Hashable, Sequence[Hashable]],
) -> dict[Hashable, Hashable]:
    """Return a maximum matching as a mapping from left nodes to right nodes.

    preferences maps each left node to the right nodes it may be matched to.
    Left nodes are tried in order and earlier matches are moved when needed.
    """
    owner: dict[Hashable, Hashable] = {}

    def assign(left: Hashable, visited: set[Hashable]) -> bool:
        for right in preferences.get(left, ()):
            if right in visited:
                continue
            visited.add(right)
            if right not in owner or assign(owner[right], visited):
                owner[right] = left
                return True
        return False

    for left in preferences:
        assign(left, set())
    matched = {left: right for right, left in owner.items()}
    return {left: matched[left] for left in preferences if left in matched}


def max_flow(
    capacities: Mapping[tuple[Hashable, Hashable], int],
    source: Hashable,
    sink: Hashable,
) -> int:
    """Return the maximum flow from source to sink.

    capacities maps directed edges (u, v) to their non-negative capacity.
    """
    if source == sink:
        raise ValueError("source and sink must differ")
    residual: dict[Hashable, dict[Hashable, int]] = {}
    for (start, end), capacity in capacities.items():
        if capacity < 0:
            raise ValueError(f"capacity of ({start}, {end}) is negative")
        residual.setdefault(start, {})
        residual.setdefault(end, {})
        residual[start][end] = residual[start].get(end, 0) + capacity
        residual[end].setdefault(start, 0)

    total = 0
    while True:
        previous: dict[Hashable, Hashable] = {source: source}
        queue = deque([source])
        while queue and sink not in previous:
            node = queue.popleft()
            for neighbour, remaining in residual.get(node, {}).items():
                if remaining > 0 and neighbour not in previous:
                    previous[neighbour] = node
                    queue.append(neighbour)
        if sink not in previous:
            return total

        path = []
        node = sink
        while node != source:
            path.append((previous[node], node))
            node = previous[node]
        flow = min(residual[start][end] for start, end in path)
        for start, end in path:
            residual[start][end] -= flow
            residual[end][start] += flow
        total += flow