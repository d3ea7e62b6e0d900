"""Graph traversals: breadth and depth first, topological order, SCCs."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from itertools import count

Graph = Mapping[Hashable, Sequence[Hashable]]


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


def bfs(graph: Graph, start: Hashable) -> list[Hashable]:
    """Return the nodes reachable from start in breadth-first order."""
    order = [start]
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in graph.get(node, ()):
            if neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(graph: Graph, start: Hashable) -> list[Hashable]:
    """Return the nodes reachable from start in depth-first (preorder) order."""
    order = []
    seen = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        order.append(node)
        stack.extend(reversed(graph.get(node, ())))
    return order


def topological_sort(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return nodes 1..node_count so that every edge (a, b) has a before b.

    Raises CycleError if the edges form a cycle.
    """
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, node_count + 1)}
    in_degree = dict.fromkeys(adjacency, 0)
    for source, target in edges:
        if source not in adjacency or target not in adjacency:
            raise ValueError(f"edge ({source}, {target}) leaves nodes 1..{node_count}")
        adjacency[source].append(target)
        in_degree[target] += 1
    queue = deque(node for node, degree in in_degree.items() if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                queue.append(neighbour)
    if len(order) < node_count:
        raise CycleError("the graph contains a cycle")
    return order


def strongly_connected_components(
    graph: Graph, nodes: Iterable[Hashable]
) -> list[list[Hashable]]:
    """Return the strongly connected components in the order Tarjan's method closes them.

    Every node of nodes not yet reached starts a new search. Within a
    component, nodes are listed in the order they leave the search stack.
    """
    index: dict[Hashable, int] = {}
    finished: set[Hashable] = set()
    stack: list[Hashable] = []
    components: list[list[Hashable]] = []
    numbers = count(1)

    def visit(node: Hashable) -> int:
        index[node] = next(numbers)
        stack.append(node)
        low = index[node]
        for neighbour in graph.get(node, ()):
            if neighbour not in index:
                low = min(low, visit(neighbour))
            elif neighbour not in finished:
                low = min(low, index[neighbour])
        if low == index[node]:
            component = []
            while True:
                member = stack.pop()
                component.append(member)
                finished.add(member)
                if member == node:
                    break
            components.append(component)
        return low

    for node in nodes:
        if node not in index:
            visit(node)
    return components