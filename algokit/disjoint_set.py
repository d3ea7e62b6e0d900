"""Union-find over a fixed set of elements and Kruskal's spanning tree."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass


class DisjointSet:
    """Disjoint sets with path compression; the smaller root becomes the parent."""

    def __init__(self, elements: Iterable[Hashable]) -> None:
        self._parent = {element: element for element in elements}

    def find(self, x: Hashable) -> Hashable:
        """Return the root of the set holding x; raises KeyError for unknown x."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b; return False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if root_a < root_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_a] = root_b
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Return whether a and b belong to the same set."""
        return self.find(a) == self.find(b)


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between nodes a and b."""

    a: int
    b: int
    distance: int


def kruskal(node_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest over nodes 1..node_count."""
    components = DisjointSet(range(1, node_count + 1))
    return [
        edge
        for edge in sorted(edges, key=lambda edge: edge.distance)
        if components.union(edge.a, edge.b)
    ]