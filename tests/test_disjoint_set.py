import pytest

from algokit.disjoint_set import DisjointSet, Edge, kruskal

SAMPLE_EDGES = [
    Edge(1, 7, 12),
    Edge(1, 4, 28),
    Edge(1, 2, 67),
    Edge(2, 4, 24),
    Edge(2, 5, 62),
    Edge(3, 5, 20),
    Edge(3, 6, 37),
    Edge(4, 7, 13),
    Edge(5, 6, 45),
    Edge(5, 7, 73),
    Edge(1, 5, 17),
]


@pytest.fixture
def sample_sets():
    sets = DisjointSet(range(1, 11))
    for a, b in [(1, 2), (2, 3), (3, 4), (5, 6), (6, 7), (7, 8)]:
        sets.union(a, b)
    return sets


def test_sample_roots(sample_sets):
    assert sample_sets.find(5) == 5
    assert sample_sets.find(8) == 5
    assert sample_sets.find(4) == 1


def test_sample_connectivity(sample_sets):
    assert not sample_sets.connected(1, 5)
    assert sample_sets.connected(1, 4)
    assert sample_sets.connected(6, 8)


def test_untouched_element_is_its_own_root(sample_sets):
    assert sample_sets.find(10) == 10


def test_union_reports_whether_it_merged():
    sets = DisjointSet("abc")
    assert sets.union("a", "b") is True
    assert sets.union("b", "a") is False


def test_smaller_root_becomes_parent():
    sets = DisjointSet(range(5))
    sets.union(4, 2)
    assert sets.find(4) == 2
    sets.union(3, 0)
    assert sets.find(3) == 0


def test_unknown_element_raises():
    with pytest.raises(KeyError):
        DisjointSet([1, 2]).find(3)


def test_kruskal_sample_total():
    tree = kruskal(7, SAMPLE_EDGES)
    assert sum(edge.distance for edge in tree) == 123


def test_kruskal_spans_all_nodes():
    tree = kruskal(7, SAMPLE_EDGES)
    assert len(tree) == 6
    sets = DisjointSet(range(1, 8))
    for edge in tree:
        assert sets.union(edge.a, edge.b)
    assert all(sets.connected(1, node) for node in range(2, 8))


def test_kruskal_picks_cheapest_parallel_edge():
    tree = kruskal(2, [Edge(1, 2, 9), Edge(1, 2, 3)])
    assert tree == [Edge(1, 2, 3)]


def test_kruskal_without_edges():
    assert kruskal(3, []) == []