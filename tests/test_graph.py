import pytest

from dsdrills.graph import Graph, WeightedGraph, WeightedMapGraph


def test_lines_format_for_directed_edge():
    g = Graph(2)
    g.add_edge(0, 1, bidirectional=False)
    assert g.lines() == ["0->1 , ", "1->"]


def test_bidirectional_edge_reaches_both_ways():
    g = Graph(3)
    g.add_edge(0, 2)
    assert g.has_path(0, 2) and g.has_path(2, 0)


def test_directed_edge_reaches_one_way():
    g = Graph(3)
    g.add_edge(0, 1, bidirectional=False)
    g.add_edge(1, 2, bidirectional=False)
    assert g.has_path(0, 2) is True
    assert g.has_path(2, 0) is False


def test_has_path_to_self_and_isolated():
    g = Graph(3)
    g.add_edge(0, 1)
    assert g.has_path(2, 2) is True
    assert g.has_path(0, 2) is False


def test_has_path_handles_cycles():
    g = Graph(4)
    for s, d in [(0, 1), (1, 2), (2, 0)]:
        g.add_edge(s, d, bidirectional=False)
    assert g.has_path(0, 3) is False


@pytest.mark.parametrize("src, dest", [(0, 5), (-1, 0), (5, 0)])
def test_invalid_vertex_raises(src, dest):
    g = Graph(5)
    with pytest.raises(IndexError):
        g.add_edge(src, dest)
    with pytest.raises(IndexError):
        g.has_path(src, dest)


def test_negative_vertex_count_raises():
    with pytest.raises(ValueError):
        Graph(-1)


def test_dfs_order_example():
    g = Graph(4)
    g.add_edge(0, 2)
    g.add_edge(0, 1)
    g.add_edge(1, 3)
    assert g.dfs_order(0) == [0, 1, 3, 2]


def test_dfs_order_visits_each_reachable_vertex_once():
    g = Graph(6)
    for s, d in [(0, 1), (1, 2), (2, 0), (2, 3), (4, 5)]:
        g.add_edge(s, d)
    order = g.dfs_order(1)
    assert order[0] == 1
    assert len(order) == len(set(order))
    assert set(order) == {v for v in range(6) if g.has_path(1, v)}


def test_dfs_order_independent_of_insertion_order():
    edges = [(0, 3), (0, 1), (1, 4), (3, 2), (2, 4)]
    a, b = Graph(5), Graph(5)
    for s, d in edges:
        a.add_edge(s, d)
    for s, d in reversed(edges):
        b.add_edge(s, d)
    assert a.dfs_order(0) == b.dfs_order(0)


def test_weighted_lines_record_both_directions():
    g = WeightedGraph(2)
    g.add_edge(0, 1, 5)
    assert g.lines() == ["0->(1 5)", "1->(0 5)"]


def test_weighted_directed_matches_map_graph():
    edges = [(0, 1, 7), (0, 2, 3), (2, 1, 4)]
    listed, mapped = WeightedGraph(3), WeightedMapGraph(3)
    for s, d, w in edges:
        listed.add_edge(s, d, w, bidirectional=False)
        mapped.add_edge(s, d, w)
    assert listed.lines() == mapped.lines()


def test_map_graph_replaces_weight():
    a, b = WeightedMapGraph(2), WeightedMapGraph(2)
    a.add_edge(0, 1, 4)
    a.add_edge(0, 1, 9)
    b.add_edge(0, 1, 9)
    assert a.lines() == b.lines()


def test_map_graph_records_forward_entry_only():
    a, b = WeightedMapGraph(3), WeightedMapGraph(3)
    a.add_edge(0, 2, 6, bidirectional=True)
    b.add_edge(0, 2, 6, bidirectional=False)
    assert a.lines() == b.lines()
    assert len(a.lines()) == 3


def test_weighted_invalid_vertex_raises():
    with pytest.raises(IndexError):
        WeightedGraph(2).add_edge(0, 2, 1)
    with pytest.raises(IndexError):
        WeightedMapGraph(2).add_edge(3, 0, 1)