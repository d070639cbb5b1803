import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graphs import bfs, is_bipartite, prim_mst


def _union_find(items):
    parent = {item: item for item in items}

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    return parent, find


def _is_spanning_tree(n, pairs):
    parent, find = _union_find(range(n))
    for a, b in pairs:
        ra, rb = find(a), find(b)
        if ra == rb:
            return False
        parent[ra] = rb
    return len(pairs) == n - 1


def _brute_minimum(n, edges):
    return min(
        sum(w for _, _, w in combo)
        for combo in itertools.combinations(edges, n - 1)
        if _is_spanning_tree(n, [(a, b) for a, b, _ in combo])
    )


@given(st.integers(2, 20).map(lambda k: 2 * k))
def test_even_cycle_is_bipartite(n):
    assert is_bipartite(n, [(i, (i + 1) % n) for i in range(n)]) is True


@given(st.integers(1, 20).map(lambda k: 2 * k + 1))
def test_odd_cycle_is_not_bipartite(n):
    assert is_bipartite(n, [(i, (i + 1) % n) for i in range(n)]) is False


@given(st.lists(st.tuples(st.integers(0, 9), st.integers(0, 9))))
def test_even_odd_edges_are_bipartite(pairs):
    edges = [(2 * a, 2 * b + 1) for a, b in pairs]
    assert is_bipartite(20, edges) is True


def test_self_loop_is_not_bipartite():
    assert is_bipartite(1, [(0, 0)]) is False


def test_graph_without_edges_is_bipartite():
    assert is_bipartite(5, []) is True


def test_is_bipartite_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        is_bipartite(2, [(0, 2)])


CLASSIC = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2), (2, 5, 4),
    (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]


def _weights(edges):
    return {frozenset((a, b)): w for a, b, w in edges}


def test_prim_classic_graph_is_minimum():
    tree = prim_mst(9, CLASSIC, 0)
    weights = _weights(CLASSIC)
    assert _is_spanning_tree(9, tree)
    assert sum(weights[frozenset(pair)] for pair in tree) == _brute_minimum(9, CLASSIC)


def test_prim_lists_every_other_vertex_in_order():
    tree = prim_mst(9, CLASSIC, 3)
    assert [vertex for _, vertex in tree] == [v for v in range(9) if v != 3]


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(1, 6))
    weights = {}
    for v in range(1, n):
        u = draw(st.integers(0, v - 1))
        weights[(u, v)] = draw(st.integers(1, 20))
    extra = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(1, 20)),
            max_size=8,
        )
    )
    for a, b, w in extra:
        if a != b:
            weights.setdefault((min(a, b), max(a, b)), w)
    edges = [(a, b, w) for (a, b), w in weights.items()]
    source = draw(st.integers(0, n - 1))
    return n, edges, source


@given(connected_graphs())
def test_prim_matches_exhaustive_minimum(graph):
    n, edges, source = graph
    tree = prim_mst(n, edges, source)
    weights = _weights(edges)
    assert _is_spanning_tree(n, tree)
    assert sum(weights[frozenset(pair)] for pair in tree) == _brute_minimum(n, edges)


def test_prim_single_vertex():
    assert prim_mst(1, [], 0) == []


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim_mst(3, [(0, 1, 5)], 0)


def test_bfs_isolated_start():
    assert bfs([], 7) == [7]


def test_bfs_default_start():
    assert bfs([(1, 2), (3, 4)]) == [1, 2]


def test_bfs_neighbours_in_edge_order():
    assert bfs([(1, 5), (1, 3), (1, 4)], 1) == [1, 5, 3, 4]


def test_bfs_along_a_path():
    assert bfs([(i, i + 1) for i in range(1, 10)], 1) == list(range(1, 11))


@given(
    st.lists(st.tuples(st.integers(0, 9), st.integers(0, 9)), max_size=20),
    st.integers(0, 9),
)
def test_bfs_visits_component_once(edges, start):
    order = bfs(edges, start)
    parent, find = _union_find(range(10))
    for a, b in edges:
        ra, rb = find(a), find(b)
        if ra != rb:
            parent[ra] = rb
    component = {v for v in range(10) if find(v) == find(start)}
    assert order[0] == start
    assert len(order) == len(set(order))
    assert set(order) == component