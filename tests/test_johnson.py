import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dsakit.bellman_ford import NegativeCycleError, WeightedEdge, bellman_ford
from dsakit.johnson import dense_dijkstra, johnson, reweighting_potentials

SAMPLE_EDGES = [
    WeightedEdge(a, b, w)
    for a, b, w in zip(
        [0, 1, 1, 1, 2, 3, 4, 5, 6],
        [1, 2, 3, 5, 4, 2, 1, 6, 0],
        [3, 5, 10, -4, 2, -7, -3, -8, 12],
    )
]

CYCLE_EDGES = [
    WeightedEdge(a, b, w)
    for a, b, w in zip(
        [0, 1, 2, 2, 3, 2, 4, 5],
        [1, 3, 1, 5, 2, 4, 5, 1],
        [3, -8, 3, 5, 3, 2, -1, 8],
    )
]


@st.composite
def nonnegative_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    edges = draw(
        st.lists(
            st.tuples(
                st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 20)
            ),
            max_size=15,
        )
    )
    return n, [WeightedEdge(*e) for e in edges]


@st.composite
def dags(draw):
    n = draw(st.integers(min_value=2, max_value=6))
    pairs = draw(
        st.lists(
            st.tuples(st.integers(0, n - 2), st.integers(1, n - 1)).filter(
                lambda p: p[0] < p[1]
            ),
            max_size=12,
        )
    )
    weights = draw(st.lists(st.integers(-20, 20), min_size=len(pairs), max_size=len(pairs)))
    return n, [WeightedEdge(u, v, w) for (u, v), w in zip(pairs, weights)]


def test_sample_matches_bellman_ford_from_every_source():
    result = johnson(7, SAMPLE_EDGES)
    for source in range(7):
        assert result[source] == bellman_ford(7, SAMPLE_EDGES, source)


def test_sample_diagonal_is_zero():
    result = johnson(7, SAMPLE_EDGES)
    assert [result[i][i] for i in range(7)] == [0] * 7


def test_potentials_make_weights_non_negative():
    h = reweighting_potentials(7, SAMPLE_EDGES)
    assert len(h) == 7
    assert all(value <= 0 for value in h)
    assert all(w + h[u] - h[v] >= 0 for u, v, w in SAMPLE_EDGES)


def test_negative_cycle_raises():
    with pytest.raises(NegativeCycleError):
        johnson(6, CYCLE_EDGES)
    with pytest.raises(NegativeCycleError):
        reweighting_potentials(6, CYCLE_EDGES)


def test_unreachable_vertices_are_none():
    result = johnson(3, [WeightedEdge(0, 1, 4)])
    assert result[1][0] is None
    assert result[0][2] is None
    assert result[0][1] == 4


def test_dense_dijkstra_rejects_bad_start():
    with pytest.raises(ValueError):
        dense_dijkstra(3, 3, [])


def test_edge_out_of_range_rejected():
    with pytest.raises(ValueError):
        johnson(2, [WeightedEdge(0, 5, 1)])


def test_empty_graph():
    assert johnson(0, []) == []


@settings(max_examples=60)
@given(nonnegative_graphs())
def test_dense_dijkstra_agrees_with_bellman_ford(graph):
    n, edges = graph
    for source in range(n):
        assert dense_dijkstra(n, source, edges) == bellman_ford(n, edges, source)


@settings(max_examples=60)
@given(nonnegative_graphs())
def test_johnson_agrees_with_bellman_ford_nonnegative(graph):
    n, edges = graph
    result = johnson(n, edges)
    assert result == [bellman_ford(n, edges, s) for s in range(n)]


@settings(max_examples=60)
@given(dags())
def test_johnson_agrees_with_bellman_ford_on_dags(graph):
    n, edges = graph
    result = johnson(n, edges)
    assert result == [bellman_ford(n, edges, s) for s in range(n)]