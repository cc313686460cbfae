"""Tests for the degree-sequence backtracking generator."""
import itertools

import networkx as nx
import pytest

from cospectraltools.graph import SimpleGraph
from cospectraltools.oracle import is_isomorphic
from cospectraltools.search.degree_sequence import (
    DegreeSequenceError,
    generate,
    validate_degree_sequence,
)


def _assert_pairwise_non_isomorphic(graphs):
    for G, H in itertools.combinations(graphs, 2):
        assert not is_isomorphic(G, H)


# --- validation ---

def test_validate_sorts():
    assert validate_degree_sequence([2, 1, 1]) == [1, 1, 2]


def test_validate_odd_sum():
    with pytest.raises(DegreeSequenceError):
        validate_degree_sequence([1, 1, 1])


def test_validate_entry_too_large():
    with pytest.raises(DegreeSequenceError):
        generate([4, 1, 1, 1])


def test_validate_negative():
    with pytest.raises(DegreeSequenceError):
        generate([-1, 1])


def test_validate_non_int():
    with pytest.raises(DegreeSequenceError):
        generate([1.0, 1])


def test_degree_sequence_error_is_value_error():
    assert issubclass(DegreeSequenceError, ValueError)


# --- small known cases ---

def test_empty_sequence():
    assert generate([]) == []


def test_single_vertex():
    assert generate([0]) == [SimpleGraph.empty(1)]


def test_single_edge():
    (G,) = generate([1, 1])
    assert G.edges() == [(0, 1)]


def test_star():
    (G,) = generate([3, 1, 1, 1])
    assert G.degree_sequence() == [1, 1, 1, 3]


def test_path_p4_only():
    graphs = generate([1, 2, 2, 1])
    assert len(graphs) == 1
    assert is_isomorphic(graphs[0], SimpleGraph.from_edges([(0, 1), (1, 2), (2, 3)], 4))


def test_two_graphs_for_p4_plus_k2_sequence():
    # P4 + K2 and P3 + P3
    assert len(generate([1, 1, 1, 1, 2, 2])) == 2


def test_non_graphical_sequence_is_empty():
    # Even sum and in range, but fails Erdos-Gallai.
    assert generate([3, 3, 1, 1]) == []


def test_two_regular_on_six():
    # C6 and two triangles
    graphs = generate([2] * 6)
    assert len(graphs) == 2
    assert any(is_isomorphic(G, SimpleGraph.cycle(6)) for G in graphs)


def test_cubic_counts():
    assert len(generate([3] * 4)) == 1
    assert len(generate([3] * 6)) == 2
    assert len(generate([3] * 8)) == 6


def test_complement_counts_agree():
    # A d-regular graph on n vertices complements to an (n-1-d)-regular one.
    assert len(generate([3] * 8)) == len(generate([4] * 8))
    assert len(generate([2] * 7)) == len(generate([4] * 7))


# --- properties ---

@pytest.mark.parametrize(
    "seq",
    [
        [1, 1, 2, 2, 2],
        [0, 1, 1, 2, 2, 2],
        [1, 1, 1, 2, 2, 3],
        [2, 2, 2, 3, 3, 4],
        [1, 2, 2, 3, 3, 3, 4],
    ],
)
def test_degree_sequence_fidelity_and_no_duplicates(seq):
    graphs = generate(seq)
    assert graphs
    for G in graphs:
        assert G.degree_sequence() == sorted(seq)
        # Vertex u carries the u-th smallest target degree.
        assert G.degrees() == sorted(seq)
    _assert_pairwise_non_isomorphic(graphs)


def test_input_order_irrelevant():
    a = generate([2, 1, 3, 2, 2])
    b = generate([3, 2, 2, 2, 1])
    assert a == b


def test_filter_applied():
    connected = generate([2] * 6, lambda G: nx.is_connected(G.to_nx()))
    assert len(connected) == 1
    assert is_isomorphic(connected[0], SimpleGraph.cycle(6))


def test_filter_rejecting_everything():
    assert generate([2] * 6, lambda G: False) == []


def test_filter_errors_propagate():
    def boom(G):
        raise RuntimeError("filter failed")

    with pytest.raises(RuntimeError, match="filter failed"):
        generate([1, 1], boom)


def test_results_immutable():
    (G,) = generate([1, 1])
    with pytest.raises(AttributeError):
        G.adj = (0, 0)