"""Tests for the VF2-based isomorphism oracle."""
from cospectraltools.graph import SimpleGraph
from cospectraltools.oracle import has_automorphism_mapping, is_isomorphic, same_degree_relation


def test_isomorphic_relabelled_path():
    A = SimpleGraph.from_edges([(0, 1), (1, 2), (2, 3)], 4)
    B = SimpleGraph.from_edges([(2, 0), (0, 3), (3, 1)], 4)
    assert is_isomorphic(A, B)


def test_not_isomorphic_path_vs_star():
    path = SimpleGraph.from_edges([(0, 1), (1, 2), (2, 3)], 4)
    star = SimpleGraph.from_edges([(0, 1), (0, 2), (0, 3)], 4)
    assert not is_isomorphic(path, star)


def test_relation_can_forbid_isomorphism():
    # Forcing an endpoint of P3 onto its centre is impossible.
    A = SimpleGraph.from_edges([(0, 1), (1, 2)], 3)
    assert is_isomorphic(A, A)
    assert not is_isomorphic(A, A, lambda a, b: (a == 0) == (b == 1))


def test_automorphism_mapping_cycle():
    C4 = SimpleGraph.cycle(4)
    assert has_automorphism_mapping(C4, 0, 2)
    assert has_automorphism_mapping(C4, 0, 1)


def test_automorphism_mapping_star():
    star = SimpleGraph.from_edges([(0, 1), (0, 2), (0, 3)], 4)
    assert not has_automorphism_mapping(star, 0, 1)
    assert has_automorphism_mapping(star, 1, 3)


def test_same_degree_relation():
    rel = same_degree_relation([1, 1, 2, 2])
    assert rel(0, 1)
    assert rel(2, 3)
    assert not rel(1, 2)
