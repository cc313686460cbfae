"""Isomorphism oracle built on NetworkX's VF2 matcher.

A vertex relation is a predicate ``rel(a, b)`` on a vertex ``a`` of the first
graph and a vertex ``b`` of the second; only isomorphisms mapping every ``a``
to some ``b`` with ``rel(a, b)`` are considered.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence, Union

import networkx as nx
from networkx.algorithms.isomorphism import GraphMatcher

from cospectraltools.graph import SimpleGraph


VertexRelation = Callable[[int, int], bool]
GraphLike = Union[SimpleGraph, nx.Graph]


class RelationMatcher(GraphMatcher):
    """GraphMatcher whose semantic check is an arbitrary vertex relation."""

    def __init__(self, G1: nx.Graph, G2: nx.Graph, vertex_relation: Optional[VertexRelation] = None):
        super().__init__(G1, G2)
        self.vertex_relation = vertex_relation

    def semantic_feasibility(self, G1_node, G2_node) -> bool:
        if self.vertex_relation is None:
            return True
        return bool(self.vertex_relation(G1_node, G2_node))


def _as_nx(G: GraphLike) -> nx.Graph:
    if isinstance(G, SimpleGraph):
        return G.to_nx()
    return G


def is_isomorphic(G: GraphLike, H: GraphLike, vertex_relation: Optional[VertexRelation] = None) -> bool:
    """True iff an isomorphism G -> H respecting vertex_relation exists."""
    GM = RelationMatcher(_as_nx(G), _as_nx(H), vertex_relation)
    return GM.is_isomorphic()


def has_automorphism_mapping(G: GraphLike, i: int, j: int) -> bool:
    """True iff some automorphism of G sends vertex i to vertex j."""
    Gx = _as_nx(G)
    return is_isomorphic(Gx, Gx, lambda a, b: (a == i) == (b == j))


def same_degree_relation(targets: Sequence[int]) -> VertexRelation:
    """Relation pairing vertices of equal target degree.

    Both graphs must be realisations of the same (sorted) degree sequence.
    """
    targets = tuple(targets)

    def rel(a: int, b: int) -> bool:
        return targets[a] == targets[b]

    return rel
