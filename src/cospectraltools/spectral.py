"""Closed-walk counts, cospectral vertices and NCVS pairs.

Vertices i and j are cospectral iff they have the same number of closed
walks of every length 1..n-1, i.e. iff rows i and j of loop_counts(G) agree.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from cospectraltools.graph import SimpleGraph
from cospectraltools.linalg import adjacency_int_matrix, diagonal, identity, matmul
from cospectraltools.orbits import is_vertex_transitive, vertex_orbits


LoopCounts = Tuple[Tuple[int, ...], ...]


def loop_counts(G: SimpleGraph) -> LoopCounts:
    """
    n x (n-1) matrix L with L[i][k-1] = number of closed walks of length k at i.
    """
    n = G.n
    A = adjacency_int_matrix(G)
    B = identity(n)
    cols: List[List[int]] = []
    for _k in range(1, n):
        B = matmul(B, A)
        cols.append(diagonal(B))
    return tuple(tuple(col[i] for col in cols) for i in range(n))


def is_walk_regular(G: SimpleGraph) -> bool:
    L = loop_counts(G)
    return all(row == L[0] for row in L[1:])


def _classes_from(L: LoopCounts) -> List[List[int]]:
    groups: Dict[Tuple[int, ...], List[int]] = {}
    for u, row in enumerate(L):
        groups.setdefault(row, []).append(u)
    return sorted(groups.values(), key=lambda c: c[0])


def cospectral_classes(G: SimpleGraph) -> List[List[int]]:
    """Vertices grouped by loop-count row, ordered by smallest member."""
    return _classes_from(loop_counts(G))


def are_cospectral(G: SimpleGraph, i: int, j: int) -> bool:
    L = loop_counts(G)
    return L[i] == L[j]


def _ncvs_from(L: LoopCounts, orbits: List[FrozenSet[int]]) -> List[Tuple[int, int]]:
    n = len(L)
    return [
        (i, j)
        for i in range(n)
        for j in range(i + 1, n)
        if L[i] == L[j] and j not in orbits[i]
    ]


def ncvs_pairs(G: SimpleGraph) -> List[Tuple[int, int]]:
    """All pairs (i, j), i < j, of cospectral but not similar vertices."""
    L = loop_counts(G)
    if len(set(L)) == len(L):
        # No two vertices are cospectral; orbits cannot matter.
        return []
    return _ncvs_from(L, vertex_orbits(G))


def has_ncvs(G: SimpleGraph) -> bool:
    return bool(ncvs_pairs(G))


def walk_regular_not_vertex_transitive(G: SimpleGraph) -> bool:
    """Filter for walk-regular graphs that are not vertex-transitive."""
    return is_walk_regular(G) and not is_vertex_transitive(G)


@dataclass(frozen=True)
class CospectralProfile:
    """
    Per-graph cospectrality report.

    loops:    loop-count matrix (see loop_counts)
    orbits:   orbit partition of Aut(G), ordered by smallest member
    classes:  cospectral classes, ordered by smallest member
    ncvs:     cospectral but not similar pairs (i, j), i < j
    """

    loops: LoopCounts
    orbits: Tuple[FrozenSet[int], ...]
    classes: Tuple[Tuple[int, ...], ...]
    ncvs: Tuple[Tuple[int, int], ...]

    @property
    def walk_regular(self) -> bool:
        return len(self.classes) <= 1

    @property
    def vertex_transitive(self) -> bool:
        return len(self.orbits) <= 1


def cospectral_profile(G: SimpleGraph) -> CospectralProfile:
    L = loop_counts(G)
    per_vertex = vertex_orbits(G)
    orbits = tuple(sorted(set(per_vertex), key=min))

    classes = tuple(tuple(c) for c in _classes_from(L))

    return CospectralProfile(
        loops=L,
        orbits=orbits,
        classes=classes,
        ncvs=tuple(_ncvs_from(L, per_vertex)),
    )
