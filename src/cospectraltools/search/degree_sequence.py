"""Exhaustive isomorph-free generation of graphs with a given degree sequence."""
from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import networkx as nx

from cospectraltools.graph import SimpleGraph
from cospectraltools.oracle import is_isomorphic, same_degree_relation


GraphFilter = Callable[[SimpleGraph], bool]


class DegreeSequenceError(ValueError):
    """Raised for sequences that no simple graph can realise on their length."""


def validate_degree_sequence(degree_sequence: Sequence[int]) -> List[int]:
    """
    Return a sorted (ascending) copy of degree_sequence after checking that
    every entry is an int in [0, n-1] and that the sum is even.
    """
    seq = list(degree_sequence)
    n = len(seq)
    for i, d in enumerate(seq):
        if isinstance(d, bool) or not isinstance(d, int):
            raise DegreeSequenceError(f"Entry {i} is {d!r}, expected an int.")
        if not 0 <= d <= n - 1:
            raise DegreeSequenceError(f"Entry {i} is {d}, expected 0 <= d <= {n - 1}.")
    if sum(seq) % 2:
        raise DegreeSequenceError(f"Degree sum {sum(seq)} is odd.")
    return sorted(seq)


def _neighbor_degree_key(G: SimpleGraph) -> Tuple[Tuple[int, ...], ...]:
    """Isomorphism invariant: sorted multiset of sorted neighbour-degree lists."""
    degs = G.degrees()
    return tuple(sorted(tuple(sorted(degs[v] for v in G.neighbors(u))) for u in range(G.n)))


def generate(
    degree_sequence: Sequence[int],
    filter: Optional[GraphFilter] = None,
    *,
    verbose: bool = False,
) -> List[SimpleGraph]:
    """
    All graphs realising degree_sequence that pass filter, one per
    isomorphism class.

    The sequence is sorted ascending first, so vertex u of every result has
    degree sorted(degree_sequence)[u].

    Search: vertices are completed from the top index down. For the current
    top vertex m, the edge (i, m) is decided for i = m-1, ..., 0, trying
    "present" (when i has spare degree) before "absent". Once m reaches its
    target degree the search moves to m-1. A completed graph is kept if it
    passes filter and is not isomorphic to one already kept.
    """
    target = validate_degree_sequence(degree_sequence)
    n0 = len(target)
    if n0 == 0:
        return []

    rel = same_degree_relation(target)
    adj = [0] * n0
    deg = [0] * n0

    found: List[SimpleGraph] = []
    buckets: Dict[Tuple[Tuple[int, ...], ...], List[nx.Graph]] = {}
    n_complete = 0
    n_rejected = 0

    def record() -> None:
        nonlocal n_complete, n_rejected
        G = SimpleGraph(tuple(adj))
        n_complete += 1

        if filter is not None and not filter(G):
            return

        key = _neighbor_degree_key(G)
        Gx = G.to_nx()
        bucket = buckets.setdefault(key, [])
        if any(is_isomorphic(Gx, H, rel) for H in bucket):
            n_rejected += 1
            return

        bucket.append(Gx)
        found.append(G)

    def clear_lower_edges(v: int) -> None:
        low = adj[v] & ((1 << v) - 1)
        while low:
            lsb = low & -low
            u = lsb.bit_length() - 1
            low ^= lsb
            adj[u] &= ~(1 << v)
            adj[v] &= ~lsb
            deg[u] -= 1
            deg[v] -= 1

    def recur(m: int, i: int) -> None:
        degm = deg[m]

        if m == 0 and degm == target[0]:
            record()

        elif degm == target[m]:
            recur(m - 1, m - 2)
            clear_lower_edges(m - 1)

        # i + 1 candidates remain below m; they must be able to fill m.
        elif i >= 0 and i + 1 >= target[m] - degm:
            room = deg[i] < target[i]

            # Skip "present" when i is interchangeable with i+1: same target,
            # i+1 was left out of m, and both agree on every vertex above m.
            interchangeable = (
                i + 1 < m
                and not (adj[i + 1] >> m) & 1
                and target[i + 1] == target[i]
                and adj[i] >> (m + 1) == adj[i + 1] >> (m + 1)
            )

            if room and not interchangeable:
                adj[i] |= 1 << m
                adj[m] |= 1 << i
                deg[i] += 1
                deg[m] += 1
                recur(m, i - 1)
                adj[i] &= ~(1 << m)
                adj[m] &= ~(1 << i)
                deg[i] -= 1
                deg[m] -= 1

            recur(m, i - 1)

    recur(n0 - 1, n0 - 2)

    if verbose:
        print(
            f"[seq={target}] {n_complete} complete, "
            f"{n_rejected} isomorphic rejects, {len(found)} kept",
            file=sys.stderr,
        )

    return found
