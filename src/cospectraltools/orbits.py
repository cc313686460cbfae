from __future__ import annotations

from typing import Dict, FrozenSet, List

from cospectraltools.graph import SimpleGraph
from cospectraltools.oracle import has_automorphism_mapping
from cospectraltools.wl.equitable_partition import color_classes, stable_coloring


class DisjointSet:
    """Union-find over 0..n-1 with path compression and union by size."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.size = [1] * n

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> int:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return ra
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return ra

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> List[FrozenSet[int]]:
        """Blocks of the partition, ordered by smallest member."""
        by_root: Dict[int, List[int]] = {}
        for x in range(len(self.parent)):
            by_root.setdefault(self.find(x), []).append(x)
        return sorted((frozenset(b) for b in by_root.values()), key=min)


def _orbit_sets(G: SimpleGraph) -> DisjointSet:
    ds = DisjointSet(G.n)
    Gx = G.to_nx()
    done = [False] * G.n

    # Orbits lie inside stable colour classes, so only pairs within a class
    # are tried.
    for cls in color_classes(stable_coloring(G)):
        for a, i in enumerate(cls):
            if done[i]:
                continue

            for j in cls[a + 1 :]:
                if done[j] or ds.same(i, j):
                    continue
                if has_automorphism_mapping(Gx, i, j):
                    ds.union(i, j)

            # Every earlier member of the class is done, so the orbit of i
            # is now complete.
            root = ds.find(i)
            for j in cls[a:]:
                if ds.find(j) == root:
                    done[j] = True

    return ds


def orbit_partition(G: SimpleGraph) -> List[FrozenSet[int]]:
    """Orbits of Aut(G) on the vertices, ordered by smallest member."""
    return _orbit_sets(G).groups()


def vertex_orbits(G: SimpleGraph) -> List[FrozenSet[int]]:
    """orbits[u] is the orbit of u under Aut(G)."""
    out: List[FrozenSet[int]] = [frozenset()] * G.n
    for orb in orbit_partition(G):
        for u in orb:
            out[u] = orb
    return out


def are_similar(G: SimpleGraph, i: int, j: int) -> bool:
    """True iff an automorphism of G maps i to j."""
    if i == j:
        return True
    return has_automorphism_mapping(G, i, j)


def is_vertex_transitive(G: SimpleGraph) -> bool:
    if G.n == 0:
        return True
    return len(vertex_orbits(G)[0]) == G.n
