from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import networkx as nx


@dataclass(frozen=True)
class SimpleGraph:
    """
    Immutable simple undirected loop-free graph on vertices {0..n-1}.

    adj: bitset adjacency, adj[u] has bit v set iff u~v.

    Equality and hashing are on the labelled graph; use
    cospectraltools.oracle.is_isomorphic for equality up to relabelling.
    """

    adj: Tuple[int, ...]

    def __post_init__(self) -> None:
        n = len(self.adj)
        full = (1 << n) - 1
        for u, row in enumerate(self.adj):
            if row < 0 or row & ~full:
                raise ValueError(f"Row {u} references a vertex outside 0..{n - 1}.")
            if (row >> u) & 1:
                raise ValueError(f"Loop at vertex {u}.")
            nbr = row
            while nbr:
                lsb = nbr & -nbr
                v = lsb.bit_length() - 1
                nbr ^= lsb
                if not (self.adj[v] >> u) & 1:
                    raise ValueError(f"Adjacency is not symmetric at ({u}, {v}).")

    # -------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[int]]) -> "SimpleGraph":
        """Build from a square 0/1 (or bool) adjacency matrix."""
        n = len(rows)
        adj = []
        for u, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"Adjacency matrix is not square (row {u} has {len(row)} entries, expected {n}).")
            bits = 0
            for v, x in enumerate(row):
                if x not in (0, 1):
                    raise ValueError(f"Entry ({u}, {v}) is {x!r}, expected 0 or 1.")
                if x:
                    bits |= 1 << v
            adj.append(bits)
        return cls(tuple(adj))

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]], n: int) -> "SimpleGraph":
        """Build from an edge list on {0..n-1}."""
        adj = [0] * n
        for u, v in edges:
            if u == v:
                raise ValueError(f"Loop at vertex {u}.")
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"Edge ({u}, {v}) is outside 0..{n - 1}.")
            adj[u] |= 1 << v
            adj[v] |= 1 << u
        return cls(tuple(adj))

    @classmethod
    def from_nx(cls, G: nx.Graph) -> "SimpleGraph":
        """Build from a NetworkX graph, relabelling nodes to 0..n-1 in sorted order."""
        if G.is_directed() or G.is_multigraph():
            raise ValueError("Only simple undirected graphs are supported.")
        nodes = sorted(G.nodes())
        index = {v: i for i, v in enumerate(nodes)}
        return cls.from_edges(((index[u], index[v]) for u, v in G.edges()), len(nodes))

    @classmethod
    def empty(cls, n: int) -> "SimpleGraph":
        return cls((0,) * n)

    @classmethod
    def complete(cls, n: int) -> "SimpleGraph":
        full = (1 << n) - 1
        return cls(tuple(full & ~(1 << u) for u in range(n)))

    @classmethod
    def cycle(cls, n: int) -> "SimpleGraph":
        return cls.from_edges(((i, (i + 1) % n) for i in range(n)), n)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------

    @property
    def n(self) -> int:
        return len(self.adj)

    def has_edge(self, u: int, v: int) -> bool:
        return bool((self.adj[u] >> v) & 1)

    def neighbors(self, u: int) -> List[int]:
        out = []
        nbr = self.adj[u]
        while nbr:
            lsb = nbr & -nbr
            out.append(lsb.bit_length() - 1)
            nbr ^= lsb
        return out

    def degree(self, u: int) -> int:
        return bin(self.adj[u]).count("1")

    def degrees(self) -> List[int]:
        return [self.degree(u) for u in range(self.n)]

    def degree_sequence(self) -> List[int]:
        """Degrees sorted ascending."""
        return sorted(self.degrees())

    def edges(self) -> List[Tuple[int, int]]:
        """Undirected edges as (u, v) with u < v."""
        return [(u, v) for u in range(self.n) for v in self.neighbors(u) if v > u]

    def num_edges(self) -> int:
        return sum(self.degrees()) // 2

    def adjacency_matrix(self) -> Tuple[Tuple[int, ...], ...]:
        n = self.n
        return tuple(tuple((self.adj[u] >> v) & 1 for v in range(n)) for u in range(n))

    def to_nx(self) -> nx.Graph:
        """Frozen NetworkX view on nodes 0..n-1."""
        G = nx.Graph()
        G.add_nodes_from(range(self.n))
        G.add_edges_from(self.edges())
        return nx.freeze(G)

    def __repr__(self) -> str:
        return f"SimpleGraph(n={self.n}, edges={self.edges()})"
