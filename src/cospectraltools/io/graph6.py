"""graph6 conversion for SimpleGraph, as written and read by nauty."""
from __future__ import annotations

import networkx as nx

from cospectraltools.graph import SimpleGraph


def g6_to_graph(g6: str) -> SimpleGraph:
    """Parse one graph6 line; a leading '>>graph6<<' header is accepted."""
    line = g6.strip().replace(">>graph6<<", "", 1)
    return SimpleGraph.from_nx(nx.from_graph6_bytes(line.encode("ascii")))


def graph_to_g6(G: SimpleGraph) -> str:
    """graph6 string (no header, no newline) for G."""
    return nx.to_graph6_bytes(G.to_nx(), header=False).decode("ascii").strip()
