"""WL-1 colour refinement on a SimpleGraph.

Automorphisms preserve the stable colouring, so two vertices of different
colour can never be similar.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from cospectraltools.graph import SimpleGraph


Coloring = Tuple[int, ...]


def refine_coloring(G: SimpleGraph, colors: Coloring) -> Coloring:
    """One round: a vertex's new colour is its old colour together with the
    sorted list of its neighbours' colours, renumbered 0, 1, ... in sorted
    order of those signatures."""
    sigs = [
        (colors[u], tuple(sorted(colors[v] for v in G.neighbors(u))))
        for u in range(G.n)
    ]
    rank = {sig: k for k, sig in enumerate(sorted(set(sigs)))}
    return tuple(rank[s] for s in sigs)


def stable_coloring(G: SimpleGraph, initial: Optional[Coloring] = None) -> Coloring:
    """Iterate refinement to a fixed point, starting from degrees by default."""
    colors = tuple(G.degrees()) if initial is None else tuple(initial)
    # A round never merges classes, so the class count is monotone and
    # stabilises after at most n rounds.
    n_classes = len(set(colors))
    while True:
        newc = refine_coloring(G, colors)
        n_new = len(set(newc))
        if n_new == n_classes:
            return newc
        colors, n_classes = newc, n_new


def color_classes(colors: Coloring) -> List[List[int]]:
    """Vertices grouped by colour, ordered by smallest member."""
    groups: Dict[int, List[int]] = {}
    for v, c in enumerate(colors):
        groups.setdefault(c, []).append(v)
    return sorted(groups.values(), key=lambda L: L[0])
