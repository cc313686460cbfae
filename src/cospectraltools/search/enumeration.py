from __future__ import annotations

import sys
from typing import Dict, Iterator, List, Optional

from cospectraltools.graph import SimpleGraph
from cospectraltools.search.degree_sequence import DegreeSequenceError, GraphFilter, generate


def degree_sequences(n: int) -> Iterator[List[int]]:
    """
    Yield every nondecreasing sequence of n values in {0..n-1} with even sum,
    in lexicographic order. Each yielded list is a fresh copy.
    """
    if n <= 0:
        raise ValueError("n must be positive.")

    seq = [0] * n
    yield list(seq)
    while seq[0] < n - 1:
        i = n - 1
        while seq[i] == n - 1:
            i -= 1
        seq[i] += 1
        for j in range(i + 1, n):
            seq[j] = seq[i]

        if sum(seq) % 2:
            continue
        yield list(seq)


def generate_all(
    n: int,
    filter: Optional[GraphFilter] = None,
    *,
    verbose: bool = False,
) -> List[SimpleGraph]:
    """All graphs on n vertices passing filter, one per isomorphism class."""
    out: List[SimpleGraph] = []
    for seq in degree_sequences(n):
        graphs = generate(seq, filter)
        if verbose and graphs:
            print(f"[n={n}] seq={seq}: {len(graphs)} graphs", file=sys.stderr)
        out.extend(graphs)
    if verbose:
        print(f"[n={n}] total {len(out)} graphs.", file=sys.stderr)
    return out


def generate_regular(
    n: int,
    d: int,
    filter: Optional[GraphFilter] = None,
    *,
    verbose: bool = False,
) -> List[SimpleGraph]:
    """All d-regular graphs on n vertices passing filter, up to isomorphism."""
    if n <= 0:
        raise ValueError("n must be positive.")
    if not 0 <= d <= n - 1:
        raise DegreeSequenceError(f"No {d}-regular graph on {n} vertices (need 0 <= d <= {n - 1}).")
    if (n * d) % 2:
        raise DegreeSequenceError(f"No {d}-regular graph on {n} vertices (n*d is odd).")
    return generate([d] * n, filter, verbose=verbose)


def generate_all_regular(
    n: int,
    filter: Optional[GraphFilter] = None,
    *,
    verbose: bool = False,
) -> Dict[int, List[SimpleGraph]]:
    """Map d -> generate_regular(n, d, filter) for every feasible degree d."""
    out: Dict[int, List[SimpleGraph]] = {}
    for d in range(n):
        if (n * d) % 2:
            continue
        out[d] = generate_regular(n, d, filter, verbose=verbose)
    return out
