"""Checks of generator output counts against known sequences."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from cospectraltools.external.nauty import geng_count
from cospectraltools.search.enumeration import generate_all, generate_regular


# OEIS A000088: graphs on n unlabelled vertices, n = 1..8.
GRAPH_COUNTS = [1, 2, 4, 11, 34, 156, 1044, 12346]

# OEIS A005176: regular graphs on n unlabelled vertices, n = 1..12.
REGULAR_GRAPH_COUNTS = [1, 2, 2, 4, 3, 8, 6, 22, 26, 176, 546, 19002]


@dataclass(frozen=True)
class CountCheck:
    n: int
    expected: int
    actual: int

    @property
    def ok(self) -> bool:
        return self.expected == self.actual

    def message(self) -> str:
        return f"n = {self.n} test: " + ("SUCCESS" if self.ok else "FAILED")


def count_regular_graphs(n: int) -> int:
    """Sum over d of the number of d-regular graphs on n vertices."""
    return sum(len(generate_regular(n, d)) for d in range(n) if (n * d) % 2 == 0)


def check_graph_counts(n_max: Optional[int] = None, *, verbose: bool = False) -> List[CountCheck]:
    n_max = len(GRAPH_COUNTS) if n_max is None else n_max
    if not 1 <= n_max <= len(GRAPH_COUNTS):
        raise ValueError(f"n_max must be in 1..{len(GRAPH_COUNTS)}.")

    out = []
    for n in range(1, n_max + 1):
        chk = CountCheck(n, GRAPH_COUNTS[n - 1], len(generate_all(n)))
        if verbose:
            print(chk.message())
        out.append(chk)
    return out


def check_regular_graph_counts(n_max: Optional[int] = None, *, verbose: bool = False) -> List[CountCheck]:
    n_max = len(REGULAR_GRAPH_COUNTS) if n_max is None else n_max
    if not 1 <= n_max <= len(REGULAR_GRAPH_COUNTS):
        raise ValueError(f"n_max must be in 1..{len(REGULAR_GRAPH_COUNTS)}.")

    out = []
    for n in range(1, n_max + 1):
        chk = CountCheck(n, REGULAR_GRAPH_COUNTS[n - 1], count_regular_graphs(n))
        if verbose:
            print(chk.message())
        out.append(chk)
    return out


def check_regular_against_geng(n: int, d: int) -> CountCheck:
    """Compare generate_regular(n, d) with geng -d{d} -D{d} n. Requires nauty."""
    expected = geng_count(n, min_degree=d, max_degree=d)
    return CountCheck(n, expected, len(generate_regular(n, d)))
