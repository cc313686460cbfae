from __future__ import annotations

from typing import List, Sequence

from cospectraltools.graph import SimpleGraph


Matrix = List[List[int]]


def identity(n: int) -> Matrix:
    """n x n integer identity matrix."""
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def adjacency_int_matrix(G: SimpleGraph) -> Matrix:
    """Adjacency matrix of G as nested lists of Python ints."""
    return [list(row) for row in G.adjacency_matrix()]


def matmul(A: Sequence[Sequence[int]], B: Sequence[Sequence[int]]) -> Matrix:
    """Exact product A @ B over the integers.

    Entries are Python ints, so walk counts never overflow or round.
    """
    n_rows = len(A)
    n_inner = len(B)
    n_cols = len(B[0]) if n_inner else 0
    if n_rows and len(A[0]) != n_inner:
        raise ValueError(f"Shape mismatch: {n_rows}x{len(A[0])} @ {n_inner}x{n_cols}.")

    # Skip zero entries of A; adjacency powers are sparse for small k.
    out: Matrix = [[0] * n_cols for _ in range(n_rows)]
    for i in range(n_rows):
        Ai = A[i]
        Oi = out[i]
        for k in range(n_inner):
            a = Ai[k]
            if a == 0:
                continue
            Bk = B[k]
            for j in range(n_cols):
                Oi[j] += a * Bk[j]
    return out


def diagonal(M: Sequence[Sequence[int]]) -> List[int]:
    return [M[i][i] for i in range(len(M))]
