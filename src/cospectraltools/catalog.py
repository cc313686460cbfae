"""
The three example searches, written out as CSV adjacency files:

  ncvs/ncvs{i}.csv              graphs on 8 vertices with an NCVS pair
  regular/reg{i}.csv            regular graphs on 10 vertices with an NCVS pair
  walkregular/walkreg{i}.csv    walk-regular, not vertex-transitive, regular
                                graphs on 12 vertices

The 12-vertex search takes days.
"""
from __future__ import annotations

import os
import sys
from typing import Iterable, List, Optional

from cospectraltools.graph import SimpleGraph
from cospectraltools.io.csv_matrix import save_csv_many
from cospectraltools.search.degree_sequence import GraphFilter
from cospectraltools.search.enumeration import generate_all, generate_regular
from cospectraltools.spectral import has_ncvs, walk_regular_not_vertex_transitive


EXAMPLES_DIR = os.environ.get("COSPECTRAL_EXAMPLES_DIR", "examples")

NCVS_SUBDIR = "ncvs"
REG_SUBDIR = "regular"
WALKREG_SUBDIR = "walkregular"


def _regular_search(
    n: int,
    degrees: Iterable[int],
    filter: GraphFilter,
    verbose: bool,
) -> List[SimpleGraph]:
    out: List[SimpleGraph] = []
    for d in degrees:
        if (n * d) % 2:
            continue
        graphs = generate_regular(n, d, filter)
        if verbose:
            print(f"[n={n}, d={d}] {len(graphs)} graphs", file=sys.stderr)
        out.extend(graphs)
    return out


def save_ncvs_examples(
    n: int = 8,
    *,
    examples_dir: Optional[str] = None,
    verbose: bool = False,
) -> List[str]:
    """Save every graph on n vertices with an NCVS pair; returns the paths."""
    graphs = generate_all(n, has_ncvs, verbose=verbose)
    directory = os.path.join(examples_dir or EXAMPLES_DIR, NCVS_SUBDIR)
    return save_csv_many(graphs, directory, "ncvs")


def save_reg_examples(
    n: int = 10,
    degrees: Optional[Iterable[int]] = None,
    *,
    examples_dir: Optional[str] = None,
    verbose: bool = False,
) -> List[str]:
    """Save every regular graph on n vertices with an NCVS pair."""
    degrees = range(n) if degrees is None else degrees
    graphs = _regular_search(n, degrees, has_ncvs, verbose)
    directory = os.path.join(examples_dir or EXAMPLES_DIR, REG_SUBDIR)
    return save_csv_many(graphs, directory, "reg")


def save_walkreg_examples(
    n: int = 12,
    degrees: Optional[Iterable[int]] = None,
    *,
    examples_dir: Optional[str] = None,
    verbose: bool = False,
) -> List[str]:
    """Save every walk-regular, non-vertex-transitive regular graph on n vertices."""
    degrees = range(n) if degrees is None else degrees
    graphs = _regular_search(n, degrees, walk_regular_not_vertex_transitive, verbose)
    directory = os.path.join(examples_dir or EXAMPLES_DIR, WALKREG_SUBDIR)
    return save_csv_many(graphs, directory, "walkreg")
