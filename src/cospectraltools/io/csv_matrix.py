"""
Adjacency matrices as CSV files: n lines of n comma-separated 0/1 values,
no header and no newline after the last row.
"""
from __future__ import annotations

import os
import re
from typing import Iterable, List

from cospectraltools.graph import SimpleGraph


def graph_to_csv(G: SimpleGraph) -> str:
    return "\n".join(",".join(str(x) for x in row) for row in G.adjacency_matrix())


def csv_to_graph(text: str) -> SimpleGraph:
    """Parse CSV adjacency text; raises ValueError on malformed input."""
    if not text.strip():
        return SimpleGraph(())
    lines = [ln.strip() for ln in text.strip().splitlines()]
    rows: List[List[int]] = []
    for k, line in enumerate(lines):
        if not line:
            raise ValueError(f"Blank line {k + 1} inside adjacency matrix.")
        try:
            rows.append([int(x) for x in line.split(",")])
        except ValueError:
            raise ValueError(f"Non-integer entry on line {k + 1}: {line!r}") from None
    return SimpleGraph.from_matrix(rows)


def save_csv(G: SimpleGraph, path: str) -> None:
    with open(path, "w") as f:
        f.write(graph_to_csv(G))


def load_csv(path: str) -> SimpleGraph:
    with open(path) as f:
        return csv_to_graph(f.read())


def save_csv_many(graphs: Iterable[SimpleGraph], directory: str, prefix: str) -> List[str]:
    """Write graphs to {directory}/{prefix}1.csv, {prefix}2.csv, ... and return the paths."""
    os.makedirs(directory, exist_ok=True)
    paths = []
    for i, G in enumerate(graphs, start=1):
        path = os.path.join(directory, f"{prefix}{i}.csv")
        save_csv(G, path)
        paths.append(path)
    return paths


def load_csv_dir(directory: str, prefix: str) -> List[SimpleGraph]:
    """Read back {prefix}{i}.csv files from directory in increasing i."""
    pat = re.compile(rf"^{re.escape(prefix)}(\d+)\.csv$")
    numbered = []
    for name in os.listdir(directory):
        m = pat.match(name)
        if m:
            numbered.append((int(m.group(1)), name))
    numbered.sort()
    return [load_csv(os.path.join(directory, name)) for _, name in numbered]
