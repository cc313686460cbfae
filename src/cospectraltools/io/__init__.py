from .csv_matrix import (
    graph_to_csv,
    csv_to_graph,
    save_csv,
    load_csv,
    save_csv_many,
    load_csv_dir,
)
from .graph6 import g6_to_graph, graph_to_g6

__all__ = [
    "graph_to_csv",
    "csv_to_graph",
    "save_csv",
    "load_csv",
    "save_csv_many",
    "load_csv_dir",
    "g6_to_graph",
    "graph_to_g6",
]
