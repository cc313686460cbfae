"""
cospectraltools: isomorph-free generation of graphs by degree sequence, and
search for cospectral but non-similar vertices (NCVS).
"""

from .graph import SimpleGraph
from .oracle import is_isomorphic, has_automorphism_mapping, same_degree_relation

# Generation
from .search.degree_sequence import (
    DegreeSequenceError,
    generate,
    validate_degree_sequence,
)
from .search.enumeration import (
    degree_sequences,
    generate_all,
    generate_regular,
    generate_all_regular,
)

# Analysis
from .orbits import DisjointSet, orbit_partition, vertex_orbits, are_similar, is_vertex_transitive
from .spectral import (
    CospectralProfile,
    loop_counts,
    is_walk_regular,
    cospectral_classes,
    are_cospectral,
    ncvs_pairs,
    has_ncvs,
    walk_regular_not_vertex_transitive,
    cospectral_profile,
)

# IO
from .io.csv_matrix import save_csv, load_csv, save_csv_many, load_csv_dir
from .io.graph6 import g6_to_graph, graph_to_g6

__all__ = [
    "SimpleGraph",
    # Oracle
    "is_isomorphic",
    "has_automorphism_mapping",
    "same_degree_relation",
    # Generation
    "DegreeSequenceError",
    "generate",
    "validate_degree_sequence",
    "degree_sequences",
    "generate_all",
    "generate_regular",
    "generate_all_regular",
    # Analysis
    "DisjointSet",
    "orbit_partition",
    "vertex_orbits",
    "are_similar",
    "is_vertex_transitive",
    "CospectralProfile",
    "loop_counts",
    "is_walk_regular",
    "cospectral_classes",
    "are_cospectral",
    "ncvs_pairs",
    "has_ncvs",
    "walk_regular_not_vertex_transitive",
    "cospectral_profile",
    # IO
    "save_csv",
    "load_csv",
    "save_csv_many",
    "load_csv_dir",
    "g6_to_graph",
    "graph_to_g6",
]
