from .degree_sequence import DegreeSequenceError, GraphFilter, generate, validate_degree_sequence
from .enumeration import degree_sequences, generate_all, generate_regular, generate_all_regular

__all__ = [
    "DegreeSequenceError",
    "GraphFilter",
    "generate",
    "validate_degree_sequence",
    "degree_sequences",
    "generate_all",
    "generate_regular",
    "generate_all_regular",
]
