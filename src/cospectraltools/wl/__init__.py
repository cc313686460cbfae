from .equitable_partition import (
    refine_coloring,
    stable_coloring,
    color_classes,
)

__all__ = [
    "refine_coloring",
    "stable_coloring",
    "color_classes",
]
