from .draw import draw_ncvs

__all__ = [
    "draw_ncvs",
]
