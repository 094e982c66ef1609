"""
lines/
------
Core data layer.  Public API:

    from lines import Line, Palette, Container
"""

from lines.line      import Line, Palette, DEFAULT_PALETTE, Point
from lines.container import Container

__all__ = [
    "Line",
    "Palette",
    "DEFAULT_PALETTE",
    "Point",
    "Container",
]
