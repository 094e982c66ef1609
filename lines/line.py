"""
line.py — Sortable Bar
======================
One vertical bar on the canvas.  The thing being sorted AND the thing
being drawn.

Design decisions:
  - `height` is the sort key.  It is fixed at construction and exposed
    through a read-only property, so an algorithm can only ever reorder
    lines, never rewrite their values.
  - `point` is the bar's bottom-left corner (x, baseline y).  Algorithms
    exchange points between lines when they swap, so a screen slot keeps
    its coordinate while the values travel through it.
  - `color` is a hex string.  Purely visual; algorithms write it, never
    read it.
  - No __eq__: two lines with equal height are still different lines.
    Identity is what a permutation check needs.
"""

from dataclasses import dataclass
from typing import Tuple


Point = Tuple[float, float]


# ---------------------------------------------------------------------------
# Palette: the three colors a run ever paints with
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Palette:
    default:   str = "#ffffff"   # resting bar
    swap:      str = "#ff0000"   # pair under comparison / being swapped
    animation: str = "#14ff09"   # completion fill


DEFAULT_PALETTE = Palette()


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------
class Line:
    """
    Attributes:
        point  : (x, y) of the bar's baseline-left corner.  Mutable.
        width  : Bar thickness in pixels, fixed for the run.
        height : Magnitude / sort key.  Read-only.
        color  : Current fill (hex string).  Mutable.
    """

    __slots__ = ("point", "width", "_height", "color")

    def __init__(
        self,
        point: Point,
        width: float,
        height: float,
        color: str = DEFAULT_PALETTE.default,
    ):
        self.point:   Point = (float(point[0]), float(point[1]))
        self.width:   float = width
        self._height: float = height
        self.color:   str   = color

    @property
    def height(self) -> float:
        return self._height

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]

    # ------------------------------------------------------------------
    # Serialisation  (renderer / JSON API)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "x":      self.point[0],
            "y":      self.point[1],
            "width":  self.width,
            "height": self._height,
            "color":  self.color,
        }

    def __repr__(self) -> str:
        return f"Line(height={self._height:g}, pos=({self.point[0]:.1f},{self.point[1]:.1f}), color={self.color})"
