"""
container.py — Line Container
==============================
Owns the ordered list of Lines that algorithms sort and the renderer
draws.  Single source of truth for the sequence.

Responsibilities:
  1. Build the lines from layout settings      (load / update)
  2. Hold the "already sorted" UI flag         (is_sorted)
  3. Read-only helpers for callers and tests   (heights, is_ordered, to_dict)

Design decisions:
  - Membership is never edited piecemeal.  Any configuration change
    rebuilds the whole list; during a run only order, points and colors
    change.
  - Heights grow linearly from 1 px to the usable height, so a freshly
    loaded container is already sorted and has no duplicate values.
"""

from typing import List, Tuple

from lines.line import Line, DEFAULT_PALETTE


class Container:
    """
    Attributes:
        resolution   : (width, height) of the drawing area in pixels.
        frame_margin : Empty border kept around the bars.
        lines_count  : Number of bars.
        lines_margin : Gap between neighbouring bars.
        color        : Default bar color.
        lines        : The sequence itself.
        is_sorted    : Set by the caller when a sort run starts; cleared by
                       stop / shuffle.  Gates the "sort" affordance.
    """

    def __init__(
        self,
        resolution: Tuple[float, float],
        frame_margin: int,
        lines_count: int,
        lines_margin: int,
        color: str = DEFAULT_PALETTE.default,
    ):
        if lines_count < 0:
            raise ValueError(f"lines_count must be >= 0, got {lines_count}")
        self.resolution:   Tuple[float, float] = resolution
        self.frame_margin: int        = frame_margin
        self.lines_count:  int        = lines_count
        self.lines_margin: int        = lines_margin
        self.color:        str        = color
        self.lines:        List[Line] = []
        self.is_sorted:    bool       = False

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------
    def load(self) -> List[Line]:
        """(Re)create every line from the current layout."""
        width, height = self.resolution
        x = float(self.frame_margin)
        baseline = float(height - self.frame_margin)

        start_height = 1.0
        final_height = max(float(height - 2 * self.frame_margin), start_height)
        thickness = self._thickness()

        if self.lines_count > 1:
            height_step = (final_height - start_height) / (self.lines_count - 1)
        else:
            start_height, height_step = final_height, 0.0

        self.lines = []
        for i in range(self.lines_count):
            self.lines.append(Line((x, baseline), thickness, start_height + height_step * i, self.color))
            x += thickness + self.lines_margin
        return self.lines

    def update(self, resolution: Tuple[float, float], lines_count: int, lines_margin: int) -> List[Line]:
        """Apply a new layout.  Always rebuilds; never patches."""
        if lines_count < 0:
            raise ValueError(f"lines_count must be >= 0, got {lines_count}")
        self.resolution   = resolution
        self.lines_count  = lines_count
        self.lines_margin = lines_margin
        self.is_sorted    = False
        return self.load()

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------
    def heights(self) -> List[float]:
        return [line.height for line in self.lines]

    def is_ordered(self) -> bool:
        """True if heights are non-decreasing by index."""
        return all(a.height <= b.height for a, b in zip(self.lines, self.lines[1:]))

    def to_dict(self) -> dict:
        return {
            "resolution":   list(self.resolution),
            "frame_margin": self.frame_margin,
            "lines_count":  self.lines_count,
            "lines_margin": self.lines_margin,
            "is_sorted":    self.is_sorted,
            "lines":        [line.to_dict() for line in self.lines],
        }

    def __len__(self) -> int:
        return len(self.lines)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _thickness(self) -> float:
        if self.lines_count == 0:
            return 0.0
        width = self.resolution[0]
        usable = width - 2 * self.frame_margin - self.lines_margin * (self.lines_count - 1)
        return max(usable / self.lines_count, 1.0)
