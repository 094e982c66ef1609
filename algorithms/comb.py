"""
comb.py — Comb Sort
====================
Bubble sort over gap-separated pairs.  The gap starts at n and shrinks
by a factor of 1.3 before every pass (floored at 1).  The loop keeps
going while the gap is above 1 or the last pass swapped anything, so
the run always ends with one clean pass at gap 1.

Pacing: one pause per comparison.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


SHRINK_FACTOR = 1.3

PSEUDOCODE: List[str] = [
    "gap ← n;  swapped ← true",
    "while gap > 1 or swapped:",
    "    gap ← max(1, floor(gap / 1.3))",
    "    swapped ← false",
    "    for i in 0 .. n-gap-1:",
    "        if a[i] > a[i+gap]: swap(a[i], a[i+gap]); swapped ← true",
]


class CombSort(SortAlgorithm):
    name = "COMB_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        n = len(lines)
        gap = n
        swapped = True

        while gap > 1 or swapped:
            token.raise_if_cancelled()
            gap = max(1, int(gap / SHRINK_FACTOR))
            swapped = False

            for i in range(n - gap):
                token.raise_if_cancelled()
                self._highlight(lines[i], lines[i + gap])
                await token.sleep(delay)

                if self._greater(lines[i], lines[i + gap]):
                    self._swap(lines, i, i + gap)
                    swapped = True

                self._unhighlight(lines[i], lines[i + gap])
