"""
bubble.py — Bubble Sort
========================
Adjacent pairs, full passes, larger value bubbles right.

Pacing: one pause per swap (comparisons that do not swap are free).
Stops early as soon as a whole pass makes no swap.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    swapped ← false",
    "    for j in 0 .. n-i-2:",
    "        if a[j] > a[j+1]:",
    "            swap(a[j], a[j+1])",
    "            swapped ← true",
    "    if not swapped: break",
]


class BubbleSort(SortAlgorithm):
    name = "BUBBLE_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        n = len(lines)
        for i in range(n - 1):
            swapped = False
            for j in range(n - i - 1):
                token.raise_if_cancelled()
                self._highlight(lines[j], lines[j + 1])

                if self._greater(lines[j], lines[j + 1]):
                    await token.sleep(delay)
                    self._swap(lines, j, j + 1)
                    swapped = True

                self._unhighlight(lines[j], lines[j + 1])

            if not swapped:
                return
