"""
odd_even.py — Odd-Even (Brick) Sort
====================================
Each round makes two passes over adjacent pairs: first the pairs that
start at odd indices, then the pairs that start at even indices.  Rounds
repeat until one finishes with no swap in either pass.

Pacing: one pause per comparison.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "sorted ← false",
    "while not sorted:",
    "    sorted ← true",
    "    for i in 1, 3, 5 … n-2:  if a[i] > a[i+1]: swap; sorted ← false",
    "    for i in 0, 2, 4 … n-2:  if a[i] > a[i+1]: swap; sorted ← false",
]


class OddEvenSort(SortAlgorithm):
    name = "ODD_EVEN_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        n = len(lines)
        is_sorted = False

        while not is_sorted:
            token.raise_if_cancelled()
            is_sorted = True

            for first in (1, 0):
                for i in range(first, n - 1, 2):
                    token.raise_if_cancelled()
                    self._highlight(lines[i], lines[i + 1])
                    await token.sleep(delay)

                    if self._greater(lines[i], lines[i + 1]):
                        self._swap(lines, i, i + 1)
                        is_sorted = False

                    self._unhighlight(lines[i], lines[i + 1])
