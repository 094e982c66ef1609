"""
selection.py — Selection Sort
==============================
Scans the unsorted tail for its minimum and swaps it to the front.
Exactly one swap per outer iteration (none if already in place).

Pacing: one pause per swap.  The scan itself is not visualised, but it
still polls the token on every comparison.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    min ← i",
    "    for j in i+1 .. n-1:",
    "        if a[j] < a[min]: min ← j",
    "    if min ≠ i: swap(a[i], a[min])",
]


class SelectionSort(SortAlgorithm):
    name = "SELECTION_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        n = len(lines)
        for i in range(n - 1):
            token.raise_if_cancelled()
            min_index = i

            for j in range(i + 1, n):
                token.raise_if_cancelled()
                if self._greater(lines[min_index], lines[j]):
                    min_index = j

            if min_index != i:
                self._highlight(lines[i], lines[min_index])
                await token.sleep(delay)

                self._swap(lines, i, min_index)

                self._unhighlight(lines[i], lines[min_index])
