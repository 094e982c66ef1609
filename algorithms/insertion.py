"""
insertion.py — Insertion Sort
==============================
Walks each new line left through the sorted prefix, one slot per swap,
while its predecessor is taller.

Pacing: one pause per swap.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",
    "    j ← i",
    "    while j > 0 and a[j-1] > a[j]:",
    "        swap(a[j], a[j-1])",
    "        j ← j - 1",
]


class InsertionSort(SortAlgorithm):
    name = "INSERTION_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        for i in range(1, len(lines)):
            token.raise_if_cancelled()
            j = i
            while j > 0 and self._greater(lines[j - 1], lines[j]):
                token.raise_if_cancelled()
                self._highlight(lines[j], lines[j - 1])
                await token.sleep(delay)

                self._swap(lines, j, j - 1)

                self._unhighlight(lines[j], lines[j - 1])
                j -= 1
