"""
cocktail.py — Cocktail Shaker Sort
===================================
Bidirectional bubble sort.  A forward pass carries the largest value to
the upper bound, a backward pass carries the smallest to the lower
bound; each pass shrinks its bound by one.

Pacing: one pause per comparison.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "start ← 0;  end ← n-1;  swapped ← true",
    "while swapped:",
    "    forward pass start .. end-1, swapping a[i] > a[i+1]",
    "    if nothing swapped: break",
    "    end ← end - 1",
    "    backward pass end .. start+1, swapping a[i-1] > a[i]",
    "    start ← start + 1",
]


class CocktailSort(SortAlgorithm):
    name = "COCKTAIL_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        start, end = 0, len(lines) - 1
        swapped = True

        while swapped:
            token.raise_if_cancelled()
            swapped = False

            # forward
            for i in range(start, end):
                swapped = await self._step(lines, i, i + 1, delay, token) or swapped

            if not swapped:
                break

            swapped = False
            end -= 1

            # backward
            for i in range(end, start, -1):
                swapped = await self._step(lines, i - 1, i, delay, token) or swapped

            start += 1

    async def _step(self, lines: List[Line], left: int, right: int, delay: float, token: CancelToken) -> bool:
        """Compare one adjacent pair, swap if out of order.  True if swapped."""
        token.raise_if_cancelled()
        self._highlight(lines[left], lines[right])
        await token.sleep(delay)

        swapped = self._greater(lines[left], lines[right])
        if swapped:
            self._swap(lines, left, right)

        self._unhighlight(lines[left], lines[right])
        return swapped
