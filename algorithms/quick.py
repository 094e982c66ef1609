"""
quick.py — Quick Sort
======================
Lomuto partition with the last line as pivot.  Lines strictly shorter
than the pivot move to the left partition; the pivot is then swapped
into place and both sides are sorted.

The smaller side is sorted recursively and the larger side by looping,
so recursion depth stays logarithmic even on already-sorted input.

Pacing: one pause per swap.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "quick_sort(a, lo, hi):",
    "    if lo < hi:",
    "        p ← partition(a, lo, hi)",
    "        quick_sort(a, lo, p-1)",
    "        quick_sort(a, p+1, hi)",
    "partition(a, lo, hi):",
    "    pivot ← a[hi];  i ← lo - 1",
    "    for j in lo .. hi-1:",
    "        if a[j] < pivot: i ← i + 1; swap(a[i], a[j])",
    "    swap(a[i+1], a[hi]);  return i + 1",
]


class QuickSort(SortAlgorithm):
    name = "QUICK_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        await self._quick_sort(lines, 0, len(lines) - 1, delay, token)

    async def _quick_sort(self, lines: List[Line], low: int, high: int, delay: float, token: CancelToken) -> None:
        while low < high:
            token.raise_if_cancelled()
            pivot_index = await self._partition(lines, low, high, delay, token)

            if pivot_index - low < high - pivot_index:
                await self._quick_sort(lines, low, pivot_index - 1, delay, token)
                low = pivot_index + 1
            else:
                await self._quick_sort(lines, pivot_index + 1, high, delay, token)
                high = pivot_index - 1

    async def _partition(self, lines: List[Line], low: int, high: int, delay: float, token: CancelToken) -> int:
        """Partition lines[low..high] around lines[high]; return the pivot's final index."""
        token.raise_if_cancelled()
        pivot = lines[high]
        i = low - 1

        for j in range(low, high):
            token.raise_if_cancelled()
            if self._greater(pivot, lines[j]):
                i += 1
                if i != j:
                    await self._visual_swap(lines, i, j, delay, token)

        if i + 1 != high:
            await self._visual_swap(lines, i + 1, high, delay, token)
        return i + 1

    async def _visual_swap(self, lines: List[Line], i: int, j: int, delay: float, token: CancelToken) -> None:
        self._highlight(lines[i], lines[j])
        await token.sleep(delay)
        self._swap(lines, i, j)
        self._unhighlight(lines[i], lines[j])
