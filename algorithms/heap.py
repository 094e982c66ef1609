"""
heap.py — Heap Sort
====================
Builds a max-heap in place, then repeatedly swaps the root (largest) to
the end of the shrinking heap and sifts the new root down.

Pacing: one pause per swap, both during sift-down and root extraction.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "for i in n//2-1 .. 0:  sift_down(a, n, i)",
    "for end in n-1 .. 1:",
    "    swap(a[0], a[end])",
    "    sift_down(a, end, 0)",
    "sift_down(a, n, i):",
    "    largest ← max of i, 2i+1, 2i+2 (within n)",
    "    if largest ≠ i: swap(a[i], a[largest]); sift_down(a, n, largest)",
]


class HeapSort(SortAlgorithm):
    name = "HEAP_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        n = len(lines)

        for i in range(n // 2 - 1, -1, -1):
            token.raise_if_cancelled()
            await self._sift_down(lines, n, i, delay, token)

        for end in range(n - 1, 0, -1):
            token.raise_if_cancelled()
            self._highlight(lines[0], lines[end])
            await token.sleep(delay)

            self._swap(lines, 0, end)

            self._unhighlight(lines[0], lines[end])
            await self._sift_down(lines, end, 0, delay, token)

    async def _sift_down(self, lines: List[Line], size: int, root: int, delay: float, token: CancelToken) -> None:
        while True:
            token.raise_if_cancelled()
            largest = root
            left, right = 2 * root + 1, 2 * root + 2

            if left < size and self._greater(lines[left], lines[largest]):
                largest = left
            if right < size and self._greater(lines[right], lines[largest]):
                largest = right
            if largest == root:
                return

            self._highlight(lines[root], lines[largest])
            await token.sleep(delay)

            self._swap(lines, root, largest)

            self._unhighlight(lines[root], lines[largest])
            root = largest
