"""
merge.py — Merge Sort
======================
Top-down merge sort.  Each merge first decides the merged order by
comparing the heads of the two sorted halves (left wins ties, so the
sort is stable), then writes that order back into the slots
left..right.

The write-back is a sequence of slot swaps: for every destination slot
the line that belongs there is swapped in from further right.  That
keeps two guarantees at every pause:

  • the list is still a permutation of the original lines, and
  • slot coordinates never move — values travel, screen slots stay.

Pacing: one pause per slot written back.
"""

from typing import List

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "merge_sort(a, l, r):",
    "    if l < r:",
    "        m ← (l + r) // 2",
    "        merge_sort(a, l, m)",
    "        merge_sort(a, m+1, r)",
    "        merge(a, l, m, r)",
    "merge(a, l, m, r):",
    "    take the smaller head of a[l..m] / a[m+1..r] until both are empty",
    "    write the merged run back into slots l..r",
]


class MergeSort(SortAlgorithm):
    name = "MERGE_SORT"

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        await self._merge_sort(lines, 0, len(lines) - 1, delay, token)

    async def _merge_sort(self, lines: List[Line], left: int, right: int, delay: float, token: CancelToken) -> None:
        if left < right:
            mid = (left + right) // 2
            await self._merge_sort(lines, left, mid, delay, token)
            await self._merge_sort(lines, mid + 1, right, delay, token)
            await self._merge(lines, left, mid, right, delay, token)

    async def _merge(self, lines: List[Line], left: int, mid: int, right: int, delay: float, token: CancelToken) -> None:
        left_run  = lines[left:mid + 1]
        right_run = lines[mid + 1:right + 1]

        merged: List[Line] = []
        i = j = 0
        while i < len(left_run) and j < len(right_run):
            token.raise_if_cancelled()
            if self._greater(left_run[i], right_run[j]):
                merged.append(right_run[j])
                j += 1
            else:
                merged.append(left_run[i])
                i += 1
        merged.extend(left_run[i:])
        merged.extend(right_run[j:])

        for k in range(left, right + 1):
            token.raise_if_cancelled()
            target = merged[k - left]
            self._highlight(target)
            await token.sleep(delay)

            self._swap(lines, k, self._locate(lines, target, k, right))

            self._unhighlight(lines[k])

    @staticmethod
    def _locate(lines: List[Line], target: Line, start: int, end: int) -> int:
        # identity, not equality: equal heights are still distinct lines
        for idx in range(start, end + 1):
            if lines[idx] is target:
                return idx
        raise LookupError("merged line is missing from its run")
