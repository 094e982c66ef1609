"""
shuffle.py — Randomize Shuffle
===============================
Not a sort: puts the lines in a uniformly random order.  Walks i from
left to right and swaps slot i with a random slot in [0, i], which is
the inside-out form of Fisher–Yates and gives every permutation the
same probability.

Runs through the same contract as the sorts (flags, token, pacing) but
skips the completion animation: a shuffled list has nothing to
celebrate.

Pacing: one pause per index.
"""

import random
from typing import List, Optional

from lines import Line
from algorithms.base import SortAlgorithm, CancelToken


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",
    "    j ← random integer in [0, i]",
    "    swap(a[i], a[j])",
]


class RandomizeShuffle(SortAlgorithm):
    name = "RANDOMIZE_SHUFFLE"
    animates_completion = False

    def __init__(self, rng: Optional[random.Random] = None, **kwargs):
        super().__init__(**kwargs)
        self.rng: random.Random = rng or random.Random()

    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        for i in range(len(lines)):
            token.raise_if_cancelled()
            await token.sleep(delay)

            self._swap(lines, i, self.rng.randint(0, i))
