"""
Tests for the Randomize Shuffle
=================================
Covers:
- Output is a permutation with slot points untouched
- Uniform distribution over all 24 orders of 4 lines
- Pacing and stop behave like any other run
"""
import asyncio
import itertools
import random
from collections import Counter

import pytest

from algorithms import RandomizeShuffle, create_algorithm
from tests.conftest import make_lines, is_permutation_of, all_default


class TestRandomizeShuffle:

    @pytest.mark.asyncio
    async def test_permutation_and_points(self):
        lines = make_lines(range(1, 51))
        original = list(lines)

        await RandomizeShuffle(rng=random.Random(5)).sort(lines)

        assert is_permutation_of(lines, original)
        assert [line.x for line in lines] == [float(i) for i in range(50)]

    @pytest.mark.asyncio
    async def test_empty_and_single(self):
        for heights in ([], [9]):
            lines = make_lines(heights)
            assert await RandomizeShuffle().sort(lines) is True
            assert [line.height for line in lines] == heights

    @pytest.mark.asyncio
    async def test_uniform_over_all_orders(self):
        algo = RandomizeShuffle(rng=random.Random(20240917))
        runs = 12_000
        counts = Counter()

        for _ in range(runs):
            lines = make_lines([1, 2, 3, 4])
            await algo.sort(lines)
            counts[tuple(line.height for line in lines)] += 1

        expected = runs / 24
        assert set(counts) == set(itertools.permutations([1, 2, 3, 4]))
        for order, seen in counts.items():
            assert 0.8 * expected <= seen <= 1.2 * expected, (order, seen)

    @pytest.mark.asyncio
    async def test_stop_mid_shuffle(self):
        lines = make_lines(range(1, 31))
        original = list(lines)
        algo = create_algorithm("shuffle")

        task = asyncio.ensure_future(algo.sort(lines, delay=10))
        await asyncio.sleep(0.03)
        assert algo.stop_sort(lines) is True

        assert await task is False
        assert is_permutation_of(lines, original)
        assert all_default(lines)
        assert algo.is_running is False
