"""
Shared fixtures for the sorting visualizer tests.
"""
import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lines import Line, DEFAULT_PALETTE
from engine import Settings


def make_lines(heights):
    """One line per height, laid out left to right in unit-wide slots."""
    return [Line((float(i), 100.0), 1.0, h) for i, h in enumerate(heights)]


def is_permutation_of(lines, original):
    return sorted(map(id, lines)) == sorted(map(id, original))


def heights_of(lines):
    return [line.height for line in lines]


def all_default(lines):
    return all(line.color == DEFAULT_PALETTE.default for line in lines)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fast_settings():
    """Settings with no pacing and an instant completion fill."""
    return Settings(lines_count=20, algorithm_delay=0, fill_step_ms=0, fill_hold_ms=0)


@pytest.fixture
def settings_home(tmp_path, monkeypatch):
    monkeypatch.setenv("SORTING_APP_HOME", str(tmp_path))
    return tmp_path
