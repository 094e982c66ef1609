"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, create_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, cls, pseudocode, tags, is_sort, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it,
so adding a new algorithm is: subclass SortAlgorithm in its own module,
add one entry here.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Type

from algorithms.base import SortAlgorithm, CancelToken, SortCancelled

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import BubbleSort,       PSEUDOCODE as _bubble_pc
from algorithms.insertion import InsertionSort,    PSEUDOCODE as _ins_pc
from algorithms.selection import SelectionSort,    PSEUDOCODE as _sel_pc
from algorithms.merge     import MergeSort,        PSEUDOCODE as _merge_pc
from algorithms.quick     import QuickSort,        PSEUDOCODE as _quick_pc
from algorithms.heap      import HeapSort,         PSEUDOCODE as _heap_pc
from algorithms.comb      import CombSort,         PSEUDOCODE as _comb_pc
from algorithms.cocktail  import CocktailSort,     PSEUDOCODE as _cock_pc
from algorithms.odd_even  import OddEvenSort,      PSEUDOCODE as _oe_pc
from algorithms.shuffle   import RandomizeShuffle, PSEUDOCODE as _shuf_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                        # registry key, e.g. "bubble"
    label:            str                        # human label, e.g. "Bubble Sort"
    cls:              Type[SortAlgorithm]        # the implementation
    pseudocode:       List[str]                  # lines for the side-panel
    tags:             List[str] = field(default_factory=list)   # e.g. ["stable", "in-place"]
    is_sort:          bool     = True            # False for the shuffle
    complexity_time:  str      = ""              # e.g. "O(n²)"
    complexity_space: str      = ""              # e.g. "O(1)"
    description:      str      = ""              # one-liner for the UI card

    @property
    def name(self) -> str:
        return self.cls.name


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", cls=BubbleSort, pseudocode=_bubble_pc,
        tags=["stable", "in-place", "adjacent"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent pairs until a full pass makes no swap.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", cls=InsertionSort, pseudocode=_ins_pc,
        tags=["stable", "in-place", "adjacent"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Slides each line left until its predecessor is not taller.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", cls=SelectionSort, pseudocode=_sel_pc,
        tags=["in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the tail and swaps it to the front. One swap per pass.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", cls=MergeSort, pseudocode=_merge_pc,
        tags=["stable", "divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts both halves, then merges them back slot by slot.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", cls=QuickSort, pseudocode=_quick_pc,
        tags=["in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Partitions around the last line as pivot, then sorts each side.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", cls=HeapSort, pseudocode=_heap_pc,
        tags=["in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then moves the root to the shrinking tail.",
    ),

    "comb": AlgoInfo(
        key="comb", label="Comb Sort", cls=CombSort, pseudocode=_comb_pc,
        tags=["in-place", "gap"],
        complexity_time="O(n²) worst", complexity_space="O(1)",
        description="Bubble sort over a gap that shrinks by 1.3 each pass.",
    ),

    "cocktail": AlgoInfo(
        key="cocktail", label="Cocktail Shaker Sort", cls=CocktailSort, pseudocode=_cock_pc,
        tags=["stable", "in-place", "adjacent"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Bubble sort that alternates direction every pass.",
    ),

    "odd_even": AlgoInfo(
        key="odd_even", label="Odd-Even Sort", cls=OddEvenSort, pseudocode=_oe_pc,
        tags=["stable", "in-place", "adjacent"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Alternates passes over odd-indexed and even-indexed pairs.",
    ),

    "shuffle": AlgoInfo(
        key="shuffle", label="Randomize", cls=RandomizeShuffle, pseudocode=_shuf_pc,
        tags=["random"], is_sort=False,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Fisher–Yates shuffle. Every permutation equally likely.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms(sorts_only: bool = False) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order."""
    return [a for a in REGISTRY.values() if a.is_sort or not sorts_only]


def create_algorithm(key: str, **kwargs) -> SortAlgorithm:
    """Instantiate the algorithm registered under `key`."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return info.cls(**kwargs)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "create_algorithm",
    "SortAlgorithm",
    "CancelToken",
    "SortCancelled",
    "BubbleSort",
    "InsertionSort",
    "SelectionSort",
    "MergeSort",
    "QuickSort",
    "HeapSort",
    "CombSort",
    "CocktailSort",
    "OddEvenSort",
    "RandomizeShuffle",
]
