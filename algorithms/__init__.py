"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, time, space, stable, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                # registry key, e.g. "bubble"
    label:            str                # human label, e.g. "Bubble Sort"
    fn:               Callable           # the generator function, fn(ctx)
    pseudocode:       List[str]          # lines for the info card
    complexity_time:  str  = ""          # e.g. "O(n²)"
    complexity_space: str  = ""          # e.g. "O(1)"
    stable:           bool = False       # preserves order of equal values?
    description:      str  = ""

    @property
    def stability_label(self) -> str:
        return "Stable" if self.stable else "Unstable"


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description=(
            "Bubble sort repeatedly scans the array, swapping adjacent elements that "
            "are out of order. Large values move to the end with each pass, like "
            "bubbles rising in water."
        ),
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=False,
        description=(
            "Selection sort repeatedly selects the smallest remaining element and swaps "
            "it into the next position. It minimizes writes but still does O(n²) "
            "comparisons."
        ),
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        complexity_time="O(n²) (best: O(n))", complexity_space="O(1)", stable=True,
        description=(
            "Insertion sort builds a sorted prefix one element at a time. Each new "
            "element is inserted into its correct spot within the already sorted part "
            "of the array."
        ),
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        complexity_time="O(n log n)", complexity_space="O(n)", stable=True,
        description=(
            "Merge sort uses divide-and-conquer: it recursively splits the array, sorts "
            "each half, then merges the sorted halves back together."
        ),
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n) average", complexity_space="O(log n) stack", stable=False,
        description=(
            "Quick sort chooses a pivot, partitions the array into elements less than "
            "and greater than the pivot, then recursively sorts each side. Very fast "
            "in practice."
        ),
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def stable_algorithms() -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.stable]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "stable_algorithms",
]
