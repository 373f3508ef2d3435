"""
quick.py — Quick Sort
======================
Lomuto partition with the last element of the range as pivot:

    i = lo
    for j in lo .. hi-1:   compare a[j] < pivot, swap a[i], a[j] and i += 1 if so
    swap a[i], a[hi]       → pivot lands at its final index i

then recurse into [lo, i-1] and [i+1, hi], depth-first, left side first.
Swaps of an index with itself are emitted but cost no writes.
"""

from typing import Iterator, List, Optional, Generator

from algorithms.context import RunContext
from algorithms.step import Step, COMPARE, WRITE


PSEUDOCODE: List[str] = [
    "quickSort(a, lo, hi):",
    "  if lo < hi:",
    "    p = partition(a, lo, hi)",
    "    quickSort(a, lo, p - 1)",
    "    quickSort(a, p + 1, hi)",
]


def quick_sort(ctx: RunContext) -> Iterator[Step]:
    yield from _quick_sort(ctx, 0, ctx.n - 1)
    if ctx.cancelled:
        return
    yield ctx.finish()


def _quick_sort(ctx: RunContext, lo: int, hi: int) -> Iterator[Step]:
    if ctx.cancelled or lo >= hi:
        return
    p = yield from _partition(ctx, lo, hi)
    if p is None:
        return
    yield from _quick_sort(ctx, lo, p - 1)
    yield from _quick_sort(ctx, p + 1, hi)


def _partition(ctx: RunContext, lo: int, hi: int) -> Generator[Step, None, Optional[int]]:
    """Yields the partition's Steps; returns the pivot index, or None if cancelled."""
    arr = ctx.array
    i   = lo

    for j in range(lo, hi):
        if ctx.cancelled:
            return None
        less = arr.compare(j, hi, "<")
        yield ctx.emit(
            COMPARE, compare=(j, hi),
            explanation=f"Compare a[{j}] with the pivot a[{hi}].",
        )
        if ctx.cancelled:
            return None
        if less:
            arr.swap(i, j)
            yield ctx.emit(
                WRITE, swap=(i, j),
                explanation=f"a[{j}] < pivot: move it into the low side at index {i}.",
            )
            i += 1

    if ctx.cancelled:
        return None
    arr.swap(i, hi)
    yield ctx.emit(
        WRITE, swap=(i, hi),
        explanation=f"Place the pivot at its final index {i}.",
    )
    return i
