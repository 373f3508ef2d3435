"""
merge.py — Merge Sort
======================
Top-down merge sort on inclusive ranges [l, r], split at (l + r) // 2.
The left half is sorted completely, then the right half, then the two
are merged, so Steps come out depth-first, left-first.

Merging copies both halves into buffers and writes the winner of each
head-to-head comparison back to the array.  Ties go to the left buffer
(`<=`), which makes the sort stable.  Once one buffer runs out the other
is drained without further comparisons.

The recursion is plain generator delegation (`yield from`), so the run
can be suspended or cancelled at any depth.  A merge interrupted halfway
writes its unconsumed buffer values back before unwinding.
"""

from typing import Iterator, List

from algorithms.context import RunContext
from algorithms.step import Step, COMPARE, WRITE


PSEUDOCODE: List[str] = [
    "mergeSort(a):",
    "  if length(a) ≤ 1:",
    "    return a",
    "  mid = length(a) / 2",
    "  left  = mergeSort(a[0..mid-1])",
    "  right = mergeSort(a[mid..end])",
    "  return merge(left, right)",
]


def merge_sort(ctx: RunContext) -> Iterator[Step]:
    yield from _merge_sort(ctx, 0, ctx.n - 1)
    if ctx.cancelled:
        return
    yield ctx.finish()


def _merge_sort(ctx: RunContext, l: int, r: int) -> Iterator[Step]:
    if l >= r or ctx.cancelled:
        return
    m = (l + r) // 2
    yield from _merge_sort(ctx, l, m)
    yield from _merge_sort(ctx, m + 1, r)
    if ctx.cancelled:
        return
    yield from _merge(ctx, l, m, r)


def _merge(ctx: RunContext, l: int, m: int, r: int) -> Iterator[Step]:
    arr   = ctx.array
    left  = arr.values[l:m + 1]
    right = arr.values[m + 1:r + 1]
    i = j = 0
    k = l

    try:
        while i < len(left) and j < len(right):
            if ctx.cancelled:
                return
            take_left = arr.compare_values(left[i], right[j], "<=")
            yield ctx.emit(
                COMPARE, compare=(k,),
                explanation=f"Merge [{l}..{m}] with [{m + 1}..{r}]: pick the smaller head for index {k}.",
            )
            if ctx.cancelled:
                return

            if take_left:
                value = left[i]
                i += 1
                source = "left"
            else:
                value = right[j]
                j += 1
                source = "right"
            arr.write(k, value)
            k += 1
            yield ctx.emit(
                WRITE, swap=(k - 1,),
                explanation=f"Write the {source} head to index {k - 1}.",
            )

        while i < len(left):
            if ctx.cancelled:
                return
            arr.write(k, left[i])
            i += 1
            k += 1
            yield ctx.emit(
                WRITE, swap=(k - 1,),
                explanation=f"Copy the remaining left value to index {k - 1}.",
            )

        while j < len(right):
            if ctx.cancelled:
                return
            arr.write(k, right[j])
            j += 1
            k += 1
            yield ctx.emit(
                WRITE, swap=(k - 1,),
                explanation=f"Copy the remaining right value to index {k - 1}.",
            )
    finally:
        # commit whatever the buffers still hold so no value is lost
        for value in left[i:] + right[j:]:
            if arr[k] != value:
                arr.write(k, value)
            k += 1
