"""
insertion.py — Insertion Sort
==============================
Grow a sorted prefix one element at a time.  The element being inserted
(`key`) is lifted out of the array, larger prefix values are shifted one
slot right (one metered write each), then the key is written into the gap.

While the key is lifted the array holds a duplicate of its neighbour, so
a run stopped mid-shift writes the key back before unwinding; a cancelled
run still leaves a permutation of its input.
"""

from typing import Iterator, List

from algorithms.context import RunContext
from algorithms.step import Step, COMPARE, WRITE


PSEUDOCODE: List[str] = [
    "insertionSort(a):",
    "  n = length(a)",
    "  for i from 1 to n - 1:",
    "    key = a[i]",
    "    j = i - 1",
    "    while j >= 0 and a[j] > key:",
    "      a[j+1] = a[j]",
    "      j = j - 1",
    "    a[j+1] = key",
]


def insertion_sort(ctx: RunContext) -> Iterator[Step]:
    arr = ctx.array
    n   = ctx.n

    for i in range(1, n):
        if ctx.cancelled:
            return
        key = arr[i]
        j   = i - 1
        placed = False
        try:
            while j >= 0:
                greater = arr.compare_values(arr[j], key, ">")
                yield ctx.emit(
                    COMPARE, compare=(j, j + 1),
                    explanation=f"Compare a[{j}] with the key {key:.3f}.",
                )
                if ctx.cancelled:
                    return
                if not greater:
                    break
                arr.write(j + 1, arr[j])
                j -= 1
                # the gap is now at j + 1
                yield ctx.emit(
                    WRITE, swap=(j + 1,),
                    explanation=f"a[{j + 1}] is larger: shift it right to index {j + 2}.",
                )
                if ctx.cancelled:
                    return

            arr.write(j + 1, key)
            placed = True
        finally:
            # cancelled or closed while the key was lifted out
            if not placed and arr[j + 1] != key:
                arr.write(j + 1, key)

        yield ctx.emit(
            WRITE, swap=(j + 1,),
            explanation=f"Insert the key at index {j + 1}.",
        )

    if ctx.cancelled:
        return
    yield ctx.finish()
