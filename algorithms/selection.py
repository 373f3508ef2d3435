"""
selection.py — Selection Sort
==============================
Scan the unsorted suffix for its minimum, then swap it to the front.
Each scan comparison is a COMPARE step; the closing swap of every outer
iteration is a WRITE step, emitted even when the minimum was already in
place (the swap itself is then skipped and costs no writes).
"""

from typing import Iterator, List

from algorithms.context import RunContext
from algorithms.step import Step, COMPARE, WRITE


PSEUDOCODE: List[str] = [
    "selectionSort(a):",
    "  n = length(a)",
    "  for i from 0 to n - 2:",
    "    minIndex = i",
    "    for j from i+1 to n - 1:",
    "      if a[j] < a[minIndex]:",
    "        minIndex = j",
    "    swap a[i], a[minIndex]",
]


def selection_sort(ctx: RunContext) -> Iterator[Step]:
    arr = ctx.array
    n   = ctx.n

    for i in range(n - 1):
        if ctx.cancelled:
            return
        min_index = i

        for j in range(i + 1, n):
            if ctx.cancelled:
                return
            smaller = arr.compare(j, min_index, "<")
            yield ctx.emit(
                COMPARE, compare=(min_index, j),
                explanation=f"Is a[{j}] smaller than the current minimum a[{min_index}]?",
            )
            if smaller:
                min_index = j

        if ctx.cancelled:
            return
        if min_index != i:
            arr.swap(i, min_index)
            text = f"Move the minimum from index {min_index} to index {i}."
        else:
            text = f"a[{i}] is already the minimum of the unsorted part."
        yield ctx.emit(WRITE, swap=(i, min_index), explanation=text)

    if ctx.cancelled:
        return
    yield ctx.finish()
