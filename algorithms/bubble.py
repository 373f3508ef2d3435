"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every event:
  1. Compare neighbours a[j], a[j+1]  →  COMPARE
  2. Swap them when out of order      →  WRITE
  3. Pass finished                    →  PASS (sorted tail grows by one)
  4. Final step                       →  FINAL (all sorted)

A pass that performs no swap ends the run early.
"""

from typing import Iterator, List

from algorithms.context import RunContext
from algorithms.step import Step, COMPARE, WRITE, PASS


PSEUDOCODE: List[str] = [
    "bubbleSort(a):",
    "  n = length(a)",
    "  repeat",
    "    swapped = false",
    "    for i from 0 to n - 2:",
    "      if a[i] > a[i+1]:",
    "        swap a[i], a[i+1]",
    "        swapped = true",
    "  until not swapped",
]


def bubble_sort(ctx: RunContext) -> Iterator[Step]:
    arr = ctx.array
    n   = ctx.n

    for i in range(n - 1):
        if ctx.cancelled:
            return
        swapped = False

        for j in range(n - 1 - i):
            if ctx.cancelled:
                return
            out_of_order = arr.compare(j, j + 1, ">")
            yield ctx.emit(
                COMPARE, compare=(j, j + 1),
                explanation=f"Compare a[{j}] and a[{j + 1}].",
            )
            if ctx.cancelled:
                return

            if out_of_order:
                arr.swap(j, j + 1)
                swapped = True
                yield ctx.emit(
                    WRITE, swap=(j, j + 1),
                    explanation=f"a[{j}] > a[{j + 1}]: swap them.",
                )

        yield ctx.emit(
            PASS, sorted=range(n - 1 - i, n),
            explanation=f"Pass {i + 1} done: the largest {i + 1} value(s) are in place.",
        )
        if not swapped:
            break

    if ctx.cancelled:
        return
    yield ctx.finish()
