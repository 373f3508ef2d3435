"""
array_state.py — The Array Being Sorted
=========================================
ArrayState owns the mutable sequence of values plus the two counters the
metrics panel shows:

    comparisons – incremented once per metered comparison
    writes      – incremented once per metered write (a swap is two)

The contract every algorithm follows: EVERY comparison and EVERY value
mutation goes through compare()/compare_values()/write()/swap().  That is
what makes the counts comparable across algorithms.  Plain indexing
(state[i]) is an unmetered read and is allowed.

Counter changes are pushed synchronously to an optional reporter object
exposing on_comparisons_changed(total) / on_writes_changed(total).
"""

import operator
import random
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Any


# ---------------------------------------------------------------------------
# Comparison operators an algorithm may ask for
# ---------------------------------------------------------------------------
COMPARISON_OPS: Dict[str, Callable[[float, float], bool]] = {
    "<":  operator.lt,
    "<=": operator.le,
    ">":  operator.gt,
    ">=": operator.ge,
}


class ArrayState:
    """
    Attributes:
        values      : The live list of floats.  Algorithms mutate it only
                      through write()/swap().
        comparisons : Metered comparisons since the last reset.
        writes      : Metered writes since the last reset.
        reporter    : Optional metrics sink (see engine.reporter).
    """

    def __init__(self, values: Optional[Iterable[float]] = None, reporter: Any = None):
        self.values:      List[float] = [float(v) for v in values] if values is not None else []
        self.comparisons: int         = 0
        self.writes:      int         = 0
        self.reporter:    Any         = reporter

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def generate(self, size: int, rng: Optional[random.Random] = None) -> None:
        """Replace the sequence with `size` uniform values in [0, 1)."""
        rand = rng.random if rng is not None else random.random
        self.values = [rand() for _ in range(max(0, int(size)))]
        self.reset_counters()

    def load(self, values: Iterable[float]) -> None:
        """Replace the sequence with explicit values."""
        self.values = [float(v) for v in values]
        self.reset_counters()

    def reset_counters(self) -> None:
        self.comparisons = 0
        self.writes      = 0
        self._report_comparisons()
        self._report_writes()

    # ------------------------------------------------------------------
    # Metered operations
    # ------------------------------------------------------------------
    def compare(self, i: int, j: int, op: str = "<") -> bool:
        """Metered: return values[i] <op> values[j].  Never reorders."""
        return self.compare_values(self.values[i], self.values[j], op)

    def compare_values(self, x: float, y: float, op: str = "<") -> bool:
        """
        Metered comparison of two values the algorithm already holds
        (an insertion key, merge buffer heads, a quicksort pivot).
        """
        fn = COMPARISON_OPS.get(op)
        if fn is None:
            raise ValueError(f"Unknown comparison operator: {op!r}")
        self.comparisons += 1
        self._report_comparisons()
        return fn(x, y)

    def write(self, i: int, value: float) -> None:
        """Metered: values[i] = value."""
        self.values[i] = value
        self.writes += 1
        self._report_writes()

    def swap(self, i: int, j: int) -> None:
        """Two metered writes, or nothing at all when i == j."""
        if i == j:
            return
        a, b = self.values[i], self.values[j]
        self.write(i, b)
        self.write(j, a)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def snapshot(self) -> Tuple[float, ...]:
        """Immutable copy for renderers; stale as soon as the next step runs."""
        return tuple(self.values)

    def is_sorted(self) -> bool:
        v = self.values
        return all(v[k] <= v[k + 1] for k in range(len(v) - 1))

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, idx: int) -> float:
        return self.values[idx]

    def __repr__(self) -> str:
        return (
            f"ArrayState(n={len(self.values)}, comparisons={self.comparisons}, "
            f"writes={self.writes})"
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _report_comparisons(self) -> None:
        if self.reporter is not None:
            self.reporter.on_comparisons_changed(self.comparisons)

    def _report_writes(self) -> None:
        if self.reporter is not None:
            self.reporter.on_writes_changed(self.writes)
