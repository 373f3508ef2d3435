"""
step.py — Algorithm Step Snapshot
==================================
Every sorting algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The array values right after the step's metered operation
    • Which bars are being compared / were written / are final
    • The running comparison and write totals
    • A plain-English explanation of what just happened

Design decisions:
  - Step is a plain frozen dataclass.  It is a SNAPSHOT: the algorithm
    generator is the only writer of the array; the controller and the
    renderer are pure readers.
  - `values` is a tuple copy, so a buffered Step never changes when the
    algorithm keeps running.
"""

from dataclasses import dataclass, field
from typing import Tuple, Dict, Any

from bars import Highlight


# ---------------------------------------------------------------------------
# Step kinds
# ---------------------------------------------------------------------------
COMPARE = "compare"     # one metered comparison
WRITE   = "write"       # one metered write or swap
PASS    = "pass"        # a pass finished (bubble sort's sorted tail)
FINAL   = "final"       # run completed, every index sorted

STEP_KINDS = (COMPARE, WRITE, PASS, FINAL)


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the run.
        kind        : One of STEP_KINDS.
        values      : Array contents right after this step.
        highlight   : compare / swap / sorted index sets for this frame.
        comparisons : Running comparison total.
        writes      : Running write total.
        explanation : Human-readable text for the step log.
        is_final    : True on the all-sorted step that ends a completed run.
    """

    step_number:  int                = 0
    kind:         str                = COMPARE
    values:       Tuple[float, ...]  = ()
    highlight:    Highlight          = field(default_factory=Highlight)
    comparisons:  int                = 0
    writes:       int                = 0
    explanation:  str                = ""
    is_final:     bool               = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number": self.step_number,
            "kind":        self.kind,
            "values":      list(self.values),
            "highlight":   self.highlight.to_dict(),
            "comparisons": self.comparisons,
            "writes":      self.writes,
            "explanation": self.explanation,
            "is_final":    self.is_final,
        }
