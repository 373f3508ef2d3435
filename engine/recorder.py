"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps) headless, with no pacing,
then computes the metrics the analytics card and the trace API need.

Usage:
    rec = Recorder()
    rec.start(algo_key="merge", values=[5, 3, 8, 1])
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-ready trace

The recorder sorts its own copy of the values; the caller's sequence is
never touched.
"""

import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any, Iterable, Iterator

from bars import ArrayState
from algorithms import get_algorithm, AlgoInfo
from algorithms.context import RunContext
from algorithms.step import Step


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    size:          int   = 0
    comparisons:   int   = 0
    writes:        int   = 0
    total_steps:   int   = 0          # number of Steps yielded
    wall_time_ms:  float = 0.0        # wall-clock time to run to completion
    completed:     bool  = False      # final all-sorted step was reached
    is_sorted:     bool  = False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        array   : The recorder's private ArrayState.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.array:   Optional[ArrayState] = None

        self._algo_info: Optional[AlgoInfo]        = None
        self._ctx:       Optional[RunContext]      = None
        self._generator: Optional[Iterator[Step]]  = None
        self._initial:   List[float]               = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Iterable[float]) -> None:
        """Initialise the generator for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self.array      = ArrayState(values)
        self._initial   = list(self.array.values)
        self._ctx       = RunContext(self.array)
        self._generator = info.fn(self._ctx)
        self.steps      = []
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        for step in self._generator:
            self.steps.append(step)
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def initial_values(self) -> List[float]:
        return list(self._initial)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "initial":  list(self._initial),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            size=len(self.array) if self.array is not None else 0,
            comparisons=self.array.comparisons if self.array is not None else 0,
            writes=self.array.writes if self.array is not None else 0,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            completed=bool(last and last.is_final),
            is_sorted=self.array.is_sorted() if self.array is not None else False,
        )


def record(algo_key: str, values: Iterable[float]) -> Recorder:
    """One-shot helper: start + run_to_completion."""
    rec = Recorder()
    rec.start(algo_key, values)
    rec.run_to_completion()
    return rec
