"""
context.py — Run Context
=========================
Everything one algorithm run needs, passed explicitly to the generator
instead of living in module globals:

    • array   – the ArrayState being sorted (and its counters)
    • token   – the CancelToken the controller raises to stop the run
    • pacing  – the shared delay object the controller sleeps on

It also numbers and builds Steps, so an algorithm only says *what*
happened:

    yield ctx.emit(COMPARE, compare=(j, j + 1), explanation="…")
"""

from typing import Iterable, Optional, Any

from bars import ArrayState, Highlight
from algorithms.step import Step, FINAL


class CancelToken:
    """Polled, cooperative cancellation flag."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def clear(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self._cancelled})"


class RunContext:
    """
    Attributes:
        array   : The ArrayState the algorithm sorts in place.
        token   : CancelToken polled at every loop head and suspension.
        pacing  : Pacing object (engine.pacing) or None for headless runs.
        steps   : Number of Steps emitted so far.
    """

    def __init__(
        self,
        array: ArrayState,
        token: Optional[CancelToken] = None,
        pacing: Any = None,
    ):
        self.array:  ArrayState  = array
        self.token:  CancelToken = token if token is not None else CancelToken()
        self.pacing: Any         = pacing
        self.steps:  int         = 0

    @property
    def cancelled(self) -> bool:
        return self.token.cancelled

    @property
    def n(self) -> int:
        return len(self.array)

    def emit(
        self,
        kind: str,
        compare: Iterable[int] = (),
        swap: Iterable[int] = (),
        sorted: Iterable[int] = (),
        explanation: str = "",
        is_final: bool = False,
    ) -> Step:
        """Snapshot the array + counters into the next numbered Step."""
        step = Step(
            step_number=self.steps,
            kind=kind,
            values=self.array.snapshot(),
            highlight=Highlight.of(compare=compare, swap=swap, sorted=sorted),
            comparisons=self.array.comparisons,
            writes=self.array.writes,
            explanation=explanation,
            is_final=is_final,
        )
        self.steps += 1
        return step

    def finish(self, explanation: str = "") -> Step:
        """The closing all-sorted frame of a completed run."""
        return self.emit(
            FINAL,
            sorted=range(self.n),
            explanation=explanation or f"Done: all {self.n} values are in ascending order.",
            is_final=True,
        )
