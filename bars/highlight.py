"""
highlight.py — Highlight Descriptor
=====================================
The three index sets a renderer needs to colour one frame of bars:

    • compare – indices being compared right now
    • swap    – indices just written
    • sorted  – indices known to be in their final position

A Highlight is only valid for the instant it is emitted; the next step
replaces it wholesale.  It is frozen so a renderer can never mutate it.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Dict


def _indices(values: Iterable[int]) -> FrozenSet[int]:
    return frozenset(int(v) for v in values)


@dataclass(frozen=True)
class Highlight:
    compare: FrozenSet[int] = field(default_factory=frozenset)
    swap:    FrozenSet[int] = field(default_factory=frozenset)
    sorted:  FrozenSet[int] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        compare: Iterable[int] = (),
        swap: Iterable[int] = (),
        sorted: Iterable[int] = (),
    ) -> "Highlight":
        """Build from any iterables of indices (lists, ranges, tuples)."""
        return cls(compare=_indices(compare), swap=_indices(swap), sorted=_indices(sorted))

    @classmethod
    def all_sorted(cls, n: int) -> "Highlight":
        return cls(sorted=frozenset(range(n)))

    def state_of(self, idx: int) -> str:
        """
        Colour state for one bar.  Later classes win, matching the CSS
        cascade of the browser front end: sorted > swap > compare.
        """
        if idx in self.sorted:
            return "sorted"
        if idx in self.swap:
            return "swap"
        if idx in self.compare:
            return "compare"
        return "default"

    def to_dict(self) -> Dict[str, List[int]]:
        return {
            "compare": sorted(self.compare),
            "swap":    sorted(self.swap),
            "sorted":  sorted(self.sorted),
        }


EMPTY_HIGHLIGHT = Highlight()
