"""
bars/
-----
Core data layer.  Public API:

    from bars import ArrayState, Highlight
"""

from bars.highlight   import Highlight, EMPTY_HIGHLIGHT
from bars.array_state import ArrayState, COMPARISON_OPS

__all__ = [
    "ArrayState",
    "COMPARISON_OPS",
    "Highlight",
    "EMPTY_HIGHLIGHT",
]
