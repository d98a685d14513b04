"""Comparison layer — structural equality and diffing of untyped Values.

Decides whether a binding's inputs drifted between two cycles, and
describes what changed when they did.
"""

from tether.compare.differ import ValueChange, diff_values, summarize
from tether.compare.equality import deep_equal, kind_of

__all__ = [
    "ValueChange",
    "deep_equal",
    "diff_values",
    "kind_of",
    "summarize",
]
