"""Series module for stepseries.

Provides the sequence-backed time series and the operations built on it.
"""

from .frame import entries_from_frame, entries_to_frame, sample
from .merge import merge_series
from .numeric import minus, multiply, plus, sliding_sum
from .validation import EntryFrameContract, find_violation, validate_entries
from .vector import VectorTimeSeries, build_series, dichotomic_search

__all__ = [
    # Sequence-backed series
    "VectorTimeSeries",
    "build_series",
    "dichotomic_search",
    # Merge and arithmetic
    "merge_series",
    "plus",
    "minus",
    "multiply",
    "sliding_sum",
    # Validation
    "EntryFrameContract",
    "find_violation",
    "validate_entries",
    # Frames
    "entries_to_frame",
    "entries_from_frame",
    "sample",
]
