"""Core module - entries, merge algebra and shared contracts.

This module provides the foundational types of stepseries: the
single-interval ``Entry``, the empty sentinel, the entry merge algebra,
configuration, numeric capabilities and errors.
"""

from stepseries.core.base import EmptyTimeSeries, TimeSeries
from stepseries.core.config import SeriesConfig
from stepseries.core.entry import Entry, Left, Right, Value
from stepseries.core.errors import (
    EContractViolation,
    EInvalidArgument,
    StepSeriesError,
)
from stepseries.core.merge import (
    merge,
    merge_disjoint,
    merge_either_to_none,
    merge_eithers,
    merge_overlapping,
    merge_single_to_multiple,
)
from stepseries.core.numeric import (
    NUMERIC,
    NumericOps,
    ops_for,
    strict_minus,
    strict_multiply,
    strict_plus,
)

__all__ = [
    # Series
    "TimeSeries",
    "EmptyTimeSeries",
    "Entry",
    "Value",
    "Left",
    "Right",
    # Merge algebra
    "merge",
    "merge_disjoint",
    "merge_overlapping",
    "merge_eithers",
    "merge_either_to_none",
    "merge_single_to_multiple",
    # Numeric
    "NumericOps",
    "NUMERIC",
    "ops_for",
    "strict_plus",
    "strict_minus",
    "strict_multiply",
    # Config
    "SeriesConfig",
    # Errors
    "StepSeriesError",
    "EInvalidArgument",
    "EContractViolation",
]
