"""stepseries - Piecewise-constant time series over discrete time.

A time series is an ordered collection of entries, each holding a constant
value over a half-open interval ``[timestamp, timestamp + validity)``. Data
stays at its native, irregular timestamps: nothing is resampled onto a grid.

Basic usage:
    >>> from stepseries import Entry, VectorTimeSeries, plus
    >>> a = VectorTimeSeries.of((1, (1.0, 10)), (12, (2.0, 10)))
    >>> b = VectorTimeSeries.of((6, (3.0, 10)))
    >>> plus(a, b).entries
    (Entry(timestamp=6, value=4.0, validity=5), Entry(timestamp=12, value=5.0, validity=4))

Custom combinators:
    >>> from stepseries import merge
    >>> merge(Entry(0, 1, 10), Entry(5, 2, 10), lambda x, y: (x, y))
    [Entry(timestamp=0, value=(1, None), validity=5), Entry(timestamp=5, value=(1, 2), validity=5), Entry(timestamp=10, value=(None, 2), validity=5)]

Sliding windows:
    >>> from stepseries import sliding_sum
    >>> sliding_sum([Entry(10, 1, 5), Entry(15, 2, 10)], window=2)
    (Entry(timestamp=10, value=1, validity=5), Entry(timestamp=15, value=3, validity=1), Entry(timestamp=16, value=2, validity=9))
"""

__version__ = "0.1.0"

# Core API
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
from stepseries.core.numeric import NUMERIC, NumericOps, ops_for

# Series
from stepseries.series import (
    VectorTimeSeries,
    entries_from_frame,
    entries_to_frame,
    merge_series,
    minus,
    multiply,
    plus,
    sample,
    sliding_sum,
    validate_entries,
)

__all__ = [
    "__version__",
    # Series variants
    "TimeSeries",
    "EmptyTimeSeries",
    "Entry",
    "VectorTimeSeries",
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
    "merge_series",
    # Numeric
    "NumericOps",
    "NUMERIC",
    "ops_for",
    "plus",
    "minus",
    "multiply",
    "sliding_sum",
    # Frames and validation
    "entries_to_frame",
    "entries_from_frame",
    "sample",
    "validate_entries",
    # Config
    "SeriesConfig",
    # Errors
    "StepSeriesError",
    "EInvalidArgument",
    "EContractViolation",
]
