"""Conversion between entries and pandas DataFrames.

A frame holds one row per entry with a start time, a value and a validity
column (names from ``SeriesConfig``). Times and validities must be integers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
import pandas as pd

from stepseries.core.base import TimeSeries
from stepseries.core.config import DEFAULT_CONFIG, SeriesConfig
from stepseries.core.entry import Entry
from stepseries.core.errors import EContractViolation
from stepseries.series.validation import EntryFrameContract, validate_entries

logger = logging.getLogger(__name__)


def entries_to_frame(
    entries: Iterable[Entry[Any]],
    config: SeriesConfig | None = None,
) -> pd.DataFrame:
    """Convert entries to a DataFrame with one row per entry."""
    contract = EntryFrameContract.from_config(config or DEFAULT_CONFIG)
    rows = [(e.timestamp, e.value, e.validity) for e in entries]
    df = pd.DataFrame(rows, columns=contract.columns)
    if not rows:
        df = df.astype({contract.time_col: "int64", contract.validity_col: "int64"})
    return df


def entries_from_frame(
    df: pd.DataFrame,
    config: SeriesConfig | None = None,
) -> tuple[Entry[Any], ...]:
    """Read entries from a DataFrame, sorted by start time.

    Raises:
        EContractViolation: If columns are missing or not integer-typed, or
            if ``config.validate`` is set and entries overlap
        EInvalidArgument: If a validity is not strictly positive
    """
    config = config or DEFAULT_CONFIG
    contract = EntryFrameContract.from_config(config)

    missing = [c for c in contract.columns if c not in df.columns]
    if missing:
        raise EContractViolation(
            f"Missing required columns: {missing}",
            context={"required": contract.columns, "found": list(df.columns)},
            fix_hint="Pass a SeriesConfig naming the frame's columns",
        )
    for col in (contract.time_col, contract.validity_col):
        if not pd.api.types.is_integer_dtype(df[col]):
            raise EContractViolation(
                f"Column '{col}' must hold integers",
                context={"column": col, "dtype": str(df[col].dtype)},
            )

    data = df.sort_values(contract.time_col, kind="stable")
    entries = tuple(
        Entry(int(t), value, int(validity))
        for t, value, validity in zip(
            data[contract.time_col], data[contract.value_col], data[contract.validity_col]
        )
    )
    if config.validate:
        validate_entries(entries)
    logger.debug("Read %d entries from frame", len(entries))
    return entries


def sample(series: TimeSeries[Any], times: Sequence[int] | np.ndarray) -> np.ndarray:
    """Evaluate ``series`` at each of ``times`` (flattened to one dimension).

    Returns:
        Object array with the value at each time, None where undefined
    """
    points = np.asarray(times, dtype=np.int64).ravel()
    result = np.full(points.shape, None, dtype=object)
    entries = series.entries
    if not entries or points.size == 0:
        return result

    starts = np.fromiter((e.timestamp for e in entries), dtype=np.int64, count=len(entries))
    ends = np.fromiter((e.defined_until for e in entries), dtype=np.int64, count=len(entries))
    idx = np.searchsorted(starts, points, side="right") - 1
    hit = idx >= 0
    hit[hit] = points[hit] < ends[idx[hit]]
    for pos in np.flatnonzero(hit):
        result[pos] = entries[int(idx[pos])].value
    return result


__all__ = ["entries_to_frame", "entries_from_frame", "sample"]
