"""Series-level merge built from the entry merge algebra.

Every entry of the left series is merged against the overlapping entries of
the right series; the parts of the right series the left one does not cover
are merged against an undefined left side. Stretches where neither series
is defined produce no entry.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Sequence
from typing import Any

from stepseries.core.base import TimeSeries
from stepseries.core.entry import Entry
from stepseries.core.merge import merge_either_to_none, merge_single_to_multiple
from stepseries.core.types import Combinator
from stepseries.series.vector import build_series

logger = logging.getLogger(__name__)


def merge_series(a: TimeSeries[Any], b: TimeSeries[Any], op: Combinator) -> TimeSeries[Any]:
    """Merge two time series under ``op``.

    ``op`` receives ``(a_value | None, b_value | None)`` for each stretch of
    time where the definedness of either side is constant.
    """
    left_entries = a.entries
    right_entries = b.entries
    result: list[Entry[Any]] = []

    for entry in left_entries:
        tagged = entry.to_left_entry()
        others = [o.to_right_entry() for o in _overlapping(right_entries, entry)]
        if others:
            result.extend(merge_single_to_multiple(tagged, others, op))
        else:
            result.extend(merge_either_to_none(tagged, entry.timestamp, entry.defined_until, op))

    for entry in right_entries:
        tagged = entry.to_right_entry()
        for start, until in _uncovered(entry, _overlapping(left_entries, entry)):
            result.extend(merge_either_to_none(tagged, start, until, op))

    result.sort(key=lambda e: e.timestamp)
    logger.debug(
        "Merged series of %d and %d entries into %d entries",
        len(left_entries),
        len(right_entries),
        len(result),
    )
    return build_series(result)


def _overlapping(entries: Sequence[Entry[Any]], target: Entry[Any]) -> list[Entry[Any]]:
    lo = max(bisect.bisect_right(entries, target.timestamp, key=_timestamp) - 1, 0)
    hi = bisect.bisect_left(entries, target.defined_until, key=_timestamp)
    return [e for e in entries[lo:hi] if e.overlaps(target)]


def _uncovered(entry: Entry[Any], covering: Sequence[Entry[Any]]) -> list[tuple[int, int]]:
    pieces = []
    cursor = entry.timestamp
    for c in covering:
        if c.timestamp > cursor:
            pieces.append((cursor, c.timestamp))
        cursor = max(cursor, c.defined_until)
    if cursor < entry.defined_until:
        pieces.append((cursor, entry.defined_until))
    return pieces


def _timestamp(e: Entry[Any]) -> int:
    return e.timestamp


__all__ = ["merge_series"]
