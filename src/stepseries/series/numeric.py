"""Numeric operations on time series.

Binary operators (sum, difference, product) are strict: wherever one of
the series is undefined, the result is undefined. ``sliding_sum`` computes
the sum over a trailing window, recomputed only at boundary events (an
entry entering or leaving the window), so its cost depends on the number
of entries, never on the magnitude of timestamps or the window length.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from typing import Any

from stepseries.core.base import TimeSeries
from stepseries.core.entry import Entry
from stepseries.core.errors import EInvalidArgument
from stepseries.core.numeric import (
    NUMERIC,
    NumericOps,
    strict_minus,
    strict_multiply,
    strict_plus,
)
from stepseries.core.types import Time
from stepseries.series.merge import merge_series

logger = logging.getLogger(__name__)


def plus(a: TimeSeries[Any], b: TimeSeries[Any], ops: NumericOps = NUMERIC) -> TimeSeries[Any]:
    """Sum of two series, defined where both are."""
    return merge_series(a, b, strict_plus(ops))


def minus(a: TimeSeries[Any], b: TimeSeries[Any], ops: NumericOps = NUMERIC) -> TimeSeries[Any]:
    """Difference ``a - b``, defined where both are."""
    return merge_series(a, b, strict_minus(ops))


def multiply(
    a: TimeSeries[Any], b: TimeSeries[Any], ops: NumericOps = NUMERIC
) -> TimeSeries[Any]:
    """Product of two series, defined where both are."""
    return merge_series(a, b, strict_multiply(ops))


def sliding_sum(
    entries: Sequence[Entry[Any]],
    window: int,
    ops: NumericOps = NUMERIC,
) -> tuple[Entry[Any], ...]:
    """Sum of values over the trailing window ``[t - window + 1, t]``.

    An input entry contributes its full value as long as any part of it
    intersects the window. Where no entry intersects the window the result
    is undefined (no output entry), not zero.

    Args:
        entries: Sorted, non-overlapping entries
        window: Window length in time units, at least 1
        ops: Arithmetic for the entry values

    Returns:
        Entries holding the windowed sum, from the first input timestamp to
        the end of the last input entry

    Raises:
        EInvalidArgument: If ``window`` is lower than 1
    """
    if window < 1:
        raise EInvalidArgument(
            f"Window must be strictly positive. Was {window}",
            context={"window": window},
        )
    if not entries:
        return ()

    remaining: deque[Entry[Any]] = deque(entries)
    in_window: deque[Entry[Any]] = deque()
    total = ops.zero
    head = entries[0].timestamp
    end_of_time = entries[-1].defined_until
    result: list[Entry[Any]] = []
    events = 0

    while head < end_of_time:
        tail = head - window + 1
        total = _update_window(remaining, in_window, total, head, tail, ops)
        # How long is the new window content valid?
        next_head = _next_boundary(remaining, in_window, head, tail, end_of_time)
        if in_window:
            result.append(Entry(head, total, next_head - head))
        head = next_head
        events += 1

    logger.debug(
        "Sliding sum over %d entries (window=%d): %d boundary events, %d entries",
        len(entries),
        window,
        events,
        len(result),
    )
    return tuple(result)


def _update_window(
    remaining: deque[Entry[Any]],
    in_window: deque[Entry[Any]],
    total: Any,
    head: Time,
    tail: Time,
    ops: NumericOps,
) -> Any:
    """Move entries in or out of the window at a boundary and update the sum."""
    entering = bool(remaining) and remaining[0].timestamp == head
    leaving = bool(in_window) and in_window[0].defined_until == tail
    if not entering and not leaving:
        raise EInvalidArgument(
            "Expecting exact boundary matches",
            context={"head": head, "tail": tail},
        )
    if leaving:
        total = ops.subtract(total, in_window.popleft().value)
    if entering:
        nxt = remaining.popleft()
        in_window.append(nxt)
        total = ops.add(total, nxt.value)
    return total


def _next_boundary(
    remaining: deque[Entry[Any]],
    in_window: deque[Entry[Any]],
    head: Time,
    tail: Time,
    end_of_time: Time,
) -> Time:
    """The next time at which an entry enters or leaves the window.

    Bounded by the end of the domain of interest once nothing remains to enter.
    """
    candidates = []
    if remaining:
        candidates.append(remaining[0].timestamp - head)
    else:
        candidates.append(end_of_time - head)
    if in_window:
        candidates.append(in_window[0].defined_until - tail)
    return head + min(candidates)


__all__ = ["plus", "minus", "multiply", "sliding_sum"]
