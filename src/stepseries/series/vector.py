"""Sequence-backed time series.

``VectorTimeSeries`` wraps an ordered, non-overlapping tuple of entries.
Gaps between entries are allowed. Point lookups and trims rely on a
dichotomic search over entry timestamps and run in O(log n).

The ordering invariant is the caller's responsibility when using the raw
constructor: it is assumed, never reconstructed on access. Use
``VectorTimeSeries.of_entries`` to sort (and optionally validate) input.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from stepseries.core.base import EmptyTimeSeries, TimeSeries
from stepseries.core.config import DEFAULT_CONFIG, SeriesConfig
from stepseries.core.entry import Entry
from stepseries.core.types import T, Time

logger = logging.getLogger(__name__)


def dichotomic_search(
    data: Sequence[Entry[T]], ts: Time
) -> tuple[Entry[T], int] | None:
    """Find the entry with the highest timestamp lower or equal to ``ts``.

    Args:
        data: Entries sorted by timestamp
        ts: Target time

    Returns:
        ``(entry, index)`` if such an entry exists, None if ``ts`` precedes
        every timestamp in ``data``
    """
    idx = bisect.bisect_right(data, ts, key=_timestamp) - 1
    if idx < 0:
        return None
    return data[idx], idx


def _timestamp(e: Entry[Any]) -> Time:
    return e.timestamp


def build_series(entries: Sequence[Entry[T]]) -> TimeSeries[T]:
    """Assemble sorted entries into the smallest fitting series variant."""
    if not entries:
        return EmptyTimeSeries()
    if len(entries) == 1:
        return entries[0]
    return VectorTimeSeries(tuple(entries))


@dataclass(frozen=True)
class VectorTimeSeries(TimeSeries[T]):
    """Time series backed by a sorted tuple of entries.

    Args:
        data: Entries, sorted by timestamp and non-overlapping
    """

    data: tuple[Entry[T], ...]

    def __post_init__(self) -> None:
        if not isinstance(self.data, tuple):
            object.__setattr__(self, "data", tuple(self.data))

    @classmethod
    def of_entries(
        cls,
        entries: Iterable[Entry[T]],
        config: SeriesConfig | None = None,
    ) -> VectorTimeSeries[T]:
        """Create a series from entries in any order.

        Entries are sorted by timestamp. Overlaps are only detected when
        ``config.validate`` is set.

        Raises:
            EContractViolation: If validation is enabled and entries overlap
        """
        config = config or DEFAULT_CONFIG
        data = tuple(sorted(entries, key=_timestamp))
        if config.validate:
            from stepseries.series.validation import validate_entries

            validate_entries(data)
        logger.debug("Built series from %d entries (validated=%s)", len(data), config.validate)
        return cls(data)

    @classmethod
    def of(cls, *items: tuple[Time, tuple[T, int]]) -> VectorTimeSeries[T]:
        """Create a series from ``(timestamp, (value, validity))`` tuples."""
        return cls.of_entries(Entry(t, value, validity) for t, (value, validity) in items)

    def last_entry_at(self, t: Time) -> tuple[Entry[T], int] | None:
        """The entry with the highest timestamp lower or equal to ``t``, with its index."""
        return dichotomic_search(self.data, t)

    def entry_valid_at(self, t: Time) -> Entry[T] | None:
        """The entry whose domain contains ``t``, if any."""
        found = self.last_entry_at(t)
        if found is None:
            return None
        return found[0].entry_at(t)

    def at(self, t: Time) -> T | None:
        entry = self.entry_valid_at(t)
        return None if entry is None else entry.value

    def defined(self, t: Time) -> bool:
        return self.entry_valid_at(t) is not None

    def map(self, f: Callable[[T], Any]) -> VectorTimeSeries[Any]:
        return VectorTimeSeries(tuple(e.map(f) for e in self.data))

    def size(self) -> int:
        return len(self.data)

    @property
    def entries(self) -> tuple[Entry[T], ...]:
        return self.data

    def head_option(self) -> Entry[T] | None:
        return self.data[0] if self.data else None

    def last_option(self) -> Entry[T] | None:
        return self.data[-1] if self.data else None

    def trim_left(self, t: Time) -> TimeSeries[T]:
        # Obvious shortcuts first
        if not self.data:
            return EmptyTimeSeries()
        if len(self.data) == 1:
            return self.data[0].trim_left(t)
        if self.data[0].timestamp >= t:
            return self

        found = self.last_entry_at(t)
        if found is None:
            return EmptyTimeSeries()
        entry, idx = found
        keep = self.data[idx + 1 :]
        if entry.defined(t):
            return build_series((entry.trim_entry_left(t),) + keep)
        return build_series(keep)

    def trim_right(self, t: Time) -> TimeSeries[T]:
        if not self.data:
            return EmptyTimeSeries()
        if len(self.data) == 1:
            return self.data[-1].trim_right(t)

        found = self.last_entry_at(t - 1)
        if found is None:
            return EmptyTimeSeries()
        entry, idx = found
        if idx == 0:
            return entry.trim_right(t)
        # The boundary entry may need trimming, everything after it is dropped
        return VectorTimeSeries(self.data[:idx] + (entry.trim_entry_right(t),))

    def __iter__(self) -> Iterator[Entry[T]]:
        return iter(self.data)


__all__ = ["VectorTimeSeries", "dichotomic_search", "build_series"]
