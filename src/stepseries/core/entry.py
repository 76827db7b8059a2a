"""Single-interval entries.

An ``Entry`` holds one constant value over the half-open interval
``[timestamp, timestamp + validity)``. Entries are immutable: every trim or
map returns a new instance (or the same one when nothing changes).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic

from stepseries.core.base import EmptyTimeSeries, TimeSeries
from stepseries.core.errors import EInvalidArgument
from stepseries.core.types import T, Time


@dataclass(frozen=True)
class Value(Generic[T]):
    """An entry without its start time, as stored in a time-keyed map."""

    value: T
    validity: int

    def valid_for(self, key: Time, at_time: Time) -> bool:
        """True if this value, stored at ``key``, is valid at ``at_time``."""
        return key <= at_time < key + self.validity


@dataclass(frozen=True)
class Left(Generic[T]):
    """Tags a value as coming from the left-hand side of a merge."""

    value: T


@dataclass(frozen=True)
class Right(Generic[T]):
    """Tags a value as coming from the right-hand side of a merge."""

    value: T


@dataclass(frozen=True)
class Entry(TimeSeries[T]):
    """A value valid from ``timestamp`` (inclusive) for ``validity`` time units.

    Args:
        timestamp: Start of the domain of definition
        value: The constant value
        validity: Strictly positive duration of the domain

    Raises:
        EInvalidArgument: If validity is not strictly positive
    """

    timestamp: int
    value: T
    validity: int

    def __post_init__(self) -> None:
        if self.validity <= 0:
            raise EInvalidArgument(
                f"Entry validity must be strictly positive, was {self.validity}",
                context={"timestamp": self.timestamp, "validity": self.validity},
            )

    @classmethod
    def from_map_tuple(cls, item: tuple[Time, Value[T]]) -> Entry[T]:
        """Build an entry from a ``(timestamp, Value)`` pair."""
        t, val = item
        return cls(t, val.value, val.validity)

    @property
    def defined_until(self) -> Time:
        """The end of this entry's domain, exclusive."""
        return self.timestamp + self.validity

    def at(self, t: Time) -> T | None:
        if self.timestamp <= t < self.defined_until:
            return self.value
        return None

    def defined(self, t: Time) -> bool:
        return self.timestamp <= t < self.defined_until

    def entry_at(self, t: Time) -> Entry[T] | None:
        """This entry if it is defined at ``t``."""
        return self if self.defined(t) else None

    def size(self) -> int:
        return 1

    @property
    def entries(self) -> tuple[Entry[T], ...]:
        return (self,)

    def head_option(self) -> Entry[T]:
        return self

    def last_option(self) -> Entry[T]:
        return self

    def to_value(self) -> Value[T]:
        return Value(self.value, self.validity)

    def to_map_tuple(self) -> tuple[Time, Value[T]]:
        return (self.timestamp, self.to_value())

    def to_left_entry(self) -> Entry[Left[T]]:
        return Entry(self.timestamp, Left(self.value), self.validity)

    def to_right_entry(self) -> Entry[Right[T]]:
        return Entry(self.timestamp, Right(self.value), self.validity)

    def map(self, f: Callable[[T], Any]) -> Entry[Any]:
        return Entry(self.timestamp, f(self.value), self.validity)

    def trim_right(self, at: Time) -> TimeSeries[T]:
        """Shorten this entry so it ends at ``at``.

        Empty if ``at`` is at or before the entry's start, unchanged if
        ``at`` lies beyond its end.
        """
        if at <= self.timestamp:
            return EmptyTimeSeries()
        return self.trim_entry_right(at)

    def trim_entry_right(self, at: Time) -> Entry[T]:
        """Like ``trim_right`` but always returns an entry.

        Raises:
            EInvalidArgument: If nothing would remain (``at <= timestamp``)
        """
        if at <= self.timestamp:
            raise EInvalidArgument(
                f"Attempting to trim right at {at} before entry's domain "
                f"has started ({self.timestamp})",
                context={"at": at, "timestamp": self.timestamp},
            )
        if at >= self.defined_until:
            return self
        return Entry(self.timestamp, self.value, at - self.timestamp)

    def trim_left(self, at: Time) -> TimeSeries[T]:
        """Move this entry's start to ``at``, keeping its end.

        Empty if ``at`` is at or past the entry's end, unchanged if ``at``
        lies before its start.
        """
        if at >= self.defined_until:
            return EmptyTimeSeries()
        return self.trim_entry_left(at)

    def trim_entry_left(self, at: Time) -> Entry[T]:
        """Like ``trim_left`` but always returns an entry.

        Raises:
            EInvalidArgument: If nothing would remain (``at >= defined_until``)
        """
        if at >= self.defined_until:
            raise EInvalidArgument(
                f"Attempting to trim left at {at} after entry's domain "
                f"has ended ({self.defined_until})",
                context={"at": at, "defined_until": self.defined_until},
            )
        if at <= self.timestamp:
            return self
        return Entry(at, self.value, self.defined_until - at)

    def trim_entry_left_n_right(self, left: Time, right: Time) -> Entry[T]:
        """Equivalent to ``trim_entry_left(left).trim_entry_right(right)``.

        Raises:
            EInvalidArgument: If the bounds miss the domain or ``left >= right``
        """
        if left >= self.defined_until:
            raise EInvalidArgument(
                f"Attempting to trim left at {left} after entry's domain "
                f"has ended ({self.defined_until})",
                context={"left": left, "defined_until": self.defined_until},
            )
        if right <= self.timestamp:
            raise EInvalidArgument(
                f"Attempting to trim right at {right} before entry's domain "
                f"has started ({self.timestamp})",
                context={"right": right, "timestamp": self.timestamp},
            )
        if left >= right:
            raise EInvalidArgument(
                f"Left time must be strictly lower than right time. "
                f"Was: {left} and {right}",
                context={"left": left, "right": right},
            )
        if left <= self.timestamp and right >= self.defined_until:
            return self
        start = max(self.timestamp, left)
        return Entry(start, self.value, min(self.defined_until, right) - start)

    def overlaps(self, other: Entry[Any]) -> bool:
        """True if both domains intersect. Contiguous domains do not overlap."""
        return self.timestamp < other.defined_until and self.defined_until > other.timestamp


__all__ = ["Entry", "Value", "Left", "Right"]
