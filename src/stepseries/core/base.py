"""Time-series capability set and the empty sentinel.

The variant set is closed: ``EmptyTimeSeries``, ``Entry`` (a single
entry is itself a time series) and ``VectorTimeSeries``. Every operation
below is total over these three; no other subclass is expected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeAlias

from stepseries.core.types import T, Time

if TYPE_CHECKING:
    from stepseries.core.entry import Entry
    from stepseries.series.vector import VectorTimeSeries


class TimeSeries(ABC, Generic[T]):
    """A piecewise-constant function of discrete time."""

    @abstractmethod
    def at(self, t: Time) -> T | None:
        """Value at ``t``, or None where the series is undefined."""

    @abstractmethod
    def defined(self, t: Time) -> bool:
        """True if ``at(t)`` would return a value."""

    @abstractmethod
    def map(self, f: Callable[[T], Any]) -> TimeSeries[Any]:
        """Apply ``f`` to every value, keeping intervals unchanged."""

    @abstractmethod
    def size(self) -> int:
        """Number of entries."""

    @abstractmethod
    def trim_left(self, t: Time) -> TimeSeries[T]:
        """Restrict to times >= ``t``."""

    @abstractmethod
    def trim_right(self, t: Time) -> TimeSeries[T]:
        """Restrict to times < ``t``."""

    @property
    @abstractmethod
    def entries(self) -> tuple[Entry[T], ...]:
        """The sorted entries making up this series."""

    @abstractmethod
    def head_option(self) -> Entry[T] | None:
        """First entry, or None if empty."""

    @abstractmethod
    def last_option(self) -> Entry[T] | None:
        """Last entry, or None if empty."""

    def head(self) -> Entry[T]:
        first = self.head_option()
        if first is None:
            raise IndexError("head of empty time series")
        return first

    def last(self) -> Entry[T]:
        final = self.last_option()
        if final is None:
            raise IndexError("last of empty time series")
        return final

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def append(self, other: TimeSeries[T]) -> TimeSeries[T]:
        """Append ``other``, overwriting this series from other's first timestamp on.

        If ``other`` starts at or before this series, it replaces it entirely.
        """
        first = other.head_option()
        if first is None:
            return self
        if self.head_option() is None:
            return other
        if first.timestamp > self.head().timestamp:
            kept = self.trim_right(first.timestamp).entries
            return _build(kept + other.entries)
        return other

    def prepend(self, other: TimeSeries[T]) -> TimeSeries[T]:
        """Prepend ``other``, overwriting this series up to other's end.

        If ``other`` ends at or after this series, it replaces it entirely.
        """
        final = other.last_option()
        if final is None:
            return self
        if self.last_option() is None:
            return other
        if final.defined_until < self.last().defined_until:
            kept = self.trim_left(final.defined_until).entries
            return _build(other.entries + kept)
        return other


class EmptyTimeSeries(TimeSeries[Any]):
    """A series without any entry: undefined everywhere."""

    def at(self, t: Time) -> None:
        return None

    def defined(self, t: Time) -> bool:
        return False

    def map(self, f: Callable[[Any], Any]) -> EmptyTimeSeries:
        return self

    def size(self) -> int:
        return 0

    def trim_left(self, t: Time) -> EmptyTimeSeries:
        return self

    def trim_right(self, t: Time) -> EmptyTimeSeries:
        return self

    @property
    def entries(self) -> tuple[Entry[Any], ...]:
        return ()

    def head_option(self) -> None:
        return None

    def last_option(self) -> None:
        return None

    def append(self, other: TimeSeries[Any]) -> TimeSeries[Any]:
        return other

    def prepend(self, other: TimeSeries[Any]) -> TimeSeries[Any]:
        return other

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptyTimeSeries)

    def __hash__(self) -> int:
        return hash(EmptyTimeSeries)

    def __repr__(self) -> str:
        return "EmptyTimeSeries()"


def _build(entries: Sequence[Entry[T]]) -> TimeSeries[T]:
    from stepseries.series.vector import build_series

    return build_series(entries)


AnyTimeSeries: TypeAlias = "EmptyTimeSeries | Entry[Any] | VectorTimeSeries[Any]"
