"""Configuration for building and converting time series.

A single frozen config class holds the few knobs the library exposes:
whether convenience constructors validate their input eagerly, and the
column names used when converting to and from pandas DataFrames.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesConfig:
    """Minimal configuration for time-series construction.

    Args:
        validate: Check sortedness and non-overlap when building a
            sequence-backed series through ``VectorTimeSeries.of_entries``
            or when reading entries from a DataFrame
        time_col: Column name for entry start timestamps
        value_col: Column name for entry values
        validity_col: Column name for entry validity durations
    """

    validate: bool = False

    # Column names (frame contract)
    time_col: str = "ts"
    value_col: str = "value"
    validity_col: str = "validity"

    def __post_init__(self) -> None:
        columns = [self.time_col, self.value_col, self.validity_col]
        if any(not c for c in columns):
            raise ValueError(f"column names must be non-empty, got {columns}")
        if len(set(columns)) != len(columns):
            raise ValueError(f"column names must be distinct, got {columns}")

    @classmethod
    def lenient(cls) -> SeriesConfig:
        """Caller-enforced ordering: entries are sorted but never checked."""
        return cls(validate=False)

    @classmethod
    def strict(cls) -> SeriesConfig:
        """Strict preset - fails fast on unsorted or overlapping entries."""
        return cls(validate=True)

    @property
    def columns(self) -> list[str]:
        """Frame columns in canonical order."""
        return [self.time_col, self.value_col, self.validity_col]


DEFAULT_CONFIG = SeriesConfig()
