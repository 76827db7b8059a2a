"""Entry data validation.

The sorted, non-overlapping invariant is assumed by every query. These
helpers check it explicitly for callers that want to fail fast.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from stepseries.core.config import SeriesConfig
from stepseries.core.entry import Entry
from stepseries.core.errors import EContractViolation


class EntryFrameContract(BaseModel):
    """Column-level contract for entries stored in a DataFrame."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    time_col: str = "ts"
    value_col: str = "value"
    validity_col: str = "validity"

    @model_validator(mode="after")
    def check_distinct_columns(self) -> EntryFrameContract:
        columns = self.columns
        if len(set(columns)) != len(columns):
            raise ValueError(f"column names must be distinct, got {columns}")
        return self

    @property
    def columns(self) -> list[str]:
        return [self.time_col, self.value_col, self.validity_col]

    @classmethod
    def from_config(cls, config: SeriesConfig) -> EntryFrameContract:
        return cls(
            time_col=config.time_col,
            value_col=config.value_col,
            validity_col=config.validity_col,
        )


def find_violation(entries: Sequence[Entry[Any]]) -> dict[str, Any] | None:
    """Describe the first pair of entries breaking the ordering invariant.

    Returns:
        None if entries are sorted and non-overlapping, otherwise a dict
        with the offending index, timestamps and the kind of violation
    """
    for idx in range(1, len(entries)):
        previous, current = entries[idx - 1], entries[idx]
        if current.timestamp < previous.timestamp:
            kind = "unsorted"
        elif current.timestamp < previous.defined_until:
            kind = "overlap"
        else:
            continue
        return {
            "kind": kind,
            "index": idx,
            "previous": (previous.timestamp, previous.defined_until),
            "current": (current.timestamp, current.defined_until),
        }
    return None


def validate_entries(entries: Sequence[Entry[Any]]) -> None:
    """Check that entries are sorted by timestamp and do not overlap.

    Raises:
        EContractViolation: On the first offending pair of entries
    """
    violation = find_violation(entries)
    if violation is not None:
        raise EContractViolation(
            f"Entries are {violation['kind']} at index {violation['index']}",
            context=violation,
        )


__all__ = ["EntryFrameContract", "find_violation", "validate_entries"]
