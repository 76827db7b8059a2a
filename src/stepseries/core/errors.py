"""Core error types with rich context.

Two kinds of failure exist in stepseries, both signalling caller misuse:
invalid arguments (bad trims, bad window lengths, mismatched merge tags)
and contract violations (unsorted or overlapping entry data). Undefined
values are never errors: queries return ``None`` instead.
"""

from __future__ import annotations

from typing import Any


class StepSeriesError(Exception):
    """Base exception with rich context.

    All errors in stepseries use this class with specific error_code
    values instead of creating many subclasses.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EInvalidArgument(StepSeriesError, ValueError):
    """An argument lies outside the domain an operation accepts."""

    error_code = "E_INVALID_ARGUMENT"
    fix_hint = "Check trim bounds and window lengths against the entry domains"


class EContractViolation(StepSeriesError, ValueError):
    """Entry data violates the sorted, non-overlapping contract."""

    error_code = "E_CONTRACT_VIOLATION"
    fix_hint = "Entries must be sorted by timestamp and must not overlap"


# Error registry for lookup
ERROR_REGISTRY: dict[str, type[StepSeriesError]] = {
    "E_INVALID_ARGUMENT": EInvalidArgument,
    "E_CONTRACT_VIOLATION": EContractViolation,
}


def get_error_class(error_code: str) -> type[StepSeriesError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, StepSeriesError)
