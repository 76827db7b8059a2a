"""Shared type definitions for stepseries.

Type aliases used across modules for clarity and consistency.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

# Discrete time: integer instants, durations in the same unit
Time = int

# Generic type variables
T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

# Combining operator: receives each side's value (or None where a side is
# undefined) and returns the combined value, or None for "undefined".
Combinator = Callable[[A | None, B | None], R | None]

__all__ = [
    "Time",
    "T",
    "A",
    "B",
    "R",
    "Combinator",
]
