"""Explicit numeric capability passed to arithmetic operations.

Rather than resolving arithmetic from the value type, callers hand over a
``NumericOps`` describing addition, subtraction, multiplication and the
additive identity. The default ``NUMERIC`` covers int, float, Decimal,
Fraction and numpy scalars.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NumericOps:
    """Arithmetic capability for a host numeric type.

    Attributes:
        add: Binary addition
        subtract: Binary subtraction
        multiply: Binary multiplication
        zero: Additive identity
    """

    add: Callable[[Any, Any], Any] = operator.add
    subtract: Callable[[Any, Any], Any] = operator.sub
    multiply: Callable[[Any, Any], Any] = operator.mul
    zero: Any = 0


NUMERIC = NumericOps()


def ops_for(zero: Any) -> NumericOps:
    """Operator-module arithmetic with a custom additive identity.

    Useful for types whose zero is not the integer ``0``, e.g.
    ``ops_for(Decimal("0"))`` or ``ops_for(np.zeros(3))``.
    """
    return NumericOps(zero=zero)


def _strict(fn: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def combine(lhs: Any, rhs: Any) -> Any:
        if lhs is None or rhs is None:
            return None
        return fn(lhs, rhs)

    return combine


def strict_plus(ops: NumericOps = NUMERIC) -> Callable[[Any, Any], Any]:
    """Sum that is undefined wherever either side is undefined."""
    return _strict(ops.add)


def strict_minus(ops: NumericOps = NUMERIC) -> Callable[[Any, Any], Any]:
    """Difference that is undefined wherever either side is undefined."""
    return _strict(ops.subtract)


def strict_multiply(ops: NumericOps = NUMERIC) -> Callable[[Any, Any], Any]:
    """Product that is undefined wherever either side is undefined."""
    return _strict(ops.multiply)


__all__ = [
    "NumericOps",
    "NUMERIC",
    "ops_for",
    "strict_plus",
    "strict_minus",
    "strict_multiply",
]
