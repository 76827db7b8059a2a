"""Merge algebra for entries.

Two entries are merged under a caller-supplied combinator
``op(a_value | None, b_value | None) -> result | None``. The result is a
sorted list of entries covering the union of both domains, split wherever
either side's definedness changes. Segments for which ``op`` returns None
produce no entry.

If ``op`` is commutative, so is ``merge``:
``merge(a, b, op) == merge(b, a, op)`` only if ``op(x, y) == op(y, x)``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from stepseries.core.entry import Entry, Left, Right
from stepseries.core.errors import EInvalidArgument
from stepseries.core.types import Combinator, Time


def merge(a: Entry[Any], b: Entry[Any], op: Combinator) -> list[Entry[Any]]:
    """Merge two entries.

    The domain covered by the returned entries (including potential
    discontinuities) spans from ``min(a.timestamp, b.timestamp)`` to
    ``max(a.defined_until, b.defined_until)``.
    """
    if not a.overlaps(b):
        return merge_disjoint(a, b, op)
    return merge_overlapping(a, b, op)


def merge_disjoint(a: Entry[Any], b: Entry[Any], op: Combinator) -> list[Entry[Any]]:
    """Merge two entries with disjoint domains.

    Each entry is projected through ``op`` on its own; a gap between the two
    domains is projected through ``op(None, None)``.
    """
    result: list[Entry[Any]] = []
    left = op(a.value, None)
    if left is not None:
        result.append(Entry(a.timestamp, left, a.validity))
    gap = _apply_undefined(
        min(a.defined_until, b.defined_until), max(a.timestamp, b.timestamp), op
    )
    if gap is not None:
        result.append(gap)
    right = op(None, b.value)
    if right is not None:
        result.append(Entry(b.timestamp, right, b.validity))
    return sorted(result, key=lambda e: e.timestamp)


def merge_overlapping(a: Entry[Any], b: Entry[Any], op: Combinator) -> list[Entry[Any]]:
    """Merge two overlapping entries into one to three segments.

    - one entry if ``a`` and ``b`` share the exact same domain
    - two entries if they share one bound of their domain
    - three entries if the domains overlap without sharing a bound

    Raises:
        EInvalidArgument: If the domains do not overlap
    """
    middle_from = max(a.timestamp, b.timestamp)
    middle_to = min(a.defined_until, b.defined_until)
    if middle_from >= middle_to:
        raise EInvalidArgument(
            "This function cannot merge non-overlapping entries.",
            context={"a": a, "b": b},
        )

    result: list[Entry[Any]] = []
    # Leading part, where only the earlier entry is defined
    result.extend(_merge_values(a, b, min(a.timestamp, b.timestamp), middle_from, op))
    # Both defined
    result.extend(_merge_values(a, b, middle_from, middle_to, op))
    # Trailing part, where only the later-ending entry is defined
    result.extend(
        _merge_values(a, b, middle_to, max(a.defined_until, b.defined_until), op)
    )
    return result


def merge_eithers(a: Entry[Any], b: Entry[Any], op: Combinator) -> list[Entry[Any]]:
    """Merge two overlapping entries tagged ``Left`` and ``Right``.

    The order of the arguments does not matter: the ``Left`` value is always
    passed as the first argument to ``op``.

    Raises:
        EInvalidArgument: If both entries carry the same tag
    """
    if isinstance(a.value, Left) and isinstance(b.value, Right):
        left, right = a, b
    elif isinstance(a.value, Right) and isinstance(b.value, Left):
        left, right = b, a
    else:
        raise EInvalidArgument(
            f"Can't pass two entries with same sided tags: {a}, {b}",
            context={"a": a, "b": b},
        )
    return merge_overlapping(
        Entry(left.timestamp, left.value.value, left.validity),
        Entry(right.timestamp, right.value.value, right.validity),
        op,
    )


def merge_either_to_none(
    e: Entry[Any], at: Time, until: Time, op: Combinator
) -> list[Entry[Any]]:
    """Merge a tagged entry against an undefined other side over ``[at, until)``."""
    if at == until:
        return []
    value = e.at(at)
    if isinstance(e.value, Left):
        merged = op(None if value is None else value.value, None)
    else:
        merged = op(None, None if value is None else value.value)
    if merged is None:
        return []
    return [Entry(at, merged, until - at)]


def merge_single_to_multiple(
    single: Entry[Any], others: Sequence[Entry[Any]], op: Combinator
) -> list[Entry[Any]]:
    """Merge the ``single`` tagged entry to the ``others``.

    ``others`` must be sorted, non-overlapping, tagged with the opposite side
    and each overlap ``single``. The domain of ``single`` is used: parts of
    the others lying outside of it are not merged.
    """
    if not others:
        return []
    trimmed = [
        o.trim_entry_left_n_right(single.timestamp, single.defined_until) for o in others
    ]
    if len(trimmed) == 1:
        return merge_eithers(single, trimmed[0], op)

    # Undefined domain before the first other
    result = merge_either_to_none(single, single.timestamp, trimmed[0].timestamp, op)
    # Pairs of others delimit the part of 'single' each one is merged with,
    # including a potential undefined space between them
    for current, following in zip(trimmed, trimmed[1:]):
        part = single.trim_entry_left_n_right(current.timestamp, following.timestamp)
        result.extend(merge_eithers(part, current, op))
    last = trimmed[-1]
    part = single.trim_entry_left_n_right(last.timestamp, last.defined_until)
    result.extend(merge_eithers(part, last, op))
    # Undefined domain after the last other
    result.extend(merge_either_to_none(single, last.defined_until, single.defined_until, op))
    return result


def _merge_values(
    a: Entry[Any], b: Entry[Any], at: Time, until: Time, op: Combinator
) -> list[Entry[Any]]:
    # Zero-length segments contribute nothing
    if at == until:
        return []
    merged = op(a.at(at), b.at(at))
    if merged is None:
        return []
    return [Entry(at, merged, until - at)]


def _apply_undefined(at: Time, until: Time, op: Combinator) -> Entry[Any] | None:
    if at == until:
        return None
    merged = op(None, None)
    if merged is None:
        return None
    return Entry(at, merged, until - at)


__all__ = [
    "merge",
    "merge_disjoint",
    "merge_overlapping",
    "merge_eithers",
    "merge_either_to_none",
    "merge_single_to_multiple",
]
