"""Tests for core/merge.py - the entry merge algebra."""

from __future__ import annotations

import itertools

import pytest

from stepseries import (
    EInvalidArgument,
    Entry,
    Left,
    Right,
    merge,
    merge_disjoint,
    merge_either_to_none,
    merge_eithers,
    merge_overlapping,
    merge_single_to_multiple,
)


def pair(x, y):
    """Combinator keeping both sides, so every segment is visible."""
    return (x, y)


def strict_sum(x, y):
    if x is None or y is None:
        return None
    return x + y


def lenient_sum(x, y):
    return (x or 0) + (y or 0)


class TestMergeOverlapping:
    """Tests for merging overlapping entries."""

    def test_three_segments(self) -> None:
        result = merge_overlapping(Entry(0, 1, 10), Entry(5, 2, 10), pair)
        assert result == [
            Entry(0, (1, None), 5),
            Entry(5, (1, 2), 5),
            Entry(10, (None, 2), 5),
        ]

    def test_identical_domains(self) -> None:
        result = merge_overlapping(Entry(0, 1, 10), Entry(0, 2, 10), pair)
        assert result == [Entry(0, (1, 2), 10)]

    def test_shared_start(self) -> None:
        result = merge_overlapping(Entry(0, 1, 10), Entry(0, 2, 5), pair)
        assert result == [Entry(0, (1, 2), 5), Entry(5, (1, None), 5)]

    def test_shared_end(self) -> None:
        result = merge_overlapping(Entry(0, 1, 10), Entry(5, 2, 5), pair)
        assert result == [Entry(0, (1, None), 5), Entry(5, (1, 2), 5)]

    def test_contained(self) -> None:
        result = merge_overlapping(Entry(0, 1, 10), Entry(3, 2, 2), pair)
        assert result == [
            Entry(0, (1, None), 3),
            Entry(3, (1, 2), 2),
            Entry(5, (1, None), 5),
        ]

    def test_undefined_segments_dropped(self) -> None:
        result = merge_overlapping(Entry(0, 1, 10), Entry(5, 2, 10), strict_sum)
        assert result == [Entry(5, 3, 5)]

    def test_non_overlapping_raises(self) -> None:
        with pytest.raises(EInvalidArgument, match="non-overlapping"):
            merge_overlapping(Entry(0, 1, 5), Entry(5, 2, 5), pair)


class TestMergeDisjoint:
    """Tests for merging entries with disjoint domains."""

    def test_gap_projected(self) -> None:
        result = merge_disjoint(Entry(0, 1, 5), Entry(10, 2, 5), pair)
        assert result == [
            Entry(0, (1, None), 5),
            Entry(5, (None, None), 5),
            Entry(10, (None, 2), 5),
        ]

    def test_reversed_order_is_sorted(self) -> None:
        result = merge_disjoint(Entry(10, 1, 5), Entry(0, 2, 5), pair)
        assert [e.timestamp for e in result] == [0, 5, 10]
        assert result[0] == Entry(0, (None, 2), 5)
        assert result[2] == Entry(10, (1, None), 5)

    def test_contiguous_has_no_gap(self) -> None:
        result = merge_disjoint(Entry(0, 1, 5), Entry(5, 2, 5), pair)
        assert result == [Entry(0, (1, None), 5), Entry(5, (None, 2), 5)]

    def test_strict_op_yields_nothing(self) -> None:
        assert merge_disjoint(Entry(0, 1, 5), Entry(10, 2, 5), strict_sum) == []


class TestMerge:
    """Tests for the dispatching merge and its properties."""

    def test_dispatches_to_overlapping(self) -> None:
        a, b = Entry(0, 1, 10), Entry(5, 2, 10)
        assert merge(a, b, pair) == merge_overlapping(a, b, pair)

    def test_dispatches_to_disjoint(self) -> None:
        a, b = Entry(0, 1, 5), Entry(7, 2, 10)
        assert merge(a, b, pair) == merge_disjoint(a, b, pair)

    def _entries(self):
        for ts, validity in itertools.product(range(0, 8), range(1, 6)):
            yield Entry(ts, ts + 1, validity)

    def test_result_covers_union_without_gaps(self) -> None:
        """For an everywhere-defined op the result tiles [min start, max end)."""
        for a, b in itertools.product(self._entries(), repeat=2):
            result = merge(a, b, pair)
            assert result[0].timestamp == min(a.timestamp, b.timestamp)
            assert result[-1].defined_until == max(a.defined_until, b.defined_until)
            for prev, cur in zip(result, result[1:]):
                assert prev.defined_until == cur.timestamp

    def test_commutative_op_gives_commutative_merge(self) -> None:
        for a, b in itertools.product(self._entries(), repeat=2):
            assert merge(a, b, lenient_sum) == merge(b, a, lenient_sum)


class TestMergeEithers:
    """Tests for merging tagged entries."""

    def test_left_right(self) -> None:
        result = merge_eithers(Entry(0, Left(1), 10), Entry(5, Right(2), 10), pair)
        assert result == merge_overlapping(Entry(0, 1, 10), Entry(5, 2, 10), pair)

    def test_right_left_puts_left_first(self) -> None:
        result = merge_eithers(Entry(5, Right(2), 10), Entry(0, Left(1), 10), pair)
        assert result == [
            Entry(0, (1, None), 5),
            Entry(5, (1, 2), 5),
            Entry(10, (None, 2), 5),
        ]

    @pytest.mark.parametrize("tag", [Left, Right])
    def test_same_tags_raise(self, tag) -> None:
        with pytest.raises(EInvalidArgument, match="same sided"):
            merge_eithers(Entry(0, tag(1), 10), Entry(5, tag(2), 10), pair)


class TestMergeEitherToNone:
    """Tests for merging a tagged entry with an undefined side."""

    def test_left(self) -> None:
        result = merge_either_to_none(Entry(0, Left(1), 10), 2, 5, pair)
        assert result == [Entry(2, (1, None), 3)]

    def test_right(self) -> None:
        result = merge_either_to_none(Entry(0, Right(1), 10), 2, 5, pair)
        assert result == [Entry(2, (None, 1), 3)]

    def test_empty_interval(self) -> None:
        assert merge_either_to_none(Entry(0, Left(1), 10), 4, 4, pair) == []

    def test_undefined_result(self) -> None:
        assert merge_either_to_none(Entry(0, Left(1), 10), 2, 5, strict_sum) == []


class TestMergeSingleToMultiple:
    """Tests for merging one entry against a sequence of entries."""

    def test_no_others(self) -> None:
        assert merge_single_to_multiple(Entry(0, Left(1), 10), [], pair) == []

    def test_single_other_is_trimmed(self) -> None:
        result = merge_single_to_multiple(
            Entry(5, Left(1), 10), [Entry(0, Right(2), 8)], pair
        )
        assert result == [Entry(5, (1, 2), 3), Entry(8, (1, None), 7)]

    def test_multiple_others_with_gaps(self) -> None:
        others = [Entry(2, Right(10), 3), Entry(8, Right(20), 4)]
        result = merge_single_to_multiple(Entry(0, Left(1), 20), others, pair)
        assert result == [
            Entry(0, (1, None), 2),
            Entry(2, (1, 10), 3),
            Entry(5, (1, None), 3),
            Entry(8, (1, 20), 4),
            Entry(12, (1, None), 8),
        ]

    def test_multiple_others_exceeding_single(self) -> None:
        others = [Entry(-5, Right(2), 7), Entry(6, Right(3), 10)]
        result = merge_single_to_multiple(Entry(0, Left(1), 10), others, pair)
        assert result == [
            Entry(0, (1, 2), 2),
            Entry(2, (1, None), 4),
            Entry(6, (1, 3), 4),
        ]

    def test_strict_sum(self) -> None:
        others = [Entry(0, Right(2), 3), Entry(3, Right(3), 3), Entry(8, Right(4), 5)]
        result = merge_single_to_multiple(Entry(0, Left(1), 10), others, strict_sum)
        assert result == [Entry(0, 3, 3), Entry(3, 4, 3), Entry(8, 5, 2)]
