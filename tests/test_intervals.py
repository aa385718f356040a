"""Tests for interval building and context padding."""

from decimal import Decimal

import pytest

from ffcut.errors import InvalidIntervalError, MalformedNumberError, NegativeContextError
from ffcut.intervals import adjust_times, build_intervals, resolve_context
from ffcut.models import ContextSpec, TimeRange


def _tr(start, end) -> TimeRange:
    return TimeRange(start=Decimal(start), end=Decimal(end))


class TestBuildIntervals:
    def test_clock_mode(self):
        assert build_intervals([("0", "130")]) == [_tr(0, 90)]

    def test_seconds_mode(self):
        assert build_intervals([("0", "130")], seconds=True) == [_tr(0, 130)]

    def test_sliding_pairs(self):
        ranges = build_intervals([("10", "20"), ("20", "30")], seconds=True)
        assert ranges == [_tr(10, 20), _tr(20, 30)]

    def test_empty_range_allowed(self):
        assert build_intervals([("15", "15")]) == [_tr(15, 15)]

    def test_start_after_end_rejected(self):
        with pytest.raises(InvalidIntervalError, match="20-10"):
            build_intervals([("0", "5"), ("20", "10")])

    def test_clock_ordering_differs_from_seconds(self):
        # on the clock 130 is 1:30 and 100 is 1:00
        with pytest.raises(InvalidIntervalError):
            build_intervals([("130", "100")])

    def test_malformed_token_aborts(self):
        with pytest.raises(MalformedNumberError):
            build_intervals([("10", "")], seconds=True)

    def test_duration_derived(self):
        (tr,) = build_intervals([("1.25", "3.5")], seconds=True)
        assert tr.duration == Decimal("2.25")


class TestResolveContext:
    def test_no_context(self):
        assert resolve_context(ContextSpec()) is None

    def test_around_fills_both(self):
        resolved = resolve_context(ContextSpec(around=Decimal(3)))
        assert resolved.before == Decimal(3)
        assert resolved.after == Decimal(3)

    def test_explicit_value_wins(self):
        resolved = resolve_context(ContextSpec(before=Decimal(1), around=Decimal(3)))
        assert resolved.before == Decimal(1)
        assert resolved.after == Decimal(3)

    def test_negative_around_rejected(self):
        with pytest.raises(NegativeContextError):
            resolve_context(ContextSpec(after=Decimal(1), around=Decimal(-2)))

    def test_negative_before_replaced_by_around(self):
        resolved = resolve_context(ContextSpec(before=Decimal(-1), around=Decimal(2)))
        assert resolved.before == Decimal(2)


class TestAdjustTimes:
    def test_zero_context_is_identity(self):
        ranges = [_tr(10, 20), _tr(0, 5)]
        assert adjust_times(ranges, ContextSpec()) == ranges

    def test_padding(self):
        ranges = adjust_times([_tr(10, 20)], ContextSpec(before=Decimal(2), after=Decimal("1.5")))
        assert ranges == [TimeRange(start=Decimal(8), end=Decimal("21.5"))]

    def test_start_clamped_at_zero(self):
        ranges = adjust_times([_tr(1, 5)], ContextSpec(around=Decimal(3)))
        assert ranges == [_tr(0, 8)]
