"""Tests for keyframe snapping."""

from decimal import Decimal

from ffcut.keyframes import nearest_keyframe, snap_to_keyframes
from ffcut.models import TimeRange

KEYFRAMES = [0, 4, 8, 12, 16]


class TestNearestKeyframe:
    def test_exact_hit(self):
        assert nearest_keyframe(KEYFRAMES, Decimal(8)) == 8

    def test_between(self):
        assert nearest_keyframe(KEYFRAMES, Decimal("11.9")) == 8

    def test_after_last(self):
        assert nearest_keyframe(KEYFRAMES, Decimal(100)) == 16

    def test_before_first(self):
        assert nearest_keyframe([5, 10], Decimal(3)) == 0

    def test_no_keyframes(self):
        assert nearest_keyframe([], Decimal(30)) == 0


class TestSnapToKeyframes:
    def test_start_moves_end_stays(self):
        ranges = [TimeRange(start=Decimal(10), end=Decimal(20))]
        assert snap_to_keyframes(ranges, KEYFRAMES) == [
            TimeRange(start=Decimal(8), end=Decimal(20))
        ]

    def test_below_smallest_keyframe(self):
        ranges = [TimeRange(start=Decimal(2), end=Decimal(6))]
        assert snap_to_keyframes(ranges, [5, 10]) == [
            TimeRange(start=Decimal(0), end=Decimal(6))
        ]
