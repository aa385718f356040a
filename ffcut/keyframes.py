"""Move clip starts back onto keyframes so stream copies begin cleanly."""

from bisect import bisect_right
from decimal import Decimal

from ffcut.models import TimeRange


def nearest_keyframe(keyframes: list[int], at: Decimal) -> int:
    """Return the last keyframe not after *at*, or 0 if there is none."""
    i = bisect_right(keyframes, at)
    if i == 0:
        return 0
    return keyframes[i - 1]


def snap_to_keyframes(ranges: list[TimeRange], keyframes: list[int]) -> list[TimeRange]:
    """Re-anchor each start to ``nearest_keyframe``; ends are left alone.

    *keyframes* must be sorted ascending.
    """
    return [
        TimeRange(start=Decimal(nearest_keyframe(keyframes, tr.start)), end=tr.end)
        for tr in ranges
    ]
