"""Build validated time ranges from raw pairs and pad them with context."""

from decimal import Decimal

from ffcut.errors import InvalidIntervalError, NegativeContextError
from ffcut.models import ContextSpec, TimeRange
from ffcut.timecode import parse_time

EPSILON = Decimal("0.000001")


def build_intervals(pairs: list[tuple[str, str]], seconds: bool = False) -> list[TimeRange]:
    """Parse every ``(start, end)`` pair; the first bad pair aborts the build."""
    ranges: list[TimeRange] = []
    for pair in pairs:
        tr = TimeRange(start=parse_time(pair[0], seconds), end=parse_time(pair[1], seconds))
        if not tr.is_valid():
            raise InvalidIntervalError(f"invalid interval: {tr} ({pair[0]}-{pair[1]})")
        ranges.append(tr)
    return ranges


def resolve_context(context: ContextSpec) -> ContextSpec | None:
    """Fill unset before/after from ``around``; None means no padding at all."""
    if context.before < EPSILON and context.after < EPSILON and context.around < EPSILON:
        return None

    before = context.around if context.before < EPSILON else context.before
    after = context.around if context.after < EPSILON else context.after

    if before < 0 or after < 0:
        raise NegativeContextError(
            f"context must not be negative (before={before}, after={after})"
        )
    return ContextSpec(before=before, after=after, around=context.around)


def adjust_times(ranges: list[TimeRange], context: ContextSpec) -> list[TimeRange]:
    """Widen every range by the resolved context, clamping starts at zero."""
    resolved = resolve_context(context)
    if resolved is None:
        return ranges

    return [
        TimeRange(
            start=max(Decimal(0), tr.start - resolved.before),
            end=tr.end + resolved.after,
        )
        for tr in ranges
    ]
