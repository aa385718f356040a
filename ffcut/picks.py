"""Pick which of the computed parts to materialize."""

from ffcut.errors import InvalidPickIndexError
from ffcut.models import TimeRange


def parse_picks(value: str | None) -> set[int]:
    """Parse a 1-based comma list into zero-based indices.

    An empty or missing value gives an empty set, which keeps every part.
    """
    if value is None or not value.strip():
        return set()

    picks: set[int] = set()
    for entry in value.split(","):
        try:
            picks.add(int(entry.strip()) - 1)
        except ValueError as e:
            raise InvalidPickIndexError(f"invalid pick entry: {entry!r}") from e
    return picks


def select_parts(ranges: list[TimeRange], picks: set[int]) -> list[tuple[int, TimeRange]]:
    """Return ``(part_number, range)`` for every retained range.

    ``part_number`` is the 1-based position in *ranges*, so output names
    match the numbering the user picked from.
    """
    return [
        (i + 1, tr)
        for i, tr in enumerate(ranges)
        if not picks or i in picks
    ]
