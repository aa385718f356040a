"""Split command-line time markers into (start, end) string pairs."""

import re

_TIME_TOKEN = re.compile(r"[0-9,.\-]+")

# Clock value far beyond any real runtime, used for open-ended ranges.
END_OF_MEDIA = "240000"


def is_time_token(arg: str) -> bool:
    """Return True if *arg* consists only of digits, ``,``, ``.`` and ``-``."""
    return _TIME_TOKEN.fullmatch(arg) is not None


def parse_block(block: str) -> list[tuple[str, str]]:
    """Turn ``"10-20-30"`` into ``[("10", "20"), ("20", "30")]``.

    A leading ``-`` opens the range at zero and a trailing ``-`` runs it to
    the end of the media. Blocks holding a single number yield nothing.
    """
    if not block:
        return []

    if block.startswith("-"):
        block = "0" + block
    if block.endswith("-"):
        block += END_OF_MEDIA

    times = block.split("-")
    return list(zip(times, times[1:]))


def collect_times(args: list[str]) -> list[tuple[str, str]]:
    """Gather the raw time pairs from every time-bearing argument, in order."""
    pairs: list[tuple[str, str]] = []
    for arg in args:
        if not is_time_token(arg):
            continue
        for block in arg.split(","):
            pairs.extend(parse_block(block))
    return pairs
