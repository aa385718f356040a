"""Time value parsing and clock formatting.

Times are ``decimal.Decimal`` seconds. Two input notations are supported:

* seconds: a plain decimal literal, ``"15123.3"`` is 15123.3 seconds;
* clock: digits read two at a time from the right as base-60 places, so
  ``"15123.3"`` is 1 hour, 51 minutes and 23 seconds plus the fraction.
"""

import re
from decimal import Decimal, InvalidOperation

from ffcut.errors import DigitOutOfRangeError, MalformedNumberError

_DECIMAL_LITERAL = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")
_DIGITS = re.compile(r"[0-9]+")


def parse_seconds(token: str) -> Decimal:
    """Parse a raw seconds value such as ``"90"`` or ``"12.75"``."""
    if not _DECIMAL_LITERAL.fullmatch(token):
        raise MalformedNumberError(f"invalid number of seconds: {token!r}")
    try:
        return Decimal(token)
    except InvalidOperation as e:
        raise MalformedNumberError(f"invalid number of seconds: {token!r}") from e


def _split_fraction(token: str) -> tuple[str, int]:
    parts = token.split(".")
    if len(parts) > 2:
        raise MalformedNumberError(f"invalid string to be parsed as clock: {token!r}")

    integer = parts[0]
    fraction = parts[1] if len(parts) == 2 else ""
    if not fraction:
        return integer, 0
    if not _DIGITS.fullmatch(fraction):
        raise MalformedNumberError(f"invalid fraction in clock value: {fraction!r}")
    return integer, int(fraction)


def parse_clock(token: str) -> Decimal:
    """Parse clock notation: ``"130"`` is 1:30, ``"10203"`` is 1:02:03.

    The fraction is carried over as written (after dropping leading zeros),
    not rescaled: ``"130.25"`` becomes ``Decimal("90.25")``.
    """
    integer, fraction = _split_fraction(token)
    if len(integer) % 2 == 1:
        integer = "0" + integer

    seconds = 0
    multiplier = 1
    for i in range(len(integer) // 2 - 1, -1, -1):
        group = integer[i * 2:i * 2 + 2]
        if not _DIGITS.fullmatch(group) or int(group) >= 60:
            raise DigitOutOfRangeError(group, i, integer)
        seconds += multiplier * int(group)
        multiplier *= 60

    if fraction > 0:
        return Decimal(f"{seconds}.{fraction}")
    return Decimal(seconds)


def parse_time(token: str, seconds: bool = False) -> Decimal:
    if seconds:
        return parse_seconds(token)
    return parse_clock(token)


def int_to_clock(seconds: int) -> str:
    """Render whole seconds as ``H:MM:SS`` with a single leading zero dropped."""
    groups: list[str] = []
    while True:
        seconds, n = divmod(seconds, 60)
        groups.append(f"{n:02d}")
        if seconds == 0:
            break

    joined = ":".join(reversed(groups))
    if joined.startswith("0"):
        return joined[1:]
    return joined


def format_clock(value: Decimal) -> str:
    """Format a time for ffmpeg's ``-ss``/``-t`` arguments.

    Only the integer part is rendered. A positive storage exponent (values
    such as ``Decimal("9E+1")``) is appended after a dot.
    """
    text = int_to_clock(int(value))
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent > 0:
        return f"{text}.{exponent}"
    return text
