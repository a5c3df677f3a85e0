"""
Duration strings such as "1h30m", "300ms" or "-1.5s".

A duration is an optionally signed sequence of decimal numbers, each with an
optional fraction and a required unit. Valid units are "ns", "us" (or "µs"),
"ms", "s", "m" and "h". The bare string "0" is also accepted.
"""

import re
from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)", re.ASCII)

# Largest magnitude a duration may have (a signed 64-bit nanosecond count).
MAX_DURATION_NS = (1 << 63) - 1


def parse_duration_ns(s: str) -> int:
    """
    Parse a duration string into a signed count of nanoseconds.

    Raises:
        ValueError: If the string is not a valid duration
    """
    orig = s
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ValueError(f'invalid duration "{orig}"')

    limit = MAX_DURATION_NS + 1 if negative else MAX_DURATION_NS

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not frac:
            raise ValueError(f'invalid duration "{orig}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{orig}"')
        if unit not in UNITS:
            raise ValueError(f'unknown unit "{unit}" in duration "{orig}"')

        scale = UNITS[unit]
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // (10 ** len(frac))
        if total > limit:
            raise ValueError(f'invalid duration "{orig}"')
        pos = match.end()

    return -total if negative else total


def parse_duration(s: str) -> timedelta:
    """Parse a duration string into a timedelta (microsecond resolution)."""
    ns = parse_duration_ns(s)
    # Truncate toward zero like integer division on the magnitude.
    micros = abs(ns) // MICROSECOND
    return timedelta(microseconds=-micros if ns < 0 else micros)
