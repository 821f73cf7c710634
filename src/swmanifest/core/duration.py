"""Parsing of compact duration strings such as "3d12h"."""

from __future__ import annotations

import re

from swmanifest.core.exceptions import MalformedDurationError


_PARSE_TO_PAIRS = re.compile(r"[0-9]+[^0-9]+")
_PAIR_SPLIT = re.compile(r"([0-9]+)([^0-9]+)")

UNIT_FACTORS_MS: dict[str, int] = {
    "d": 86_400_000,
    "h": 3_600_000,
    "m": 60_000,
    "s": 1_000,
    "u": 1,
}


def parse_duration_ms(duration: str) -> int:
    """Convert a duration string into milliseconds.

    The string is scanned for ``<digits><unit>`` pairs which are summed.
    Valid units are d, h, m, s and u (milliseconds).

    Args:
        duration: Duration such as "1d12h" or "500u".

    Returns:
        Total duration in milliseconds. A string without any pairs
        (e.g. "") yields 0.

    Raises:
        MalformedDurationError: If a pair's unit is not one of d/h/m/s/u.

    Examples:
        >>> parse_duration_ms("1d12h")
        129600000
        >>> parse_duration_ms("30m")
        1800000
    """
    total = 0
    for pair in _PARSE_TO_PAIRS.findall(duration):
        match = _PAIR_SPLIT.fullmatch(pair)
        # Guaranteed by _PARSE_TO_PAIRS; the unit is what can be wrong.
        assert match is not None
        magnitude, unit = match.groups()
        factor = UNIT_FACTORS_MS.get(unit)
        if factor is None:
            raise MalformedDurationError(duration, unit)
        total += int(magnitude) * factor
    return total
