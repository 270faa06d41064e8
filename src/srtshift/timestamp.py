"""
Timestamp parsing for srtshift.

Converts signed SubRip-style timestamps ([+-]hh:mm:ss,mmm) into
millisecond durations and back.
"""

import re

from .utils import TimestampParseError

TIMESTAMP_PATTERN = re.compile(r"([+-]?)(\d{2}):(\d{2}):(\d{2}),(\d{3})")

# Largest value the pattern accepts; used as an "unbounded" cutoff
MAX_TIMESTAMP = "99:99:99,999"


def parse_timestamp(value: str) -> int:
    """
    Parse a signed timestamp into milliseconds.

    Field ranges are not checked, so "00:75:00,000" is 75 minutes and
    "99:99:99,999" is accepted.

    Args:
        value: Timestamp in the form [+-]hh:mm:ss,mmm

    Returns:
        Signed duration in milliseconds

    Raises:
        TimestampParseError: If the value does not match the pattern

    Example:
        >>> parse_timestamp("01:02:03,456")
        3723456
        >>> parse_timestamp("-00:00:01,500")
        -1500
    """
    match = TIMESTAMP_PATTERN.fullmatch(value)
    if match is None:
        raise TimestampParseError(
            f"Could not parse timestamp '{value}' (expected [+-]hh:mm:ss,mmm)"
        )

    sign, hours, minutes, seconds, millis = match.groups()
    total = (int(hours) * 3600 + int(minutes) * 60 + int(seconds)) * 1000 + int(millis)

    return -total if sign == "-" else total


def format_timestamp(ms: int) -> str:
    """
    Format a signed millisecond duration as [-]hh:mm:ss,mmm.

    Hours widen beyond two digits when needed.

    Example:
        >>> format_timestamp(3723456)
        '01:02:03,456'
        >>> format_timestamp(-1500)
        '-00:00:01,500'
    """
    sign = "-" if ms < 0 else ""
    ms = abs(ms)

    hours, rest = divmod(ms, 3600000)
    minutes, rest = divmod(rest, 60000)
    seconds, millis = divmod(rest, 1000)

    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"
