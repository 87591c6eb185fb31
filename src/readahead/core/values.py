"""Pure validators for numeric and duration option values.

Each parser accepts the raw option text and returns a strictly positive
value or raises :class:`~readahead.exceptions.ValidationError` echoing
the offending input.  Nothing is clamped.
"""

from __future__ import annotations

import re
from datetime import timedelta

from readahead.exceptions import ValidationError


UINT32_MAX: int = 2**32 - 1
UINT64_MAX: int = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+")

# A duration is one or more "<integer><unit>" components, optionally
# separated by whitespace.  A bare integer means seconds.
_DURATION_COMPONENT = re.compile(r"\s*([0-9]+)\s*([a-z]*)")

_DURATION_UNITS: dict[str, timedelta] = {
    "": timedelta(seconds=1),
    "us": timedelta(microseconds=1),
    "usec": timedelta(microseconds=1),
    "ms": timedelta(milliseconds=1),
    "msec": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "sec": timedelta(seconds=1),
    "second": timedelta(seconds=1),
    "seconds": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "minute": timedelta(minutes=1),
    "minutes": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "hr": timedelta(hours=1),
    "hour": timedelta(hours=1),
    "hours": timedelta(hours=1),
    "d": timedelta(days=1),
    "day": timedelta(days=1),
    "days": timedelta(days=1),
    "w": timedelta(weeks=1),
    "week": timedelta(weeks=1),
    "weeks": timedelta(weeks=1),
}


def _parse_unsigned(text: str, upper: int) -> int | None:
    """Return *text* as an int in ``[0, upper]`` or ``None`` if malformed.

    Only plain decimal digits are accepted, with surrounding whitespace
    tolerated.  Signs, underscores and other bases are rejected.
    """
    stripped = text.strip()
    if not _DIGITS.fullmatch(stripped):
        return None
    value = int(stripped)
    if value > upper:
        return None
    return value


def parse_files_max(text: str) -> int:
    """Parse ``--files-max``: a positive unsigned 32-bit integer."""
    value = _parse_unsigned(text, UINT32_MAX)
    if value is None or value <= 0:
        raise ValidationError(f"Failed to parse maximum number of files {text}.")
    return value


def parse_file_size_max(text: str) -> int:
    """Parse ``--file-size-max``: a positive unsigned 64-bit byte count."""
    value = _parse_unsigned(text, UINT64_MAX)
    if value is None or value <= 0:
        raise ValidationError(f"Failed to parse maximum file size {text}.")
    return value


def parse_duration(text: str) -> timedelta:
    """Parse a seconds-based duration such as ``30``, ``500ms`` or ``1min 30s``.

    Components are summed.  Unknown units, negative numbers, empty input
    and a zero total all fail.
    """
    stripped = text.strip().lower()
    total = timedelta()
    position = 0
    while position < len(stripped):
        match = _DURATION_COMPONENT.match(stripped, position)
        if match is None or match.group(2) not in _DURATION_UNITS:
            raise ValidationError(f"Failed to parse timeout {text}.")
        total += int(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()
    return total


def parse_timeout(text: str) -> timedelta:
    """Parse ``--timeout``: a strictly positive duration."""
    try:
        value = parse_duration(text)
    except OverflowError:
        raise ValidationError(f"Failed to parse timeout {text}.") from None
    if value <= timedelta():
        raise ValidationError(f"Failed to parse timeout {text}.")
    return value
