"""Clock-time helpers for course schedules."""

import re
from typing import Optional

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")

_REMOTE_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")


def is_valid_time(value: str) -> bool:
    """Check whether a string is a valid ``HH:MM`` clock time.

    Single-digit hours (``9:05``) are accepted.

    Examples:
        >>> is_valid_time("09:30")
        True
        >>> is_valid_time("24:00")
        False
    """
    return bool(TIME_PATTERN.match(value))


def time_to_minutes(value: str) -> int:
    """Convert ``HH:MM`` to minutes after midnight.

    Args:
        value: Clock time string

    Returns:
        Minute offset

    Raises:
        ValueError: If the string is not a valid clock time

    Example:
        >>> time_to_minutes("10:30")
        630
    """
    if not is_valid_time(value):
        raise ValueError(f"Invalid time: {value!r}")

    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Convert minutes after midnight to ``HH:MM``.

    Example:
        >>> minutes_to_time(630)
        '10:30'
    """
    if not 0 <= minutes < 24 * 60:
        raise ValueError(f"Minute offset out of range: {minutes}")

    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_remote_time(value: Optional[str]) -> Optional[str]:
    """Reduce a database time value (``HH:MM:SS``) to ``HH:MM``.

    Empty values become None. Strings that do not look like a time are
    returned unchanged so that validation can reject them.

    Examples:
        >>> normalize_remote_time("10:00:00")
        '10:00'
        >>> normalize_remote_time("")
    """
    if not value:
        return None

    match = _REMOTE_TIME_PATTERN.match(value)
    if not match:
        return value

    return f"{match.group(1)}:{match.group(2)}"
