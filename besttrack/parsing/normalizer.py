"""Coordinate, date and numeric normalization shared by both parsers.

Best-track feeds encode values loosely:
  - Coordinates carry a hemisphere suffix ("34.4N", "76.5W"). ATCF rows use
    an implied tenths encoding with no decimal point ("221N" is 22.1N).
  - Dates are YYYYMMDD plus an optional HHMM time.
  - Numeric columns may be blank, padded, or hold sentinels such as -999.

This module is PURE: every helper returns a neutral value (0 / None)
instead of raising on bad input.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime

_HEMISPHERES = {"N": 1.0, "E": 1.0, "S": -1.0, "W": -1.0}

_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")

PRESSURE_SENTINEL = -999


def parse_coordinate(text: str) -> float:
    """Convert a source latitude/longitude string into signed decimal degrees.

    Args:
        text: Raw coordinate, e.g. "34.4N", "221N", "76.5W", "-75.5".

    Returns:
        Signed degrees (north/east positive), or 0.0 when the value is empty
        or unparseable.
    """
    clean = (text or "").strip()
    if not clean:
        return 0.0

    hemisphere = clean[-1].upper()
    if hemisphere in _HEMISPHERES:
        number_part = clean[:-1].strip()
        value = _safe_float(number_part)
        # No decimal point with a suffix means tenths of a degree
        if "." not in number_part:
            value /= 10
        return value * _HEMISPHERES[hemisphere] if value else 0.0

    return _safe_float(clean)


def parse_datetime(date_digits: str, time_digits: str | None = None) -> tuple[datetime | None, str]:
    """Combine YYYYMMDD and HHMM strings into a UTC timestamp.

    A missing or malformed time falls back to 0000. The display date is
    YYYY-MM-DD; when the date is shorter than 8 characters (or not a real
    calendar date) the original string is returned unchanged alongside a
    None timestamp, and the caller is expected to skip the row.

    Returns:
        (timestamp, display_date)
    """
    date_digits = (date_digits or "").strip()
    if len(date_digits) < 8:
        return None, date_digits

    year, month, day = date_digits[0:4], date_digits[4:6], date_digits[6:8]

    hour, minute = 0, 0
    time_digits = (time_digits or "").strip()
    if len(time_digits) >= 4 and time_digits[:4].isdigit():
        hour, minute = int(time_digits[0:2]), int(time_digits[2:4])
        if hour > 23 or minute > 59:
            hour, minute = 0, 0

    try:
        timestamp = datetime(int(year), int(month), int(day), hour, minute, tzinfo=UTC)
    except ValueError:
        return None, date_digits

    return timestamp, f"{year}-{month}-{day}"


def leading_int(value: str | None) -> int | None:
    """Parse the integer a field starts with ("75", " 12kt", "-999"), else None."""
    if not value:
        return None
    match = _LEADING_INT_PATTERN.match(value)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return None


def safe_int(value: str | None) -> int:
    """Leading integer of a field, or 0 when there is none."""
    parsed = leading_int(value)
    return parsed if parsed is not None else 0


def non_negative_int(value: str | None) -> int:
    """Leading integer clamped at 0; negative sentinels read as unknown."""
    return max(safe_int(value), 0)


def parse_pressure(value: str | None) -> int:
    """Central pressure in mb; the -999 sentinel and junk normalize to 0."""
    pressure = safe_int(value)
    if pressure == PRESSURE_SENTINEL or pressure < 0:
        return 0
    return pressure


def is_numeric_token(value: str) -> bool:
    """True when a field begins with an integer (used to reject numeric name columns)."""
    return bool(value) and _LEADING_INT_PATTERN.match(value) is not None


def _safe_float(value: str) -> float:
    try:
        result = float(value)
    except ValueError:
        return 0.0
    return result if math.isfinite(result) else 0.0
