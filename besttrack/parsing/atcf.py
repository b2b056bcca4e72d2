"""ATCF b-deck (operational best track) parser.

Every line is a flat row; there is no header. A storm is identified by
basin + cyclone number, and a single synoptic time can span several rows,
one per wind-radius threshold:

    AL, 09, 2011082712,   , BEST,   0, 344N,  765W,  75,  952, HU,  34, NEQ,  200,  200,  150,  120, ...
    AL, 09, 2011082712,   , BEST,   0, 344N,  765W,  75,  952, HU,  50, NEQ,  130,  120,   80,   70, ...
    AL, 09, 2011082712,   , BEST,   0, 344N,  765W,  75,  952, HU,  64, NEQ,   80,   70,   40,   40, ...

Rows for one timestamp are merged into a single observation: the first row
supplies the core fields, every row contributes its threshold's quadrants.

Parsing runs two passes per basin+number group:
  1. Identity: season year from the first well-formed date, storm name
     from the name columns (placeholders ignored).
  2. Observations: build and merge fixes keyed by timestamp.
"""

from __future__ import annotations

from datetime import datetime

from besttrack.common.logging import get_logger
from besttrack.common.schemas import Storm, StormObservation, WindRadii
from besttrack.parsing.names import is_generic_placeholder, placeholder_name
from besttrack.parsing.normalizer import (
    is_numeric_token,
    leading_int,
    non_negative_int,
    parse_coordinate,
    parse_datetime,
    parse_pressure,
    safe_int,
)

logger = get_logger("PARSER")

# ─── Column Offsets ───

COL_BASIN = 0
COL_NUMBER = 1
COL_DATETIME = 2  # YYYYMMDDHH
COL_LAT = 6
COL_LON = 7
COL_WIND = 8
COL_PRESSURE = 9
COL_STATUS = 10
COL_WIND_CODE = 11
COL_NE = 13
COL_SE = 14
COL_SW = 15
COL_NW = 16
COL_RMW = 19
COL_NAME_SECONDARY = 23
COL_NAME_PRIMARY = 27

MIN_ROW_FIELDS = 8
DATETIME_LENGTH = 10
MAX_HOUR = 23


def parse_atcf(lines: list[str]) -> list[Storm]:
    """Parse trimmed, non-empty ATCF rows into storms.

    Args:
        lines: Output of detector.split_lines().

    Returns:
        One storm per basin+number group that yields at least one
        observation, in order of first appearance. The storm id is the
        group key plus the season year, e.g. "AL092011".
    """
    storms: list[Storm] = []
    for group_key, rows in _group_rows(lines).items():
        storm = _parse_group(group_key, rows)
        if storm is not None:
            storms.append(storm)
    return storms


def _group_rows(lines: list[str]) -> dict[str, list[list[str]]]:
    """Bucket split rows by basin + zero-padded cyclone number (e.g. "AL09")."""
    groups: dict[str, list[list[str]]] = {}
    for line in lines:
        parts = [p.strip() for p in line.split(",")]
        if len(parts) < 2:
            continue

        basin = parts[COL_BASIN].upper()
        number = leading_int(parts[COL_NUMBER])
        if not basin or number is None:
            continue

        groups.setdefault(f"{basin}{number:02d}", []).append(parts)
    return groups


def _parse_group(group_key: str, rows: list[list[str]]) -> Storm | None:
    season_year, name = _resolve_identity(rows)
    if season_year is None:
        logger.debug(
            "Dropping group without a valid date",
            extra={"data": {"group": group_key, "rows": len(rows)}},
        )
        return None

    observations: dict[datetime, StormObservation] = {}
    skipped = 0
    for parts in rows:
        if not _merge_row(parts, observations):
            skipped += 1

    if skipped:
        logger.debug(
            "Skipped malformed operational rows",
            extra={"data": {"group": group_key, "rows_skipped": skipped}},
        )

    if not observations:
        return None

    track = sorted(observations.values(), key=lambda obs: obs.timestamp)
    return Storm(
        id=f"{group_key}{season_year}",
        name=name or placeholder_name(group_key[2:]),
        year=season_year,
        track=track,
    )


def _resolve_identity(rows: list[list[str]]) -> tuple[int | None, str | None]:
    """Find the season year and best available name for one group.

    The first well-formed date fixes the season year. The primary name
    column wins whenever it ever holds a real name (a later real name
    replaces an earlier one); the secondary column is only a fallback.
    """
    season_year: int | None = None
    primary_name: str | None = None
    secondary_name: str | None = None

    for parts in rows:
        if len(parts) < MIN_ROW_FIELDS:
            continue
        timestamp = _row_timestamp(parts[COL_DATETIME])
        if timestamp is None:
            continue

        if season_year is None:
            season_year = timestamp.year

        candidate = _field(parts, COL_NAME_PRIMARY)
        if _is_usable_name(candidate):
            primary_name = candidate

        candidate = _field(parts, COL_NAME_SECONDARY)
        if _is_usable_name(candidate):
            secondary_name = candidate

    return season_year, primary_name or secondary_name


def _merge_row(parts: list[str], observations: dict[datetime, StormObservation]) -> bool:
    """Create or update the observation for this row's timestamp.

    Returns False when the row was skipped.
    """
    if len(parts) < MIN_ROW_FIELDS:
        return False

    timestamp = _row_timestamp(parts[COL_DATETIME])
    if timestamp is None:
        return False

    observation = observations.get(timestamp)
    if observation is None:
        lat_str = _field(parts, COL_LAT)
        lon_str = _field(parts, COL_LON)
        if not lat_str or not lon_str:
            return False

        observation = StormObservation(
            date=timestamp.date(),
            time=timestamp.strftime("%H%M"),
            timestamp=timestamp,
            status=_field(parts, COL_STATUS),
            latitude=parse_coordinate(lat_str),
            longitude=parse_coordinate(lon_str),
            raw_latitude=lat_str,
            raw_longitude=lon_str,
            max_sustained_wind=non_negative_int(_field(parts, COL_WIND)),
            min_central_pressure=parse_pressure(_field(parts, COL_PRESSURE)),
            wind_radii=WindRadii(),
        )
        observations[timestamp] = observation

    rmw = safe_int(_field(parts, COL_RMW))
    if rmw > 0:
        observation.radius_of_max_wind = rmw

    observation.wind_radii.set_threshold(
        safe_int(_field(parts, COL_WIND_CODE)),
        non_negative_int(_field(parts, COL_NE)),
        non_negative_int(_field(parts, COL_SE)),
        non_negative_int(_field(parts, COL_SW)),
        non_negative_int(_field(parts, COL_NW)),
    )
    return True


def _row_timestamp(value: str) -> datetime | None:
    """UTC timestamp of a YYYYMMDDHH field, or None when it is not a real date-hour."""
    if len(value) != DATETIME_LENGTH or not value.isascii() or not value.isdigit():
        return None
    if int(value[8:10]) > MAX_HOUR:
        return None
    timestamp, _ = parse_datetime(value[:8], value[8:10] + "00")
    return timestamp


def _is_usable_name(candidate: str) -> bool:
    return bool(candidate) and not is_numeric_token(candidate) and not is_generic_placeholder(candidate)


def _field(parts: list[str], index: int) -> str:
    return parts[index] if index < len(parts) else ""
