"""HURDAT2 archive parser.

The archive interleaves header lines and data lines:

    AL092011,              IRENE,     39,
    20110827, 1200, L, HU, 34.4N,  76.5W,  75,  952,  ...

A header introduces a storm; every following data line belongs to it until
the next header. The row count in the header is informational only; the
parser trusts the rows actually present.

Data-line columns (comma-split, trimmed):

    0 date   1 time   2 record id   3 status   4 lat   5 lon   6 wind   7 pressure
    8-11 34 kt NE/SE/SW/NW   12-15 50 kt   16-19 64 kt   20 radius of max wind
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from besttrack.common.logging import get_logger
from besttrack.common.schemas import (
    WIND_THRESHOLDS,
    RecordFlag,
    Storm,
    StormObservation,
    WindRadii,
)
from besttrack.parsing.normalizer import (
    non_negative_int,
    parse_coordinate,
    parse_datetime,
    parse_pressure,
    safe_int,
)

logger = get_logger("PARSER")

_HEADER_ID_PATTERN = re.compile(r"^[A-Z]{2}\d{6}")

# ─── Column Offsets ───

HEADER_ID = 0
HEADER_NAME = 1

COL_DATE = 0
COL_TIME = 1
COL_RECORD_ID = 2
COL_STATUS = 3
COL_LAT = 4
COL_LON = 5
COL_WIND = 6
COL_PRESSURE = 7
COL_RADII_START = 8  # 12 columns: NE/SE/SW/NW for 34, 50, 64 kt
COL_RMW = 20

MIN_DATA_FIELDS = 4
MIN_HEADER_DATA_BOUNDARY = 10  # headers have fewer fields than any data row
MIN_STRUCTURE_FIELDS = 20


@dataclass
class _StormBuilder:
    id: str
    name: str
    year: int
    track: list[StormObservation] = field(default_factory=list)


def parse_hurdat(lines: list[str]) -> list[Storm]:
    """Parse trimmed, non-empty HURDAT2 lines into storms.

    Storms appear in the order their first header appears. Data lines
    before any header, and rows lacking a date or position, are skipped.
    A repeated header for an id already seen moves the cursor back to
    that storm without resetting its track.

    Args:
        lines: Output of detector.split_lines().

    Returns:
        Storms with non-empty, chronologically sorted tracks.
    """
    builders: dict[str, _StormBuilder] = {}
    current: _StormBuilder | None = None
    skipped = 0

    for line in lines:
        parts = [p.strip() for p in line.split(",")]

        if _is_header(parts):
            storm_id = parts[HEADER_ID]
            if storm_id not in builders:
                builders[storm_id] = _StormBuilder(
                    id=storm_id,
                    name=_field(parts, HEADER_NAME) or "UNNAMED",
                    year=int(storm_id[4:8]),
                )
            current = builders[storm_id]
            continue

        if current is None or len(parts) < MIN_DATA_FIELDS:
            skipped += 1
            continue

        observation = _build_observation(parts)
        if observation is None:
            skipped += 1
            continue
        current.track.append(observation)

    storms: list[Storm] = []
    for builder in builders.values():
        if not builder.track:
            logger.debug(
                "Dropping storm with empty track",
                extra={"data": {"storm_id": builder.id}},
            )
            continue
        builder.track.sort(key=lambda obs: obs.timestamp)
        storms.append(
            Storm(id=builder.id, name=builder.name, year=builder.year, track=builder.track)
        )

    if skipped:
        logger.debug(
            "Skipped malformed archive rows",
            extra={"data": {"rows_skipped": skipped}},
        )
    return storms


def _is_header(parts: list[str]) -> bool:
    first = parts[HEADER_ID]
    return (
        len(first) == 8
        and _HEADER_ID_PATTERN.match(first) is not None
        and len(parts) < MIN_HEADER_DATA_BOUNDARY
    )


def _field(parts: list[str], index: int) -> str:
    return parts[index] if index < len(parts) else ""


def _build_observation(parts: list[str]) -> StormObservation | None:
    date_str = _field(parts, COL_DATE)
    lat_str = _field(parts, COL_LAT)
    lon_str = _field(parts, COL_LON)
    if not date_str or not lat_str or not lon_str:
        return None

    timestamp, _ = parse_datetime(date_str, _field(parts, COL_TIME))
    if timestamp is None:
        return None

    wind_radii, radius_of_max_wind = _extract_structure(parts)
    record_identifier = _field(parts, COL_RECORD_ID)

    return StormObservation(
        date=timestamp.date(),
        time=timestamp.strftime("%H%M"),
        timestamp=timestamp,
        record_identifier=record_identifier,
        record_flag=RecordFlag.from_identifier(record_identifier),
        status=_field(parts, COL_STATUS),
        latitude=parse_coordinate(lat_str),
        longitude=parse_coordinate(lon_str),
        raw_latitude=lat_str,
        raw_longitude=lon_str,
        max_sustained_wind=non_negative_int(_field(parts, COL_WIND)),
        min_central_pressure=parse_pressure(_field(parts, COL_PRESSURE)),
        wind_radii=wind_radii,
        radius_of_max_wind=radius_of_max_wind,
    )


def _extract_structure(parts: list[str]) -> tuple[WindRadii | None, int | None]:
    """Read the optional radii/RMW columns.

    Radii are only reported when at least one of the twelve values is
    positive; an all-zero (or all-missing) block stays absent.
    """
    if len(parts) < MIN_STRUCTURE_FIELDS:
        return None, None

    values = [safe_int(parts[i]) for i in range(COL_RADII_START, COL_RADII_START + 12)]

    wind_radii = None
    if any(v > 0 for v in values):
        radii = [max(v, 0) for v in values]
        wind_radii = WindRadii()
        for offset, threshold in enumerate(WIND_THRESHOLDS):
            wind_radii.set_threshold(threshold, *radii[offset * 4 : offset * 4 + 4])

    rmw = safe_int(_field(parts, COL_RMW))
    return wind_radii, (rmw if rmw > 0 else None)
