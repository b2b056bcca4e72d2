"""Pydantic schemas: the interface contracts between all modules.

Every parser, whatever source grammar it reads, emits these types. Callers
(HTTP layer, summary statistics, external renderers and exporters) consume
nothing else.

RULES:
- Coordinates are signed decimal degrees (north/east positive).
- Wind speeds are knots, pressures millibars, radii nautical miles.
- A pressure of 0 means "unknown"; the source sentinel -999 is never stored.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field

# ─── Observation Schemas ───


class RecordFlag(str, Enum):
    """Notable lifecycle event attached to an archive fix.

    Values are the single-letter record identifiers used by the archive
    format. Operational rows never carry one.
    """

    CLOSEST_APPROACH = "C"
    GENESIS = "G"
    PEAK_INTENSITY = "I"
    LANDFALL = "L"
    MINIMUM_PRESSURE = "P"
    RAPID_CHANGE = "R"
    STATUS_CHANGE = "S"
    TRACK_DETAIL = "T"
    MAXIMUM_WIND = "W"

    @classmethod
    def from_identifier(cls, identifier: str) -> RecordFlag | None:
        """Map a raw record identifier to a flag, or None if blank/unknown."""
        try:
            return cls(identifier.strip().upper())
        except ValueError:
            return None


class WindRadii(BaseModel):
    """Four-quadrant wind extents (nm) for the 34, 50 and 64 kt thresholds."""

    ne34: int = 0
    se34: int = 0
    sw34: int = 0
    nw34: int = 0

    ne50: int = 0
    se50: int = 0
    sw50: int = 0
    nw50: int = 0

    ne64: int = 0
    se64: int = 0
    sw64: int = 0
    nw64: int = 0

    def set_threshold(self, threshold: int, ne: int, se: int, sw: int, nw: int) -> bool:
        """Write one threshold's quadrants. Returns False for an unknown threshold."""
        if threshold not in WIND_THRESHOLDS:
            return False
        setattr(self, f"ne{threshold}", ne)
        setattr(self, f"se{threshold}", se)
        setattr(self, f"sw{threshold}", sw)
        setattr(self, f"nw{threshold}", nw)
        return True

    def quadrants(self, threshold: int) -> tuple[int, int, int, int]:
        """Return (NE, SE, SW, NW) for one threshold."""
        return (
            getattr(self, f"ne{threshold}"),
            getattr(self, f"se{threshold}"),
            getattr(self, f"sw{threshold}"),
            getattr(self, f"nw{threshold}"),
        )


WIND_THRESHOLDS = (34, 50, 64)


class StormObservation(BaseModel):
    """A single synoptic fix for one storm."""

    date: date
    time: str  # HHMM, UTC
    timestamp: datetime  # UTC; sort and merge key
    record_identifier: str = ""
    record_flag: RecordFlag | None = None
    status: str  # raw source token: TD, TS, HU, EX, LO, DB, ...
    latitude: float
    longitude: float
    raw_latitude: str
    raw_longitude: str
    max_sustained_wind: int = Field(default=0, ge=0)
    min_central_pressure: int = Field(default=0, ge=0)  # 0 = unknown
    wind_radii: WindRadii | None = None
    radius_of_max_wind: int | None = None


# ─── Storm Schemas ───


class Storm(BaseModel):
    """One cyclone lifecycle: identity plus its chronologically sorted track."""

    id: str  # e.g. "AL092011"
    name: str
    year: int
    track: list[StormObservation]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def observation_count(self) -> int:
        return len(self.track)

    @property
    def basin(self) -> str:
        return self.id[:2]

    @property
    def number(self) -> str:
        return self.id[2:4]


class StormSummary(BaseModel):
    """Headline statistics for one storm."""

    storm_id: str
    name: str
    year: int
    peak_wind: int  # kt
    min_pressure: int  # mb, 0 when no pressure was ever known
    category: str  # "Depression", "Tropical Storm", "Category 1".."Category 5", "N/A"
    landfall_dates: list[date]
    duration_days: int
    start_date: date | None = None
    end_date: date | None = None
