"""Per-storm headline statistics: peak intensity, pressure, landfalls, duration.

Category thresholds follow the Saffir-Simpson scale in knots.
"""

from __future__ import annotations

import math

from besttrack.common.schemas import RecordFlag, Storm, StormSummary

# (minimum peak wind in kt, label), checked from strongest down
_CATEGORY_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (137, "Category 5"),
    (113, "Category 4"),
    (96, "Category 3"),
    (83, "Category 2"),
    (64, "Category 1"),
    (34, "Tropical Storm"),
)

SECONDS_PER_DAY = 86400


def saffir_simpson_category(peak_wind: int) -> str:
    """Label for a peak sustained wind in knots."""
    for minimum, label in _CATEGORY_THRESHOLDS:
        if peak_wind >= minimum:
            return label
    return "Depression"


def summarize_storm(storm: Storm) -> StormSummary:
    """Compute headline statistics for one storm.

    Unknown pressures (0) are ignored when finding the minimum; a storm
    with no known pressure reports 0. Duration is the first-to-last fix
    span rounded up to whole days.
    """
    track = storm.track
    if not track:
        return StormSummary(
            storm_id=storm.id,
            name=storm.name,
            year=storm.year,
            peak_wind=0,
            min_pressure=0,
            category="N/A",
            landfall_dates=[],
            duration_days=0,
        )

    peak_wind = max(obs.max_sustained_wind for obs in track)
    known_pressures = [obs.min_central_pressure for obs in track if obs.min_central_pressure > 0]
    span = abs(track[-1].timestamp - track[0].timestamp)

    return StormSummary(
        storm_id=storm.id,
        name=storm.name,
        year=storm.year,
        peak_wind=peak_wind,
        min_pressure=min(known_pressures) if known_pressures else 0,
        category=saffir_simpson_category(peak_wind),
        landfall_dates=[obs.date for obs in track if obs.record_flag is RecordFlag.LANDFALL],
        duration_days=math.ceil(span.total_seconds() / SECONDS_PER_DAY),
        start_date=track[0].date,
        end_date=track[-1].date,
    )


def summarize_storms(storms: list[Storm]) -> list[StormSummary]:
    return [summarize_storm(storm) for storm in storms]
