"""Best-track import endpoints.

Accepts a raw HURDAT2 archive or ATCF b-deck as text, parses it, and
returns normalized storms or their headline summaries. The size limit is
enforced here, before the text ever reaches the parser.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from besttrack.analysis.summary import summarize_storms
from besttrack.common.config import Settings, get_settings
from besttrack.common.exceptions import InputTooLargeError
from besttrack.common.logging import get_logger
from besttrack.common.metrics import (
    OBSERVATIONS_PARSED_TOTAL,
    PARSE_DURATION_SECONDS,
    REJECTED_PAYLOADS_TOTAL,
    STORMS_PARSED_TOTAL,
)
from besttrack.common.schemas import Storm, StormSummary
from besttrack.parsing.best_track import parse_best_track_detailed

logger = get_logger("API")

router = APIRouter()


class BestTrackPayload(BaseModel):
    """Request body: one complete best-track file or pasted block."""

    text: str


def _parse_payload(payload: BestTrackPayload, settings: Settings) -> list[Storm]:
    size_bytes = len(payload.text.encode("utf-8"))
    if size_bytes > settings.max_input_bytes:
        REJECTED_PAYLOADS_TOTAL.labels(reason="too_large").inc()
        raise InputTooLargeError(size_bytes, settings.max_input_bytes)

    start = time.perf_counter()
    source_format, storms = parse_best_track_detailed(payload.text)
    label = source_format.value if source_format else "empty"
    PARSE_DURATION_SECONDS.labels(format=label).observe(time.perf_counter() - start)

    STORMS_PARSED_TOTAL.labels(format=label).inc(len(storms))
    OBSERVATIONS_PARSED_TOTAL.labels(format=label).inc(sum(s.observation_count for s in storms))

    logger.info(
        "Best track imported",
        extra={"data": {"format": label, "bytes": size_bytes, "storms": len(storms)}},
    )
    return storms


# Plain def: FastAPI runs these in its threadpool, off the event loop.

@router.post("/parse", response_model=list[Storm])
def parse_storms(
    payload: BestTrackPayload,
    settings: Settings = Depends(get_settings),
) -> list[Storm]:
    """Parse best-track text into normalized storms."""
    return _parse_payload(payload, settings)


@router.post("/summary", response_model=list[StormSummary])
def summarize(
    payload: BestTrackPayload,
    settings: Settings = Depends(get_settings),
) -> list[StormSummary]:
    """Parse best-track text and return one summary per storm."""
    return summarize_storms(_parse_payload(payload, settings))
