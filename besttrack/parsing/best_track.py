"""Best-track parse entry point.

Sniffs the grammar once from the first meaningful line and hands the whole
input to exactly one parser. The call is a pure function of its input: no
caches, no module state, safe to run concurrently on different inputs.
"""

from __future__ import annotations

from besttrack.common.exceptions import ParseError
from besttrack.common.logging import get_logger
from besttrack.common.schemas import Storm
from besttrack.parsing.atcf import parse_atcf
from besttrack.parsing.detector import BestTrackFormat, detect_format, split_lines
from besttrack.parsing.hurdat import parse_hurdat

logger = get_logger("PARSER")


def parse_best_track(raw_text: str) -> list[Storm]:
    """Parse a HURDAT2 archive or ATCF b-deck blob into storms.

    Malformed rows are skipped, never fatal. Empty or whitespace-only
    input yields an empty list.

    Args:
        raw_text: Complete source text (one file or pasted block).

    Returns:
        A fresh list of storms owned by the caller.

    Raises:
        ParseError: If raw_text is not a string.
    """
    _, storms = parse_best_track_detailed(raw_text)
    return storms


def parse_best_track_detailed(raw_text: str) -> tuple[BestTrackFormat | None, list[Storm]]:
    """Same as parse_best_track, but also report which grammar was used.

    The format is None when the input holds no meaningful lines.
    """
    if not isinstance(raw_text, str):
        raise ParseError(
            "Best-track input must be text",
            context={"type": type(raw_text).__name__},
        )

    lines = split_lines(raw_text)
    if not lines:
        return None, []

    source_format = detect_format(lines[0])
    if source_format is BestTrackFormat.ATCF:
        storms = parse_atcf(lines)
    else:
        storms = parse_hurdat(lines)

    logger.info(
        "Parsed best track",
        extra={
            "data": {
                "format": source_format.value,
                "lines": len(lines),
                "storms": len(storms),
                "observations": sum(s.observation_count for s in storms),
            }
        },
    )
    return source_format, storms
