"""Format sniffing for raw best-track text.

Two grammars are supported:

    HURDAT2 archive (header + data rows):
        AL092011,              IRENE,     39,
        20110821, 0000,  , TS, 15.0N,  59.0W,  45, 1006,  ...

    ATCF b-deck (flat operational rows):
        AL, 09, 2011082100,   , BEST,   0, 150N,  590W,  45, 1006, TS,  34, NEQ, ...

Detection looks at the first non-blank line only and is resolved once per
parse call.
"""

from __future__ import annotations

import re
from enum import Enum

# Basin code, comma, cyclone number, comma; anchored to the line start.
_ATCF_ROW_PATTERN = re.compile(r"^[A-Za-z]{2}\s*,\s*\d{1,2}\s*,")


class BestTrackFormat(str, Enum):
    HURDAT = "hurdat"
    ATCF = "atcf"


def split_lines(raw_text: str) -> list[str]:
    """Split raw text into trimmed, non-empty lines (CRLF and LF endings)."""
    lines = raw_text.replace("\r\n", "\n").split("\n")
    return [line.strip() for line in lines if line.strip()]


def detect_format(first_line: str) -> BestTrackFormat:
    """Decide which grammar applies from the first meaningful line."""
    if _ATCF_ROW_PATTERN.match(first_line):
        return BestTrackFormat.ATCF
    return BestTrackFormat.HURDAT

