"""Storm-name heuristics.

Operational feeds put whatever the agency had at the time into the name
columns: INVEST91, GENESIS013, spelled-out depression numbers (THREE), or
nothing at all. Only a real name may replace the storm's current one.
"""

from __future__ import annotations

import re

_PLACEHOLDER_TOKENS = frozenset({"UNNAMED", "TC", "TWO", "LOW", "BEST", "NONAME"})

_PLACEHOLDER_PREFIXES = ("INVEST", "GENESIS", "SUBTROP")

_NUMBER_WORDS = frozenset(
    {
        "ONE",
        "TWO",
        "THREE",
        "FOUR",
        "FIVE",
        "SIX",
        "SEVEN",
        "EIGHT",
        "NINE",
        "TEN",
        "ELEVEN",
        "TWELVE",
        "THIRTEEN",
        "FOURTEEN",
        "FIFTEEN",
        "SIXTEEN",
        "SEVENTEEN",
        "EIGHTEEN",
        "NINETEEN",
        "TWENTY",
    }
)

_NUMBERED_STORM_PATTERN = re.compile(r"^STORM\s*\d+$")


def is_generic_placeholder(name: str | None) -> bool:
    """Return True when a name token is a placeholder rather than a real storm name."""
    n = (name or "").strip().upper()
    return (
        not n
        or n in _PLACEHOLDER_TOKENS
        or n.startswith(_PLACEHOLDER_PREFIXES)
        or n in _NUMBER_WORDS
        or _NUMBERED_STORM_PATTERN.match(n) is not None
    )


def placeholder_name(number: str) -> str:
    """Deterministic name for a storm that never received a real one."""
    return f"STORM {number}"
