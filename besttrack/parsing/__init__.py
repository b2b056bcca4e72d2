"""Best-track parsing: HURDAT2 archives and ATCF b-decks into Storm records.

Orchestrates: format sniff → archive or operational parser → sorted storms.
"""

from __future__ import annotations

from besttrack.parsing.best_track import parse_best_track, parse_best_track_detailed

__all__ = ["parse_best_track", "parse_best_track_detailed"]
