"""Tests for besttrack.parsing.parse_best_track: the public entry point."""

from __future__ import annotations

import pytest

from besttrack.common.exceptions import ParseError
from besttrack.common.schemas import RecordFlag
from besttrack.parsing import parse_best_track, parse_best_track_detailed
from besttrack.parsing.detector import BestTrackFormat
from tests.factories import make_atcf_row

IRENE_ARCHIVE = (
    "AL092011,IRENE,2\n"
    "20110827,1200,L,HU,34.4N,76.5W,75,952\n"
    "20110828,0000,,HU,35.1N,77.0W,70,958"
)


class TestParseBestTrack:
    @pytest.mark.parametrize("text", ["", "   ", "\n\r\n\t\n"])
    def test_empty_input_returns_empty_list(self, text: str) -> None:
        assert parse_best_track(text) == []

    def test_non_text_input_raises(self) -> None:
        with pytest.raises(ParseError, match="text"):
            parse_best_track(b"AL092011,IRENE,2")  # type: ignore[arg-type]

    def test_archive_scenario(self) -> None:
        storms = parse_best_track(IRENE_ARCHIVE)
        assert len(storms) == 1
        storm = storms[0]
        assert (storm.id, storm.name, storm.year, storm.observation_count) == ("AL092011", "IRENE", 2011, 2)
        assert storm.track[0].record_flag is RecordFlag.LANDFALL
        assert storm.track[0].max_sustained_wind == 75

    def test_crlf_archive(self) -> None:
        storms = parse_best_track(IRENE_ARCHIVE.replace("\n", "\r\n"))
        assert storms[0].observation_count == 2

    def test_operational_dispatch(self) -> None:
        text = "\n".join(
            [
                make_atcf_row(wind_code="34", radii=(150, 120, 100, 130)),
                make_atcf_row(wind_code="64", radii=(30, 25, 20, 28)),
            ]
        )
        storms = parse_best_track(text)
        assert len(storms) == 1
        assert storms[0].id == "AL092011"
        assert storms[0].observation_count == 1

    def test_grammar_chosen_once_for_whole_input(self) -> None:
        """Archive lines after an operational first line are not parsed as archive."""
        text = make_atcf_row() + "\n" + IRENE_ARCHIVE
        storms = parse_best_track(text)
        assert [s.id for s in storms] == ["AL092011"]
        assert storms[0].observation_count == 1
        assert storms[0].track[0].raw_latitude == "344N"

    def test_garbage_text_yields_nothing(self) -> None:
        assert parse_best_track("lorem ipsum\ndolor, sit, amet\n,,,,,,,,,,,,") == []

    def test_idempotent(self) -> None:
        first = parse_best_track(IRENE_ARCHIVE)
        second = parse_best_track(IRENE_ARCHIVE)
        assert [s.model_dump() for s in first] == [s.model_dump() for s in second]
        assert first[0] is not second[0]

    def test_returned_lists_are_independent(self) -> None:
        first = parse_best_track(IRENE_ARCHIVE)
        first[0].track.clear()
        assert parse_best_track(IRENE_ARCHIVE)[0].observation_count == 2

    def test_serializes_observation_count(self) -> None:
        dumped = parse_best_track(IRENE_ARCHIVE)[0].model_dump(mode="json")
        assert dumped["observation_count"] == 2
        assert dumped["track"][0]["date"] == "2011-08-27"
        assert dumped["track"][0]["record_flag"] == "L"


class TestParseBestTrackDetailed:
    def test_reports_archive_format(self) -> None:
        source_format, storms = parse_best_track_detailed(IRENE_ARCHIVE)
        assert source_format is BestTrackFormat.HURDAT
        assert [s.id for s in storms] == ["AL092011"]

    def test_reports_operational_format(self) -> None:
        source_format, storms = parse_best_track_detailed(make_atcf_row())
        assert source_format is BestTrackFormat.ATCF
        assert storms[0].observation_count == 1

    def test_empty_input_has_no_format(self) -> None:
        assert parse_best_track_detailed("\n\n") == (None, [])

    def test_non_text_input_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_best_track_detailed(None)  # type: ignore[arg-type]
