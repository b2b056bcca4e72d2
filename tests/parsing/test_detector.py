"""Tests for besttrack.parsing.detector: line splitting and format sniffing."""

from __future__ import annotations

from besttrack.parsing.detector import BestTrackFormat, detect_format, split_lines


class TestSplitLines:
    def test_normalizes_crlf(self) -> None:
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_drops_blank_lines_and_trims(self) -> None:
        assert split_lines("\n  a  \n\n   \n b\n") == ["a", "b"]

    def test_whitespace_only(self) -> None:
        assert split_lines(" \n\t\r\n ") == []


class TestDetectFormat:
    def test_atcf_row(self) -> None:
        assert detect_format("AL, 09, 2011082100,   , BEST,   0, 150N,  590W") is BestTrackFormat.ATCF

    def test_atcf_single_digit_number(self) -> None:
        assert detect_format("ep,5,2020071500, , BEST") is BestTrackFormat.ATCF

    def test_hurdat_header(self) -> None:
        assert detect_format("AL092011,              IRENE,     39,") is BestTrackFormat.HURDAT

    def test_incidental_commas_later_in_line(self) -> None:
        """Only a basin + number at the start of the line counts."""
        assert detect_format("20110827, 1200, L, HU, 34.4N, 76.5W") is BestTrackFormat.HURDAT
        assert detect_format("note: AL, 09, 2011082100") is BestTrackFormat.HURDAT

    def test_unrecognized_text_falls_back_to_archive(self) -> None:
        assert detect_format("hello world") is BestTrackFormat.HURDAT

