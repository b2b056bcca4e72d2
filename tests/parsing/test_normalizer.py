"""Tests for besttrack.parsing.normalizer: coordinate, date and numeric helpers."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from besttrack.parsing.normalizer import (
    is_numeric_token,
    leading_int,
    non_negative_int,
    parse_coordinate,
    parse_datetime,
    parse_pressure,
    safe_int,
)

# ─── parse_coordinate ───


class TestParseCoordinate:
    """Hemisphere suffixes, implied tenths, and junk input."""

    def test_implied_tenths_north(self) -> None:
        """ATCF '221N' has no decimal point → 22.1."""
        assert parse_coordinate("221N") == pytest.approx(22.1)

    def test_explicit_decimal_north(self) -> None:
        assert parse_coordinate("22.1N") == pytest.approx(22.1)

    def test_west_is_negative(self) -> None:
        assert parse_coordinate("75.5W") == pytest.approx(-75.5)

    def test_implied_tenths_west(self) -> None:
        assert parse_coordinate("755W") == pytest.approx(-75.5)

    def test_south_is_negative(self) -> None:
        assert parse_coordinate("12.3S") == pytest.approx(-12.3)

    def test_east_is_positive(self) -> None:
        assert parse_coordinate("1405E") == pytest.approx(140.5)

    def test_lowercase_suffix(self) -> None:
        assert parse_coordinate("34.4n") == pytest.approx(34.4)

    def test_surrounding_whitespace(self) -> None:
        assert parse_coordinate("   34.4N  ") == pytest.approx(34.4)

    def test_plain_signed_float(self) -> None:
        """No hemisphere letter → parsed as a signed float."""
        assert parse_coordinate("-75.5") == pytest.approx(-75.5)

    @pytest.mark.parametrize("raw", ["", "   ", "N", "abcW", "nan", "--"])
    def test_unparseable_returns_zero(self, raw: str) -> None:
        assert parse_coordinate(raw) == 0.0


# ─── parse_datetime ───


class TestParseDateTime:
    """YYYYMMDD + HHMM → UTC timestamp and display date."""

    def test_date_and_time(self) -> None:
        timestamp, display = parse_datetime("20110827", "1200")
        assert timestamp == datetime(2011, 8, 27, 12, 0, tzinfo=UTC)
        assert display == "2011-08-27"

    def test_missing_time_defaults_to_midnight(self) -> None:
        timestamp, _ = parse_datetime("20110827", None)
        assert timestamp == datetime(2011, 8, 27, 0, 0, tzinfo=UTC)

    def test_malformed_time_defaults_to_midnight(self) -> None:
        timestamp, display = parse_datetime("20110827", "12")
        assert timestamp == datetime(2011, 8, 27, 0, 0, tzinfo=UTC)
        assert display == "2011-08-27"

    def test_short_date_is_invalid(self) -> None:
        """Fewer than 8 date digits → None timestamp, original string back."""
        timestamp, display = parse_datetime("201108", "1200")
        assert timestamp is None
        assert display == "201108"

    def test_impossible_calendar_date_is_invalid(self) -> None:
        timestamp, display = parse_datetime("20111345", "0000")
        assert timestamp is None
        assert display == "20111345"

    def test_timestamps_order_chronologically(self) -> None:
        earlier, _ = parse_datetime("20111231", "1800")
        later, _ = parse_datetime("20120101", "0000")
        assert earlier < later


# ─── Numeric helpers ───


class TestNumericHelpers:
    def test_leading_int(self) -> None:
        assert leading_int("75") == 75
        assert leading_int(" 12kt") == 12
        assert leading_int("-999") == -999
        assert leading_int("IRENE") is None
        assert leading_int("") is None

    def test_oversized_digit_run_is_not_an_int(self) -> None:
        """Runs beyond the interpreter's int conversion limit read as no value."""
        huge = "9" * 5000
        assert leading_int(huge) is None
        assert safe_int(huge) == 0
        assert non_negative_int(huge) == 0
        assert parse_pressure(huge) == 0

    def test_safe_int_defaults_to_zero(self) -> None:
        assert safe_int("abc") == 0
        assert safe_int(None) == 0

    def test_non_negative_int_clamps_sentinels(self) -> None:
        assert non_negative_int("-99") == 0
        assert non_negative_int("45") == 45

    def test_pressure_sentinel_is_unknown(self) -> None:
        """-999 → 0, the 'unknown' representation."""
        assert parse_pressure("-999") == 0

    def test_pressure_junk_is_unknown(self) -> None:
        assert parse_pressure("") == 0
        assert parse_pressure("M") == 0

    def test_pressure_value(self) -> None:
        assert parse_pressure(" 952") == 952

    def test_is_numeric_token(self) -> None:
        assert is_numeric_token("09")
        assert not is_numeric_token("IRENE")

    def test_oversized_digit_run_is_still_numeric(self) -> None:
        assert is_numeric_token("1" * 5000)
