"""Date helper tests"""

from datetime import date

import pytest

from layoffs_etl.cleaning.dates import format_date, is_blank, is_null_token, parse_date

FMT = "%m/%d/%Y"


class TestDates:
    """Test strict parsing helpers"""

    @pytest.mark.parametrize("text", ["01/01/2020", "02/29/2024", "12/31/1999", "07/04/2023"])
    def test_round_trip(self, text):
        """Parse then format reproduces MM/DD/YYYY input"""
        assert format_date(parse_date(text, FMT), FMT) == text

    def test_unpadded_input_parses(self):
        assert parse_date("3/1/2023", FMT) == date(2023, 3, 1)

    def test_invalid_calendar_date(self):
        with pytest.raises(ValueError):
            parse_date("02/30/2023", FMT)

    def test_format_none(self):
        assert format_date(None, FMT) is None

    def test_blank_helpers(self):
        assert is_blank(None)
        assert is_blank("  ")
        assert not is_blank("x")
        assert not is_blank(0)
        assert is_null_token("NULL", ["", "NULL"])
        assert not is_null_token("null", ["", "NULL"])
