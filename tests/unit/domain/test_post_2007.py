"""
Tests for post-2007 week-based date codes.
"""

from datetime import date, datetime

import pytest

from date_code_hub.domain.countries import Country
from date_code_hub.domain.eras.post_2007 import (
    generate_2007_code,
    generate_2007_code_for_date,
    iso_weeks_in_year,
    parse_2007_code,
)
from date_code_hub.domain.exceptions import (
    InvalidArgumentError,
    InvalidFormatError,
    NotFoundError,
    OutOfRangeError,
)
from date_code_hub.domain.models import Era, Post2007DateCode


@pytest.mark.unit
class TestIsoWeeksInYear:
    @pytest.mark.parametrize(
        "year, weeks",
        [(2009, 53), (2015, 53), (2016, 52), (2019, 52), (2020, 53), (2026, 53)],
    )
    def test_weeks(self, year, weeks):
        assert iso_weeks_in_year(year) == weeks


@pytest.mark.unit
class TestGenerate2007Code:
    def test_interleaves_week_and_year(self):
        code = generate_2007_code("SD", 2015, 6)
        assert code == "SD0165"
        assert code[2] + code[4] == "06"
        assert code[-1] == "5"

    def test_week_53_in_long_year(self):
        assert generate_2007_code("sd", 2015, 53) == "SD5135"

    def test_rejects_week_53_in_short_year(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            generate_2007_code("SD", 2016, 53)
        assert exc_info.value.argument == "manufacturing_week"

    def test_rejects_week_zero(self):
        with pytest.raises(OutOfRangeError):
            generate_2007_code("SD", 2015, 0)

    @pytest.mark.parametrize("year", [2006, 2100])
    def test_year_bounds(self, year):
        with pytest.raises(OutOfRangeError) as exc_info:
            generate_2007_code("SD", year, 10)
        assert exc_info.value.argument == "manufacturing_year"

    def test_unknown_factory_code(self):
        with pytest.raises(NotFoundError):
            generate_2007_code("ZZ", 2015, 6)

    def test_malformed_factory_code(self):
        with pytest.raises(InvalidFormatError):
            generate_2007_code("SDX", 2015, 6)


@pytest.mark.unit
class TestGenerate2007CodeForDate:
    def test_converts_to_iso_week(self):
        # 3 Feb 2015 falls in ISO week 6
        assert generate_2007_code_for_date("SD", date(2015, 2, 3)) == "SD0165"

    def test_year_end_rolls_into_next_iso_year(self):
        assert generate_2007_code_for_date("SD", date(2007, 12, 31)) == "SD0018"

    def test_first_day_of_era(self):
        assert generate_2007_code_for_date("SD", date(2007, 1, 1)) == "SD0017"

    def test_accepts_datetime(self):
        assert generate_2007_code_for_date("SD", datetime(2015, 2, 3, 9, 30)) == "SD0165"

    def test_rejects_dates_before_2007(self):
        with pytest.raises(OutOfRangeError):
            generate_2007_code_for_date("SD", date(2006, 12, 31))

    def test_requires_date(self):
        with pytest.raises(InvalidArgumentError):
            generate_2007_code_for_date("SD", None)


@pytest.mark.unit
class TestParse2007Code:
    def test_decodes_fields(self):
        result = parse_2007_code("SD0165")
        assert isinstance(result, Post2007DateCode)
        assert result.era == Era.POST_2007
        assert result.factory_code == "SD"
        assert result.countries == (Country.FRANCE, Country.USA)
        assert (result.year, result.week) == (2015, 6)

    def test_week_53(self):
        result = parse_2007_code("sd5135")
        assert (result.year, result.week) == (2015, 53)

    @pytest.mark.parametrize(
        "code",
        [
            "SD5136",  # week 53 in 2016
            "SD0105",  # week 0
            "SD1006",  # 2006
        ],
    )
    def test_out_of_range(self, code):
        with pytest.raises(OutOfRangeError):
            parse_2007_code(code)

    @pytest.mark.parametrize("code", ["SD016", "SD01655", "SD0A65", "1D0165"])
    def test_malformed_codes(self, code):
        with pytest.raises(InvalidFormatError):
            parse_2007_code(code)

    def test_unknown_factory_code(self):
        with pytest.raises(NotFoundError):
            parse_2007_code("ZZ0165")

    def test_round_trip(self):
        for year in (2007, 2015, 2016, 2020, 2099):
            for week in range(1, iso_weeks_in_year(year) + 1):
                result = parse_2007_code(generate_2007_code("fh", year, week))
                assert result.factory_code == "FH"
                assert (result.year, result.week) == (year, week)
