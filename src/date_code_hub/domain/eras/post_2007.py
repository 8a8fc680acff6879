"""Post-2007 date codes: factory code, then ISO week and year digits interleaved."""

from datetime import date
from typing import Optional

from date_code_hub.domain.countries import resolve_country
from date_code_hub.domain.eras.interleaved import interleave_code, split_interleaved_code
from date_code_hub.domain.exceptions import (
    DateCodeError,
    InvalidArgumentError,
    OutOfRangeError,
)
from date_code_hub.domain.factory_code import (
    require_code,
    require_int,
    validate_factory_code,
)
from date_code_hub.domain.models import Post2007DateCode
from date_code_hub.utils.logging import get_logger

logger = get_logger(__name__)

MIN_YEAR = 2007
# Only two year digits are stamped, so 2100 would read back as 2000.
MAX_YEAR = 2099
CENTURY_2000 = 2000


def iso_weeks_in_year(year: int) -> int:
    """Return 52 or 53, the number of ISO 8601 weeks in ``year``."""
    # 28 December always falls in the last ISO week of its year.
    return date(year, 12, 28).isocalendar()[1]


def _check_year_week(year: int, week: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRangeError(
            f"manufacturing year must be between {MIN_YEAR} and {MAX_YEAR}",
            argument="manufacturing_year",
            value=year,
        )
    weeks = iso_weeks_in_year(year)
    if not 1 <= week <= weeks:
        raise OutOfRangeError(
            f"manufacturing week must be between 1 and {weeks} in {year}",
            argument="manufacturing_week",
            value=week,
        )


def generate_2007_code(
    factory_location_code: str, manufacturing_year: int, manufacturing_week: int
) -> str:
    """
    Generate a date code using the post-2007 rules.

    Args:
        factory_location_code: Two-letter factory code (case-insensitive)
        manufacturing_year: ISO year, 2007 or later
        manufacturing_week: ISO week within that year

    Returns:
        Six character code, e.g. ``"SD0165"`` for week 6 of 2015

    Raises:
        InvalidArgumentError: If an argument is missing or mistyped
        InvalidFormatError: If the factory code is not two letters
        NotFoundError: If the factory code is unknown
        OutOfRangeError: If the year or week is outside the valid bounds
    """
    year = require_int(manufacturing_year, "manufacturing_year")
    week = require_int(manufacturing_week, "manufacturing_week")
    _check_year_week(year, week)

    factory_code = validate_factory_code(factory_location_code)
    resolve_country(factory_code)
    code = interleave_code(factory_code, week, year)
    logger.debug("date_code.generated", era="2007", code=code)
    return code


def generate_2007_code_for_date(
    factory_location_code: str, manufacturing_date: Optional[date]
) -> str:
    """
    Generate a post-2007 code from a calendar date.

    The date is converted to its ISO year and week first, so 31 December 2007
    is stamped as week 1 of 2008.
    """
    if manufacturing_date is None:
        raise InvalidArgumentError(
            "manufacturing date is required", argument="manufacturing_date"
        )
    iso_year, iso_week, _ = manufacturing_date.isocalendar()
    if iso_year < MIN_YEAR:
        raise OutOfRangeError(
            f"manufacturing date must be in {MIN_YEAR} or later",
            argument="manufacturing_date",
            value=manufacturing_date,
        )
    return generate_2007_code(factory_location_code, iso_year, iso_week)


def parse_2007_code(date_code: Optional[str]) -> Post2007DateCode:
    """
    Parse a post-2007 date code.

    Raises:
        InvalidArgumentError: If the code is None or empty
        InvalidFormatError: If the layout is invalid
        NotFoundError: If the factory code is unknown
        OutOfRangeError: If the decoded year or week is out of bounds
    """
    code = require_code(date_code)
    try:
        factory_code, week_digits, year_digits = split_interleaved_code(code)
        factory_code = validate_factory_code(factory_code)
        countries = resolve_country(factory_code)

        year = CENTURY_2000 + int(year_digits)
        week = int(week_digits)
        if year < MIN_YEAR:
            raise OutOfRangeError(
                f"date code year {year} is before {MIN_YEAR}",
                argument="date_code",
                value=code,
            )
        weeks = iso_weeks_in_year(year)
        if not 1 <= week <= weeks:
            raise OutOfRangeError(
                f"date code week {week} is outside 1-{weeks} for {year}",
                argument="date_code",
                value=code,
            )
    except DateCodeError as exc:
        logger.debug("date_code.rejected", era="2007", **exc.to_dict())
        raise

    return Post2007DateCode(
        code=code,
        factory_code=factory_code,
        countries=countries,
        year=year,
        week=week,
    )
