"""1990-2006 date codes: factory code, then month and year digits interleaved."""

from datetime import date
from typing import Optional

from date_code_hub.domain.countries import resolve_country
from date_code_hub.domain.eras.interleaved import interleave_code, split_interleaved_code
from date_code_hub.domain.exceptions import (
    DateCodeError,
    InvalidArgumentError,
    InvalidFormatError,
    OutOfRangeError,
)
from date_code_hub.domain.factory_code import (
    require_code,
    require_int,
    validate_factory_code,
)
from date_code_hub.domain.models import Period1990DateCode
from date_code_hub.utils.logging import get_logger

logger = get_logger(__name__)

MIN_YEAR = 1990
MAX_YEAR = 2006
CENTURY_1900 = 1900
CENTURY_2000 = 2000


def generate_1990_code(
    factory_location_code: str, manufacturing_year: int, manufacturing_month: int
) -> str:
    """
    Generate a date code using the 1990-2006 rules.

    The month is zero padded and woven with the last two year digits, so March
    1995 at factory SD becomes ``"SD0935"``.

    Raises:
        InvalidArgumentError: If an argument is missing or mistyped
        InvalidFormatError: If the factory code is not two letters
        NotFoundError: If the factory code is unknown
        OutOfRangeError: If the year or month is outside the era's bounds
    """
    year = require_int(manufacturing_year, "manufacturing_year")
    month = require_int(manufacturing_month, "manufacturing_month")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRangeError(
            f"manufacturing year must be between {MIN_YEAR} and {MAX_YEAR}",
            argument="manufacturing_year",
            value=year,
        )
    if not 1 <= month <= 12:
        raise OutOfRangeError(
            "manufacturing month must be between 1 and 12",
            argument="manufacturing_month",
            value=month,
        )

    factory_code = validate_factory_code(factory_location_code)
    resolve_country(factory_code)
    code = interleave_code(factory_code, month, year)
    logger.debug("date_code.generated", era="1990", code=code)
    return code


def generate_1990_code_for_date(
    factory_location_code: str, manufacturing_date: Optional[date]
) -> str:
    """Generate a 1990-2006 code from the calendar year and month of a date."""
    if manufacturing_date is None:
        raise InvalidArgumentError(
            "manufacturing date is required", argument="manufacturing_date"
        )
    return generate_1990_code(
        factory_location_code, manufacturing_date.year, manufacturing_date.month
    )


def parse_1990_code(date_code: Optional[str]) -> Period1990DateCode:
    """
    Parse a 1990-2006 date code.

    The first embedded year digit selects the century: ``0`` means the 2000s,
    anything else the 1900s. Only 1990-2006 survive the range check.

    Raises:
        InvalidArgumentError: If the code is None or empty
        InvalidFormatError: If the layout or decoded fields are invalid
        NotFoundError: If the factory code is unknown
    """
    code = require_code(date_code)
    try:
        factory_code, month_digits, year_digits = split_interleaved_code(code)
        factory_code = validate_factory_code(factory_code)
        countries = resolve_country(factory_code)

        century = CENTURY_2000 if year_digits[0] == "0" else CENTURY_1900
        year = century + int(year_digits)
        month = int(month_digits)
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidFormatError(
                f"date code year {year} is outside {MIN_YEAR}-{MAX_YEAR}",
                argument="date_code",
                value=code,
            )
        if not 1 <= month <= 12:
            raise InvalidFormatError(
                f"date code month {month} is outside 1-12",
                argument="date_code",
                value=code,
            )
    except DateCodeError as exc:
        logger.debug("date_code.rejected", era="1990", **exc.to_dict())
        raise

    return Period1990DateCode(
        code=code,
        factory_code=factory_code,
        countries=countries,
        year=year,
        month=month,
    )
