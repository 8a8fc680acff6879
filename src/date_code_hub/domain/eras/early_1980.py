"""Early 1980s date codes: ``YY`` followed by the unpadded month."""

import re
from datetime import date
from typing import Optional, Tuple

from date_code_hub.domain.exceptions import (
    InvalidArgumentError,
    InvalidFormatError,
    OutOfRangeError,
)
from date_code_hub.domain.factory_code import require_code, require_int
from date_code_hub.domain.models import Early1980DateCode
from date_code_hub.utils.logging import get_logger

logger = get_logger(__name__)

MIN_YEAR = 1980
MAX_YEAR = 1989
CENTURY_PREFIX = "19"

_EARLY_1980_PATTERN = re.compile(r"([0-9]{2})([0-9]{1,2})")


def check_year_month(year: int, month: int) -> None:
    """Raise OutOfRangeError unless year is 1980-1989 and month is 1-12."""
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


def generate_early_1980_code(manufacturing_year: int, manufacturing_month: int) -> str:
    """
    Generate a date code using the early 1980s rules.

    Args:
        manufacturing_year: Year between 1980 and 1989
        manufacturing_month: Month between 1 and 12

    Returns:
        Three or four digit code, e.g. ``"873"`` for March 1987

    Raises:
        InvalidArgumentError: If an argument is missing or not an integer
        OutOfRangeError: If the year or month is outside the era's bounds
    """
    year = require_int(manufacturing_year, "manufacturing_year")
    month = require_int(manufacturing_month, "manufacturing_month")
    check_year_month(year, month)

    code = f"{year % 100:02d}{month}"
    logger.debug("date_code.generated", era="early_1980", code=code)
    return code


def generate_early_1980_code_for_date(manufacturing_date: Optional[date]) -> str:
    """Generate an early 1980s code from the calendar year and month of a date."""
    if manufacturing_date is None:
        raise InvalidArgumentError(
            "manufacturing date is required", argument="manufacturing_date"
        )
    return generate_early_1980_code(manufacturing_date.year, manufacturing_date.month)


def decode_year_month(date_code: str) -> Tuple[int, int]:
    """Decode an uppercased ``YYM``/``YYMM`` code into (year, month).

    Raises:
        InvalidFormatError: If the code is malformed or its fields are out of range
    """
    if len(date_code) not in (3, 4):
        raise InvalidFormatError(
            "date code must be 3 or 4 characters long",
            argument="date_code",
            value=date_code,
        )
    match = _EARLY_1980_PATTERN.fullmatch(date_code)
    if not match:
        raise InvalidFormatError(
            "date code must be two year digits followed by a month",
            argument="date_code",
            value=date_code,
        )

    year = int(CENTURY_PREFIX + match.group(1))
    month = int(match.group(2))
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidFormatError(
            f"date code year {year} is outside {MIN_YEAR}-{MAX_YEAR}",
            argument="date_code",
            value=date_code,
        )
    if not 1 <= month <= 12:
        raise InvalidFormatError(
            f"date code month {month} is outside 1-12",
            argument="date_code",
            value=date_code,
        )
    return year, month


def parse_early_1980_code(date_code: Optional[str]) -> Early1980DateCode:
    """
    Parse an early 1980s date code.

    Args:
        date_code: Three or four digit code

    Returns:
        Early1980DateCode with year and month

    Raises:
        InvalidArgumentError: If the code is None or empty
        InvalidFormatError: If the code does not follow the layout

    Example:
        >>> parse_early_1980_code("8711").month
        11
    """
    code = require_code(date_code)
    try:
        year, month = decode_year_month(code)
    except InvalidFormatError as exc:
        logger.debug("date_code.rejected", era="early_1980", **exc.to_dict())
        raise
    return Early1980DateCode(code=code, year=year, month=month)
