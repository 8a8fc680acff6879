"""Late 1980s date codes: the early 1980s digits followed by a factory code."""

from datetime import date
from typing import Optional

from date_code_hub.domain.countries import resolve_country
from date_code_hub.domain.eras.early_1980 import (
    decode_year_month,
    generate_early_1980_code,
)
from date_code_hub.domain.exceptions import (
    DateCodeError,
    InvalidArgumentError,
    InvalidFormatError,
)
from date_code_hub.domain.factory_code import require_code, validate_factory_code
from date_code_hub.domain.models import Late1980DateCode
from date_code_hub.utils.logging import get_logger

logger = get_logger(__name__)

MIN_CODE_LENGTH = 5
MAX_CODE_LENGTH = 6


def generate_late_1980_code(
    factory_location_code: str, manufacturing_year: int, manufacturing_month: int
) -> str:
    """
    Generate a date code using the late 1980s rules.

    Args:
        factory_location_code: Two-letter factory code (case-insensitive)
        manufacturing_year: Year between 1980 and 1989
        manufacturing_month: Month between 1 and 12

    Returns:
        Code such as ``"8811SD"``

    Raises:
        InvalidArgumentError: If an argument is missing or mistyped
        InvalidFormatError: If the factory code is not two letters
        NotFoundError: If the factory code is unknown
        OutOfRangeError: If the year or month is outside the era's bounds
    """
    code = generate_early_1980_code(manufacturing_year, manufacturing_month)
    factory_code = validate_factory_code(factory_location_code)
    resolve_country(factory_code)
    return code + factory_code


def generate_late_1980_code_for_date(
    factory_location_code: str, manufacturing_date: Optional[date]
) -> str:
    """Generate a late 1980s code from the calendar year and month of a date."""
    if manufacturing_date is None:
        raise InvalidArgumentError(
            "manufacturing date is required", argument="manufacturing_date"
        )
    return generate_late_1980_code(
        factory_location_code, manufacturing_date.year, manufacturing_date.month
    )


def parse_late_1980_code(date_code: Optional[str]) -> Late1980DateCode:
    """
    Parse a late 1980s date code.

    The trailing two characters are the factory code; the rest is decoded with
    the early 1980s rules.

    Raises:
        InvalidArgumentError: If the code is None or empty
        InvalidFormatError: If the layout or decoded fields are invalid
        NotFoundError: If the factory code is unknown

    Example:
        >>> parse_late_1980_code("8811SD").countries
        (<Country.FRANCE: 'France'>, <Country.USA: 'USA'>)
    """
    code = require_code(date_code)
    try:
        if not MIN_CODE_LENGTH <= len(code) <= MAX_CODE_LENGTH:
            raise InvalidFormatError(
                f"date code must be {MIN_CODE_LENGTH} or {MAX_CODE_LENGTH} "
                "characters long",
                argument="date_code",
                value=code,
            )
        factory_code = validate_factory_code(code[-2:])
        countries = resolve_country(factory_code)
        year, month = decode_year_month(code[:-2])
    except DateCodeError as exc:
        logger.debug("date_code.rejected", era="late_1980", **exc.to_dict())
        raise

    return Late1980DateCode(
        code=code,
        factory_code=factory_code,
        countries=countries,
        year=year,
        month=month,
    )
