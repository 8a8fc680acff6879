"""Shared argument validation for the date code eras."""

import re
from typing import Any, Optional

from date_code_hub.domain.exceptions import InvalidArgumentError, InvalidFormatError

FACTORY_CODE_PATTERN = re.compile(r"[A-Za-z]{2}")


def validate_factory_code(factory_location_code: Optional[str]) -> str:
    """
    Validate a factory location code and normalize it to uppercase.

    Args:
        factory_location_code: Candidate two-letter code

    Returns:
        The uppercased code

    Raises:
        InvalidArgumentError: If the code is None or empty
        InvalidFormatError: If the code is not exactly two ASCII letters
    """
    if not factory_location_code:
        raise InvalidArgumentError(
            "factory location code is null or empty",
            argument="factory_location_code",
            value=factory_location_code,
        )
    if not isinstance(
        factory_location_code, str
    ) or not FACTORY_CODE_PATTERN.fullmatch(factory_location_code):
        raise InvalidFormatError(
            "factory location code must be exactly two letters",
            argument="factory_location_code",
            value=factory_location_code,
        )
    return factory_location_code.upper()


def require_int(value: Any, argument: str) -> int:
    """Reject None and non-integer values (bool included)."""
    if value is None:
        raise InvalidArgumentError(f"{argument} is required", argument=argument)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    return value


def require_code(date_code: Optional[str]) -> str:
    """Reject a missing date code and normalize it to uppercase."""
    if not date_code:
        raise InvalidArgumentError(
            "date code is null or empty", argument="date_code", value=date_code
        )
    if not isinstance(date_code, str):
        raise InvalidArgumentError(
            f"date code must be a string, got {type(date_code).__name__}",
            argument="date_code",
            value=date_code,
        )
    return date_code.upper()
