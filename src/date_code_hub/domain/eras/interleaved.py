"""Digit interleaving shared by the six-character eras.

Both the 1990-2006 and post-2007 layouts place a factory code first, then weave a
two-digit period (month or week) with the last two year digits::

    L L P1 Y1 P2 Y2
"""

import re
from typing import Tuple

from date_code_hub.domain.exceptions import InvalidFormatError

INTERLEAVED_CODE_LENGTH = 6
_INTERLEAVED_DIGITS = re.compile(r"[0-9]{4}")


def interleave_code(factory_code: str, period: int, year: int) -> str:
    """Build ``LL P1 Y1 P2 Y2`` from an already validated factory code."""
    period_digits = f"{period:02d}"
    year_digits = f"{year % 100:02d}"
    return (
        factory_code
        + period_digits[0]
        + year_digits[0]
        + period_digits[1]
        + year_digits[1]
    )


def split_interleaved_code(date_code: str) -> Tuple[str, str, str]:
    """
    Split a six-character code into factory code, period digits and year digits.

    Args:
        date_code: Uppercased date code

    Returns:
        Tuple of (factory code, two period digits, two year digits)

    Raises:
        InvalidFormatError: If the length is not 6 or positions 2-5 are not digits
    """
    if len(date_code) != INTERLEAVED_CODE_LENGTH:
        raise InvalidFormatError(
            f"date code must be {INTERLEAVED_CODE_LENGTH} characters long",
            argument="date_code",
            value=date_code,
        )
    digits = date_code[2:]
    if not _INTERLEAVED_DIGITS.fullmatch(digits):
        raise InvalidFormatError(
            "date code must end with four digits",
            argument="date_code",
            value=date_code,
        )
    return date_code[:2], digits[0] + digits[2], digits[1] + digits[3]
