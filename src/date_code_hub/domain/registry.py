"""Era registry and dispatch.

Callers that already know which era a code belongs to can decode it through
``parse_date_code`` instead of branching on the era themselves. There is no
guessing: an era must be given explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union

from date_code_hub.domain.eras import (
    parse_1990_code,
    parse_2007_code,
    parse_early_1980_code,
    parse_late_1980_code,
)
from date_code_hub.domain.exceptions import InvalidArgumentError
from date_code_hub.domain.models import DecodedDateCode, Era


@dataclass(frozen=True)
class EraRule:
    """Metadata and decoder for one date code era.

    Attributes:
        era: Era tag the rule belongs to
        label: Human-readable name with the code layout, for display by callers
        min_year: First manufacturing year the era can encode
        max_year: Last manufacturing year the era can encode
        has_factory_code: Whether codes carry a two-letter factory code
        parser: Decoder returning the era's result model
    """

    era: Era
    label: str
    min_year: int
    max_year: int
    has_factory_code: bool
    parser: Callable[[str], DecodedDateCode]


ERA_RULES: Dict[Era, EraRule] = {
    Era.EARLY_1980: EraRule(
        Era.EARLY_1980, "Early 1980s (YY + M/MM)", 1980, 1989, False,
        parse_early_1980_code,
    ),
    Era.LATE_1980: EraRule(
        Era.LATE_1980, "Late 1980s (YY + M/MM + LL)", 1980, 1989, True,
        parse_late_1980_code,
    ),
    Era.PERIOD_1990: EraRule(
        Era.PERIOD_1990, "1990-2006 (LL + M1 Y1 M2 Y2)", 1990, 2006, True,
        parse_1990_code,
    ),
    Era.POST_2007: EraRule(
        Era.POST_2007, "2007 onwards (LL + W1 Y1 W2 Y2)", 2007, 2099, True,
        parse_2007_code,
    ),
}


def get_era_rule(era: Union[Era, str]) -> EraRule:
    """Look up the rule for an Era member or its string value."""
    try:
        key = Era(era)
    except ValueError:
        raise InvalidArgumentError(
            f"unknown date code era: {era!r}", argument="era", value=era
        ) from None
    return ERA_RULES[key]


def parse_date_code(era: Union[Era, str], date_code: str) -> DecodedDateCode:
    """Decode ``date_code`` with the rules of ``era``."""
    return get_era_rule(era).parser(date_code)
