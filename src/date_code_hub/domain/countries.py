"""Factory location code to country resolution.

The table below is historical data: several codes were licensed to more than one
country, so those combinations are kept as their own entries rather than derived
from the single-country lists.

Usage:
    >>> from date_code_hub.domain.countries import resolve_country
    >>> resolve_country("FL")
    (<Country.FRANCE: 'France'>, <Country.USA: 'USA'>)
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional, Sequence, Tuple

from date_code_hub.domain.exceptions import InvalidArgumentError, NotFoundError
from date_code_hub.utils.logging import get_logger

logger = get_logger(__name__)


class Country(str, Enum):
    """Countries that have operated factories stamping date codes."""

    FRANCE = "France"
    ITALY = "Italy"
    SPAIN = "Spain"
    USA = "USA"
    GERMANY = "Germany"
    SWITZERLAND = "Switzerland"


def _codes(*codes: str) -> FrozenSet[str]:
    return frozenset(codes)


# Checked top to bottom; single-country lists come before the shared ones.
# "DR" appears twice in the historical France list and is kept once here.
FACTORY_LOCATION_TABLE: Sequence[Tuple[FrozenSet[str], Tuple[Country, ...]]] = (
    (
        _codes(
            "A0", "A1", "A2", "AA", "AH", "AN", "AR", "AS", "BA", "BJ", "BU",
            "DR", "DU", "DT", "CO", "CT", "CX", "ET", "MB", "MI", "NO", "RA",
            "RI", "SF", "SL", "SN", "SP", "SR", "TJ", "TH", "TR", "TS", "VI",
            "VX",
        ),
        (Country.FRANCE,),
    ),
    (
        _codes("BC", "BO", "CE", "FO", "MA", "OB", "RC", "RE", "SA", "TD"),
        (Country.ITALY,),
    ),
    (_codes("CA", "LO", "LB", "LM", "GI"), (Country.SPAIN,)),
    (_codes("FC", "FH", "LA", "OS"), (Country.USA,)),
    (_codes("FL", "SD"), (Country.FRANCE, Country.USA)),
    (_codes("LP", "OL"), (Country.GERMANY,)),
    (_codes("DI", "FA"), (Country.SWITZERLAND,)),
    (_codes("LW"), (Country.FRANCE, Country.SPAIN)),
)


def resolve_country(factory_location_code: Optional[str]) -> Tuple[Country, ...]:
    """
    Resolve a two-letter factory location code to its countries.

    One location code can belong to several countries; the returned tuple keeps
    the table's declaration order.

    Args:
        factory_location_code: Two-letter factory code (case-insensitive)

    Returns:
        Non-empty tuple of Country values

    Raises:
        InvalidArgumentError: If the code is None or empty
        NotFoundError: If the code is not present in any table

    Example:
        >>> resolve_country("lw")
        (<Country.FRANCE: 'France'>, <Country.SPAIN: 'Spain'>)
    """
    if not factory_location_code:
        raise InvalidArgumentError(
            "factory location code is null or empty",
            argument="factory_location_code",
            value=factory_location_code,
        )
    if not isinstance(factory_location_code, str):
        raise InvalidArgumentError(
            "factory location code must be a string",
            argument="factory_location_code",
            value=factory_location_code,
        )

    code = factory_location_code.upper()
    for codes, countries in FACTORY_LOCATION_TABLE:
        if code in codes:
            return countries

    logger.debug("country_resolver.not_found", factory_location_code=code)
    raise NotFoundError(
        f"factory location code '{code}' is not known",
        argument="factory_location_code",
        value=factory_location_code,
    )


def is_known_factory_code(factory_location_code: Optional[str]) -> bool:
    """Return True if the code resolves to at least one country."""
    if not factory_location_code or not isinstance(factory_location_code, str):
        return False
    code = factory_location_code.upper()
    return any(code in codes for codes, _ in FACTORY_LOCATION_TABLE)
