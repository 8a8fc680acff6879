"""Date code domain: country resolution, per-era codecs and era dispatch."""

from date_code_hub.domain.countries import (
    FACTORY_LOCATION_TABLE,
    Country,
    is_known_factory_code,
    resolve_country,
)
from date_code_hub.domain.eras import (
    generate_1990_code,
    generate_1990_code_for_date,
    generate_2007_code,
    generate_2007_code_for_date,
    generate_early_1980_code,
    generate_early_1980_code_for_date,
    generate_late_1980_code,
    generate_late_1980_code_for_date,
    iso_weeks_in_year,
    parse_1990_code,
    parse_2007_code,
    parse_early_1980_code,
    parse_late_1980_code,
)
from date_code_hub.domain.exceptions import (
    DateCodeError,
    InvalidArgumentError,
    InvalidFormatError,
    NotFoundError,
    OutOfRangeError,
)
from date_code_hub.domain.factory_code import validate_factory_code
from date_code_hub.domain.models import (
    DecodedDateCode,
    Early1980DateCode,
    Era,
    Late1980DateCode,
    Period1990DateCode,
    Post2007DateCode,
)
from date_code_hub.domain.registry import (
    ERA_RULES,
    EraRule,
    get_era_rule,
    parse_date_code,
)

__all__ = [
    # Countries
    "Country",
    "FACTORY_LOCATION_TABLE",
    "is_known_factory_code",
    "resolve_country",
    "validate_factory_code",
    # Codecs
    "generate_early_1980_code",
    "generate_early_1980_code_for_date",
    "parse_early_1980_code",
    "generate_late_1980_code",
    "generate_late_1980_code_for_date",
    "parse_late_1980_code",
    "generate_1990_code",
    "generate_1990_code_for_date",
    "parse_1990_code",
    "generate_2007_code",
    "generate_2007_code_for_date",
    "parse_2007_code",
    "iso_weeks_in_year",
    # Models
    "DecodedDateCode",
    "Early1980DateCode",
    "Era",
    "Late1980DateCode",
    "Period1990DateCode",
    "Post2007DateCode",
    # Registry
    "ERA_RULES",
    "EraRule",
    "get_era_rule",
    "parse_date_code",
    # Errors
    "DateCodeError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "NotFoundError",
    "OutOfRangeError",
]
