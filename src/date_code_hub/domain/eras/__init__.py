"""Per-era date code generation and parsing."""

from date_code_hub.domain.eras.early_1980 import (
    generate_early_1980_code,
    generate_early_1980_code_for_date,
    parse_early_1980_code,
)
from date_code_hub.domain.eras.late_1980 import (
    generate_late_1980_code,
    generate_late_1980_code_for_date,
    parse_late_1980_code,
)
from date_code_hub.domain.eras.period_1990 import (
    generate_1990_code,
    generate_1990_code_for_date,
    parse_1990_code,
)
from date_code_hub.domain.eras.post_2007 import (
    generate_2007_code,
    generate_2007_code_for_date,
    iso_weeks_in_year,
    parse_2007_code,
)

__all__ = [
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
    "iso_weeks_in_year",
    "parse_2007_code",
]
