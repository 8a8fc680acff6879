"""Decoded date code models.

Each era decodes into its own immutable model. The models share an ``era``
discriminator so ``DecodedDateCode`` can be used as a tagged union.
"""

from enum import Enum
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from date_code_hub.domain.countries import Country


class Era(str, Enum):
    """Historical date code grammars, oldest first."""

    EARLY_1980 = "early_1980"
    LATE_1980 = "late_1980"
    PERIOD_1990 = "1990"
    POST_2007 = "2007"


class _DateCodeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Canonical uppercase date code")
    year: int = Field(..., description="Manufacturing year")


class _FactoryDateCodeBase(_DateCodeBase):
    factory_code: str = Field(..., description="Two-letter factory location code")
    countries: Tuple[Country, ...] = Field(
        ..., description="Countries that operated the factory code, table order"
    )


class Early1980DateCode(_DateCodeBase):
    """Early 1980s: ``YY`` + ``M``/``MM``, no factory code."""

    era: Literal[Era.EARLY_1980] = Era.EARLY_1980
    month: int = Field(..., description="Manufacturing month (1-12)")


class Late1980DateCode(_FactoryDateCodeBase):
    """Late 1980s: ``YY`` + ``M``/``MM`` + ``LL``."""

    era: Literal[Era.LATE_1980] = Era.LATE_1980
    month: int = Field(..., description="Manufacturing month (1-12)")


class Period1990DateCode(_FactoryDateCodeBase):
    """1990-2006: ``LL`` + ``M1 Y1 M2 Y2``."""

    era: Literal[Era.PERIOD_1990] = Era.PERIOD_1990
    month: int = Field(..., description="Manufacturing month (1-12)")


class Post2007DateCode(_FactoryDateCodeBase):
    """2007 onwards: ``LL`` + ``W1 Y1 W2 Y2`` using ISO weeks."""

    era: Literal[Era.POST_2007] = Era.POST_2007
    week: int = Field(..., description="ISO week number (1-53)")


DecodedDateCode = Annotated[
    Union[Early1980DateCode, Late1980DateCode, Period1990DateCode, Post2007DateCode],
    Field(discriminator="era"),
]
