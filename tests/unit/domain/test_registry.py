"""
Tests for era dispatch and the decoded model union.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from date_code_hub.domain.countries import Country
from date_code_hub.domain.exceptions import InvalidArgumentError, NotFoundError
from date_code_hub.domain.models import (
    DecodedDateCode,
    Early1980DateCode,
    Era,
    Late1980DateCode,
    Period1990DateCode,
    Post2007DateCode,
)
from date_code_hub.domain.registry import ERA_RULES, get_era_rule, parse_date_code


@pytest.mark.unit
class TestEraRules:
    def test_rules_are_chronological(self):
        assert list(ERA_RULES) == [
            Era.EARLY_1980,
            Era.LATE_1980,
            Era.PERIOD_1990,
            Era.POST_2007,
        ]

    def test_only_early_1980_lacks_factory_code(self):
        without = [era for era, rule in ERA_RULES.items() if not rule.has_factory_code]
        assert without == [Era.EARLY_1980]

    @pytest.mark.parametrize(
        "era, min_year, max_year",
        [
            (Era.EARLY_1980, 1980, 1989),
            (Era.LATE_1980, 1980, 1989),
            (Era.PERIOD_1990, 1990, 2006),
            (Era.POST_2007, 2007, 2099),
        ],
    )
    def test_year_bounds(self, era, min_year, max_year):
        rule = get_era_rule(era)
        assert (rule.min_year, rule.max_year) == (min_year, max_year)

    def test_labels_describe_layout(self):
        assert "LL" not in get_era_rule(Era.EARLY_1980).label
        for era in (Era.LATE_1980, Era.PERIOD_1990, Era.POST_2007):
            assert "LL" in get_era_rule(era).label

    def test_lookup_by_string_value(self):
        assert get_era_rule("1990").era == Era.PERIOD_1990
        assert get_era_rule(Era.POST_2007).min_year == 2007

    @pytest.mark.parametrize("era", ["1970", "", None])
    def test_unknown_era(self, era):
        with pytest.raises(InvalidArgumentError):
            get_era_rule(era)


@pytest.mark.unit
class TestParseDateCode:
    @pytest.mark.parametrize(
        "era, code, model",
        [
            (Era.EARLY_1980, "873", Early1980DateCode),
            (Era.LATE_1980, "8811SD", Late1980DateCode),
            (Era.PERIOD_1990, "SD0935", Period1990DateCode),
            (Era.POST_2007, "SD0165", Post2007DateCode),
        ],
    )
    def test_dispatches_to_era_parser(self, era, code, model):
        result = parse_date_code(era, code)
        assert isinstance(result, model)
        assert result.era == era

    def test_errors_propagate(self):
        with pytest.raises(NotFoundError):
            parse_date_code("late_1980", "8811ZZ")


@pytest.mark.unit
class TestDecodedModels:
    def test_models_are_frozen(self):
        result = parse_date_code(Era.EARLY_1980, "873")
        with pytest.raises(ValidationError):
            result.year = 1988

    def test_discriminated_union(self):
        adapter = TypeAdapter(DecodedDateCode)
        result = adapter.validate_python(
            {
                "era": Era.POST_2007,
                "code": "SD0165",
                "factory_code": "SD",
                "countries": [Country.FRANCE, Country.USA],
                "year": 2015,
                "week": 6,
            }
        )
        assert isinstance(result, Post2007DateCode)
        assert result.countries == (Country.FRANCE, Country.USA)

    def test_dump_keeps_country_values(self):
        result = parse_date_code(Era.PERIOD_1990, "LW0935")
        dumped = result.model_dump(mode="json")
        assert dumped["countries"] == ["France", "Spain"]
        assert dumped["era"] == "1990"
