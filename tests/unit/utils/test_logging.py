"""Unit tests for the structured logging framework.

Tests cover:
- get_logger returns a structlog logger that renders JSON
- Context binding
- Codec rejections are logged with structured context
"""

import json
import logging

import pytest

from date_code_hub.domain.countries import resolve_country
from date_code_hub.domain.eras.period_1990 import parse_1990_code
from date_code_hub.domain.exceptions import InvalidFormatError, NotFoundError
from date_code_hub.utils.logging import bind_context, get_logger


def _events(caplog: pytest.LogCaptureFixture) -> list:
    return [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.getMessage().startswith("{")
    ]


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")


@pytest.mark.unit
def test_get_logger_renders_json(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event", code="SD0935")

    log_data = _events(caplog)[-1]
    assert log_data["event"] == "test_event"
    assert log_data["logger"] == "my_test_logger"
    assert log_data["level"] == "info"
    assert log_data["code"] == "SD0935"
    assert "timestamp" in log_data


@pytest.mark.unit
def test_bind_context(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(era="2007", batch="intake_42")
    logger.info("date_code.decoded")

    log_data = _events(caplog)[-1]
    assert log_data["era"] == "2007"
    assert log_data["batch"] == "intake_42"


@pytest.mark.unit
def test_unknown_factory_code_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    with pytest.raises(NotFoundError):
        resolve_country("zz")

    events = [e for e in _events(caplog) if e["event"] == "country_resolver.not_found"]
    assert events
    assert events[-1]["factory_location_code"] == "ZZ"


@pytest.mark.unit
def test_rejected_code_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    with pytest.raises(InvalidFormatError):
        parse_1990_code("SD09X5")

    events = [e for e in _events(caplog) if e["event"] == "date_code.rejected"]
    assert events
    assert events[-1]["era"] == "1990"
    assert events[-1]["error_type"] == "InvalidFormatError"
    assert events[-1]["value"] == "SD09X5"
