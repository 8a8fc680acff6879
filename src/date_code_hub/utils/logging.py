"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from date_code_hub.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from date_code_hub.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("date_code.generated", era="1990", code="SD0935")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from structlog.types import Processor

from date_code_hub.config import get_settings

_HANDLER_NAME_STDOUT = "date_code_hub.stdout"
_HANDLER_NAME_FILE = "date_code_hub.file"


def _get_log_level() -> int:
    """Get log level from settings.

    Falls back to the LOG_LEVEL environment variable when settings fail
    validation, so a bad value never prevents the package from importing.
    """
    try:
        return get_settings().log_level_number
    except ValidationError:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().LOG_TO_FILE
    except ValidationError:
        return os.getenv("LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().LOG_FILE_DIR)
    except ValidationError:
        log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: datecodehub-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"datecodehub-{date_str}.log"


def _has_handler(name: str) -> bool:
    return any(handler.get_name() == name for handler in logging.root.handlers)


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Dual output (stdout + optional file)
    """
    level = _get_log_level()
    logging.root.setLevel(level)

    # Re-imports must not stack duplicate handlers
    if not _has_handler(_HANDLER_NAME_STDOUT):
        stdout_handler = logging.StreamHandler()
        stdout_handler.set_name(_HANDLER_NAME_STDOUT)
        stdout_handler.setLevel(level)
        logging.root.addHandler(stdout_handler)

    if _should_log_to_file() and not _has_handler(_HANDLER_NAME_FILE):
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        file_handler.set_name(_HANDLER_NAME_FILE)
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("country_resolver.not_found", factory_location_code="ZZ")
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(era="2007", batch="intake_42")
        >>> logger.info("date_code.decoded", code="SD0165")
        # Emits: {"era": "2007", "batch": "intake_42", "code": "SD0165",
        #         "event": "date_code.decoded", ...}
    """
    return structlog.get_logger().bind(**kwargs)
