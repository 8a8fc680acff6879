"""Configuration management for Date Code Hub.

Usage:
    >>> from date_code_hub.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from date_code_hub.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
