"""Typed errors raised by the date code codec and country resolver.

Every validation failure surfaces immediately as one of these errors; nothing is
clamped, retried or partially returned.
"""

from typing import Any, Dict, Optional


class DateCodeError(Exception):
    """Base error with the offending argument attached for structured logging."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = None,
    ):
        self.argument = argument
        self.value = value
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "argument": self.argument,
            "value": self.value,
            "message": str(self),
        }


class InvalidArgumentError(DateCodeError, ValueError):
    """Required input is missing, empty, or of the wrong type."""


class InvalidFormatError(DateCodeError, ValueError):
    """Input does not match the era's character layout."""


class OutOfRangeError(DateCodeError, ValueError):
    """Year, month or week falls outside the era's valid bounds."""


class NotFoundError(DateCodeError, LookupError):
    """Factory location code is not present in any country table."""
