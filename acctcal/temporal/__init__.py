"""
Field identifiers, value ranges and errors shared by the calendar types.
"""

from .errors import (
    AccountingCalendarError,
    ChronologyConfigurationError,
    DateTimeRangeError,
    InvalidConfigurationError,
    MissingConfigurationError,
    UnsupportedFieldError,
)
from .fields import ChronoField, ChronoUnit, ValueRange

__all__ = [
    # Fields
    "ChronoField",
    "ChronoUnit",
    "ValueRange",
    # Errors
    "AccountingCalendarError",
    "DateTimeRangeError",
    "UnsupportedFieldError",
    "ChronologyConfigurationError",
    "MissingConfigurationError",
    "InvalidConfigurationError",
]
