"""Exceptions raised by the accounting calendar."""

from typing import Any, Optional


class AccountingCalendarError(Exception):
    """Base class for every error raised by acctcal."""


class DateTimeRangeError(AccountingCalendarError, ValueError):
    """A field value, week count or date lies outside its valid range."""

    def __init__(self, message: str, field: Optional[Any] = None, value: Optional[int] = None):
        super().__init__(message)
        self.field = field
        self.value = value


class UnsupportedFieldError(DateTimeRangeError):
    """The field or unit is not part of the accounting calendar."""


class ChronologyConfigurationError(AccountingCalendarError):
    """The builder holds a configuration that cannot produce a chronology."""


class MissingConfigurationError(ChronologyConfigurationError):
    """A required part of the configuration was never set."""


class InvalidConfigurationError(ChronologyConfigurationError):
    """A configured value is outside the range the other settings allow."""
