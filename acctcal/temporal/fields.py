"""
Field and unit identifiers understood by accounting dates, plus the
``ValueRange`` used to describe their valid values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import DateTimeRangeError


class ChronoField(Enum):
    """Calendar fields an accounting date can be queried or adjusted by."""

    DAY_OF_WEEK = "DayOfWeek"
    ALIGNED_DAY_OF_WEEK_IN_MONTH = "AlignedDayOfWeekInMonth"
    ALIGNED_DAY_OF_WEEK_IN_YEAR = "AlignedDayOfWeekInYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    ALIGNED_WEEK_OF_MONTH = "AlignedWeekOfMonth"
    ALIGNED_WEEK_OF_YEAR = "AlignedWeekOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    ERA = "Era"

    def __str__(self) -> str:
        return self.value


class ChronoUnit(Enum):
    """Units an accounting date can be moved by or measured in."""

    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValueRange:
    """Inclusive range of valid values for a field.

    The maximum may vary (e.g. day-of-year is 364 in a normal year and 371
    in a leap year); ``smallest_maximum`` holds the lower of the two.

    Attributes:
        minimum: Smallest valid value
        smallest_maximum: Largest value valid in every context
        maximum: Largest value valid in some context
    """

    minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self):
        if self.minimum > self.smallest_maximum or self.smallest_maximum > self.maximum:
            raise ValueError(
                f"Invalid range: {self.minimum} - {self.smallest_maximum}/{self.maximum}"
            )

    @classmethod
    def of(cls, minimum: int, smallest_maximum: int, maximum: int | None = None) -> ValueRange:
        if maximum is None:
            maximum = smallest_maximum
        return cls(minimum, smallest_maximum, maximum)

    def is_fixed(self) -> bool:
        return self.smallest_maximum == self.maximum

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, field: ChronoField | None = None) -> int:
        """Return ``value`` unchanged, or raise if it is outside the range."""
        if not self.is_valid_value(value):
            name = f"{field}" if field is not None else "value"
            raise DateTimeRangeError(
                f"Invalid value for {name} (valid values {self}): {value}",
                field=field,
                value=value,
            )
        return value

    def __contains__(self, value: int) -> bool:
        return self.is_valid_value(value)

    def __str__(self) -> str:
        if self.is_fixed():
            return f"{self.minimum} - {self.maximum}"
        return f"{self.minimum} - {self.smallest_maximum}/{self.maximum}"
