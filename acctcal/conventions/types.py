"""
Basic types and enums used to configure accounting calendars.
"""

from enum import Enum, IntEnum

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE

_RELATIVEDELTA_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)


class DayOfWeek(IntEnum):
    """ISO days of the week, Monday = 1 through Sunday = 7."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def to_relativedelta(self, n: int = -1):
        """dateutil weekday; the default ``n=-1`` means previous-or-same."""
        return _RELATIVEDELTA_WEEKDAYS[self.value - 1](n)

    @classmethod
    def of_date(cls, d) -> "DayOfWeek":
        return cls(d.isoweekday())


class Month(IntEnum):
    """Months of the ISO year."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class YearEndRule(Enum):
    """How the fiscal year-end is anchored to the chosen month."""

    NEAREST_END_OF = "NEAREST_END_OF"
    IN_LAST_WEEK_OF = "IN_LAST_WEEK_OF"

    @property
    def description(self) -> str:
        if self is YearEndRule.NEAREST_END_OF:
            return "nearest end of"
        return "in last week of"


class YearAlignment(Enum):
    """Which ISO year a fiscal year is numbered after."""

    ENDS_IN_ISO_YEAR = 0
    STARTS_IN_ISO_YEAR = 1

    @property
    def offset(self) -> int:
        return self.value
