"""
Ways of dividing a 52-week accounting year into months.
"""

from __future__ import annotations

import bisect
from enum import Enum
from typing import Tuple

from acctcal.temporal.errors import DateTimeRangeError
from acctcal.temporal.fields import ChronoField, ValueRange


class AccountingYearDivision(Enum):
    """Fixed week-count patterns for the months of an accounting year.

    The leap week, when a year has one, is appended to the end of the
    configured month; it never shifts the week numbering inside any other
    month. A ``leap_week_in_month`` of 0 means no leap week.
    """

    QUARTERS_OF_PATTERN_4_4_5_WEEKS = (4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5)
    QUARTERS_OF_PATTERN_4_5_4_WEEKS = (4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4)
    QUARTERS_OF_PATTERN_5_4_4_WEEKS = (5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4)
    THIRTEEN_EVEN_MONTHS_OF_4_WEEKS = (4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4)

    def __init__(self, *weeks_in_months: int):
        self.weeks_in_months: Tuple[int, ...] = weeks_in_months
        self.months_in_year_range = ValueRange.of(1, len(weeks_in_months))
        elapsed = [0]
        for weeks in weeks_in_months[:-1]:
            elapsed.append(elapsed[-1] + weeks)
        self.elapsed_weeks: Tuple[int, ...] = tuple(elapsed)

    @property
    def length_of_year_in_months(self) -> int:
        return len(self.weeks_in_months)

    @property
    def is_quarterly(self) -> bool:
        return self.length_of_year_in_months == 12

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _check_month(self, month: int) -> int:
        return self.months_in_year_range.check_valid_value(month, ChronoField.MONTH_OF_YEAR)

    def _check_leap_week_month(self, leap_week_in_month: int) -> int:
        if leap_week_in_month == 0:
            return 0
        return self._check_month(leap_week_in_month)

    # ------------------------------------------------------------------
    # Week counts
    # ------------------------------------------------------------------
    def weeks_in_month(self, month: int, leap_week_in_month: int = 0) -> int:
        """Weeks in ``month``, counting the leap week if it falls in it."""
        month = self._check_month(month)
        leap_week_in_month = self._check_leap_week_month(leap_week_in_month)
        return self.weeks_in_months[month - 1] + (1 if month == leap_week_in_month else 0)

    def weeks_at_start_of_month(self, month: int, leap_week_in_month: int = 0) -> int:
        """Weeks elapsed in the year before ``month`` begins."""
        month = self._check_month(month)
        leap_week_in_month = self._check_leap_week_month(leap_week_in_month)
        extra = 1 if leap_week_in_month != 0 and month > leap_week_in_month else 0
        return self.elapsed_weeks[month - 1] + extra

    def month_from_elapsed_weeks(self, elapsed_weeks: int, leap_week_in_month: int = 0) -> int:
        """Month containing the 0-based week ``elapsed_weeks`` of the year.

        Raises:
            DateTimeRangeError: If ``elapsed_weeks`` is negative or not
                below the number of weeks in the year (52, or 53 with a
                leap week).
        """
        weeks_in_year = 52 if leap_week_in_month == 0 else 53
        if elapsed_weeks < 0 or elapsed_weeks >= weeks_in_year:
            raise DateTimeRangeError(
                f"Count of '{elapsed_weeks}' elapsed weeks not valid,"
                f" should be in the range [0, {weeks_in_year})",
                field=ChronoField.ALIGNED_WEEK_OF_YEAR,
                value=elapsed_weeks,
            )
        leap_week_in_month = self._check_leap_week_month(leap_week_in_month)

        month = bisect.bisect_right(self.elapsed_weeks, elapsed_weeks)
        # The first week of a month after the leap week is still the leap week.
        if (
            leap_week_in_month != 0
            and month > leap_week_in_month
            and elapsed_weeks == self.elapsed_weeks[month - 1]
        ):
            return month - 1
        return month
