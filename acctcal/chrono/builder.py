"""Fluent builder for accounting chronologies."""

from __future__ import annotations

from typing import Optional

from acctcal.conventions.types import DayOfWeek, Month, YearAlignment, YearEndRule

from .chronology import AccountingChronology
from .division import AccountingYearDivision


class AccountingChronologyBuilder:
    """Collects the settings of an accounting calendar.

    Every setter returns the builder so calls can be chained. Nothing is
    validated until :meth:`to_chronology`, and the builder can be reused
    to create further chronologies afterwards.

    Example:
        >>> chronology = (
        ...     AccountingChronologyBuilder()
        ...     .ends_on(DayOfWeek.SUNDAY)
        ...     .nearest_end_of(Month.AUGUST)
        ...     .with_division(AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS)
        ...     .leap_week_in_month(12)
        ...     .to_chronology()
        ... )
    """

    def __init__(self):
        self._ends_on: Optional[DayOfWeek] = None
        self._rule = YearEndRule.NEAREST_END_OF
        self._end: Optional[Month] = None
        self._division: Optional[AccountingYearDivision] = None
        self._leap_week_in_month = 0
        self._alignment = YearAlignment.ENDS_IN_ISO_YEAR

    # ------------------------------------------------------------------
    # Year end
    # ------------------------------------------------------------------
    def ends_on(self, ends_on: DayOfWeek) -> AccountingChronologyBuilder:
        """Weekday the accounting year ends on."""
        self._ends_on = ends_on
        return self

    def nearest_end_of(self, end: Month) -> AccountingChronologyBuilder:
        """Year ends on the chosen weekday nearest the end of ``end``."""
        self._rule = YearEndRule.NEAREST_END_OF
        self._end = end
        return self

    def in_last_week_of(self, end: Month) -> AccountingChronologyBuilder:
        """Year ends on the chosen weekday inside the last week of ``end``."""
        self._rule = YearEndRule.IN_LAST_WEEK_OF
        self._end = end
        return self

    # ------------------------------------------------------------------
    # Division
    # ------------------------------------------------------------------
    def with_division(self, division: AccountingYearDivision) -> AccountingChronologyBuilder:
        self._division = division
        return self

    def leap_week_in_month(self, leap_week_in_month: int) -> AccountingChronologyBuilder:
        """Month that gains the extra week in 53-week years."""
        self._leap_week_in_month = leap_week_in_month
        return self

    # ------------------------------------------------------------------
    # ISO year alignment
    # ------------------------------------------------------------------
    def accounting_year_ends_in_iso_year(self) -> AccountingChronologyBuilder:
        """Accounting year Y ends in ISO year Y (the default)."""
        self._alignment = YearAlignment.ENDS_IN_ISO_YEAR
        return self

    def accounting_year_starts_in_iso_year(self) -> AccountingChronologyBuilder:
        """Accounting year Y starts in ISO year Y and ends in Y + 1."""
        self._alignment = YearAlignment.STARTS_IN_ISO_YEAR
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------
    def to_chronology(self) -> AccountingChronology:
        """Validate the settings and create a chronology.

        Raises:
            MissingConfigurationError: If the weekday, month or division was never set.
            InvalidConfigurationError: If the leap-week month is not a month
                of the division, or a weekday/month value is unknown.
        """
        return AccountingChronology.create(
            self._ends_on,
            self._end,
            self._rule,
            self._division,
            self._leap_week_in_month,
            self._alignment.offset,
        )
