"""
Accounting (52/53 week) chronology.

A chronology is fixed by the weekday the year ends on, how that weekday is
anchored to a month (nearest its end, or inside its last week), how the
year is divided into months and which month absorbs the leap week. All
year lengths are derived from consecutive year-end dates: a year is a
leap year exactly when its year-end is 371 days after the previous one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from functools import cached_property
from typing import List, Optional, Tuple, Union

from acctcal.conventions.types import DayOfWeek, Month, YearEndRule
from acctcal.temporal.errors import (
    InvalidConfigurationError,
    MissingConfigurationError,
    UnsupportedFieldError,
)
from acctcal.temporal.fields import ChronoField, ValueRange
from acctcal.utils.date import (
    from_epoch_day,
    iso_year_of_epoch_day,
    month_end_adjusted,
    to_date,
    to_epoch_day,
)

from .date import AccountingDate
from .division import AccountingYearDivision
from .era import AccountingEra

logger = logging.getLogger(__name__)

MIN_YEAR = -999_999
MAX_YEAR = 999_999
DAYS_IN_WEEK = 7
WEEKS_IN_YEAR = 52
DAYS_IN_YEAR = DAYS_IN_WEEK * WEEKS_IN_YEAR
DAYS_IN_LEAP_YEAR = DAYS_IN_YEAR + DAYS_IN_WEEK

# Nearest-end-of: the weekday on or before the 3rd of the following month.
_NEAREST_END_OF_SHIFT = 3


@dataclass(frozen=True)
class AccountingChronology:
    """Immutable accounting calendar system.

    Instances are normally obtained from
    :class:`~acctcal.chrono.builder.AccountingChronologyBuilder`.

    Attributes:
        ends_on: Weekday every accounting year ends on
        end: ISO month the year-end is anchored to
        rule: Whether the year ends nearest the end of ``end`` or in its last week
        division: Week pattern of the months in the year
        leap_week_in_month: Month that grows by a week in leap years
        year_offset: 0 if year Y ends in ISO year Y, 1 if it starts in ISO year Y
    """

    ends_on: DayOfWeek
    end: Month
    rule: YearEndRule
    division: AccountingYearDivision
    leap_week_in_month: int
    year_offset: int = 0

    @classmethod
    def create(
        cls,
        ends_on: Optional[DayOfWeek],
        end: Optional[Month],
        rule: YearEndRule,
        division: Optional[AccountingYearDivision],
        leap_week_in_month: int,
        year_offset: int = 0,
    ) -> AccountingChronology:
        """Validate a configuration and create the chronology.

        Raises:
            MissingConfigurationError: If the weekday, month or division is unset.
            InvalidConfigurationError: If a value is outside its allowed range.
        """
        if ends_on is None:
            raise MissingConfigurationError("Must specify what day-of-week the year ends on")
        if end is None:
            raise MissingConfigurationError("Must specify the month the year ends in")
        if division is None:
            raise MissingConfigurationError("Must specify how the year is divided")
        try:
            ends_on = DayOfWeek(ends_on)
        except ValueError as exc:
            raise InvalidConfigurationError(f"Invalid day-of-week: {ends_on!r}") from exc
        try:
            end = Month(end)
        except ValueError as exc:
            raise InvalidConfigurationError(f"Invalid month: {end!r}") from exc
        if not isinstance(rule, YearEndRule):
            raise InvalidConfigurationError(f"Invalid year-end rule: {rule!r}")
        if not isinstance(division, AccountingYearDivision):
            raise InvalidConfigurationError(f"Invalid year division: {division!r}")
        if not division.months_in_year_range.is_valid_value(leap_week_in_month):
            raise InvalidConfigurationError(
                f"Leap week must be in a month of the division "
                f"({division.months_in_year_range}): {leap_week_in_month}"
            )
        if year_offset not in (0, 1):
            raise InvalidConfigurationError(f"Year offset must be 0 or 1: {year_offset}")

        chronology = cls(ends_on, end, rule, division, leap_week_in_month, year_offset)
        logger.debug("Created accounting chronology: %s", chronology)
        return chronology

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def id(self) -> str:
        return "Accounting"

    @property
    def calendar_type(self) -> Optional[str]:
        return None

    def __str__(self) -> str:
        alignment = "ending" if self.year_offset == 0 else "starting"
        return (
            f"Accounting calendar ends on {self.ends_on.name} {self.rule.description} "
            f"{self.end.name}, year divided in {self.division.name} with leap-week in "
            f"month {self.leap_week_in_month} {alignment} in the given ISO year"
        )

    # ------------------------------------------------------------------
    # Year boundaries
    # ------------------------------------------------------------------
    def year_end_epoch_day(self, proleptic_year: int) -> int:
        """Epoch day of the last day of the accounting year."""
        iso_year = proleptic_year + self.year_offset
        if self.rule is YearEndRule.IN_LAST_WEEK_OF:
            return month_end_adjusted(iso_year, self.end, self.ends_on)
        return month_end_adjusted(iso_year, self.end, self.ends_on, _NEAREST_END_OF_SHIFT)

    def year_end(self, proleptic_year: int) -> date:
        """Last day of the accounting year as an ISO date."""
        return from_epoch_day(self.year_end_epoch_day(proleptic_year))

    def year_start_epoch_day(self, proleptic_year: int) -> int:
        return self.year_end_epoch_day(proleptic_year - 1) + 1

    def is_leap_year(self, proleptic_year: int) -> bool:
        """True if the year has 53 weeks."""
        return self.length_of_year(proleptic_year) == DAYS_IN_LEAP_YEAR

    def length_of_year(self, proleptic_year: int) -> int:
        return self.year_end_epoch_day(proleptic_year) - self.year_end_epoch_day(proleptic_year - 1)

    def previous_leap_years(self, proleptic_year: int) -> int:
        """Signed count of leap years between year 1 and ``proleptic_year``.

        For years after 1 this counts the leap years in ``[1, year)``; for
        years up to 0 it is minus the count of leap years in ``[year, 0]``.
        """
        elapsed_days = self.year_end_epoch_day(proleptic_year - 1) - self.year_end_epoch_day(0)
        return (elapsed_days - DAYS_IN_YEAR * (proleptic_year - 1)) // DAYS_IN_WEEK

    def leap_week_for_year(self, proleptic_year: int) -> int:
        """Leap-week month to use for the year, 0 if it is not a leap year."""
        return self.leap_week_in_month if self.is_leap_year(proleptic_year) else 0

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        weeks = self.division.weeks_in_month(month, self.leap_week_for_year(proleptic_year))
        return weeks * DAYS_IN_WEEK

    # ------------------------------------------------------------------
    # Day-count conversion
    # ------------------------------------------------------------------
    def epoch_day_of(self, proleptic_year: int, month: int, day_of_month: int) -> int:
        """Epoch day of an already validated (year, month, day)."""
        leap_week = self.leap_week_for_year(proleptic_year)
        weeks = self.division.weeks_at_start_of_month(month, leap_week)
        return self.year_end_epoch_day(proleptic_year - 1) + weeks * DAYS_IN_WEEK + day_of_month

    def month_day_of_year_day(self, proleptic_year: int, day_of_year: int) -> Tuple[int, int]:
        """Split a day-of-year into (month, day-of-month)."""
        leap_week = self.leap_week_for_year(proleptic_year)
        month = self.division.month_from_elapsed_weeks((day_of_year - 1) // DAYS_IN_WEEK, leap_week)
        day_of_month = day_of_year - self.division.weeks_at_start_of_month(month, leap_week) * DAYS_IN_WEEK
        return month, day_of_month

    def resolve_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        """Convert an epoch day to (year, month, day-of-month)."""
        self.range(ChronoField.EPOCH_DAY).check_valid_value(epoch_day, ChronoField.EPOCH_DAY)
        # The year-end is always within a week of the anchor month's end, so
        # the ISO year is at most one fiscal year away.
        year = iso_year_of_epoch_day(epoch_day) - self.year_offset
        while epoch_day > self.year_end_epoch_day(year):
            year += 1
        while epoch_day <= self.year_end_epoch_day(year - 1):
            year -= 1
        logger.debug("Epoch day %d falls in accounting year %d", epoch_day, year)
        day_of_year = epoch_day - self.year_end_epoch_day(year - 1)
        month, day_of_month = self.month_day_of_year_day(year, day_of_year)
        return year, month, day_of_month

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------
    @cached_property
    def _week_of_month_range(self) -> ValueRange:
        months = range(1, self.division.length_of_year_in_months + 1)
        smallest = min(self.division.weeks_in_month(m) for m in months)
        largest = max(self.division.weeks_in_month(m, self.leap_week_in_month) for m in months)
        return ValueRange.of(1, smallest, largest)

    @cached_property
    def _epoch_day_range(self) -> ValueRange:
        return ValueRange.of(
            self.year_start_epoch_day(MIN_YEAR), self.year_end_epoch_day(MAX_YEAR)
        )

    def range(self, field: ChronoField) -> ValueRange:
        """Range of valid values for ``field`` across every year."""
        months = self.division.length_of_year_in_months
        if field in (
            ChronoField.DAY_OF_WEEK,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ):
            return ValueRange.of(1, DAYS_IN_WEEK)
        elif field == ChronoField.ALIGNED_WEEK_OF_MONTH:
            return self._week_of_month_range
        elif field == ChronoField.DAY_OF_MONTH:
            weeks = self._week_of_month_range
            return ValueRange.of(
                1, weeks.smallest_maximum * DAYS_IN_WEEK, weeks.maximum * DAYS_IN_WEEK
            )
        elif field == ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, DAYS_IN_YEAR, DAYS_IN_LEAP_YEAR)
        elif field == ChronoField.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, WEEKS_IN_YEAR, WEEKS_IN_YEAR + 1)
        elif field == ChronoField.MONTH_OF_YEAR:
            return self.division.months_in_year_range
        elif field == ChronoField.PROLEPTIC_MONTH:
            return ValueRange.of(MIN_YEAR * months, MAX_YEAR * months + months - 1)
        elif field == ChronoField.YEAR:
            return ValueRange.of(MIN_YEAR, MAX_YEAR)
        elif field == ChronoField.YEAR_OF_ERA:
            return ValueRange.of(1, MAX_YEAR, 1 - MIN_YEAR)
        elif field == ChronoField.ERA:
            return ValueRange.of(AccountingEra.BCE.value, AccountingEra.CE.value)
        elif field == ChronoField.EPOCH_DAY:
            return self._epoch_day_range
        raise UnsupportedFieldError(f"Unsupported field: {field}", field=field)

    # ------------------------------------------------------------------
    # Eras
    # ------------------------------------------------------------------
    def proleptic_year(self, era: AccountingEra, year_of_era: int) -> int:
        if not isinstance(era, AccountingEra):
            raise TypeError("Era must be AccountingEra")
        return year_of_era if era is AccountingEra.CE else 1 - year_of_era

    def era_of(self, era: int) -> AccountingEra:
        return AccountingEra.of(era)

    def eras(self) -> List[AccountingEra]:
        return list(AccountingEra)

    # ------------------------------------------------------------------
    # Date factories
    # ------------------------------------------------------------------
    def date(self, proleptic_year: int, month: int, day_of_month: int) -> AccountingDate:
        """Accounting date from proleptic year, month and day-of-month."""
        return AccountingDate.of(self, proleptic_year, month, day_of_month)

    def date_era(
        self, era: AccountingEra, year_of_era: int, month: int, day_of_month: int
    ) -> AccountingDate:
        return self.date(self.proleptic_year(era, year_of_era), month, day_of_month)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> AccountingDate:
        return AccountingDate.of_year_day(self, proleptic_year, day_of_year)

    def date_era_year_day(
        self, era: AccountingEra, year_of_era: int, day_of_year: int
    ) -> AccountingDate:
        return self.date_year_day(self.proleptic_year(era, year_of_era), day_of_year)

    def date_epoch_day(self, epoch_day: int) -> AccountingDate:
        return AccountingDate.of_epoch_day(self, epoch_day)

    def date_from(self, temporal: Union[AccountingDate, str, date, datetime]) -> AccountingDate:
        """Accounting date for the same day as ``temporal``."""
        if isinstance(temporal, AccountingDate):
            if temporal.chronology == self:
                return temporal
            return self.date_epoch_day(temporal.to_epoch_day())
        return self.date_epoch_day(to_epoch_day(to_date(temporal)))

    def date_now(self, today: Optional[date] = None) -> AccountingDate:
        """Accounting date for ``today`` (the system date when omitted)."""
        return self.date_from(today if today is not None else date.today())
