"""
Dates in an accounting calendar.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import total_ordering
from typing import TYPE_CHECKING, Optional, Union

from acctcal.conventions.types import DayOfWeek
from acctcal.temporal.errors import UnsupportedFieldError
from acctcal.temporal.fields import ChronoField, ChronoUnit, ValueRange
from acctcal.utils.date import from_epoch_day, iso_day_of_week

from .era import AccountingEra

if TYPE_CHECKING:
    from .chronology import AccountingChronology

DateLike = Union["AccountingDate", str, date, datetime]

_YEARS_IN_UNIT = {
    ChronoUnit.YEARS: 1,
    ChronoUnit.DECADES: 10,
    ChronoUnit.CENTURIES: 100,
    ChronoUnit.MILLENNIA: 1000,
}


def _truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient


def _require_chronology(chronology) -> None:
    if chronology is None:
        raise TypeError("chronology must not be None")


@total_ordering
@dataclass(frozen=True, repr=False)
class AccountingDate:
    """A date in a specific accounting chronology.

    Dates hold a reference to their chronology and delegate every range
    and year-length question to it. Two dates are equal only if their
    chronologies are equal as well as their year, month and day, and only
    dates of the same chronology can be ordered.

    Use :meth:`AccountingChronology.date` or the ``of*`` factories rather
    than the constructor, which does not validate.
    """

    chronology: AccountingChronology
    proleptic_year: int
    month: int
    day_of_month: int

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def of(
        cls, chronology: AccountingChronology, proleptic_year: int, month: int, day_of_month: int
    ) -> AccountingDate:
        """Validated date from proleptic year, month and day-of-month."""
        _require_chronology(chronology)
        chronology.range(ChronoField.YEAR).check_valid_value(proleptic_year, ChronoField.YEAR)
        chronology.range(ChronoField.MONTH_OF_YEAR).check_valid_value(month, ChronoField.MONTH_OF_YEAR)
        length = chronology.length_of_month(proleptic_year, month)
        ValueRange.of(1, length).check_valid_value(day_of_month, ChronoField.DAY_OF_MONTH)
        return cls(chronology, proleptic_year, month, day_of_month)

    @classmethod
    def of_year_day(
        cls, chronology: AccountingChronology, proleptic_year: int, day_of_year: int
    ) -> AccountingDate:
        """Validated date from proleptic year and day-of-year."""
        _require_chronology(chronology)
        chronology.range(ChronoField.YEAR).check_valid_value(proleptic_year, ChronoField.YEAR)
        length = chronology.length_of_year(proleptic_year)
        ValueRange.of(1, length).check_valid_value(day_of_year, ChronoField.DAY_OF_YEAR)
        month, day_of_month = chronology.month_day_of_year_day(proleptic_year, day_of_year)
        return cls(chronology, proleptic_year, month, day_of_month)

    @classmethod
    def of_epoch_day(cls, chronology: AccountingChronology, epoch_day: int) -> AccountingDate:
        """Date falling on ``epoch_day`` (days since 1970-01-01)."""
        _require_chronology(chronology)
        return cls(chronology, *chronology.resolve_epoch_day(epoch_day))

    @classmethod
    def from_temporal(cls, chronology: AccountingChronology, temporal: DateLike) -> AccountingDate:
        _require_chronology(chronology)
        return chronology.date_from(temporal)

    @classmethod
    def now(cls, chronology: AccountingChronology, today: Optional[date] = None) -> AccountingDate:
        _require_chronology(chronology)
        return chronology.date_now(today)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def _leap_week(self) -> int:
        return self.chronology.leap_week_for_year(self.proleptic_year)

    @property
    def day_of_year(self) -> int:
        weeks = self.chronology.division.weeks_at_start_of_month(self.month, self._leap_week)
        return weeks * 7 + self.day_of_month

    @property
    def day_of_week(self) -> DayOfWeek:
        return iso_day_of_week(self.to_epoch_day())

    @property
    def era(self) -> AccountingEra:
        return AccountingEra.CE if self.proleptic_year >= 1 else AccountingEra.BCE

    @property
    def year_of_era(self) -> int:
        return self.proleptic_year if self.proleptic_year >= 1 else 1 - self.proleptic_year

    @property
    def proleptic_month(self) -> int:
        months = self.chronology.division.length_of_year_in_months
        return self.proleptic_year * months + self.month - 1

    def is_leap_year(self) -> bool:
        return self.chronology.is_leap_year(self.proleptic_year)

    def length_of_month(self) -> int:
        return self.chronology.length_of_month(self.proleptic_year, self.month)

    def length_of_year(self) -> int:
        return self.chronology.length_of_year(self.proleptic_year)

    def to_epoch_day(self) -> int:
        return self.chronology.epoch_day_of(self.proleptic_year, self.month, self.day_of_month)

    def to_date(self) -> date:
        """The same day as an ISO ``datetime.date``."""
        return from_epoch_day(self.to_epoch_day())

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------
    def is_supported(self, field_or_unit: Union[ChronoField, ChronoUnit]) -> bool:
        return isinstance(field_or_unit, (ChronoField, ChronoUnit))

    def range(self, field: ChronoField) -> ValueRange:
        """Valid values of ``field`` for this particular date."""
        if not isinstance(field, ChronoField):
            raise UnsupportedFieldError(f"Unsupported field: {field}", field=field)
        if field == ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        elif field == ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        elif field == ChronoField.ALIGNED_WEEK_OF_MONTH:
            weeks = self.chronology.division.weeks_in_month(self.month, self._leap_week)
            return ValueRange.of(1, weeks)
        elif field == ChronoField.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, self.length_of_year() // 7)
        return self.chronology.range(field)

    def get(self, field: ChronoField) -> int:
        """Value of ``field`` for this date."""
        if field == ChronoField.DAY_OF_WEEK:
            return self.day_of_week.value
        elif field == ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self.day_of_month - 1) % 7 + 1
        elif field == ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % 7 + 1
        elif field == ChronoField.DAY_OF_MONTH:
            return self.day_of_month
        elif field == ChronoField.DAY_OF_YEAR:
            return self.day_of_year
        elif field == ChronoField.EPOCH_DAY:
            return self.to_epoch_day()
        elif field == ChronoField.ALIGNED_WEEK_OF_MONTH:
            return (self.day_of_month - 1) // 7 + 1
        elif field == ChronoField.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        elif field == ChronoField.MONTH_OF_YEAR:
            return self.month
        elif field == ChronoField.PROLEPTIC_MONTH:
            return self.proleptic_month
        elif field == ChronoField.YEAR_OF_ERA:
            return self.year_of_era
        elif field == ChronoField.YEAR:
            return self.proleptic_year
        elif field == ChronoField.ERA:
            return self.era.value
        raise UnsupportedFieldError(f"Unsupported field: {field}", field=field)

    # ------------------------------------------------------------------
    # Adjustment
    # ------------------------------------------------------------------
    def with_field(self, field: ChronoField, value: int) -> AccountingDate:
        """Copy of this date with ``field`` set to ``value``.

        Changing the month or year keeps the day-of-month where possible,
        otherwise it moves to the last day of the new month.
        """
        if not isinstance(field, ChronoField):
            raise UnsupportedFieldError(f"Unsupported field: {field}", field=field)
        self.chronology.range(field).check_valid_value(value, field)
        current = self.get(field)
        if value == current:
            return self

        if field in (
            ChronoField.DAY_OF_WEEK,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ):
            return self._plus_days(value - current)
        elif field in (ChronoField.ALIGNED_WEEK_OF_MONTH, ChronoField.ALIGNED_WEEK_OF_YEAR):
            return self._plus_days((value - current) * 7)
        elif field == ChronoField.DAY_OF_MONTH:
            return AccountingDate.of(self.chronology, self.proleptic_year, self.month, value)
        elif field == ChronoField.DAY_OF_YEAR:
            return AccountingDate.of_year_day(self.chronology, self.proleptic_year, value)
        elif field == ChronoField.EPOCH_DAY:
            return AccountingDate.of_epoch_day(self.chronology, value)
        elif field == ChronoField.MONTH_OF_YEAR:
            return self._resolve_previous(self.proleptic_year, value, self.day_of_month)
        elif field == ChronoField.PROLEPTIC_MONTH:
            return self._plus_months(value - current)
        elif field == ChronoField.YEAR_OF_ERA:
            year = value if self.proleptic_year >= 1 else 1 - value
            return self._resolve_previous(year, self.month, self.day_of_month)
        elif field == ChronoField.YEAR:
            return self._resolve_previous(value, self.month, self.day_of_month)
        # ERA
        return self._resolve_previous(1 - self.proleptic_year, self.month, self.day_of_month)

    def with_last_day_of_month(self) -> AccountingDate:
        return self.with_field(ChronoField.DAY_OF_MONTH, self.length_of_month())

    def _resolve_previous(self, proleptic_year: int, month: int, day_of_month: int) -> AccountingDate:
        chronology = self.chronology
        chronology.range(ChronoField.YEAR).check_valid_value(proleptic_year, ChronoField.YEAR)
        chronology.range(ChronoField.MONTH_OF_YEAR).check_valid_value(month, ChronoField.MONTH_OF_YEAR)
        day_of_month = min(day_of_month, chronology.length_of_month(proleptic_year, month))
        return AccountingDate.of(chronology, proleptic_year, month, day_of_month)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def plus(self, amount: int, unit: ChronoUnit) -> AccountingDate:
        """Copy of this date moved by ``amount`` of ``unit``."""
        if amount == 0 and isinstance(unit, ChronoUnit):
            return self
        if unit == ChronoUnit.DAYS:
            return self._plus_days(amount)
        elif unit == ChronoUnit.WEEKS:
            return self._plus_days(amount * 7)
        elif unit == ChronoUnit.MONTHS:
            return self._plus_months(amount)
        elif unit in _YEARS_IN_UNIT:
            years = amount * _YEARS_IN_UNIT[unit]
            return self._resolve_previous(self.proleptic_year + years, self.month, self.day_of_month)
        elif unit == ChronoUnit.ERAS:
            return self.with_field(ChronoField.ERA, self.era.value + amount)
        raise UnsupportedFieldError(f"Unsupported unit: {unit}", field=unit)

    def minus(self, amount: int, unit: ChronoUnit) -> AccountingDate:
        return self.plus(-amount, unit)

    def _plus_days(self, days: int) -> AccountingDate:
        if days == 0:
            return self
        return AccountingDate.of_epoch_day(self.chronology, self.to_epoch_day() + days)

    def _plus_months(self, months: int) -> AccountingDate:
        if months == 0:
            return self
        proleptic_month = self.proleptic_month + months
        self.chronology.range(ChronoField.PROLEPTIC_MONTH).check_valid_value(
            proleptic_month, ChronoField.PROLEPTIC_MONTH
        )
        months_in_year = self.chronology.division.length_of_year_in_months
        year, month_index = divmod(proleptic_month, months_in_year)
        return self._resolve_previous(year, month_index + 1, self.day_of_month)

    def __add__(self, other):
        if isinstance(other, timedelta):
            return self._plus_days(other.days)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return self._plus_days(-other.days)
        return NotImplemented

    def until(self, end: DateLike, unit: ChronoUnit) -> int:
        """Whole ``unit`` s from this date to ``end``, truncated toward zero."""
        end = self.chronology.date_from(end)
        if unit == ChronoUnit.DAYS:
            return end.to_epoch_day() - self.to_epoch_day()
        elif unit == ChronoUnit.WEEKS:
            return _truncating_div(end.to_epoch_day() - self.to_epoch_day(), 7)
        elif unit == ChronoUnit.MONTHS:
            return self._months_until(end)
        elif unit in _YEARS_IN_UNIT:
            months_in_year = self.chronology.division.length_of_year_in_months
            return _truncating_div(self._months_until(end), months_in_year * _YEARS_IN_UNIT[unit])
        elif unit == ChronoUnit.ERAS:
            return end.era.value - self.era.value
        raise UnsupportedFieldError(f"Unsupported unit: {unit}", field=unit)

    def _months_until(self, end: AccountingDate) -> int:
        packed_start = self.proleptic_month * 256 + self.day_of_month
        packed_end = end.proleptic_month * 256 + end.day_of_month
        return _truncating_div(packed_end - packed_start, 256)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------
    def __lt__(self, other):
        if not isinstance(other, AccountingDate) or other.chronology != self.chronology:
            return NotImplemented
        return (self.proleptic_year, self.month, self.day_of_month) < (
            other.proleptic_year,
            other.month,
            other.day_of_month,
        )

    def __str__(self) -> str:
        return (
            f"{self.chronology} {self.era} {self.year_of_era}"
            f"-{self.month:02d}-{self.day_of_month:02d}"
        )

    def __repr__(self) -> str:
        return (
            f"AccountingDate({self.proleptic_year}, {self.month}, {self.day_of_month}, "
            f"chronology={self.chronology!r})"
        )
