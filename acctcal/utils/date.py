"""
Reference-calendar helpers built on ``datetime.date`` and ``dateutil``.

``datetime.date`` only covers years 1-9999. Accounting calendars are
proleptic, so year-end calculations are done on epoch days (days since
1970-01-01) and ISO years outside a 400-year window are shifted by whole
Gregorian cycles. A cycle is 146097 days, an exact number of weeks, so
weekdays and month ends repeat unchanged.
"""

from datetime import date, datetime
from typing import Tuple, Union

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from acctcal.conventions.types import DayOfWeek
from acctcal.temporal.errors import DateTimeRangeError
from acctcal.temporal.fields import ChronoField

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

EPOCH_ORDINAL = date(1970, 1, 1).toordinal()
YEARS_PER_CYCLE = 400
DAYS_PER_CYCLE = 146097
_WINDOW_START_YEAR = 2000
_WINDOW_START_EPOCH_DAY = date(_WINDOW_START_YEAR, 1, 1).toordinal() - EPOCH_ORDINAL


def to_date(date_like: Union[str, date, datetime]) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_epoch_day(date_like: Union[str, date, datetime]) -> int:
    """Days since 1970-01-01 for a date-like."""
    return to_date(date_like).toordinal() - EPOCH_ORDINAL


def from_epoch_day(epoch_day: int) -> date:
    """Inverse of :func:`to_epoch_day`, limited to the range of ``datetime.date``."""
    try:
        return date.fromordinal(epoch_day + EPOCH_ORDINAL)
    except (ValueError, OverflowError) as exc:
        raise DateTimeRangeError(
            f"Epoch day {epoch_day} is outside the range of datetime.date",
            field=ChronoField.EPOCH_DAY,
            value=epoch_day,
        ) from exc


def _cycle_shift(iso_year: int) -> Tuple[int, int]:
    """Split an ISO year into (year inside the window, whole 400-year cycles)."""
    cycles = (iso_year - _WINDOW_START_YEAR) // YEARS_PER_CYCLE
    return iso_year - cycles * YEARS_PER_CYCLE, cycles


def month_end_adjusted(
    iso_year: int, month: int, day_of_week: DayOfWeek, days_after_month_end: int = 0
) -> int:
    """
    Epoch day of the previous-or-same ``day_of_week`` counted back from the
    last day of ``month``, optionally moved ``days_after_month_end`` days on
    first. Works for any proleptic ISO year.
    """
    window_year, cycles = _cycle_shift(iso_year)
    adjusted = date(window_year, month, 1) + relativedelta(
        day=31,
        days=days_after_month_end,
        weekday=day_of_week.to_relativedelta(-1),
    )
    return adjusted.toordinal() - EPOCH_ORDINAL + cycles * DAYS_PER_CYCLE


def iso_year_of_epoch_day(epoch_day: int) -> int:
    """Proleptic ISO year containing the epoch day."""
    cycles = (epoch_day - _WINDOW_START_EPOCH_DAY) // DAYS_PER_CYCLE
    shifted = from_epoch_day(epoch_day - cycles * DAYS_PER_CYCLE)
    return shifted.year + cycles * YEARS_PER_CYCLE


def iso_day_of_week(epoch_day: int) -> DayOfWeek:
    """ISO weekday of an epoch day (1970-01-01 was a Thursday)."""
    return DayOfWeek((epoch_day + 3) % 7 + 1)


def datetime_to_str(datetime_date: Union[str, date, datetime]) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(datetime_date).strftime(DATE_FMT)
