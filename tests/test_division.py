"""Tests for the week patterns that divide an accounting year into months.

Covers weeks per month, weeks elapsed before each month and the reverse
lookup from an elapsed-week count to its month, with and without a leap
week in every possible month.
"""

from __future__ import annotations

import itertools

import pytest

from acctcal.chrono.division import AccountingYearDivision
from acctcal.temporal.errors import DateTimeRangeError
from acctcal.temporal.fields import ChronoField, ValueRange


# ---------------------------------------------------------------------------
# Expected patterns
# ---------------------------------------------------------------------------

WEEKS_IN_MONTHS = {
    AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS: [4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5],
    AccountingYearDivision.QUARTERS_OF_PATTERN_4_5_4_WEEKS: [4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4],
    AccountingYearDivision.QUARTERS_OF_PATTERN_5_4_4_WEEKS: [5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4],
    AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS: [4] * 13,
}


def _elapsed(weeks: list[int]) -> list[int]:
    """Weeks elapsed before each month."""
    elapsed, total = [], 0
    for w in weeks:
        elapsed.append(total)
        total += w
    return elapsed


def _division_leap_cases():
    for division, weeks in WEEKS_IN_MONTHS.items():
        for leap in range(1, len(weeks) + 1):
            yield division, weeks, leap


DIVISION_LEAP_CASES = list(_division_leap_cases())


# ---------------------------------------------------------------------------
# Pattern shape
# ---------------------------------------------------------------------------


class TestPatternShape:
    @pytest.mark.parametrize("division", list(AccountingYearDivision))
    def test_weeks_sum_to_52(self, division):
        assert sum(division.weeks_in_months) == 52

    @pytest.mark.parametrize("division", list(AccountingYearDivision))
    def test_months_in_year_range(self, division):
        months = len(WEEKS_IN_MONTHS[division])
        assert division.length_of_year_in_months == months
        assert division.months_in_year_range == ValueRange.of(1, months)

    def test_quarterly_flag(self):
        assert AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS.is_quarterly
        assert not AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS.is_quarterly

    @pytest.mark.parametrize("division", list(AccountingYearDivision))
    def test_first_month_starts_at_zero(self, division):
        assert division.weeks_at_start_of_month(1) == 0

    @pytest.mark.parametrize("division,weeks,leap", DIVISION_LEAP_CASES)
    def test_last_month_ends_the_year(self, division, weeks, leap):
        last = len(weeks)
        assert division.weeks_at_start_of_month(last) + division.weeks_in_month(last) == 52
        assert (
            division.weeks_at_start_of_month(last, leap) + division.weeks_in_month(last, leap)
            == 53
        )


# ---------------------------------------------------------------------------
# Weeks in month / weeks at start of month
# ---------------------------------------------------------------------------


class TestWeekCounts:
    @pytest.mark.parametrize("division,weeks,leap", DIVISION_LEAP_CASES)
    def test_weeks_in_month(self, division, weeks, leap):
        for month in range(1, len(weeks) + 1):
            assert division.weeks_in_month(month) == weeks[month - 1]
            expected = weeks[month - 1] + (1 if month == leap else 0)
            assert division.weeks_in_month(month, leap) == expected, f"month {month}"

    @pytest.mark.parametrize("division,weeks,leap", DIVISION_LEAP_CASES)
    def test_weeks_at_start_of_month(self, division, weeks, leap):
        elapsed = _elapsed(weeks)
        for month in range(1, len(weeks) + 1):
            assert division.weeks_at_start_of_month(month) == elapsed[month - 1]
            expected = elapsed[month - 1] + (1 if month > leap else 0)
            assert division.weeks_at_start_of_month(month, leap) == expected, f"month {month}"

    @pytest.mark.parametrize(
        "division,month",
        [
            (AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS, 0),
            (AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS, 13),
            (AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS, 14),
            (AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS, -1),
        ],
    )
    def test_bad_month_names_month_of_year(self, division, month):
        with pytest.raises(DateTimeRangeError) as exc_info:
            division.weeks_in_month(month)
        assert exc_info.value.field == ChronoField.MONTH_OF_YEAR
        assert "MonthOfYear" in str(exc_info.value)

    def test_bad_leap_week_month(self):
        with pytest.raises(DateTimeRangeError):
            AccountingYearDivision.QUARTERS_OF_PATTERN_5_4_4_WEEKS.weeks_at_start_of_month(1, 13)


# ---------------------------------------------------------------------------
# Month from elapsed weeks
# ---------------------------------------------------------------------------


class TestMonthFromElapsedWeeks:
    @pytest.mark.parametrize("division,weeks,leap", DIVISION_LEAP_CASES)
    def test_every_week_maps_to_its_month(self, division, weeks, leap):
        elapsed = _elapsed(weeks)
        for index, (start, count) in enumerate(zip(elapsed, weeks)):
            month = index + 1
            for week in range(start, start + count):
                assert division.month_from_elapsed_weeks(week) == month
                shifted = week + (1 if month > leap else 0)
                assert division.month_from_elapsed_weeks(shifted, leap) == month, f"week {week}"

    @pytest.mark.parametrize("division,weeks,leap", DIVISION_LEAP_CASES)
    def test_leap_week_belongs_to_leap_month(self, division, weeks, leap):
        leap_week = _elapsed(weeks)[leap - 1] + weeks[leap - 1]
        assert division.month_from_elapsed_weeks(leap_week, leap) == leap

    @pytest.mark.parametrize("division", list(AccountingYearDivision))
    def test_first_week(self, division):
        assert division.month_from_elapsed_weeks(0) == 1

    @pytest.mark.parametrize("division", list(AccountingYearDivision))
    def test_negative_weeks_rejected(self, division):
        with pytest.raises(DateTimeRangeError):
            division.month_from_elapsed_weeks(-1)

    @pytest.mark.parametrize(
        "division,extra", itertools.product(list(AccountingYearDivision), [0, 1])
    )
    def test_weeks_past_year_rejected(self, division, extra):
        with pytest.raises(DateTimeRangeError):
            division.month_from_elapsed_weeks(52 + extra)

    @pytest.mark.parametrize("division,weeks,leap", DIVISION_LEAP_CASES)
    def test_weeks_past_leap_year_rejected(self, division, weeks, leap):
        assert division.month_from_elapsed_weeks(52, leap) in range(1, len(weeks) + 1)
        for elapsed_weeks in (53, 54):
            with pytest.raises(DateTimeRangeError) as exc_info:
                division.month_from_elapsed_weeks(elapsed_weeks, leap)
            assert exc_info.value.field == ChronoField.ALIGNED_WEEK_OF_YEAR
