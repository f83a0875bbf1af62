"""Tests for the daily accounting-calendar DataFrame."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from acctcal.chrono.builder import AccountingChronologyBuilder
from acctcal.chrono.division import AccountingYearDivision
from acctcal.conventions.types import DayOfWeek, Month
from acctcal.frames import FRAME_COLUMNS, calendar_frame

THIRTEEN = (
    AccountingChronologyBuilder()
    .ends_on(DayOfWeek.SUNDAY)
    .nearest_end_of(Month.AUGUST)
    .with_division(AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS)
    .leap_week_in_month(13)
    .to_chronology()
)

QUARTERLY = (
    AccountingChronologyBuilder()
    .ends_on(DayOfWeek.SATURDAY)
    .in_last_week_of(Month.JANUARY)
    .with_division(AccountingYearDivision.QUARTERS_OF_PATTERN_4_5_4_WEEKS)
    .leap_week_in_month(12)
    .to_chronology()
)


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------


class TestFrameShape:
    def test_columns_and_length(self):
        frame = calendar_frame(THIRTEEN, "2012-08-27", "2012-09-04")
        assert list(frame.columns) == FRAME_COLUMNS
        assert len(frame) == 9
        assert frame["date"].iloc[0] == pd.Timestamp("2012-08-27")
        assert frame["date"].iloc[-1] == pd.Timestamp("2012-09-04")

    def test_single_day(self):
        frame = calendar_frame(THIRTEEN, date(2012, 9, 2), date(2012, 9, 2))
        assert len(frame) == 1
        row = frame.iloc[0]
        assert (row["fiscal_year"], row["fiscal_month"], row["day_of_month"]) == (2012, 13, 35)
        assert row["day_of_year"] == 371
        assert row["week_of_year"] == 53
        assert bool(row["is_leap_year"])

    def test_end_before_start(self):
        with pytest.raises(ValueError):
            calendar_frame(THIRTEEN, "2012-09-04", "2012-09-03")


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class TestFrameContent:
    def test_year_boundary(self):
        frame = calendar_frame(THIRTEEN, "2012-09-01", "2012-09-04").set_index("date")
        assert frame.loc[pd.Timestamp("2012-09-02"), "fiscal_year"] == 2012
        assert frame.loc[pd.Timestamp("2012-09-03"), "fiscal_year"] == 2013
        assert frame.loc[pd.Timestamp("2012-09-03"), "fiscal_month"] == 1
        assert frame.loc[pd.Timestamp("2012-09-03"), "day_of_year"] == 1
        assert not frame.loc[pd.Timestamp("2012-09-03"), "is_leap_year"]

    def test_thirteen_months_have_no_quarter(self):
        frame = calendar_frame(THIRTEEN, "2012-01-01", "2012-12-31")
        assert frame["fiscal_quarter"].isna().all()

    def test_quarters(self):
        frame = calendar_frame(QUARTERLY, "2012-01-01", "2013-12-31")
        expected = (frame["fiscal_month"] - 1) // 3 + 1
        assert (frame["fiscal_quarter"] == expected).all()
        assert set(frame["fiscal_quarter"]) == {1, 2, 3, 4}

    @pytest.mark.parametrize("chronology", [THIRTEEN, QUARTERLY])
    def test_rows_match_accounting_dates(self, chronology):
        frame = calendar_frame(chronology, "2011-06-01", "2013-06-30")
        assert len(frame) == (date(2013, 6, 30) - date(2011, 6, 1)).days + 1
        for row in frame.itertuples(index=False):
            accounting_date = chronology.date_from(row.date)
            assert row.fiscal_year == accounting_date.proleptic_year
            assert row.fiscal_month == accounting_date.month
            assert row.day_of_month == accounting_date.day_of_month
            assert row.day_of_year == accounting_date.day_of_year
            assert row.week_of_year == (accounting_date.day_of_year - 1) // 7 + 1
            assert row.is_leap_year == accounting_date.is_leap_year()
