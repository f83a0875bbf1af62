"""
Tabular views of an accounting calendar.

``calendar_frame`` maps each ISO date of a span to its accounting fields,
for joining accounting periods onto daily data.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Union

import numpy as np
import pandas as pd

from acctcal.chrono.chronology import AccountingChronology
from acctcal.utils.date import to_date, to_epoch_day

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "date",
    "fiscal_year",
    "fiscal_month",
    "fiscal_quarter",
    "day_of_month",
    "day_of_year",
    "week_of_year",
    "is_leap_year",
]


def _year_block(chronology: AccountingChronology, year: int, first: int, last: int) -> pd.DataFrame:
    """Rows for the epoch days ``[first, last]``, all inside accounting year ``year``."""
    division = chronology.division
    leap_week = chronology.leap_week_for_year(year)
    weeks_in_year = chronology.length_of_year(year) // 7
    months = division.length_of_year_in_months

    month_of_week = np.array(
        [division.month_from_elapsed_weeks(week, leap_week) for week in range(weeks_in_year)]
    )
    start_of_month = np.array(
        [0] + [division.weeks_at_start_of_month(m, leap_week) * 7 for m in range(1, months + 1)]
    )

    epoch_days = np.arange(first, last + 1)
    day_of_year = epoch_days - chronology.year_start_epoch_day(year) + 1
    week_index = (day_of_year - 1) // 7
    fiscal_month = month_of_week[week_index]
    if division.is_quarterly:
        fiscal_quarter = pd.array((fiscal_month - 1) // 3 + 1, dtype="Int64")
    else:
        fiscal_quarter = pd.array([None] * len(epoch_days), dtype="Int64")

    return pd.DataFrame(
        {
            "date": pd.to_datetime(epoch_days, unit="D"),
            "fiscal_year": year,
            "fiscal_month": fiscal_month,
            "fiscal_quarter": fiscal_quarter,
            "day_of_month": day_of_year - start_of_month[fiscal_month],
            "day_of_year": day_of_year,
            "week_of_year": week_index + 1,
            "is_leap_year": leap_week != 0,
        }
    )


def calendar_frame(
    chronology: AccountingChronology,
    start: Union[str, date, datetime],
    end: Union[str, date, datetime],
) -> pd.DataFrame:
    """
    Build a daily lookup table of accounting fields.

    Args:
        chronology: Accounting calendar to express the dates in
        start: First ISO date (inclusive)
        end: Last ISO date (inclusive)

    Returns:
        DataFrame with one row per ISO date and the columns in ``FRAME_COLUMNS``.
        ``fiscal_quarter`` is null for 13-month divisions.

    Raises:
        ValueError: If ``end`` is before ``start``
    """
    start_day = to_epoch_day(to_date(start))
    end_day = to_epoch_day(to_date(end))
    if end_day < start_day:
        raise ValueError("end must be on or after start")

    blocks: List[pd.DataFrame] = []
    first = start_day
    year = chronology.date_epoch_day(start_day).proleptic_year
    while first <= end_day:
        last = min(end_day, chronology.year_end_epoch_day(year))
        blocks.append(_year_block(chronology, year, first, last))
        first = last + 1
        year += 1

    logger.debug(
        "Built calendar frame of %d days over %d accounting years",
        end_day - start_day + 1,
        len(blocks),
    )
    frame = pd.concat(blocks, ignore_index=True)
    return frame[FRAME_COLUMNS]
