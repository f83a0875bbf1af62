"""Accounting (52/53 week) Calendar Library.

This package provides a configurable retail / fiscal calendar in which every
year has 52 or 53 whole weeks and ends on a fixed weekday.

Key modules:
- chrono: Year divisions, chronology builder, chronology and dates
- conventions: Weekday, month and year-end anchoring enums
- temporal: Field identifiers, value ranges and errors
- config: Loading chronologies from JSON configuration
- frames: Daily pandas lookup tables of accounting fields
"""

from .chrono import (
    AccountingChronology,
    AccountingChronologyBuilder,
    AccountingDate,
    AccountingEra,
    AccountingYearDivision,
)
from .conventions import DayOfWeek, Month, YearAlignment, YearEndRule
from .frames import calendar_frame

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AccountingChronology",
    "AccountingChronologyBuilder",
    "AccountingDate",
    "AccountingEra",
    "AccountingYearDivision",
    "DayOfWeek",
    "Month",
    "YearAlignment",
    "YearEndRule",
    "calendar_frame",
    # Subpackages
    "chrono",
    "conventions",
    "temporal",
    "config",
]
