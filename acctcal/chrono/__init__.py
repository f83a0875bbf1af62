"""Accounting chronology: year divisions, builder, chronology and dates."""

from .builder import AccountingChronologyBuilder
from .chronology import AccountingChronology
from .date import AccountingDate
from .division import AccountingYearDivision
from .era import AccountingEra

__all__ = [
    "AccountingChronologyBuilder",
    "AccountingChronology",
    "AccountingDate",
    "AccountingYearDivision",
    "AccountingEra",
]
