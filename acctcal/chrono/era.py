"""Eras of the accounting calendar."""

from enum import Enum

from acctcal.temporal.errors import DateTimeRangeError
from acctcal.temporal.fields import ChronoField


class AccountingEra(Enum):
    """BCE holds proleptic years 0 and below, CE years 1 and above."""

    BCE = 0
    CE = 1

    @classmethod
    def of(cls, era: int) -> "AccountingEra":
        try:
            return cls(era)
        except ValueError as exc:
            raise DateTimeRangeError(f"Invalid era: {era}", field=ChronoField.ERA, value=era) from exc

    def __str__(self) -> str:
        return self.name
