from .types import DayOfWeek, Month, YearAlignment, YearEndRule

__all__ = ["DayOfWeek", "Month", "YearAlignment", "YearEndRule"]
