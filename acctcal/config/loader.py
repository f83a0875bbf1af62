"""
Load accounting chronologies from plain configuration.

A configuration is a mapping such as::

    {
        "ends_on": "SUNDAY",
        "rule": "NEAREST_END_OF",
        "month": "AUGUST",
        "division": "QUARTERS_OF_PATTERN_4_4_5_WEEKS",
        "leap_week_in_month": 12,
        "year_alignment": "ENDS_IN_ISO_YEAR"
    }

``rule`` and ``year_alignment`` are optional and default to the values
shown. Months and weekdays may be given by name or ISO number.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from acctcal.chrono.builder import AccountingChronologyBuilder
from acctcal.chrono.chronology import AccountingChronology
from acctcal.chrono.division import AccountingYearDivision
from acctcal.conventions.types import DayOfWeek, Month, YearAlignment, YearEndRule
from acctcal.temporal.errors import InvalidConfigurationError, MissingConfigurationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

REQUIRED_KEYS = ("ends_on", "month", "division", "leap_week_in_month")


def _parse_enum(enum_cls: Type[E], raw: Any, key: str) -> E:
    """Resolve an enum member by name (case-insensitive) or by value."""
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, str):
        try:
            return enum_cls[raw.strip().upper()]
        except KeyError:
            pass
    try:
        return enum_cls(raw)
    except ValueError as exc:
        available = [member.name for member in enum_cls]
        raise InvalidConfigurationError(
            f"Unknown {key}: {raw!r}. Available: {available}"
        ) from exc


def chronology_from_mapping(config: Mapping[str, Any]) -> AccountingChronology:
    """
    Build a chronology from a configuration mapping.

    Args:
        config: Mapping with the keys described in the module docstring

    Returns:
        Validated chronology

    Raises:
        MissingConfigurationError: If a required key is absent
        InvalidConfigurationError: If a value cannot be resolved
    """
    missing = [key for key in REQUIRED_KEYS if config.get(key) is None]
    if missing:
        raise MissingConfigurationError(f"Missing chronology settings: {missing}")

    ends_on = _parse_enum(DayOfWeek, config["ends_on"], "ends_on")
    month = _parse_enum(Month, config["month"], "month")
    division = _parse_enum(AccountingYearDivision, config["division"], "division")
    rule = _parse_enum(YearEndRule, config.get("rule", YearEndRule.NEAREST_END_OF), "rule")
    alignment = _parse_enum(
        YearAlignment,
        config.get("year_alignment", YearAlignment.ENDS_IN_ISO_YEAR),
        "year_alignment",
    )
    try:
        leap_week_in_month = int(config["leap_week_in_month"])
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(
            f"leap_week_in_month must be an integer: {config['leap_week_in_month']!r}"
        ) from exc

    builder = AccountingChronologyBuilder().ends_on(ends_on).with_division(division)
    if rule is YearEndRule.IN_LAST_WEEK_OF:
        builder.in_last_week_of(month)
    else:
        builder.nearest_end_of(month)
    if alignment is YearAlignment.STARTS_IN_ISO_YEAR:
        builder.accounting_year_starts_in_iso_year()
    else:
        builder.accounting_year_ends_in_iso_year()
    return builder.leap_week_in_month(leap_week_in_month).to_chronology()


def chronology_to_mapping(chronology: AccountingChronology) -> Dict[str, Any]:
    """Inverse of :func:`chronology_from_mapping`."""
    return {
        "ends_on": chronology.ends_on.name,
        "rule": chronology.rule.value,
        "month": chronology.end.name,
        "division": chronology.division.name,
        "leap_week_in_month": chronology.leap_week_in_month,
        "year_alignment": YearAlignment(chronology.year_offset).name,
    }


def load_chronology(filepath: Union[str, Path]) -> AccountingChronology:
    """
    Load a chronology from a JSON file.

    Args:
        filepath: Path to a JSON file holding one configuration object

    Returns:
        Validated chronology
    """
    filepath = Path(filepath)
    logger.debug("Loading accounting chronology from %s", filepath)
    with open(filepath, "r") as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise InvalidConfigurationError(
            f"Expected a JSON object in {filepath}, got {type(config).__name__}"
        )
    return chronology_from_mapping(config)


def save_chronology(chronology: AccountingChronology, filepath: Union[str, Path]) -> Path:
    """Write a chronology's configuration as JSON and return the path."""
    filepath = Path(filepath)
    with open(filepath, "w") as f:
        json.dump(chronology_to_mapping(chronology), f, indent=2)
    return filepath
