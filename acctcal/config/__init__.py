"""Chronology configuration loading."""

from .loader import (
    chronology_from_mapping,
    chronology_to_mapping,
    load_chronology,
    save_chronology,
)

__all__ = [
    "chronology_from_mapping",
    "chronology_to_mapping",
    "load_chronology",
    "save_chronology",
]
