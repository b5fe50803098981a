"""
Chronology contract: calendar system + field rules + calendrical errors.
"""

from src.core.chronology.chronology import CLOCK_FIELDS, FIELD_ACCESSORS, Chronology
from src.core.chronology.errors import (
    CalendricalError,
    FieldValueUnavailableError,
    IllegalCalendarFieldValueError,
    UnsupportedRuleError,
)
from src.core.chronology.field_rule import DateTimeFieldRule

__all__ = [
    # Contract
    "Chronology",
    "DateTimeFieldRule",
    "FIELD_ACCESSORS",
    "CLOCK_FIELDS",
    # Errors
    "CalendricalError",
    "UnsupportedRuleError",
    "FieldValueUnavailableError",
    "IllegalCalendarFieldValueError",
]
