"""
Coptic calendar system plug-in.

Chronology singleton, five field rules, epoch-day arithmetic and CopticDate.
"""

from src.coptic.calendar_math import (
    COPTIC_EPOCH_DAY,
    DAYS_IN_CYCLE,
    DAYS_IN_SHORT_MONTH,
    DAYS_PER_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    CopticComponents,
    components_from_epoch_day,
    epoch_day_from_components,
    is_leap_year,
)
from src.coptic.chronology import COPTIC_CHRONOLOGY, CopticChronology
from src.coptic.date import CopticDate
from src.coptic.rules import (
    CopticDayOfMonthRule,
    CopticDayOfWeekRule,
    CopticDayOfYearRule,
    CopticMonthOfYearRule,
    CopticYearRule,
)

__all__ = [
    # Calendar math — Constants
    "COPTIC_EPOCH_DAY",
    "DAYS_IN_CYCLE",
    "DAYS_IN_SHORT_MONTH",
    "DAYS_PER_MONTH",
    "MAX_YEAR",
    "MIN_YEAR",
    "MONTHS_PER_YEAR",
    # Calendar math — Types
    "CopticComponents",
    # Calendar math — Functions
    "components_from_epoch_day",
    "epoch_day_from_components",
    "is_leap_year",
    # Chronology
    "COPTIC_CHRONOLOGY",
    "CopticChronology",
    # Field rules
    "CopticYearRule",
    "CopticMonthOfYearRule",
    "CopticDayOfMonthRule",
    "CopticDayOfYearRule",
    "CopticDayOfWeekRule",
    # Date
    "CopticDate",
]
