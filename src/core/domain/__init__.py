"""
Domain models and value objects.

Contains the framework value types: LocalDate (epoch-day), LocalTime, PeriodUnit.
"""

from src.core.domain.local_date import UNIX_EPOCH_ORDINAL, LocalDate
from src.core.domain.local_time import MIDNIGHT, NOON, LocalTime
from src.core.domain.periods import PeriodUnit

__all__ = [
    # LocalDate
    "LocalDate",
    "UNIX_EPOCH_ORDINAL",
    # LocalTime
    "LocalTime",
    "MIDNIGHT",
    "NOON",
    # Periods
    "PeriodUnit",
]
