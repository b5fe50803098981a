"""
Coptic field rules — правила пяти полей Coptic даты

Каждое правило оборачивает одну функцию из calendar_math и объявляет свой
диапазон:

| Правило          | Диапазон | Smallest max | period_unit / period_range |
|------------------|----------|--------------|----------------------------|
| Year             | 1..MAX   | MAX          | YEARS / FOREVER            |
| MonthOfYear      | 1..13    | 13           | MONTHS / YEARS             |
| DayOfMonth       | 1..30    | 5            | DAYS / MONTHS              |
| DayOfYear        | 1..366   | 365          | DAYS / YEARS               |
| DayOfWeek        | 1..7     | 7            | DAYS / WEEKS               |

Все правила — date-only: time игнорируется, None возвращается только при
отсутствии date. Экземпляры создаёт CopticChronology (по одному на процесс).
"""

from typing import TYPE_CHECKING, Optional

from src.core.chronology.field_rule import DateTimeFieldRule
from src.core.domain.local_date import LocalDate
from src.core.domain.local_time import LocalTime
from src.core.domain.periods import PeriodUnit
from src.coptic.calendar_math import (
    DAYS_IN_COMMON_YEAR,
    DAYS_IN_SHORT_MONTH,
    DAYS_PER_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    day_of_month_from_day_of_year,
    day_of_week_from_epoch_day,
    day_of_year_from_epoch_day,
    month_from_day_of_year,
    year_from_epoch_day,
)

if TYPE_CHECKING:
    from src.coptic.chronology import CopticChronology


class CopticYearRule(DateTimeFieldRule):
    """Coptic год через четырёхлетний цикл из 1461 дня."""

    def __init__(self, chronology: "CopticChronology"):
        super().__init__(
            chronology, "Year", PeriodUnit.YEARS, PeriodUnit.FOREVER, MIN_YEAR, MAX_YEAR
        )

    def get_value_quiet(
        self, date: Optional[LocalDate], time: Optional[LocalTime]
    ) -> Optional[int]:
        if date is None:
            return None
        return year_from_epoch_day(date.epoch_day)


class CopticMonthOfYearRule(DateTimeFieldRule):
    """Месяц 1..13, 13-й месяц — дополнительные 5/6 дней."""

    def __init__(self, chronology: "CopticChronology"):
        super().__init__(
            chronology, "MonthOfYear", PeriodUnit.MONTHS, PeriodUnit.YEARS, 1, MONTHS_PER_YEAR
        )

    def get_value_quiet(
        self, date: Optional[LocalDate], time: Optional[LocalTime]
    ) -> Optional[int]:
        if date is None:
            return None
        return month_from_day_of_year(day_of_year_from_epoch_day(date.epoch_day))


class CopticDayOfMonthRule(DateTimeFieldRule):
    """
    День месяца.

    Максимум 30, но 13-й месяц обычного года содержит только 5 дней,
    поэтому smallest-maximum равен DAYS_IN_SHORT_MONTH.
    """

    def __init__(self, chronology: "CopticChronology"):
        super().__init__(
            chronology, "DayOfMonth", PeriodUnit.DAYS, PeriodUnit.MONTHS, 1, DAYS_PER_MONTH
        )

    def get_smallest_maximum_value(self) -> int:
        return DAYS_IN_SHORT_MONTH

    def get_value_quiet(
        self, date: Optional[LocalDate], time: Optional[LocalTime]
    ) -> Optional[int]:
        if date is None:
            return None
        return day_of_month_from_day_of_year(day_of_year_from_epoch_day(date.epoch_day))


class CopticDayOfYearRule(DateTimeFieldRule):
    """День года: 1..366, в обычном году 1..365."""

    def __init__(self, chronology: "CopticChronology"):
        super().__init__(
            chronology,
            "DayOfYear",
            PeriodUnit.DAYS,
            PeriodUnit.YEARS,
            1,
            DAYS_IN_COMMON_YEAR + 1,
        )

    def get_smallest_maximum_value(self) -> int:
        return DAYS_IN_COMMON_YEAR

    def get_value_quiet(
        self, date: Optional[LocalDate], time: Optional[LocalTime]
    ) -> Optional[int]:
        if date is None:
            return None
        return day_of_year_from_epoch_day(date.epoch_day)


class CopticDayOfWeekRule(DateTimeFieldRule):
    """
    День недели (ISO, 1 = Monday).

    Семидневная неделя непрерывна через границы календарных систем,
    поэтому значение берётся из сырого epoch-day.
    """

    def __init__(self, chronology: "CopticChronology"):
        super().__init__(chronology, "DayOfWeek", PeriodUnit.DAYS, PeriodUnit.WEEKS, 1, 7)

    def get_value_quiet(
        self, date: Optional[LocalDate], time: Optional[LocalTime]
    ) -> Optional[int]:
        if date is None:
            return None
        return day_of_week_from_epoch_day(date.epoch_day)
