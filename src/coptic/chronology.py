"""
CopticChronology — календарная система Coptic

Двенадцать месяцев по 30 дней и дополнительный период из 5 или 6 дней,
моделируемый как 13-й месяц. Chronology только для дат: поля времени суток
не поддерживаются.

Singleton:
- Единственный экземпляр COPTIC_CHRONOLOGY создаётся при импорте модуля
  (import lock делает это идемпотентным при конкурентном первом импорте)
- Повторный вызов CopticChronology() возвращает тот же экземпляр
- pickle/copy/deepcopy разрешаются в тот же экземпляр, поэтому
  identity-диспетчеризация (`is`) в остальном коде остаётся корректной
- Пять field rules создаются вместе с chronology и живут весь процесс;
  после инициализации атрибуты экземпляра не переназначаются (AttributeError)
"""

import logging
from typing import Any, Optional

from src.core.chronology.chronology import CLOCK_FIELDS, Chronology
from src.core.chronology.field_rule import DateTimeFieldRule
from src.coptic import calendar_math
from src.coptic.rules import (
    CopticDayOfMonthRule,
    CopticDayOfWeekRule,
    CopticDayOfYearRule,
    CopticMonthOfYearRule,
    CopticYearRule,
)

logger = logging.getLogger(__name__)


class CopticChronology(Chronology):
    """Coptic календарная система (singleton)."""

    _instance: Optional["CopticChronology"] = None

    unsupported_fields = CLOCK_FIELDS

    def __new__(cls) -> "CopticChronology":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if self.__dict__.get("_initialised", False):
            return
        self._year_rule = CopticYearRule(self)
        self._month_of_year_rule = CopticMonthOfYearRule(self)
        self._day_of_month_rule = CopticDayOfMonthRule(self)
        self._day_of_year_rule = CopticDayOfYearRule(self)
        self._day_of_week_rule = CopticDayOfWeekRule(self)
        self._initialised = True
        logger.debug("Coptic chronology initialised with %d field rules", len(self.field_rules()))

    @property
    def name(self) -> str:
        return "Coptic"

    def is_leap_year(self, year: int) -> bool:
        """
        Високосный ли год.

        Args:
            year: Год, от MIN_YEAR (не проверяется)

        Returns:
            True если year % 4 == 3
        """
        return calendar_math.is_leap_year(year)

    # =========================================================================
    # ПОЛЯ ДАТЫ
    # =========================================================================

    def year(self) -> DateTimeFieldRule:
        return self._year_rule

    def month_of_year(self) -> DateTimeFieldRule:
        return self._month_of_year_rule

    def day_of_month(self) -> DateTimeFieldRule:
        return self._day_of_month_rule

    def day_of_year(self) -> DateTimeFieldRule:
        return self._day_of_year_rule

    def day_of_week(self) -> DateTimeFieldRule:
        return self._day_of_week_rule

    # =========================================================================
    # ПОЛЯ ВРЕМЕНИ (не поддерживаются)
    # =========================================================================

    def hour_of_day(self) -> DateTimeFieldRule:
        raise self._unsupported("HourOfDay")

    def minute_of_hour(self) -> DateTimeFieldRule:
        raise self._unsupported("MinuteOfHour")

    def second_of_minute(self) -> DateTimeFieldRule:
        raise self._unsupported("SecondOfMinute")

    def nano_of_second(self) -> DateTimeFieldRule:
        raise self._unsupported("NanoOfSecond")

    # =========================================================================
    # IMMUTABILITY / IDENTITY
    # =========================================================================

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_initialised", False):
            raise AttributeError(f"{self!r} is immutable: cannot set {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self.__dict__.get("_initialised", False):
            raise AttributeError(f"{self!r} is immutable: cannot delete {name}")
        super().__delattr__(name)

    def __reduce__(self) -> Any:
        return "COPTIC_CHRONOLOGY"

    def __copy__(self) -> "CopticChronology":
        return self

    def __deepcopy__(self, memo: dict) -> "CopticChronology":
        return self


COPTIC_CHRONOLOGY = CopticChronology()
