"""
Chronology — контракт календарной системы

Календарная система выставляет по одному field rule на каждое поддерживаемое
поле (year, month-of-year, day-of-month, day-of-year, day-of-week) и явно
объявляет неподдерживаемые поля (поля часов).

Правила выбираются через accessor-методы, поиск по имени (get_rule) идёт
через те же accessor-ы, поэтому неподдерживаемое поле всегда даёт
UnsupportedRuleError, а не None.
"""

import logging
from abc import ABC, abstractmethod
from typing import Final

from src.core.chronology.errors import UnsupportedRuleError
from src.core.chronology.field_rule import DateTimeFieldRule

logger = logging.getLogger(__name__)

# =============================================================================
# ИМЕНА ПОЛЕЙ
# =============================================================================

# Имя поля -> имя accessor-метода Chronology
FIELD_ACCESSORS: Final[dict[str, str]] = {
    "Year": "year",
    "MonthOfYear": "month_of_year",
    "DayOfMonth": "day_of_month",
    "DayOfYear": "day_of_year",
    "DayOfWeek": "day_of_week",
    "HourOfDay": "hour_of_day",
    "MinuteOfHour": "minute_of_hour",
    "SecondOfMinute": "second_of_minute",
    "NanoOfSecond": "nano_of_second",
}

# Поля времени суток
CLOCK_FIELDS: Final[frozenset[str]] = frozenset(
    {"HourOfDay", "MinuteOfHour", "SecondOfMinute", "NanoOfSecond"}
)


class Chronology(ABC):
    """Календарная система."""

    # Поля, которые система не поддерживает (переопределяется подклассом)
    unsupported_fields: frozenset[str] = frozenset()

    @property
    @abstractmethod
    def name(self) -> str:
        """Имя календарной системы."""

    # =========================================================================
    # ПОЛЯ ДАТЫ
    # =========================================================================

    @abstractmethod
    def year(self) -> DateTimeFieldRule:
        """Правило поля year."""

    @abstractmethod
    def month_of_year(self) -> DateTimeFieldRule:
        """Правило поля month-of-year."""

    @abstractmethod
    def day_of_month(self) -> DateTimeFieldRule:
        """Правило поля day-of-month."""

    @abstractmethod
    def day_of_year(self) -> DateTimeFieldRule:
        """Правило поля day-of-year."""

    @abstractmethod
    def day_of_week(self) -> DateTimeFieldRule:
        """Правило поля day-of-week."""

    # =========================================================================
    # ПОЛЯ ВРЕМЕНИ
    # =========================================================================

    @abstractmethod
    def hour_of_day(self) -> DateTimeFieldRule:
        """Правило поля hour-of-day."""

    @abstractmethod
    def minute_of_hour(self) -> DateTimeFieldRule:
        """Правило поля minute-of-hour."""

    @abstractmethod
    def second_of_minute(self) -> DateTimeFieldRule:
        """Правило поля second-of-minute."""

    @abstractmethod
    def nano_of_second(self) -> DateTimeFieldRule:
        """Правило поля nano-of-second."""

    # =========================================================================
    # ПОИСК ПРАВИЛ
    # =========================================================================

    def _unsupported(self, field_name: str) -> UnsupportedRuleError:
        """Ошибка для неизвестного или неподдерживаемого поля (логируется на debug)."""
        logger.debug("%s chronology rejected request for field %s", self.name, field_name)
        return UnsupportedRuleError(field_name, self.name)

    def is_field_supported(self, field_name: str) -> bool:
        """Проверка поддержки поля до запроса правила."""
        return field_name in FIELD_ACCESSORS and field_name not in self.unsupported_fields

    def get_rule(self, field_name: str) -> DateTimeFieldRule:
        """
        Правило поля по имени.

        Raises:
            UnsupportedRuleError: Если поле неизвестно или не поддерживается
        """
        accessor = FIELD_ACCESSORS.get(field_name)
        if accessor is None:
            raise self._unsupported(field_name)
        return getattr(self, accessor)()

    def field_rules(self) -> tuple[DateTimeFieldRule, ...]:
        """Все поддерживаемые правила в порядке FIELD_ACCESSORS."""
        return tuple(
            self.get_rule(field_name)
            for field_name in FIELD_ACCESSORS
            if self.is_field_supported(field_name)
        )

    def __repr__(self) -> str:
        return f"{self.name}Chronology"
