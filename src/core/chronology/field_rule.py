"""
DateTimeFieldRule — базовое правило календарного поля

Field rule — именованный accessor с диапазоном значений, который по паре
(date, time) либо вычисляет целое значение поля, либо сообщает, что значение
не выводится (None).

Базовый класс отвечает за:
- Имя, владеющую chronology и гранулярность (period_unit / period_range)
- Диапазон [minimum, maximum], largest-minimum и smallest-maximum
- Проверку значений (is_valid_value / check_value)
- Identity: равенство по ссылке, pickle/copy разрешаются в тот же экземпляр

Конкретное правило реализует только get_value_quiet.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from src.core.chronology.errors import (
    FieldValueUnavailableError,
    IllegalCalendarFieldValueError,
)
from src.core.domain.local_date import LocalDate
from src.core.domain.local_time import LocalTime
from src.core.domain.periods import PeriodUnit

if TYPE_CHECKING:
    from src.core.chronology.chronology import Chronology


def _resolve_rule(chronology: "Chronology", name: str) -> "DateTimeFieldRule":
    """Восстановление правила при unpickle: через singleton chronology."""
    return chronology.get_rule(name)


@dataclass(frozen=True, eq=False)
class DateTimeFieldRule(ABC):
    """
    Правило календарного поля.

    Immutable после конструирования; eq=False сохраняет identity-равенство.
    """

    chronology: "Chronology"
    name: str
    period_unit: PeriodUnit
    period_range: PeriodUnit
    minimum_value: int
    maximum_value: int

    def __post_init__(self) -> None:
        if self.minimum_value > self.maximum_value:
            raise ValueError(
                f"{self.name}: minimum {self.minimum_value} exceeds maximum {self.maximum_value}"
            )

    # =========================================================================
    # ДИАПАЗОН
    # =========================================================================

    def get_minimum_value(self) -> int:
        """Минимальное значение поля."""
        return self.minimum_value

    def get_largest_minimum_value(self) -> int:
        """Наибольший из минимумов по всем экземплярам поля."""
        return self.get_minimum_value()

    def get_maximum_value(self) -> int:
        """Максимальное значение поля."""
        return self.maximum_value

    def get_smallest_maximum_value(self) -> int:
        """
        Наименьший из максимумов по всем экземплярам поля.

        Консервативная верхняя граница для range-aware вызывающего кода.
        Переопределяется, если реальный максимум зависит от экземпляра
        (например, короткий последний месяц).
        """
        return self.get_maximum_value()

    def is_valid_value(self, value: int) -> bool:
        """Проверка, что value в [minimum, maximum]."""
        return self.get_minimum_value() <= value <= self.get_maximum_value()

    def check_value(self, value: int) -> int:
        """
        Проверка значения поля.

        Returns:
            value без изменений

        Raises:
            IllegalCalendarFieldValueError: Если value вне диапазона
        """
        if not self.is_valid_value(value):
            raise IllegalCalendarFieldValueError(
                self.name, value, self.get_minimum_value(), self.get_maximum_value()
            )
        return value

    # =========================================================================
    # ВЫЧИСЛЕНИЕ ЗНАЧЕНИЯ
    # =========================================================================

    @abstractmethod
    def get_value_quiet(
        self, date: Optional[LocalDate], time: Optional[LocalTime]
    ) -> Optional[int]:
        """
        Значение поля для пары (date, time).

        Returns:
            Значение поля или None, если значение не выводится
        """

    def get_value(self, date: Optional[LocalDate], time: Optional[LocalTime]) -> int:
        """
        Значение поля для пары (date, time).

        Raises:
            FieldValueUnavailableError: Если значение не выводится
        """
        value = self.get_value_quiet(date, time)
        if value is None:
            raise FieldValueUnavailableError(self.name)
        return value

    # =========================================================================
    # IDENTITY
    # =========================================================================

    def __reduce__(self) -> Any:
        return (_resolve_rule, (self.chronology, self.name))

    def __copy__(self) -> "DateTimeFieldRule":
        return self

    def __deepcopy__(self, memo: dict) -> "DateTimeFieldRule":
        return self

    def __repr__(self) -> str:
        return f"{self.chronology.name}.{self.name}"
