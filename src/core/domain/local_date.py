"""
LocalDate — дата без времени и часового пояса

Immutable Pydantic модель, единственное хранимое значение которой — epoch-day:
количество дней от 1970-01-01 (ISO). Epoch-day — универсальное значение обмена
между календарными системами: любая chronology вычисляет свои поля из него.

ISO-конструкторы (of, from_date) опираются на datetime.date и поэтому
ограничены годами 1..9999. Сам epoch_day не ограничен.

JSON обмен идёт через контракт local_date (to_json_contract / from_json_contract).
"""

from datetime import date
from typing import Any, Dict, Final

from pydantic import BaseModel, Field

from src.core.contracts.validators import validate_local_date

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Proleptic Gregorian ordinal (datetime.date.toordinal) для 1970-01-01
UNIX_EPOCH_ORDINAL: Final[int] = date(1970, 1, 1).toordinal()


class LocalDate(BaseModel):
    """
    Дата, выраженная через epoch-day.

    Сравнение и хеширование — по значению epoch_day.
    """

    epoch_day: int = Field(..., description="Количество дней от 1970-01-01 (ISO)")

    model_config = {"frozen": True}

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "LocalDate":
        """Создание из epoch-day."""
        return cls(epoch_day=epoch_day)

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "LocalDate":
        """
        Создание из ISO (proleptic Gregorian) года, месяца и дня.

        Raises:
            ValueError: Если дата не существует в ISO календаре
        """
        return cls.from_date(date(year, month, day))

    @classmethod
    def from_date(cls, value: date) -> "LocalDate":
        """Создание из datetime.date."""
        return cls(epoch_day=value.toordinal() - UNIX_EPOCH_ORDINAL)

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_date(self) -> date:
        """
        Конверсия в datetime.date (ISO).

        Raises:
            ValueError: Если epoch_day вне диапазона datetime.date
        """
        ordinal = self.epoch_day + UNIX_EPOCH_ORDINAL
        if ordinal < 1 or ordinal > date.max.toordinal():
            raise ValueError(
                f"epoch_day {self.epoch_day} is outside the ISO range supported by datetime.date"
            )
        return date.fromordinal(ordinal)

    # =========================================================================
    # JSON КОНТРАКТ
    # =========================================================================

    @classmethod
    def from_json_contract(cls, data: Dict[str, Any]) -> "LocalDate":
        """
        Создание из JSON данных контракта local_date.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_local_date(data)
        return cls.model_validate(data)

    def to_json_contract(self) -> Dict[str, Any]:
        """JSON представление, проверенное по контракту local_date."""
        data = self.model_dump(mode="json")
        validate_local_date(data)
        return data

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def plus_days(self, days: int) -> "LocalDate":
        """Дата, сдвинутая на days дней (может быть отрицательным)."""
        return LocalDate(epoch_day=self.epoch_day + days)

    def __lt__(self, other: "LocalDate") -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.epoch_day < other.epoch_day

    def __str__(self) -> str:
        try:
            return self.to_date().isoformat()
        except ValueError:
            return f"LocalDate(epoch_day={self.epoch_day})"
