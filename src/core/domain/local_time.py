"""
LocalTime — время суток без даты и часового пояса

Immutable Pydantic модель. Date-only chronology (например, Coptic) время
игнорирует; модель нужна для сигнатуры field rule (date, time).
"""

from pydantic import BaseModel, Field


class LocalTime(BaseModel):
    """Время суток с точностью до наносекунды."""

    hour: int = Field(0, ge=0, le=23, description="Час (0-23)")
    minute: int = Field(0, ge=0, le=59, description="Минута (0-59)")
    second: int = Field(0, ge=0, le=59, description="Секунда (0-59)")
    nano: int = Field(0, ge=0, le=999_999_999, description="Наносекунда (0-999999999)")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, hour: int, minute: int = 0, second: int = 0, nano: int = 0) -> "LocalTime":
        """Создание из компонент."""
        return cls(hour=hour, minute=minute, second=second, nano=nano)

    def to_nano_of_day(self) -> int:
        """Наносекунды от полуночи."""
        return ((self.hour * 60 + self.minute) * 60 + self.second) * 1_000_000_000 + self.nano


MIDNIGHT = LocalTime()
NOON = LocalTime(hour=12)
