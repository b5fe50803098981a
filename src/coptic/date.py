"""
CopticDate — дата в Coptic календаре

Immutable Pydantic модель (year, month, day). Проверка длины месяца
(13-й месяц: 5 дней, в високосный год 6) выполняется model validator-ом,
поэтому несуществующая дата не может быть сконструирована.

Конверсии идут через epoch-day:
    CopticDate.of_epoch_day(d).to_epoch_day() == d
    CopticDate.of_epoch_day(date.to_epoch_day()) == date

JSON обмен идёт через контракт coptic_date: схема проверяет форму и
диапазоны, модель дополнительно проверяет длину 13-го месяца по году.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from src.core.chronology.errors import IllegalCalendarFieldValueError
from src.core.contracts.validators import validate_coptic_date
from src.core.domain.local_date import LocalDate
from src.coptic import calendar_math
from src.coptic.calendar_math import DAYS_PER_MONTH, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from src.coptic.chronology import COPTIC_CHRONOLOGY, CopticChronology


class CopticDate(BaseModel):
    """Coptic дата."""

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Coptic год (от 1)")
    month: int = Field(..., ge=1, le=MONTHS_PER_YEAR, description="Месяц (1-13)")
    day: int = Field(..., ge=1, le=DAYS_PER_MONTH, description="День месяца (1-30)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "CopticDate":
        """Проверка, что день существует в месяце (13-й месяц короткий)."""
        max_day = calendar_math.length_of_month(self.year, self.month)
        if self.day > max_day:
            raise IllegalCalendarFieldValueError("DayOfMonth", self.day, 1, max_day)
        return self

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "CopticDate":
        """Создание из компонент."""
        return cls(year=year, month=month, day=day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "CopticDate":
        """
        Создание из epoch-day.

        Raises:
            IllegalCalendarFieldValueError: Если epoch-day раньше Coptic epoch
        """
        components = calendar_math.components_from_epoch_day(epoch_day)
        COPTIC_CHRONOLOGY.year().check_value(components.year)
        return cls(year=components.year, month=components.month, day=components.day)

    @classmethod
    def from_local_date(cls, date: LocalDate) -> "CopticDate":
        """Создание из LocalDate."""
        return cls.of_epoch_day(date.epoch_day)

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_epoch_day(self) -> int:
        """Epoch-day этой даты."""
        return calendar_math.epoch_day_from_components(self.year, self.month, self.day)

    def to_local_date(self) -> LocalDate:
        """LocalDate этой даты."""
        return LocalDate.of_epoch_day(self.to_epoch_day())

    # =========================================================================
    # JSON КОНТРАКТ
    # =========================================================================

    @classmethod
    def from_json_contract(cls, data: Dict[str, Any]) -> "CopticDate":
        """
        Создание из JSON данных контракта coptic_date.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            pydantic.ValidationError: Если день не существует в 13-м месяце года
        """
        validate_coptic_date(data)
        return cls.model_validate(data)

    def to_json_contract(self) -> Dict[str, Any]:
        """JSON представление, проверенное по контракту coptic_date."""
        data = self.model_dump(mode="json")
        validate_coptic_date(data)
        return data

    # =========================================================================
    # ПОЛЯ
    # =========================================================================

    @property
    def chronology(self) -> CopticChronology:
        return COPTIC_CHRONOLOGY

    def is_leap_year(self) -> bool:
        return COPTIC_CHRONOLOGY.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return calendar_math.length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return calendar_math.length_of_year(self.year)

    def day_of_year(self) -> int:
        """День года (1..366), через правило chronology."""
        return COPTIC_CHRONOLOGY.day_of_year().get_value(self.to_local_date(), None)

    def day_of_week(self) -> int:
        """ISO день недели (1 = Monday), через правило chronology."""
        return COPTIC_CHRONOLOGY.day_of_week().get_value(self.to_local_date(), None)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} (Coptic)"
