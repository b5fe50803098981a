"""
Тесты для CopticDate

Проверяет:
1. Создание и валидацию (включая короткий 13-й месяц)
2. Конверсии epoch-day / LocalDate и round-trip
3. Поля даты через правила chronology
4. Immutability (frozen=True), JSON сериализацию и контракт coptic_date
"""

import jsonschema
import pytest
from pydantic import ValidationError

from src.core.chronology import IllegalCalendarFieldValueError
from src.core.contracts import validate_coptic_date
from src.core.domain import LocalDate
from src.coptic import COPTIC_CHRONOLOGY, COPTIC_EPOCH_DAY, CopticDate


class TestCopticDateCreation:
    """Тесты создания CopticDate"""

    def test_of(self) -> None:
        """Создание из компонент"""
        d = CopticDate.of(1740, 4, 28)
        assert (d.year, d.month, d.day) == (1740, 4, 28)

    def test_thirteenth_month_common_year_has_five_days(self) -> None:
        """13-й месяц обычного года: дни 1..5, день 6 отклоняется"""
        assert CopticDate.of(1740, 13, 5).day == 5
        with pytest.raises(ValidationError) as exc_info:
            CopticDate.of(1740, 13, 6)
        assert "DayOfMonth" in str(exc_info.value)

    def test_thirteenth_month_leap_year_has_six_days(self) -> None:
        """13-й месяц високосного года: дни 1..6"""
        assert CopticDate.of(1739, 13, 6).day == 6
        with pytest.raises(ValidationError):
            CopticDate.of(1739, 13, 7)

    @pytest.mark.parametrize(
        "year, month, day",
        [(0, 1, 1), (1740, 0, 1), (1740, 14, 1), (1740, 1, 0), (1740, 1, 31)],
    )
    def test_out_of_range_rejected(self, year: int, month: int, day: int) -> None:
        """Компоненты вне диапазона отклоняются"""
        with pytest.raises(ValidationError):
            CopticDate.of(year, month, day)

    def test_immutable(self) -> None:
        """CopticDate должна быть immutable (frozen=True)"""
        d = CopticDate.of(1740, 1, 1)
        with pytest.raises(ValidationError):
            d.day = 2  # type: ignore


class TestCopticDateConversion:
    """Тесты конверсий CopticDate"""

    def test_epoch(self) -> None:
        """Coptic epoch: 0001-01-01 = 0284-08-29 ISO"""
        d = CopticDate.of_epoch_day(COPTIC_EPOCH_DAY)
        assert d == CopticDate.of(1, 1, 1)
        assert d.to_local_date() == LocalDate.of(284, 8, 29)

    @pytest.mark.parametrize(
        "iso, coptic",
        [
            ((1970, 1, 1), (1686, 4, 23)),
            ((2000, 1, 1), (1716, 4, 22)),
            ((2023, 9, 11), (1739, 13, 6)),
            ((2023, 9, 12), (1740, 1, 1)),
            ((2024, 1, 7), (1740, 4, 28)),
        ],
    )
    def test_iso_correspondence(self, iso, coptic) -> None:
        """Известные соответствия ISO и Coptic дат"""
        local = LocalDate.of(*iso)
        d = CopticDate.from_local_date(local)
        assert (d.year, d.month, d.day) == coptic
        assert d.to_local_date() == local

    def test_before_epoch_rejected(self) -> None:
        """Дата до Coptic epoch не представима"""
        with pytest.raises(IllegalCalendarFieldValueError, match="Year"):
            CopticDate.of_epoch_day(COPTIC_EPOCH_DAY - 1)

    def test_roundtrip_epoch_days(self) -> None:
        """Инвариант: epoch-day -> CopticDate -> epoch-day для двух циклов"""
        start = LocalDate.of(2019, 9, 12).epoch_day
        for epoch_day in range(start, start + 2 * 1461):
            assert CopticDate.of_epoch_day(epoch_day).to_epoch_day() == epoch_day

    def test_consecutive_days_are_consecutive_epoch_days(self) -> None:
        """Соседние Coptic даты — соседние epoch-day (через границу года)"""
        last = CopticDate.of(1739, 13, 6)
        first = CopticDate.of(1740, 1, 1)
        assert first.to_epoch_day() - last.to_epoch_day() == 1


class TestCopticDateFields:
    """Тесты полей CopticDate"""

    def test_chronology(self) -> None:
        """Дата принадлежит Coptic singleton"""
        assert CopticDate.of(1740, 1, 1).chronology is COPTIC_CHRONOLOGY

    def test_leap_year(self) -> None:
        """Високосность и длины"""
        leap = CopticDate.of(1739, 13, 1)
        common = CopticDate.of(1740, 13, 1)
        assert leap.is_leap_year() is True
        assert common.is_leap_year() is False
        assert leap.length_of_month() == 6
        assert common.length_of_month() == 5
        assert leap.length_of_year() == 366
        assert common.length_of_year() == 365
        assert CopticDate.of(1740, 1, 1).length_of_month() == 30

    def test_day_of_year(self) -> None:
        """День года"""
        assert CopticDate.of(1740, 1, 1).day_of_year() == 1
        assert CopticDate.of(1740, 4, 28).day_of_year() == 118
        assert CopticDate.of(1739, 13, 6).day_of_year() == 366

    def test_day_of_week(self) -> None:
        """День недели (ISO, Monday = 1)"""
        assert CopticDate.of(1740, 4, 28).day_of_week() == 7
        assert CopticDate.of(1, 1, 1).day_of_week() == 5

    def test_str(self) -> None:
        """Строковое представление"""
        assert str(CopticDate.of(1740, 4, 28)) == "1740-04-28 (Coptic)"


class TestCopticDateSerialization:
    """Тесты JSON сериализации"""

    def test_json_roundtrip(self) -> None:
        """Сериализация/десериализация JSON"""
        d = CopticDate.of(1739, 13, 6)
        restored = CopticDate.model_validate_json(d.model_dump_json())
        assert restored == d

    def test_invalid_json_rejected(self) -> None:
        """JSON с несуществующей датой отклоняется"""
        with pytest.raises(ValidationError):
            CopticDate.model_validate_json('{"year": 1740, "month": 13, "day": 6}')

    def test_to_json_contract(self) -> None:
        """JSON представление соответствует контракту coptic_date"""
        data = CopticDate.of(1740, 4, 28).to_json_contract()
        assert data == {"year": 1740, "month": 4, "day": 28}
        validate_coptic_date(data)

    def test_from_json_contract(self) -> None:
        """Восстановление из JSON данных контракта"""
        d = CopticDate.from_json_contract({"year": 1739, "month": 13, "day": 6})
        assert d == CopticDate.of(1739, 13, 6)
        assert CopticDate.from_json_contract(d.to_json_contract()) == d

    @pytest.mark.parametrize(
        "data",
        [
            {"year": 1740, "month": 4},
            {"year": "1740", "month": 4, "day": 28},
            {"year": 1740, "month": 4, "day": 28, "era": "AM"},
            {"year": 1740, "month": 13, "day": 7},
        ],
    )
    def test_from_json_contract_rejects_schema_violations(self, data) -> None:
        """Нарушение схемы отклоняется до построения модели"""
        with pytest.raises(jsonschema.ValidationError):
            CopticDate.from_json_contract(data)

    def test_from_json_contract_checks_year_length(self) -> None:
        """День 6 13-го месяца проходит схему, но не существует в обычном году"""
        data = {"year": 1740, "month": 13, "day": 6}
        validate_coptic_date(data)
        with pytest.raises(ValidationError, match="DayOfMonth"):
            CopticDate.from_json_contract(data)
