"""
Тесты для CopticChronology

Проверяет:
1. Имя и правило високосного года
2. Singleton identity (конструктор, copy, deepcopy, pickle)
3. Accessor-ы полей даты возвращают singleton-правила
4. Поля времени суток — UnsupportedRuleError
5. Поиск правил по имени и проверку поддержки поля
6. Immutability singleton и debug-логирование отказов
"""

import copy
import logging
import pickle

import pytest

from src.core.chronology import (
    CLOCK_FIELDS,
    CalendricalError,
    Chronology,
    UnsupportedRuleError,
)
from src.core.domain import MIDNIGHT, LocalDate
from src.coptic import COPTIC_CHRONOLOGY, CopticChronology


class TestChronologyBasics:
    """Тесты базовых свойств chronology"""

    def test_name(self) -> None:
        """Имя календарной системы"""
        assert COPTIC_CHRONOLOGY.name == "Coptic"
        assert repr(COPTIC_CHRONOLOGY) == "CopticChronology"

    def test_is_chronology(self) -> None:
        """Реализует контракт Chronology"""
        assert isinstance(COPTIC_CHRONOLOGY, Chronology)

    @pytest.mark.parametrize(
        "year, expected",
        [(1, False), (2, False), (3, True), (4, False), (7, True), (1739, True), (1740, False)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Високосный год: year % 4 == 3"""
        assert COPTIC_CHRONOLOGY.is_leap_year(year) is expected

    @pytest.mark.parametrize("year", range(1, 100))
    def test_is_leap_year_periodicity(self, year: int) -> None:
        """Инвариант: is_leap_year(y) == is_leap_year(y + 4)"""
        assert COPTIC_CHRONOLOGY.is_leap_year(year) == COPTIC_CHRONOLOGY.is_leap_year(year + 4)


class TestSingletonIdentity:
    """Тесты singleton identity"""

    def test_constructor_returns_singleton(self) -> None:
        """Повторный конструктор возвращает тот же экземпляр"""
        year_rule = COPTIC_CHRONOLOGY.year()
        assert CopticChronology() is COPTIC_CHRONOLOGY
        # Правила не пересоздаются
        assert COPTIC_CHRONOLOGY.year() is year_rule

    def test_copy_returns_singleton(self) -> None:
        """copy/deepcopy не создают дубликатов"""
        assert copy.copy(COPTIC_CHRONOLOGY) is COPTIC_CHRONOLOGY
        assert copy.deepcopy(COPTIC_CHRONOLOGY) is COPTIC_CHRONOLOGY

    def test_pickle_resolves_to_singleton(self) -> None:
        """Десериализация разрешается в тот же экземпляр"""
        restored = pickle.loads(pickle.dumps(COPTIC_CHRONOLOGY))
        assert restored is COPTIC_CHRONOLOGY

    def test_pickle_rules_resolve_to_singletons(self) -> None:
        """Десериализация правил разрешается в singleton-правила"""
        for rule in COPTIC_CHRONOLOGY.field_rules():
            assert pickle.loads(pickle.dumps(rule)) is rule

    def test_deepcopy_of_rule_container(self) -> None:
        """deepcopy контейнера с правилами сохраняет identity"""
        rules = {"year": COPTIC_CHRONOLOGY.year()}
        assert copy.deepcopy(rules)["year"] is COPTIC_CHRONOLOGY.year()

    def test_singleton_is_immutable(self) -> None:
        """Атрибуты singleton нельзя переназначить или удалить"""
        year_rule = COPTIC_CHRONOLOGY.year()
        with pytest.raises(AttributeError, match="CopticChronology is immutable"):
            COPTIC_CHRONOLOGY._year_rule = COPTIC_CHRONOLOGY.day_of_week()  # type: ignore
        with pytest.raises(AttributeError, match="cannot delete _year_rule"):
            del COPTIC_CHRONOLOGY._year_rule
        with pytest.raises(AttributeError):
            COPTIC_CHRONOLOGY.extra = 1  # type: ignore
        assert COPTIC_CHRONOLOGY.year() is year_rule


class TestDateFieldAccessors:
    """Тесты accessor-ов полей даты"""

    def test_accessors_return_same_rule_every_time(self) -> None:
        """Каждый accessor возвращает один и тот же экземпляр"""
        assert COPTIC_CHRONOLOGY.year() is COPTIC_CHRONOLOGY.year()
        assert COPTIC_CHRONOLOGY.month_of_year() is COPTIC_CHRONOLOGY.month_of_year()
        assert COPTIC_CHRONOLOGY.day_of_month() is COPTIC_CHRONOLOGY.day_of_month()
        assert COPTIC_CHRONOLOGY.day_of_year() is COPTIC_CHRONOLOGY.day_of_year()
        assert COPTIC_CHRONOLOGY.day_of_week() is COPTIC_CHRONOLOGY.day_of_week()

    def test_rules_are_owned_by_chronology(self) -> None:
        """Правила ссылаются на владеющую chronology"""
        for rule in COPTIC_CHRONOLOGY.field_rules():
            assert rule.chronology is COPTIC_CHRONOLOGY

    def test_field_rules_order(self) -> None:
        """field_rules() — пять поддерживаемых правил"""
        names = [rule.name for rule in COPTIC_CHRONOLOGY.field_rules()]
        assert names == ["Year", "MonthOfYear", "DayOfMonth", "DayOfYear", "DayOfWeek"]

    @pytest.mark.parametrize(
        "field_name, accessor",
        [
            ("Year", "year"),
            ("MonthOfYear", "month_of_year"),
            ("DayOfMonth", "day_of_month"),
            ("DayOfYear", "day_of_year"),
            ("DayOfWeek", "day_of_week"),
        ],
    )
    def test_get_rule_by_name(self, field_name: str, accessor: str) -> None:
        """Поиск правила по имени совпадает с accessor-ом"""
        assert COPTIC_CHRONOLOGY.get_rule(field_name) is getattr(COPTIC_CHRONOLOGY, accessor)()
        assert COPTIC_CHRONOLOGY.is_field_supported(field_name)


class TestUnsupportedFields:
    """Тесты неподдерживаемых полей времени суток"""

    @pytest.mark.parametrize(
        "accessor, field_name",
        [
            ("hour_of_day", "HourOfDay"),
            ("minute_of_hour", "MinuteOfHour"),
            ("second_of_minute", "SecondOfMinute"),
            ("nano_of_second", "NanoOfSecond"),
        ],
    )
    def test_clock_accessor_raises(self, accessor: str, field_name: str) -> None:
        """Accessor поля времени — UnsupportedRuleError"""
        with pytest.raises(UnsupportedRuleError) as exc_info:
            getattr(COPTIC_CHRONOLOGY, accessor)()
        assert exc_info.value.field_name == field_name
        assert exc_info.value.chronology_name == "Coptic"
        assert isinstance(exc_info.value, CalendricalError)

    def test_hour_of_day_fails_regardless_of_input(self) -> None:
        """hour_of_day недоступен независимо от date/time"""
        date = LocalDate.of(2024, 1, 7)
        with pytest.raises(UnsupportedRuleError, match="HourOfDay is not supported"):
            COPTIC_CHRONOLOGY.hour_of_day().get_value(date, MIDNIGHT)

    @pytest.mark.parametrize("field_name", sorted(CLOCK_FIELDS))
    def test_clock_fields_not_supported(self, field_name: str) -> None:
        """Поля времени объявлены неподдерживаемыми"""
        assert COPTIC_CHRONOLOGY.is_field_supported(field_name) is False
        with pytest.raises(UnsupportedRuleError):
            COPTIC_CHRONOLOGY.get_rule(field_name)

    def test_unknown_field(self) -> None:
        """Неизвестное поле"""
        assert COPTIC_CHRONOLOGY.is_field_supported("EraOfYear") is False
        with pytest.raises(UnsupportedRuleError, match="EraOfYear"):
            COPTIC_CHRONOLOGY.get_rule("EraOfYear")

    def test_unsupported_request_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Запрос неподдерживаемого поля логируется на уровне DEBUG"""
        caplog.set_level(logging.DEBUG, logger="src.core.chronology.chronology")
        with pytest.raises(UnsupportedRuleError):
            COPTIC_CHRONOLOGY.minute_of_hour()
        assert "Coptic chronology rejected request for field MinuteOfHour" in caplog.text

    def test_unknown_field_request_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Запрос неизвестного поля по имени логируется так же, как поля времени"""
        caplog.set_level(logging.DEBUG, logger="src.core.chronology.chronology")
        with pytest.raises(UnsupportedRuleError):
            COPTIC_CHRONOLOGY.get_rule("EraOfYear")
        assert "Coptic chronology rejected request for field EraOfYear" in caplog.text
        assert all(record.levelno == logging.DEBUG for record in caplog.records)
