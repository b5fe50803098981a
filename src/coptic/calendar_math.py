"""
Coptic calendar math — конверсия epoch-day <-> компоненты Coptic даты

Coptic календарь: двенадцать месяцев по 30 дней и дополнительный период
из 5 или 6 дней, который моделируется как 13-й месяц.

Год високосный, если year % 4 == 3: цикл из четырёх лет содержит три года
по 365 дней и один год в 366 дней (DAYS_IN_CYCLE = 1461), дополнительный
день получает 13-й месяц.

ФОРМУЛЫ (d = epoch_day - COPTIC_EPOCH_DAY, 0 для 0001-01-01 Coptic):
    year                  = floor((4 * d + 1463) / 1461)
    first_epoch_day(year) = COPTIC_EPOCH_DAY + (year - 1) * 365 + floor(year / 4)
    day_of_year           = epoch_day - first_epoch_day(year) + 1
    month                 = min(floor((day_of_year - 1) / 30) + 1, 13)
    day_of_month          = day_of_year - (month - 1) * 30
    day_of_week           = floor_mod(epoch_day + 3, 7) + 1   (ISO, Monday = 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только целочисленная арифметика, без ветвления по високосности в year
2. epoch-day всегда перебазируется к Coptic epoch до умножения на 4
3. day_of_week считается по сырому epoch-day, не из Coptic компонент
4. Функции не валидируют год на MIN_YEAR: даты до epoch дают proleptic год <= 0
"""

from typing import Final, NamedTuple

from src.core.chronology.errors import IllegalCalendarFieldValueError
from src.core.math.integer_math import (
    DAYS_PER_WEEK,
    clamp,
    floor_div,
    floor_mod,
    validate_int,
)

# =============================================================================
# ПАРАМЕТРЫ КАЛЕНДАРЯ
# =============================================================================

# Дней в четырёхлетнем цикле: 3 * 365 + 366
DAYS_IN_CYCLE: Final[int] = 365 * 4 + 1

# Дней в обычном году
DAYS_IN_COMMON_YEAR: Final[int] = 365

# Дней в месяцах 1..12
DAYS_PER_MONTH: Final[int] = 30

# Дней в 13-м месяце обычного года (в високосном на один больше)
DAYS_IN_SHORT_MONTH: Final[int] = 5

# Месяцев в году (13-й — дополнительный короткий)
MONTHS_PER_YEAR: Final[int] = 13

# Epoch-day для 0001-01-01 Coptic (= 0284-08-29 ISO)
COPTIC_EPOCH_DAY: Final[int] = -615558

# Границы года
MIN_YEAR: Final[int] = 1
MAX_YEAR: Final[int] = 999_999_999

# Сдвиг, выравнивающий epoch-day 0 (четверг, 1970-01-01) на ISO day-of-week
DAY_OF_WEEK_OFFSET: Final[int] = 3


class CopticComponents(NamedTuple):
    """Компоненты Coptic даты."""

    year: int
    month: int
    day: int
    day_of_year: int


# =============================================================================
# ВИСОКОСНОСТЬ И ДЛИНЫ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Високосный ли Coptic год.

    Args:
        year: Год (ожидается >= MIN_YEAR, не проверяется)

    Returns:
        True если year % 4 == 3
    """
    return floor_mod(year, 4) == 3


def length_of_year(year: int) -> int:
    """Дней в году: 366 для високосного, иначе 365."""
    return DAYS_IN_COMMON_YEAR + 1 if is_leap_year(year) else DAYS_IN_COMMON_YEAR


def length_of_month(year: int, month: int) -> int:
    """
    Дней в месяце.

    Raises:
        IllegalCalendarFieldValueError: Если month вне 1..13
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise IllegalCalendarFieldValueError("MonthOfYear", month, 1, MONTHS_PER_YEAR)
    if month < MONTHS_PER_YEAR:
        return DAYS_PER_MONTH
    return DAYS_IN_SHORT_MONTH + 1 if is_leap_year(year) else DAYS_IN_SHORT_MONTH


# =============================================================================
# EPOCH-DAY -> КОМПОНЕНТЫ
# =============================================================================


def year_from_epoch_day(epoch_day: int) -> int:
    """
    Coptic год для epoch-day.

    Перебазирование к Coptic epoch обязательно: без него год смещён на
    расстояние от 1970-01-01 до 0284-08-29.
    """
    validate_int(epoch_day, "epoch_day")
    days_since_epoch = epoch_day - COPTIC_EPOCH_DAY
    return floor_div(4 * days_since_epoch + DAYS_IN_CYCLE + 2, DAYS_IN_CYCLE)


def first_epoch_day_of_year(year: int) -> int:
    """Epoch-day первого дня Coptic года (обратное к year_from_epoch_day)."""
    validate_int(year, "year")
    return COPTIC_EPOCH_DAY + (year - 1) * DAYS_IN_COMMON_YEAR + floor_div(year, 4)


def day_of_year_from_epoch_day(epoch_day: int) -> int:
    """Порядковый номер дня в Coptic году (1..365 или 1..366)."""
    year = year_from_epoch_day(epoch_day)
    return epoch_day - first_epoch_day_of_year(year) + 1


def month_from_day_of_year(day_of_year: int) -> int:
    """Месяц по дню года; 13-й месяц поглощает дни 361..366."""
    return clamp(floor_div(day_of_year - 1, DAYS_PER_MONTH) + 1, 1, MONTHS_PER_YEAR)


def day_of_month_from_day_of_year(day_of_year: int) -> int:
    """День месяца по дню года."""
    month = month_from_day_of_year(day_of_year)
    return day_of_year - (month - 1) * DAYS_PER_MONTH


def components_from_epoch_day(epoch_day: int) -> CopticComponents:
    """Полная декомпозиция epoch-day в Coptic компоненты."""
    year = year_from_epoch_day(epoch_day)
    day_of_year = epoch_day - first_epoch_day_of_year(year) + 1
    month = month_from_day_of_year(day_of_year)
    day = day_of_year - (month - 1) * DAYS_PER_MONTH
    return CopticComponents(year=year, month=month, day=day, day_of_year=day_of_year)


def day_of_week_from_epoch_day(epoch_day: int) -> int:
    """ISO day-of-week (1 = Monday .. 7 = Sunday), не зависит от календаря."""
    validate_int(epoch_day, "epoch_day")
    return floor_mod(epoch_day + DAY_OF_WEEK_OFFSET, DAYS_PER_WEEK) + 1


# =============================================================================
# КОМПОНЕНТЫ -> EPOCH-DAY
# =============================================================================


def validate_components(year: int, month: int, day: int) -> None:
    """
    Проверка, что (year, month, day) — существующая Coptic дата.

    Raises:
        IllegalCalendarFieldValueError: Если какой-либо компонент вне диапазона
    """
    validate_int(year, "year")
    validate_int(month, "month")
    validate_int(day, "day")

    if year < MIN_YEAR or year > MAX_YEAR:
        raise IllegalCalendarFieldValueError("Year", year, MIN_YEAR, MAX_YEAR)

    max_day = length_of_month(year, month)
    if day < 1 or day > max_day:
        raise IllegalCalendarFieldValueError("DayOfMonth", day, 1, max_day)


def epoch_day_from_components(year: int, month: int, day: int) -> int:
    """
    Epoch-day для Coptic даты.

    Raises:
        IllegalCalendarFieldValueError: Если дата не существует
    """
    validate_components(year, month, day)
    day_of_year = (month - 1) * DAYS_PER_MONTH + day
    return first_epoch_day_of_year(year) + day_of_year - 1
