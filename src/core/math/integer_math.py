"""
Integer Math — точные целочисленные примитивы для календарной арифметики

Модуль обеспечивает детерминированную арифметику над epoch-day:
- Floor-деление и floor-остаток (округление к -inf, а не к нулю)
- Ограничение значения диапазоном (clamp)
- Валидацию целочисленных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких float: все операции над int, результат всегда int
2. Делитель всегда строго положительный (иначе ValueError)
3. floor_mod(a, b) всегда в [0, b), в том числе для отрицательных a
4. Python int не переполняется, поэтому промежуточные произведения
   (например, 4 * epoch_day) безопасны для любых значений
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество дней в неделе (используется для day-of-week)
DAYS_PER_WEEK: Final[int] = 7


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: int, name: str) -> None:
    """
    Валидация, что значение является целым числом.

    bool формально наследует int, но как календарное значение не допускается.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")


# =============================================================================
# FLOOR-АРИФМЕТИКА
# =============================================================================


def floor_div(numerator: int, divisor: int) -> int:
    """
    Целочисленное деление с округлением к минус бесконечности.

    Args:
        numerator: Делимое (может быть отрицательным)
        divisor: Делитель (строго положительный)

    Returns:
        floor(numerator / divisor)

    Raises:
        ValueError: Если divisor <= 0

    Examples:
        >>> floor_div(7, 2)
        3
        >>> floor_div(-7, 2)
        -4
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    return numerator // divisor


def floor_mod(numerator: int, divisor: int) -> int:
    """
    Остаток от floor-деления, всегда в [0, divisor).

    Выполняется тождество:
        floor_div(a, b) * b + floor_mod(a, b) == a

    Args:
        numerator: Делимое (может быть отрицательным)
        divisor: Делитель (строго положительный)

    Returns:
        Неотрицательный остаток

    Raises:
        ValueError: Если divisor <= 0

    Examples:
        >>> floor_mod(7, 3)
        1
        >>> floor_mod(-1, 7)
        6
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    return numerator % divisor


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 1, 13)
        5
        >>> clamp(0, 1, 13)
        1
        >>> clamp(14, 1, 13)
        13
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
