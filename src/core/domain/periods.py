"""
PeriodUnit — словарь единиц периода

Непрозрачные токены, которыми field rule объявляет свою гранулярность:
- period_unit: наименьшая единица, которую поле различает (например, DAYS)
- period_range: единица, внутри которой поле повторяется (например, MONTHS)

Chronology не выполняет над ними арифметику — только сравнение на равенство.
"""

from enum import Enum


class PeriodUnit(str, Enum):
    """Единица периода"""

    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    FOREVER = "Forever"
