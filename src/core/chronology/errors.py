"""
Calendrical errors — таксономия ошибок chronology/field rule

- UnsupportedRuleError: поле не поддерживается календарной системой
  (постоянное несоответствие возможностей, повтор бессмысленен)
- FieldValueUnavailableError: значение поля не выводится (нет даты)
- IllegalCalendarFieldValueError: значение вне допустимого диапазона поля

"Нет значения" в get_value_quiet — это None, а не исключение.
"""


class CalendricalError(Exception):
    """Базовое исключение календарных вычислений."""


class UnsupportedRuleError(CalendricalError):
    """
    Запрошено поле, которое chronology не поддерживает.

    Например, hour_of_day у date-only chronology. Ошибка постоянная:
    вызывающий код должен проверить is_field_supported заранее.
    """

    def __init__(self, field_name: str, chronology_name: str):
        self.field_name = field_name
        self.chronology_name = chronology_name
        super().__init__(
            f"Field {field_name} is not supported by the {chronology_name} chronology"
        )


class FieldValueUnavailableError(CalendricalError):
    """Значение поля не может быть выведено из переданных date/time."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field {field_name} cannot be derived: no date supplied")


class IllegalCalendarFieldValueError(CalendricalError, ValueError):
    """Значение поля вне диапазона [minimum, maximum]."""

    def __init__(self, field_name: str, value: int, minimum: int, maximum: int):
        self.field_name = field_name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Illegal value for {field_name} field, value {value} is not in the range "
            f"{minimum} to {maximum}"
        )
