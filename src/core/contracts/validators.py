"""
JSON Schema Contract Validators

Модуль для валидации JSON представлений дат согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных
схемам.

Схемы поставляются вместе с пакетом (src/core/contracts/schema/) и читаются
через importlib.resources, поэтому работают и из исходников, и из wheel:
- local_date.json  (LocalDate: epoch_day)
- coptic_date.json (CopticDate: year, month, day)

Схема проверяет форму и диапазоны полей. Правила, зависящие от календаря
(длина 13-го месяца в високосный год), проверяет Pydantic модель.

Загрузчик и скомпилированные валидаторы создаются лениво при первом
обращении: импорт модуля не читает файлы.
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Пакет, в котором лежит каталог схем
SCHEMA_PACKAGE: Final[str] = "src.core.contracts"

# Каталог схем внутри пакета
SCHEMA_SUBDIR: Final[str] = "schema"

# Имена контрактов
LOCAL_DATE_CONTRACT: Final[str] = "local_date"
COPTIC_DATE_CONTRACT: Final[str] = "coptic_date"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из ресурсов пакета; schema_dir позволяет
    подставить другой каталог (например, в тестах).
    """

    def __init__(self, schema_dir: Path | None = None):
        # Traversable ресурса пакета; Path поддерживает тот же интерфейс
        self._schema_dir: Any = schema_dir
        if self._schema_dir is None:
            self._schema_dir = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_SUBDIR)
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available_schemas(self) -> List[str]:
        """Имена схем (без расширения), найденных в каталоге."""
        return sorted(
            entry.name[: -len(".json")]
            for entry in self._schema_dir.iterdir()
            if entry.is_file() and entry.name.endswith(".json")
        )

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'coptic_date')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = self._schema_dir.joinpath(f"{schema_name}.json")
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        # Meta-validation: сама схема должна быть валидной Draft 2020-12
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, resource)
        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем пакета (создаётся при первом вызове)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Без явного loader использует общий загрузчик пакета.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Сообщения всех нарушений, с путём к полю (пусто, если данные валидны)."""
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(e.path)):
            location = "/".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages


class LocalDateValidator(ContractValidator):
    """Валидатор для local_date контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(LOCAL_DATE_CONTRACT, loader)


class CopticDateValidator(ContractValidator):
    """Валидатор для coptic_date контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(COPTIC_DATE_CONTRACT, loader)


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Скомпилированный валидатор контракта (кэшируется по имени)."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_local_date(data: Dict[str, Any]) -> None:
    """
    Валидация local_date данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator(LOCAL_DATE_CONTRACT).validate(data)


def validate_coptic_date(data: Dict[str, Any]) -> None:
    """
    Валидация coptic_date данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator(COPTIC_DATE_CONTRACT).validate(data)
