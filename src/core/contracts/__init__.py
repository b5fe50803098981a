"""
Contract Validation Module

Модуль для валидации JSON контрактов дат (LocalDate, CopticDate).
Схемы поставляются как ресурсы пакета в schema/.
"""

from .validators import (
    COPTIC_DATE_CONTRACT,
    LOCAL_DATE_CONTRACT,
    ContractValidator,
    CopticDateValidator,
    LocalDateValidator,
    SchemaLoader,
    get_schema_loader,
    get_validator,
    validate_coptic_date,
    validate_local_date,
)

__all__ = [
    # Constants
    "LOCAL_DATE_CONTRACT",
    "COPTIC_DATE_CONTRACT",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LocalDateValidator",
    "CopticDateValidator",
    # Functions
    "get_schema_loader",
    "get_validator",
    "validate_local_date",
    "validate_coptic_date",
]
