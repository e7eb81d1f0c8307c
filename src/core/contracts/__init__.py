"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигураций ремаппинга.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    RangeMappingValidator,
    SchemaLoader,
    get_schema_loader,
    validate_range_mapping,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RangeMappingValidator",
    # Functions
    "get_schema_loader",
    "validate_range_mapping",
]
