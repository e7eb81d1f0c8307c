"""
JSON Schema Contract Validators

Модуль для валидации сериализованных конфигураций ремаппинга согласно
формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- range_mapping.json (RangeMapping: source/target интервалы + clamped)

Схемы лежат в contracts/schema/ в корне проекта и не входят в wheel:
каталог по умолчанию доступен только при запуске из исходного дерева
или после editable install (pip install -e .). Для других установок
каталог передаётся явно: SchemaLoader(schema_dir=...). Импорт модуля
схемы не читает, ошибка возникает при первой валидации.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger("remap.contracts")

# Корень проекта: 4 уровня вверх от этого файла
DEFAULT_SCHEMA_DIR: Path = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    По умолчанию ищет схемы в DEFAULT_SCHEMA_DIR.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'range_mapping')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        logger.debug("Loading schema %s from %s", schema_name, schema_path)
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_default_loader: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик для DEFAULT_SCHEMA_DIR, создаётся при первом обращении."""
    global _default_loader
    if _default_loader is None:
        _default_loader = SchemaLoader()
    return _default_loader


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: общий загрузчик get_schema_loader())
        """
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("%s contract violation at %s: %s", self.schema_name, list(e.path), e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class RangeMappingValidator(ContractValidator):
    """Валидатор для range_mapping контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("range_mapping", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_range_mapping(data: Dict[str, Any]) -> None:
    """
    Валидация range_mapping данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RangeMappingValidator().validate(data)
