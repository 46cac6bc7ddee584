"""
JSON Schema Contract Validators

Валидация сериализованных UnitValue согласно JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- unit_value.json ({"value": <number>, "units": <non-empty string>})
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

# Схемы поставляются вместе с пакетом
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

UNIT_VALUE_SCHEMA: Final[str] = "unit_value"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = Path(schema_dir)
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'unit_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# UNIT VALUE VALIDATOR
# =============================================================================


class UnitValueValidator:
    """
    Валидатор для unit_value контракта.

    Схема загружается и компилируется один раз при создании.
    """

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema = loader.load_schema(UNIT_VALUE_SCHEMA)
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

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


# Глобальный экземпляр валидатора
_UNIT_VALUE_VALIDATOR = UnitValueValidator()


def validate_unit_value(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного UnitValue.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _UNIT_VALUE_VALIDATOR.validate(data)
