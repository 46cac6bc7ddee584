"""
Contract Validation Module

Модуль для валидации JSON контрактов UnitValue.
"""

from .validators import (
    SchemaLoader,
    UnitValueValidator,
    validate_unit_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "UnitValueValidator",
    # Functions
    "validate_unit_value",
]
