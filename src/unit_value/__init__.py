"""
unit-value: числовые значения с единицами измерения ("10px", "5 inches").

Разбор строк, приведение разнородного ввода к UnitValue и арифметика,
сохраняющая или переназначающая единицы.
"""

from unit_value.core.contracts import SchemaLoader, UnitValueValidator, validate_unit_value
from unit_value.core.domain import (
    ReconciledValues,
    UnitsError,
    UnitValue,
    UnitValueRecord,
    add,
    divide,
    get_values_and_units,
    multiply,
    parse,
    parse_string,
    subtract,
)

__version__ = "0.1.0"

__all__ = [
    "UnitValue",
    "UnitValueRecord",
    "UnitsError",
    "ReconciledValues",
    "parse",
    "parse_string",
    "get_values_and_units",
    "add",
    "subtract",
    "multiply",
    "divide",
    "SchemaLoader",
    "UnitValueValidator",
    "validate_unit_value",
    "__version__",
]
