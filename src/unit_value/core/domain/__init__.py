"""
Domain models and value objects.

Contains UnitValue, pair reconciliation and unit-preserving arithmetic.
"""

from unit_value.core.domain.errors import UnitsError
from unit_value.core.domain.record import UnitValueRecord
from unit_value.core.domain.unit_value import (
    ReconciledValues,
    UnitValue,
    add,
    divide,
    get_values_and_units,
    multiply,
    parse,
    parse_string,
    subtract,
)

__all__ = [
    # UnitValue model
    "UnitValue",
    "UnitValueRecord",
    "UnitsError",
    # Parsing
    "parse",
    "parse_string",
    # Reconciliation
    "ReconciledValues",
    "get_values_and_units",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
]
