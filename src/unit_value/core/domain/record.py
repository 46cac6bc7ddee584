"""
UnitValueRecord — Pydantic модель для обмена UnitValue

Соответствует схеме unit_value.json. В отличие от самого UnitValue,
запись требует конечную величину и непустые единицы.
"""

import math

from pydantic import BaseModel, Field, field_validator

from unit_value.core.domain.unit_value import UnitValue


class UnitValueRecord(BaseModel):
    """
    Сериализуемое представление UnitValue.

    Immutable модель (frozen=True).
    """

    value: float = Field(..., description="Числовая величина")
    units: str = Field(..., min_length=1, description="Единицы измерения (например, 'px')")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """NaN/Inf не сериализуются в JSON."""
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    @classmethod
    def from_unit_value(cls, uv: UnitValue) -> "UnitValueRecord":
        return cls(value=uv.value, units=uv.units)

    def to_unit_value(self) -> UnitValue:
        return UnitValue(self.value, self.units)
