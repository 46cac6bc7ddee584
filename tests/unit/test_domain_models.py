"""
Тесты для Pydantic модели UnitValueRecord

Проверяет:
1. Создание и валидацию модели
2. Immutability (frozen=True)
3. Конверсию UnitValue ↔ UnitValueRecord
4. Сериализацию/десериализацию JSON
"""

import math

import pytest
from pydantic import ValidationError

from unit_value.core.domain import UnitValue, UnitValueRecord


class TestUnitValueRecord:
    """Тесты для модели UnitValueRecord"""

    @pytest.fixture
    def valid_record(self) -> UnitValueRecord:
        """Валидная запись 10px"""
        return UnitValueRecord(value=10, units="px")

    def test_record_creation(self, valid_record: UnitValueRecord) -> None:
        assert valid_record.value == 10.0
        assert valid_record.units == "px"

    def test_record_immutable(self, valid_record: UnitValueRecord) -> None:
        """Запись должна быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            valid_record.units = "em"  # type: ignore

    def test_record_rejects_empty_units(self) -> None:
        with pytest.raises(ValidationError):
            UnitValueRecord(value=10, units="")

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_record_rejects_non_finite_value(self, value: float) -> None:
        with pytest.raises(ValidationError, match="value must be finite"):
            UnitValueRecord(value=value, units="px")

    def test_record_from_unit_value(self) -> None:
        record = UnitValueRecord.from_unit_value(UnitValue(1.5, "em"))
        assert record == UnitValueRecord(value=1.5, units="em")

    def test_record_to_unit_value(self, valid_record: UnitValueRecord) -> None:
        assert valid_record.to_unit_value() == UnitValue(10, "px")

    def test_unit_value_to_record(self) -> None:
        assert UnitValue.parse("4 gold pieces").to_record() == UnitValueRecord(
            value=4, units="gold pieces"
        )

    def test_record_json_roundtrip(self, valid_record: UnitValueRecord) -> None:
        """Сериализация → десериализация возвращает равную запись"""
        restored = UnitValueRecord.model_validate_json(valid_record.model_dump_json())
        assert restored == valid_record

    def test_record_dump(self, valid_record: UnitValueRecord) -> None:
        assert valid_record.model_dump() == {"value": 10.0, "units": "px"}
