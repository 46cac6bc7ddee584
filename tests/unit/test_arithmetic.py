"""
Тесты арифметики с сохранением единиц

Проверяет:
1. add / subtract / multiply / divide (функции модуля)
2. Методы экземпляра: uv.add(v) ≡ add(uv, v)
3. Вывод единиц и явную замену единиц
4. Деление на ноль по IEEE-754
"""

import math

import pytest

from unit_value import UnitsError, UnitValue, add, divide, multiply, subtract


class TestModuleFunctions:
    """Функции add / subtract / multiply / divide"""

    def test_add_with_explicit_units(self) -> None:
        result = add(1, 2, "px")
        assert result == UnitValue(3, "px")
        assert result.to_string() == "3px"

    def test_multiply_number_and_bare_string(self) -> None:
        result = multiply(10, "5", "ml")
        assert result.value == 50
        assert result.units == "ml"

    def test_divide_infers_units(self) -> None:
        result = divide(10, UnitValue(2, "px"))
        assert result == UnitValue(5, "px")

    def test_subtract_infers_units(self) -> None:
        assert subtract("10px", 4) == UnitValue(6, "px")

    def test_float_result(self) -> None:
        result = add("0.1em", "0.2em")
        assert result.value == pytest.approx(0.3, abs=1e-12)
        assert result.units == "em"

    def test_add_small_float(self) -> None:
        result = add(0.00001, 1, "px")
        assert result.value == pytest.approx(1.00001, abs=1e-12)
        assert result.units == "px"

    def test_explicit_units_override(self) -> None:
        assert add("2px", "10em", "%") == UnitValue(12, "%")

    def test_mismatched_units_raise(self) -> None:
        with pytest.raises(UnitsError, match="do not match"):
            add("2px", "10em")

    def test_missing_units_raise(self) -> None:
        with pytest.raises(UnitsError, match="At least one value"):
            multiply(2, 3)

    def test_malformed_input_raises(self) -> None:
        with pytest.raises(TypeError):
            subtract("abc", "1px")

    def test_multiply_keeps_units_unsquared(self) -> None:
        """Единицы не возводятся в степень"""
        assert multiply("10px", "2px") == UnitValue(20, "px")


class TestDivisionByZero:
    """Деление по IEEE-754 без ZeroDivisionError"""

    def test_positive_by_zero(self) -> None:
        assert divide(1, 0, "px") == UnitValue(math.inf, "px")

    def test_negative_by_zero(self) -> None:
        result = divide(UnitValue(-1, "px"), 0)
        assert result.value == -math.inf
        assert result.units == "px"

    def test_zero_by_zero(self) -> None:
        result = divide(0, 0, "px")
        assert math.isnan(result.value)
        assert str(result) == "NaNpx"


class TestInstanceMethods:
    """Методы экземпляра делегируют функциям модуля"""

    @pytest.fixture
    def px10(self) -> UnitValue:
        return UnitValue(10, "px")

    def test_add(self, px10: UnitValue) -> None:
        assert px10.add(5) == UnitValue(15, "px")

    def test_subtract(self, px10: UnitValue) -> None:
        assert px10.subtract("3px") == UnitValue(7, "px")

    def test_multiply(self, px10: UnitValue) -> None:
        assert px10.multiply(2) == UnitValue(20, "px")

    def test_divide(self, px10: UnitValue) -> None:
        assert px10.divide("4px") == UnitValue(2.5, "px")

    def test_explicit_units(self, px10: UnitValue) -> None:
        assert px10.add("5em", "rem") == UnitValue(15, "rem")

    def test_mismatch(self, px10: UnitValue) -> None:
        with pytest.raises(UnitsError):
            px10.add("5em")

    def test_receiver_unchanged(self, px10: UnitValue) -> None:
        px10.add(5, "%")
        assert px10 == UnitValue(10, "px")

    def test_chaining(self, px10: UnitValue) -> None:
        assert px10.add(5).multiply(2).subtract(10).to_string() == "20px"
