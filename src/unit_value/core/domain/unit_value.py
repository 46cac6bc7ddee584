"""
UnitValue — числовое значение с единицами измерения

Immutable value object: величина (float) + метка единиц (str), например "10px".

Модуль содержит:
- UnitValue: конструирование, разбор строк, приведение к числу
- get_values_and_units: согласование единиц пары значений
- add / subtract / multiply / divide: арифметика с сохранением единиц

Конверсии единиц нет: "cm" и "in" никогда не пересчитываются друг в друга,
единицы только сравниваются и переназначаются.
"""

import logging
import math
import numbers
from collections import UserString
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Final, List, Optional, Union, cast

from unit_value.core.contracts.validators import validate_unit_value
from unit_value.core.domain.errors import UnitsError
from unit_value.core.patterns import is_bare_number, match_unit_value, toggle

if TYPE_CHECKING:
    from unit_value.core.domain.record import UnitValueRecord

logger = logging.getLogger(__name__)


# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

EXPECTED_NUMBER_MSG: Final[str] = "Expected value to be a number"
EXPECTED_UNITS_MSG: Final[str] = "Expected units to be a string"
BAD_TYPE_MSG: Final[str] = "Expected value to be a string, number or UnitValue"
MISSING_UNITS_MSG: Final[str] = "For values without units, units must be specified"
EXPECTED_STRING_MSG: Final[str] = "Expected a String to parse"
BAD_FORMAT_MSG: Final[str] = "The string passed doesn't look like <value><units> e.g. 10px"
NO_UNITS_MSG: Final[str] = (
    "At least one value should contain units, or separate units must be specified"
)
UNITS_MISMATCH_MSG: Final[str] = "The units of both values do not match. Please specify units."

# Числа в [1e-7, 1e21) печатаются без экспоненты
_INTEGER_TEXT_LIMIT: Final[float] = 1e21
_POSITIONAL_TEXT_MIN: Final[float] = 1e-7

UnitValueLike = Union["UnitValue", numbers.Number, str, UserString]
UnitsLike = Union[str, UserString]


def _is_number(v: Any) -> bool:
    """Число или числовая обёртка (Decimal, Fraction), но не bool."""
    return isinstance(v, numbers.Number) and not isinstance(v, bool)


def _format_number(value: float) -> str:
    """
    Текстовое представление величины без лишнего ".0".

    Экспонента только вне [1e-7, 1e21): repr() переходит на неё уже
    с 1e-5 и 1e16, после чего "1e-05" разбирается как 1 + "e-05".

    Examples:
        >>> _format_number(3.0)
        '3'
        >>> _format_number(1.5)
        '1.5'
        >>> _format_number(0.00001)
        '0.00001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _INTEGER_TEXT_LIMIT:
        return str(int(value))
    if _POSITIONAL_TEXT_MIN <= abs(value) < _INTEGER_TEXT_LIMIT:
        return format(Decimal(repr(value)), "f")
    return repr(value)


def _number_text(v: Any) -> str:
    """Текст числа для разбора, без экспоненты где это возможно."""
    if isinstance(v, float):
        return _format_number(v)
    if isinstance(v, Decimal):
        return format(v, "f")
    return str(v)


# =============================================================================
# UNIT VALUE
# =============================================================================


@dataclass(frozen=True)
class UnitValue:
    """
    Числовое значение с единицами измерения.

    Immutable (frozen=True): любая операция возвращает новый экземпляр.

    Конструктор принимает только настоящее число (int/float). Строки вида
    "10" или "10px" допустимы только через parse / parse_string.

    Example:
        >>> uv = UnitValue(10, "px")
        >>> str(uv)
        '10px'
    """

    value: float
    units: str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(EXPECTED_NUMBER_MSG)
        if self.units is None:
            raise TypeError(EXPECTED_UNITS_MSG)

        object.__setattr__(self, "value", float(self.value))
        # UserString и прочие обёртки хранятся как обычный str
        object.__setattr__(self, "units", str(self.units))

    # -------------------------------------------------------------------------
    # Разбор
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, v: UnitValueLike, units: Optional[UnitsLike] = None) -> "UnitValue":
        """
        Разбор значения в UnitValue с опциональной заменой единиц.

        Принимает:
        - число или числовую обёртку (10, 1.6, Decimal("2.5"))
        - строку или UserString ("10px", "10", "4 gold pieces")
        - готовый UnitValue

        Если у значения нет единиц, units обязательны. Если единицы есть
        и units тоже переданы, units заменяют исходные единицы.

        Args:
            v: Значение для разбора
            units: Единицы (обязательны для чисел без единиц)

        Returns:
            Новый UnitValue (переданный UnitValue не изменяется)

        Raises:
            UnitsError: Значение без единиц и units не переданы
            TypeError: Неподдерживаемый тип или строка не похожа на <number><units>

        Examples:
            >>> UnitValue.parse("10px")
            UnitValue(value=10.0, units='px')
            >>> UnitValue.parse(1.6, "em")
            UnitValue(value=1.6, units='em')
            >>> UnitValue.parse(UnitValue(10, "px"), "%")
            UnitValue(value=10.0, units='%')
        """
        if isinstance(v, UnitValue):
            parsed = v
        elif _is_number(v) or isinstance(v, (str, UserString)):
            text = _number_text(v) if _is_number(v) else str(v)
            if is_bare_number(text):
                if units is None:
                    raise UnitsError(MISSING_UNITS_MSG)
                text = text + str(units)
            parsed = cls.parse_string(text)
        else:
            raise TypeError(BAD_TYPE_MSG)

        if units:
            parsed = replace(parsed, units=str(units))
        return parsed

    @classmethod
    def parse_string(cls, s: str) -> "UnitValue":
        """
        Разбор строки (str, не UserString) формата <number><units>.

        - number обязателен: int или float, без знака и научной нотации
        - units обязательны: произвольная строка, не начинается с цифры или '.'
        - между ними допускается один пробельный символ

        Raises:
            TypeError: Не str или строка не похожа на <number><units>

        Example:
            >>> UnitValue.parse_string("1.6unit.of.fun.5").units
            'unit.of.fun.5'
        """
        if not isinstance(s, str):
            raise TypeError(EXPECTED_STRING_MSG)

        matches = match_unit_value(s)
        if matches is None:
            raise TypeError(BAD_FORMAT_MSG)

        number_text, units = matches
        return cls(float(number_text), units)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Величина и единицы без разделителя: "10px"."""
        return f"{_format_number(self.value)}{self.units}"

    def __str__(self) -> str:
        return self.to_string()

    def to_array(self) -> List[Any]:
        """[value, units]"""
        return [self.value, self.units]

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в dict по контракту unit_value.json."""
        return {"value": self.value, "units": self.units}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnitValue":
        """
        Десериализация из dict с проверкой контракта unit_value.json.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_unit_value(data)
        return cls(data["value"], data["units"])

    def to_record(self) -> "UnitValueRecord":
        """Pydantic-представление для обмена данными."""
        from unit_value.core.domain.record import UnitValueRecord

        return UnitValueRecord.from_unit_value(self)

    # -------------------------------------------------------------------------
    # Приведение к числу (единицы отбрасываются)
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __neg__(self) -> float:
        return -self.value

    def __pos__(self) -> float:
        return self.value

    def __abs__(self) -> float:
        return abs(self.value)

    def __add__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value + other_value

    def __radd__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return other_value + self.value

    def __sub__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value - other_value

    def __rsub__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return other_value - self.value

    def __mul__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value * other_value

    def __rmul__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return other_value * self.value

    def __truediv__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return _divide(self.value, other_value)

    def __rtruediv__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return _divide(other_value, self.value)

    def __lt__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other: Any) -> Any:
        other_value = _coerce_operand(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value >= other_value

    # -------------------------------------------------------------------------
    # Арифметика с сохранением единиц
    # -------------------------------------------------------------------------

    def add(self, v: UnitValueLike, units: Optional[UnitsLike] = None) -> "UnitValue":
        """self + v в общих единицах."""
        return add(self, v, units)

    def subtract(self, v: UnitValueLike, units: Optional[UnitsLike] = None) -> "UnitValue":
        """self - v в общих единицах."""
        return subtract(self, v, units)

    def multiply(self, v: UnitValueLike, units: Optional[UnitsLike] = None) -> "UnitValue":
        """self * v в общих единицах."""
        return multiply(self, v, units)

    def divide(self, v: UnitValueLike, units: Optional[UnitsLike] = None) -> "UnitValue":
        """self / v в общих единицах."""
        return divide(self, v, units)


def _coerce_operand(other: Any) -> Any:
    if isinstance(other, UnitValue):
        return other.value
    if isinstance(other, numbers.Real):
        return float(other)
    return NotImplemented


def _divide(dividend: float, divisor: float) -> float:
    """Деление по IEEE-754: x/0 → ±inf, 0/0 → nan (без ZeroDivisionError)."""
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def parse(v: UnitValueLike, units: Optional[UnitsLike] = None) -> UnitValue:
    """См. UnitValue.parse."""
    return UnitValue.parse(v, units)


def parse_string(s: str) -> UnitValue:
    """См. UnitValue.parse_string."""
    return UnitValue.parse_string(s)


# =============================================================================
# СОГЛАСОВАНИЕ ЕДИНИЦ ПАРЫ
# =============================================================================


@dataclass(frozen=True)
class ReconciledValues:
    """Результат согласования: две величины в общих единицах."""

    value1: float
    value2: float
    units: str


def get_values_and_units(
    v1: UnitValueLike,
    v2: UnitValueLike,
    units: Optional[UnitsLike] = None,
) -> ReconciledValues:
    """
    Приведение двух значений к общим единицам.

    Алгоритм:
    1. Каждое значение разбирается через UnitValue.parse(v, units)
    2. Значения без единиц (UnitsError) откладываются на повтор,
       любая другая ошибка пробрасывается сразу
    3. Оба без единиц → UnitsError
    4. Одно без единиц → берёт единицы соседнего значения
    5. Единицы должны совпадать текстуально, иначе UnitsError

    Явные units применяются к обоим значениям и заменяют их собственные
    единицы, поэтому несовпадение с явными units невозможно.

    Args:
        v1: Первое значение
        v2: Второе значение
        units: Явные единицы (обязательны, если ни одно значение их не содержит)

    Returns:
        ReconciledValues(value1, value2, units)

    Raises:
        UnitsError: Единицы не определены или не совпадают
        TypeError: Значение неподдерживаемого типа или формата

    Examples:
        >>> get_values_and_units(1, "10em")
        ReconciledValues(value1=1.0, value2=10.0, units='em')
    """
    pair = (v1, v2)
    values: List[Optional[UnitValue]] = [None, None]
    retry: List[int] = []

    for i, v in enumerate(pair):
        try:
            values[i] = UnitValue.parse(v, units)
        except UnitsError:
            # единиц нет, попробуем взять их у второго значения
            retry.append(i)

    if len(retry) == 2:
        raise UnitsError(NO_UNITS_MSG)

    if len(retry) == 1:
        (i,) = retry
        sibling = cast(UnitValue, values[toggle(i)])
        logger.debug("Inferring units %r for %r from its pair", sibling.units, pair[i])
        values[i] = UnitValue.parse(pair[i], sibling.units)

    first, second = cast(List[UnitValue], values)

    if first.units != second.units:
        raise UnitsError(UNITS_MISMATCH_MSG)

    return ReconciledValues(value1=first.value, value2=second.value, units=first.units)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(
    v1: UnitValueLike, v2: UnitValueLike, units: Optional[UnitsLike] = None
) -> UnitValue:
    """
    Сумма двух значений в общих единицах.

    Example:
        >>> str(add(1, 2, "px"))
        '3px'
    """
    reconciled = get_values_and_units(v1, v2, units)
    return UnitValue(reconciled.value1 + reconciled.value2, reconciled.units)


def subtract(
    v1: UnitValueLike, v2: UnitValueLike, units: Optional[UnitsLike] = None
) -> UnitValue:
    """Разность v1 - v2 в общих единицах."""
    reconciled = get_values_and_units(v1, v2, units)
    return UnitValue(reconciled.value1 - reconciled.value2, reconciled.units)


def multiply(
    v1: UnitValueLike, v2: UnitValueLike, units: Optional[UnitsLike] = None
) -> UnitValue:
    """
    Произведение величин. Единицы не возводятся в степень: 10px * 2px = 20px.
    """
    reconciled = get_values_and_units(v1, v2, units)
    return UnitValue(reconciled.value1 * reconciled.value2, reconciled.units)


def divide(
    v1: UnitValueLike, v2: UnitValueLike, units: Optional[UnitsLike] = None
) -> UnitValue:
    """
    Частное v1 / v2 в общих единицах.

    Деление на ноль не бросает исключение, а возвращает ±inf или nan.
    """
    reconciled = get_values_and_units(v1, v2, units)
    return UnitValue(_divide(reconciled.value1, reconciled.value2), reconciled.units)
