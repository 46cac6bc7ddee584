"""
Patterns — правила распознавания чисел и пар <number><units>

Два регулярных выражения и вспомогательный toggle для индексов пары:
- NUMBER_MATCH: строка, которая является числом и ничем больше
- UNIT_VALUE_MATCH: строка вида <number><units> с необязательным пробелом
- toggle: 0 ↔ 1 (индекс соседнего значения в паре)

Числа:
- только int или float (без знака)
- без научной нотации (1E2 не поддерживается)

Единицы:
- обязательны, произвольная строка
- не начинаются с цифры, '.' или пробела
"""

import re
from typing import Final, Optional, Pattern, Tuple


# =============================================================================
# PATTERNS
# =============================================================================

# Строка, отформатированная как число, и ничего больше (в отличие от float())
NUMBER_MATCH: Final[Pattern[str]] = re.compile(r"^([0-9]+\.?[0-9]*)$")

# <number><units>, разделённые не более чем одним пробельным символом
# (\s по Unicode, включая неразрывный пробел; цифры только ASCII)
UNIT_VALUE_MATCH: Final[Pattern[str]] = re.compile(r"^([0-9]+\.?[0-9]*)\s?([^\s0-9.].*)$")


# =============================================================================
# MATCHERS
# =============================================================================


def is_bare_number(text: str) -> bool:
    """
    Проверка, что строка — число без единиц.

    Examples:
        >>> is_bare_number("5.")
        True
        >>> is_bare_number("5px")
        False
    """
    return NUMBER_MATCH.fullmatch(text) is not None


def match_unit_value(text: str) -> Optional[Tuple[str, str]]:
    """
    Разбор строки <number><units> на числовую часть и единицы.

    Разделяющий пробел (если есть) не входит ни в одну из частей.

    Args:
        text: Строка для разбора

    Returns:
        (number_text, units) или None, если строка не подходит

    Examples:
        >>> match_unit_value("4 gold pieces")
        ('4', 'gold pieces')
        >>> match_unit_value("1 1em") is None
        True
    """
    matches = UNIT_VALUE_MATCH.fullmatch(text)
    if matches is None:
        return None
    return matches.group(1), matches.group(2)


# =============================================================================
# TOGGLE
# =============================================================================


def toggle(index: int) -> int:
    """
    Индекс второго значения пары: 0 → 1, 1 → 0.

    Raises:
        ValueError: Если индекс не 0 и не 1
    """
    if index not in (0, 1):
        raise ValueError(f"Expected a pair index (0 or 1), got {index!r}")
    return 1 - index
