"""
Ошибки доменного слоя UnitValue.

Некорректный ввод (не тот тип, строка не похожа на <number><units>)
сообщается стандартным TypeError. Отдельный класс нужен только для
отсутствующих или несовпадающих единиц: его перехватывает согласование пары
значений, чтобы вывести единицы из соседнего значения.
"""


class UnitsError(ValueError):
    """
    Единицы не указаны или не совпадают.

    Возникает, когда:
    1. Число без единиц разбирается без явного units
    2. Ни одно из значений пары не содержит единиц
    3. Единицы двух значений различаются и units не переданы явно
    """

    pass
