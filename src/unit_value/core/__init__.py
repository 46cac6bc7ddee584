"""
Core: доменная модель UnitValue, правила разбора строк и контракты.

Не зависит от внешних систем (файлов, сети, UI).
"""
