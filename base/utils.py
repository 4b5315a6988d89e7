"""Модуль общих утилит для всего проекта.

Содержит функции разбора входных чисел и форматирования значений,
используемые решателем, HTTP слоем и CLI.
"""

import math
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """Преобразует входное значение поля в число.

    Пустые значения (None и пустая строка) означают неизвестную величину
    и возвращаются как None. Ноль остается нулем.

    Args:
        value: Число, строка с числом, None или ""

    Returns:
        Значение как float или None если величина не задана

    Raises:
        ValueError: Если значение не удается разобрать как число

    Example:
        >>> parse_number("12.5")
        12.5
        >>> parse_number("") is None
        True
    """
    if value is None:
        return None

    # bool является подклассом int, но числом величины не считается
    if isinstance(value, bool):
        raise ValueError(f"Некорректное числовое значение: {value!r}")

    if isinstance(value, (int, float)):
        return float(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        return float(text)

    raise ValueError(f"Некорректное числовое значение: {value!r}")


def is_finite(value: Optional[float]) -> bool:
    """Проверяет, что значение задано и конечно."""
    return value is not None and math.isfinite(value)


def format_value(value: Optional[float], precision: int = 3) -> str:
    """Форматирует значение с фиксированным числом знаков после запятой.

    Args:
        value: Значение величины или None
        precision: Количество знаков после запятой

    Returns:
        Строка вида "12.000" или "?" для неизвестной величины
    """
    if value is None:
        return "?"
    return f"{value:.{precision}f}"
