"""Нормализация единиц измерения.

Переводит значения величин в базовые единицы (V, A, Ohm, W) и обратно.
Неизвестный символ единицы считается базовой единицей (множитель 1).
"""

from typing import Dict, Optional

from base.data import Quantity

# Множители перевода в базовую единицу для каждой величины
UNIT_FACTORS: Dict[Quantity, Dict[str, float]] = {
    Quantity.V: {"V": 1.0, "mV": 1e-3},
    Quantity.I: {"A": 1.0, "mA": 1e-3},
    Quantity.R: {"Ohm": 1.0, "kOhm": 1e3},
    Quantity.P: {"W": 1.0, "mW": 1e-3},
}


def factor(unit: Optional[str], quantity: Quantity) -> float:
    """Множитель перевода единицы в базовую.

    Args:
        unit: Символ единицы (например, "mV")
        quantity: Величина, к которой относится единица

    Returns:
        Множитель; 1.0 для неизвестных символов
    """
    return UNIT_FACTORS[quantity].get(unit, 1.0)


def is_known_unit(unit: Optional[str], quantity: Quantity) -> bool:
    return unit in UNIT_FACTORS[quantity]


def to_base(value: Optional[float], unit: Optional[str], quantity: Quantity) -> Optional[float]:
    """Переводит значение в базовую единицу.

    Args:
        value: Значение в единицах unit или None
        unit: Символ единицы
        quantity: Величина

    Returns:
        Значение в базовых единицах или None если значение не задано
    """
    if value is None:
        return None
    return value * factor(unit, quantity)


def from_base(value: Optional[float], unit: Optional[str], quantity: Quantity) -> Optional[float]:
    """Переводит значение из базовой единицы в unit."""
    if value is None:
        return None
    return value / factor(unit, quantity)
