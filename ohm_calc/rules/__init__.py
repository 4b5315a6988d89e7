"""Правила вывода неизвестных величин.

Содержит тождества:
- Закон Ома (I = V/R, R = V/I, V = I*R)
- Закон мощности (P = V*I, I = P/V, V = P/I)
- Мощность и сопротивление (I = sqrt(P/R), V = sqrt(P*R))
"""

from .base import Rule
from .ohm import (
    CurrentFromVoltageResistance,
    ResistanceFromVoltageCurrent,
    VoltageFromCurrentResistance,
)
from .power import (
    PowerFromVoltageCurrent,
    CurrentFromPowerVoltage,
    VoltageFromPowerCurrent,
    PowerResistanceRule,
)


def get_rule_registry():
    """Создает упорядоченный список правил.

    Порядок влияет только на число проходов, но не на итоговый результат.

    Returns:
        Список экземпляров Rule в порядке применения
    """
    return [
        CurrentFromVoltageResistance(),
        ResistanceFromVoltageCurrent(),
        VoltageFromCurrentResistance(),
        PowerFromVoltageCurrent(),
        CurrentFromPowerVoltage(),
        VoltageFromPowerCurrent(),
        PowerResistanceRule(),
    ]


__all__ = [
    "Rule",
    "CurrentFromVoltageResistance",
    "ResistanceFromVoltageCurrent",
    "VoltageFromCurrentResistance",
    "PowerFromVoltageCurrent",
    "CurrentFromPowerVoltage",
    "VoltageFromPowerCurrent",
    "PowerResistanceRule",
    "get_rule_registry",
]
