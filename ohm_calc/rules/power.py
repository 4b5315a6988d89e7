"""Правила закона мощности: P = V * I."""

from typing import Dict

import numpy as np

from base.data import Quantity
from .base import Rule


class PowerFromVoltageCurrent(Rule):
    """P = V * I."""

    requires = Quantity.V | Quantity.I
    produces = Quantity.P
    formula = "P = V * I"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        return {Quantity.P: values[Quantity.V] * values[Quantity.I]}


class CurrentFromPowerVoltage(Rule):
    """I = P / V."""

    requires = Quantity.P | Quantity.V
    produces = Quantity.I
    formula = "I = P / V"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        return {Quantity.I: values[Quantity.P] / values[Quantity.V]}


class VoltageFromPowerCurrent(Rule):
    """V = P / I."""

    requires = Quantity.P | Quantity.I
    produces = Quantity.V
    formula = "V = P / I"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        return {Quantity.V: values[Quantity.P] / values[Quantity.I]}


class PowerResistanceRule(Rule):
    """I = sqrt(P / R) и V = sqrt(P * R).

    Выводит обе величины сразу; решатель запишет только неизвестные.
    При P * R < 0 корень дает NaN, при R = 0 ток получается бесконечным.
    """

    requires = Quantity.P | Quantity.R
    produces = Quantity.I | Quantity.V
    formula = "I = sqrt(P / R), V = sqrt(P * R)"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        p = values[Quantity.P]
        r = values[Quantity.R]
        return {
            Quantity.I: np.sqrt(p / r),
            Quantity.V: np.sqrt(p * r),
        }
