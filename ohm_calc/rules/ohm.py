"""Правила закона Ома: V = I * R."""

from typing import Dict

import numpy as np

from base.data import Quantity
from .base import Rule


class CurrentFromVoltageResistance(Rule):
    """I = V / R."""

    requires = Quantity.V | Quantity.R
    produces = Quantity.I
    formula = "I = V / R"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        return {Quantity.I: values[Quantity.V] / values[Quantity.R]}


class ResistanceFromVoltageCurrent(Rule):
    """R = V / I."""

    requires = Quantity.V | Quantity.I
    produces = Quantity.R
    formula = "R = V / I"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        return {Quantity.R: values[Quantity.V] / values[Quantity.I]}


class VoltageFromCurrentResistance(Rule):
    """V = I * R."""

    requires = Quantity.I | Quantity.R
    produces = Quantity.V
    formula = "V = I * R"

    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        return {Quantity.V: values[Quantity.I] * values[Quantity.R]}
