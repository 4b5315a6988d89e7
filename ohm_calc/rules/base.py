"""Базовый класс для правил вывода величин."""

from abc import ABC, abstractmethod
from typing import Dict

import numpy as np

from base.data import Quantity


class Rule(ABC):
    """Базовый абстрактный класс для правила вывода.

    Правило описывает одно тождество закона Ома или закона мощности:
    какие величины должны быть известны (requires) и какие оно выводит
    (produces). Все правила должны наследоваться от этого класса.

    Attributes:
        requires: Маска величин, необходимых для применения
        produces: Маска величин, которые правило умеет вычислять
        formula: Формула в читаемом виде (для отладки и вывода)
    """

    requires: Quantity = Quantity.NONE
    produces: Quantity = Quantity.NONE
    formula: str = ""

    def applicable(self, known: Quantity) -> bool:
        """Проверяет, что входы правила известны, а хотя бы один выход нет.

        Args:
            known: Маска уже известных величин

        Returns:
            True если правило можно применить
        """
        has_inputs = (self.requires & known) == self.requires
        has_unknown_output = (self.produces & known) != self.produces
        return has_inputs and has_unknown_output

    @abstractmethod
    def derive(self, values: Dict[Quantity, np.float64]) -> Dict[Quantity, np.float64]:
        """Вычисляет выходные величины правила.

        Args:
            values: Известные величины в базовых единицах

        Returns:
            Словарь {Quantity: значение} для всех величин из produces
        """
        raise NotImplementedError("Rule.derive() не реализован")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.formula})"
