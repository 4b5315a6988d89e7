"""Базовый модуль для проверки результатов.

Этот модуль содержит абстрактный класс Verifier, который определяет интерфейс
для проверки согласованности найденных величин.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from base.data import Quantity


class Verifier(ABC):
    """Класс для верификатора результатов

    Определяет интерфейс для проверки того, что набор величин удовлетворяет
    физическим законам. Все верификаторы должны наследоваться от этого класса.
    """

    def __init__(self) -> None:
        """Инициализирует верификатор"""
        pass

    @abstractmethod
    def verify(self, values: Dict[Quantity, Optional[float]]) -> bool:
        """Проверяет согласованность величин

        Args:
            values: Словарь {Quantity: значение в базовых единицах}

        Returns:
            True если величины согласованы, False иначе

        Raises:
            NotImplementedError: Если метод не реализован в подклассе
        """
        raise NotImplementedError("Verifier.verify() не реализован")
