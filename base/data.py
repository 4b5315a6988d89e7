"""Модуль данных для расчетов.

Содержит перечисление Quantity (битовый флаг над V, I, R, P) и класс
Reading для представления входных и выходных величин с единицами.
"""

import json
from enum import Flag
from functools import reduce
from typing import Optional, Dict, Any, Iterable

from base.utils import parse_number


class Quantity(Flag):
    """Электрическая величина.

    Флаг позволяет хранить множество известных величин как битовую маску:
    Quantity.V | Quantity.I означает, что известны напряжение и ток.
    """

    NONE = 0
    V = 1  # Напряжение
    I = 2  # Ток
    R = 4  # Сопротивление
    P = 8  # Мощность

    @property
    def unit_key(self) -> str:
        """Имя поля единицы во входных данных (например, "VUnit")."""
        return f"{self.name}Unit"


# Порядок величин во всех ответах
QUANTITIES = (Quantity.V, Quantity.I, Quantity.R, Quantity.P)


def mask_of(quantities: Iterable[Quantity]) -> Quantity:
    """Собирает битовую маску из набора величин."""
    return reduce(lambda acc, q: acc | q, quantities, Quantity.NONE)


def count_known(mask: Quantity) -> int:
    """Количество величин в маске."""
    return sum(1 for q in QUANTITIES if q in mask)


class Reading:
    """Набор из четырех величин с единицами.

    Каждое значение может отсутствовать (None), что отличается от нуля.
    Единица может отсутствовать, тогда решатель подставит единицу по умолчанию.

    Attributes:
        values: Словарь {Quantity: значение или None}
        units: Словарь {Quantity: символ единицы или None}
    """

    def __init__(
        self,
        V: Any = None,
        I: Any = None,
        R: Any = None,
        P: Any = None,
        VUnit: Optional[str] = None,
        IUnit: Optional[str] = None,
        RUnit: Optional[str] = None,
        PUnit: Optional[str] = None,
        **kwargs: Any
    ) -> None:
        self.values: Dict[Quantity, Optional[float]] = {
            Quantity.V: parse_number(V),
            Quantity.I: parse_number(I),
            Quantity.R: parse_number(R),
            Quantity.P: parse_number(P),
        }
        self.units: Dict[Quantity, Optional[str]] = {
            Quantity.V: VUnit or None,
            Quantity.I: IUnit or None,
            Quantity.R: RUnit or None,
            Quantity.P: PUnit or None,
        }

    def value(self, quantity: Quantity) -> Optional[float]:
        return self.values[quantity]

    def unit(self, quantity: Quantity) -> Optional[str]:
        return self.units[quantity]

    def known(self) -> Quantity:
        """Маска величин, для которых задано значение."""
        return mask_of(q for q in QUANTITIES if self.values[q] is not None)

    @classmethod
    def from_json_dict(cls, json_dict: Dict[str, Any]) -> 'Reading':
        """Создает объект Reading из словаря.

        Лишние ключи игнорируются.

        Args:
            json_dict: Словарь с данными

        Returns:
            Новый объект Reading

        Raises:
            ValueError: Если одно из значений не является числом
        """
        return cls(**json_dict)

    @classmethod
    def from_json_str(cls, json_str: str) -> 'Reading':
        return cls.from_json_dict(json.loads(json_str))

    def __repr__(self) -> str:
        parts = [f"{q.name}={self.values[q]}{self.units[q] or ''}" for q in QUANTITIES]
        return f"Reading({', '.join(parts)})"
