"""Конфигурация для решателя величин."""

from dataclasses import dataclass
from typing import Dict


@dataclass
class SolverConfig:
    """Конфигурация решателя закона Ома."""

    # Ограничение числа проходов по правилам (только для гарантии завершения)
    max_passes: int = 10

    # False: неизвестная единица считается базовой (множитель 1)
    strict_units: bool = False

    # Единицы по умолчанию для каждой величины
    default_units: Dict[str, str] = None

    def __post_init__(self):
        if self.default_units is None:
            self.default_units = {"V": "V", "I": "A", "R": "Ohm", "P": "W"}
