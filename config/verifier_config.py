"""Конфигурация для проверки согласованности результатов."""

from dataclasses import dataclass


@dataclass
class VerifierConfig:
    # Точность проверки V = I*R и P = V*I
    relative_tolerance: float = 1e-9  # относительная погрешность
    absolute_tolerance: float = 1e-12  # абсолютная погрешность
    answer_precision: int = 3          # Количество знаков после запятой при выводе
