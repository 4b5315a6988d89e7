"""Модуль проверки согласованности найденных величин.

Содержит OhmLawVerifier для проверки V = I * R и P = V * I с учётом
допустимых погрешностей.
"""

from typing import Dict, Optional

from base.verifier import Verifier
from base.data import Quantity, QUANTITIES
from base.utils import is_finite
from config import VerifierConfig


class OhmLawVerifier(Verifier):
    """Верификатор закона Ома и закона мощности.

    Attributes:
        rtol: Относительная погрешность
        atol: Абсолютная погрешность
    """

    def __init__(self, config: VerifierConfig = None) -> None:
        super().__init__()
        self.config = config or VerifierConfig()
        self.rtol: float = self.config.relative_tolerance
        self.atol: float = self.config.absolute_tolerance

    def verify(self, values: Dict[Quantity, Optional[float]]) -> bool:
        """Проверяет, что четыре величины удовлетворяют обоим законам.

        Формула сравнения: |expected - actual| <= atol + rtol * |actual|

        Args:
            values: Словарь {Quantity: значение в базовых единицах}

        Returns:
            True если все величины заданы, конечны и согласованы
        """
        if not all(is_finite(values.get(q)) for q in QUANTITIES):
            return False

        v = values[Quantity.V]
        i = values[Quantity.I]
        r = values[Quantity.R]
        p = values[Quantity.P]

        return self._close(i * r, v) and self._close(v * i, p)

    def _close(self, expected: float, actual: float) -> bool:
        return abs(expected - actual) <= (self.atol + self.rtol * abs(actual))
