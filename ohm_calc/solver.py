"""Решатель электрических величин по закону Ома и закону мощности.

Переводит известные величины в базовые единицы, выводит неизвестные
повторными проходами по правилам до неподвижной точки и переводит
результат обратно в запрошенные единицы.
"""

import logging
from typing import Dict, Optional, Tuple, Union

import numpy as np

from base.data import Reading, Quantity, QUANTITIES, mask_of, count_known
from config import SolverConfig, VerifierConfig
from ohm_calc.result import (
    SolveResult,
    SolveError,
    insufficient_inputs,
    underdetermined,
    non_finite,
    non_finite_input,
    unknown_unit,
)
from ohm_calc.rules import get_rule_registry
from ohm_calc.units import to_base, from_base, is_known_unit
from ohm_calc.verifier import OhmLawVerifier

logger = logging.getLogger(__name__)

# Минимальное количество известных величин для решения
MIN_KNOWN = 2


class QuantitySolver:
    """Находит V, I, R, P по любым двум известным величинам.

    Решатель не хранит состояние между вызовами: каждый вызов solve()
    зависит только от переданного Reading.

    Attributes:
        config: Конфигурация решателя
        rules: Упорядоченный список правил вывода
        verifier: Проверка согласованности результата
    """

    def __init__(self, config: SolverConfig = None, verifier_config: VerifierConfig = None) -> None:
        self.config = config or SolverConfig()
        self.rules = get_rule_registry()
        self.verifier = OhmLawVerifier(verifier_config)

    def solve(self, reading: Reading) -> Union[SolveResult, SolveError]:
        """Решает набор величин.

        Args:
            reading: Входные величины с единицами

        Returns:
            SolveResult со всеми четырьмя величинами в запрошенных единицах
            или SolveError с видом ошибки
        """
        units = self.resolve_units(reading)

        if self.config.strict_units:
            for q in QUANTITIES:
                if not is_known_unit(units[q], q):
                    logger.debug("Неизвестная единица %r для %s", units[q], q.name)
                    return unknown_unit(q, units[q])

        known = reading.known()
        if count_known(known) < MIN_KNOWN:
            logger.debug("Недостаточно данных: %s", reading)
            return insufficient_inputs()

        bad_inputs = [q for q in QUANTITIES if q in known and not np.isfinite(reading.value(q))]
        if bad_inputs:
            logger.debug("Неконечные входные значения: %s", [q.name for q in bad_inputs])
            return non_finite_input(bad_inputs)

        base = {q: to_base(reading.value(q), units[q], q) for q in QUANTITIES}

        resolved, passes = self.resolve(base)

        if any(resolved[q] is None for q in QUANTITIES):
            logger.debug("Не удалось вывести все величины за %d проходов: %s", passes, resolved)
            return underdetermined()

        invalid = [q for q in QUANTITIES if not np.isfinite(resolved[q])]
        if invalid:
            logger.debug("Неконечный результат для %s", [q.name for q in invalid])
            return non_finite(invalid)

        values = {q: from_base(resolved[q], units[q], q) for q in QUANTITIES}

        return SolveResult(
            values=values,
            units=units,
            base_values=resolved,
            passes=passes,
            consistent=self.verifier.verify(resolved),
        )

    def resolve_units(self, reading: Reading) -> Dict[Quantity, str]:
        """Подставляет единицы по умолчанию для незаданных полей."""
        return {
            q: reading.unit(q) or self.config.default_units[q.name]
            for q in QUANTITIES
        }

    def resolve(
        self, base: Dict[Quantity, Optional[float]]
    ) -> Tuple[Dict[Quantity, Optional[float]], int]:
        """Выводит неизвестные величины до неподвижной точки.

        Каждый проход применяет все правила, входы которых известны.
        Выведенное значение сразу доступно следующим правилам того же прохода.
        Известная величина никогда не пересчитывается.

        Деление на ноль и корень из отрицательного дают inf/NaN вместо
        исключения; проверка конечности выполняется в solve().

        Args:
            base: Словарь {Quantity: значение в базовых единицах или None}

        Returns:
            Кортеж (словарь величин, количество проходов)
        """
        values = {q: np.float64(v) for q, v in base.items() if v is not None}
        known = mask_of(values)
        passes = 0

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            changed = True
            while changed and passes < self.config.max_passes:
                changed = False
                passes += 1

                for rule in self.rules:
                    if not rule.applicable(known):
                        continue

                    for q, value in rule.derive(values).items():
                        if q in known:
                            continue
                        values[q] = value
                        known |= q
                        changed = True

        resolved = {q: float(values[q]) if q in values else None for q in QUANTITIES}
        return resolved, passes
