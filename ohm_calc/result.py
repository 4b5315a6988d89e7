"""Результаты решения: успешный набор величин или типизированная ошибка."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Iterable

from base.data import Quantity, QUANTITIES

EXPLANATIONS = [
    "Used Ohm’s law: V = I × R and P = V × I.",
    "Units are converted internally to base units for calculation.",
    "This app is for learning and quick checks, not for professional circuit design.",
]

TOOL_NOTE = "This is a learning and quick-check tool, not a full circuit simulator."


class ErrorKind(str, Enum):
    """Вид ошибки решения."""

    INSUFFICIENT_INPUTS = "insufficient_inputs"
    UNDERDETERMINED = "underdetermined"
    UNKNOWN_UNIT = "unknown_unit"
    NON_FINITE_INPUT = "non_finite_input"


@dataclass
class SolveError:
    """Ошибка решения с текстом для пользователя.

    Attributes:
        kind: Вид ошибки
        error: Краткое описание
        note: Пояснение или подсказка
    """

    kind: ErrorKind
    error: str
    note: str

    def to_json(self) -> Dict[str, Any]:
        return {"error": self.error, "note": self.note, "kind": self.kind.value}


@dataclass
class SolveResult:
    """Полностью найденный набор величин.

    Attributes:
        values: Значения в запрошенных единицах
        units: Запрошенные (или подставленные по умолчанию) единицы
        base_values: Значения в базовых единицах (V, A, Ohm, W)
        explanations: Фиксированные пояснения к расчету
        passes: Количество проходов по правилам
        consistent: Удовлетворяют ли величины V = I*R и P = V*I
    """

    values: Dict[Quantity, float]
    units: Dict[Quantity, str]
    base_values: Dict[Quantity, float]
    explanations: List[str] = field(default_factory=lambda: list(EXPLANATIONS))
    passes: int = 0
    consistent: bool = True

    def value(self, quantity: Quantity) -> float:
        return self.values[quantity]

    def unit(self, quantity: Quantity) -> str:
        return self.units[quantity]

    def to_json(self) -> Dict[str, Any]:
        """Преобразует результат в словарь ответа API.

        Returns:
            Словарь с полями V, VUnit, I, IUnit, R, RUnit, P, PUnit,
            explanations и consistent
        """
        result: Dict[str, Any] = {}
        for q in QUANTITIES:
            result[q.name] = self.values[q]
            result[q.unit_key] = self.units[q]
        result["explanations"] = list(self.explanations)
        result["consistent"] = self.consistent
        return result


def insufficient_inputs() -> SolveError:
    return SolveError(
        kind=ErrorKind.INSUFFICIENT_INPUTS,
        error="Provide at least two among V, I, R, P.",
        note=TOOL_NOTE,
    )


def underdetermined() -> SolveError:
    return SolveError(
        kind=ErrorKind.UNDERDETERMINED,
        error="Cannot compute all values from inputs.",
        note="Only simple Ohm’s law cases are supported.",
    )


def non_finite(quantities: Iterable[Quantity]) -> SolveError:
    """Ошибка для бесконечного или NaN результата вывода."""
    names = ", ".join(q.name for q in quantities)
    return SolveError(
        kind=ErrorKind.UNDERDETERMINED,
        error="Inputs lead to an undefined result.",
        note=f"Non-finite value for {names} (division by zero, overflow or a negative square root).",
    )


def non_finite_input(quantities: Iterable[Quantity]) -> SolveError:
    names = ", ".join(q.name for q in quantities)
    return SolveError(
        kind=ErrorKind.NON_FINITE_INPUT,
        error="Inputs must be finite numbers.",
        note=f"Non-finite value given for {names}.",
    )


def unknown_unit(quantity: Quantity, unit: str) -> SolveError:
    return SolveError(
        kind=ErrorKind.UNKNOWN_UNIT,
        error=f"Unknown unit '{unit}' for {quantity.name}.",
        note="Use one of the listed units for each quantity.",
    )
