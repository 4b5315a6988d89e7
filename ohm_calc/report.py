"""Текстовое представление результатов расчета."""

from typing import Union

from base.data import Quantity
from base.utils import format_value
from ohm_calc.history import CalculationHistory
from ohm_calc.result import SolveResult, SolveError

LABELS = {
    Quantity.V: "Voltage",
    Quantity.I: "Current",
    Quantity.R: "Resistance",
    Quantity.P: "Power",
}

# Символы для вывода вместо ASCII имен единиц
DISPLAY_UNITS = {"Ohm": "Ω", "kOhm": "kΩ"}


def display_unit(unit: str) -> str:
    return DISPLAY_UNITS.get(unit, unit)


def format_result(result: SolveResult, precision: int = 3) -> str:
    """
    Создает текстовое описание результата

    Args:
        result: Успешный результат решателя
        precision: Количество знаков после запятой

    Returns:
        Многострочный текст со значениями и пояснениями
    """
    lines = ["Result"]
    for q, label in LABELS.items():
        value = format_value(result.value(q), precision)
        lines.append(f"{label}: {value} {display_unit(result.unit(q))}")

    if not result.consistent:
        lines.append("Warning: the supplied values do not satisfy V = I × R and P = V × I.")

    lines.append("")
    lines.append("Notes:")
    lines.extend(f"• {note}" for note in result.explanations)
    return "\n".join(lines)


def format_error(error: SolveError) -> str:
    return f"Error: {error.error}\n{error.note}"


def format_outcome(outcome: Union[SolveResult, SolveError], precision: int = 3) -> str:
    if isinstance(outcome, SolveError):
        return format_error(outcome)
    return format_result(outcome, precision)


def format_history(history: CalculationHistory, precision: int = 3) -> str:
    """Краткий список расчетов, новые сверху."""
    entries = history.items()
    if not entries:
        return "No calculations yet."

    lines = []
    for entry in reversed(entries):
        result = entry.result
        parts = []
        for q in LABELS:
            value = format_value(result.get(q.name), precision)
            parts.append(f"{q.name}={value} {display_unit(result.get(q.unit_key, ''))}")
        lines.append(f"[{entry.timestamp}] " + ", ".join(parts))
    return "\n".join(lines)
