"""Калькулятор электрических величин по закону Ома.

Содержит нормализацию единиц, решатель V, I, R, P, проверку
согласованности и историю расчетов.
"""

from ohm_calc.solver import QuantitySolver
from ohm_calc.verifier import OhmLawVerifier
from ohm_calc.history import CalculationHistory, HistoryEntry
from ohm_calc.result import SolveResult, SolveError, ErrorKind
from ohm_calc.report import format_result, format_outcome

__all__ = [
    "QuantitySolver",
    "OhmLawVerifier",
    "CalculationHistory",
    "HistoryEntry",
    "SolveResult",
    "SolveError",
    "ErrorKind",
    "format_result",
    "format_outcome",
]
