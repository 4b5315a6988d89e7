"""Тесты текстового вывода."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from base.data import Reading
from ohm_calc.history import CalculationHistory
from ohm_calc.report import format_result, format_error, format_outcome, format_history
from ohm_calc.solver import QuantitySolver


class TestReport:
    def setup_method(self):
        self.solver = QuantitySolver()

    def test_format_result(self):
        text = format_result(self.solver.solve(Reading(V=12, R=4)))
        assert "Voltage: 12.000 V" in text
        assert "Current: 3.000 A" in text
        assert "Resistance: 4.000 Ω" in text
        assert "Power: 36.000 W" in text
        assert "Notes:" in text
        assert text.count("• ") == 3

    def test_format_requested_units(self):
        text = format_result(
            self.solver.solve(Reading(V=5000, VUnit="mV", I=2, IUnit="mA", RUnit="kOhm"))
        )
        assert "Voltage: 5000.000 mV" in text
        assert "Current: 2.000 mA" in text
        assert "Resistance: 2.500 kΩ" in text

    def test_inconsistent_warning(self):
        text = format_result(self.solver.solve(Reading(V=12, I=3, R=5)))
        assert "Warning" in text

    def test_format_error(self):
        text = format_error(self.solver.solve(Reading(V=12)))
        assert text.startswith("Error: Provide at least two among V, I, R, P.")

    def test_format_outcome_dispatch(self):
        assert format_outcome(self.solver.solve(Reading(V=1))).startswith("Error:")
        assert format_outcome(self.solver.solve(Reading(V=1, R=1))).startswith("Result")

    def test_format_history(self):
        history = CalculationHistory()
        assert format_history(history) == "No calculations yet."

        for raw in ({"V": 12, "R": 4}, {"V": 6, "R": 3}):
            history.record(raw, self.solver.solve(Reading(**raw)).to_json())

        lines = format_history(history).splitlines()
        assert len(lines) == 2
        assert "V=6.000 V" in lines[0]
        assert "R=4.000 Ω" in lines[1]
