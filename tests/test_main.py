"""Тесты командной строки."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import main, build_parser


class TestMain:
    def test_solve_from_arguments(self, capsys):
        code = main(["--V", "12", "--R", "4"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Current: 3.000 A" in out
        assert "Power: 36.000 W" in out

    def test_units_from_arguments(self, capsys):
        code = main(["--V", "5000", "--VUnit", "mV", "--I", "2"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Voltage: 5000.000 mV" in out
        assert "Resistance: 2.500 Ω" in out

    def test_error_exit_code(self, capsys):
        code = main(["--V", "12"])
        out = capsys.readouterr().out
        assert code == 1
        assert "Provide at least two" in out

    def test_malformed_input(self, capsys):
        code = main(["--V", "abc", "--R", "4"])
        assert code == 1

    def test_strict_units_flag(self, capsys):
        code = main(["--V", "12", "--VUnit", "kV", "--R", "4", "--strict-units"])
        out = capsys.readouterr().out
        assert code == 1
        assert "Unknown unit" in out

    def test_demo(self, capsys):
        code = main([])
        out = capsys.readouterr().out
        assert code == 0
        assert "Current: 3.000 A" in out
        assert "Error: Inputs lead to an undefined result." in out
        assert "История:" in out
        history = out.split("История:")[1]
        assert "V=12.000 V" in history
        assert "V=5000.000 mV" in history
        assert "No calculations yet." not in history

    def test_json_input(self, capsys):
        code = main(["--json", '{"V": 12, "R": 4}'])
        out = capsys.readouterr().out
        assert code == 0
        assert "Power: 36.000 W" in out

    @pytest.mark.parametrize("text", ['{"V": 12,', '{"V": "abc", "R": 4}', '[1, 2]'])
    def test_malformed_json_input(self, capsys, text):
        code = main(["--json", text])
        out = capsys.readouterr().out
        assert code == 1
        assert "Ошибка ввода" in out

    def test_precision(self, capsys):
        code = main(["--V", "12", "--R", "4", "--precision", "1"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Current: 3.0 A" in out
        assert "Current: 3.000 A" not in out

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.serve is False
        assert args.port == 3000
