"""
Калькулятор закона Ома: командная строка

Основные функции:
- Расчет недостающих величин по двум известным
- Демонстрация на примерах
- Запуск HTTP сервиса
"""

import argparse
import logging
import sys
from pathlib import Path

# Добавляем текущую папку в путь
sys.path.append(str(Path(__file__).parent))

from base.data import Reading, QUANTITIES
from config import SolverConfig, ServerConfig, VerifierConfig
from ohm_calc.history import CalculationHistory
from ohm_calc.solver import QuantitySolver
from ohm_calc.result import SolveError
from ohm_calc.report import format_outcome, format_history

# Примеры для демонстрации
DEMO_READINGS = [
    {"V": 12, "R": 4},
    {"V": 5000, "VUnit": "mV", "I": 2, "IUnit": "A"},
    {"P": 100, "R": 0},
]


def demo(solver: QuantitySolver, precision: int) -> None:
    """Демонстрация расчета на примерах.

    Для каждого примера выводит вход и результат (или ошибку),
    в конце показывает историю успешных расчетов.
    """
    history = CalculationHistory()

    for raw in DEMO_READINGS:
        print(f"\n--- Вход: {raw} ---")
        outcome = solver.solve(Reading.from_json_dict(raw))
        print(format_outcome(outcome, precision))
        print("-" * 50)
        if not isinstance(outcome, SolveError):
            history.record(raw, outcome.to_json())

    print("\n📜 История:")
    print(format_history(history, precision))


def serve(host: str, port: int, solver_config: SolverConfig) -> None:
    """Запускает HTTP сервис под uvicorn."""
    import uvicorn
    from ohm_calc.server import create_app

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    server_config = ServerConfig(host=host, port=port)
    app = create_app(solver_config=solver_config, server_config=server_config)
    uvicorn.run(app, host=server_config.host, port=server_config.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ohm's law calculator (V, I, R, P)")
    for q in QUANTITIES:
        parser.add_argument(f"--{q.name}", dest=q.name, default=None, help=f"Значение {q.name}")
        parser.add_argument(f"--{q.unit_key}", dest=q.unit_key, default=None, help=f"Единица {q.name}")
    parser.add_argument("--json", default=None, help='Вход одной строкой, например \'{"V": 12, "R": 4}\'')
    parser.add_argument("--precision", type=int, default=VerifierConfig.answer_precision,
                        help="Знаков после запятой при выводе")
    parser.add_argument("--strict-units", action="store_true", help="Ошибка для неизвестных единиц")
    parser.add_argument("--serve", action="store_true", help="Запустить HTTP API")
    parser.add_argument("--host", default=ServerConfig.host)
    parser.add_argument("--port", type=int, default=ServerConfig.port)
    return parser


def main(argv=None) -> int:
    """Главная функция.

    Без значений величин запускает демонстрацию, с --serve запускает API.

    Returns:
        Код завершения: 1 если расчет завершился ошибкой
    """
    args = build_parser().parse_args(argv)
    solver_config = SolverConfig(strict_units=args.strict_units)

    if args.serve:
        serve(args.host, args.port, solver_config)
        return 0

    solver = QuantitySolver(solver_config)
    fields = [key for q in QUANTITIES for key in (q.name, q.unit_key)]
    raw = {key: getattr(args, key) for key in fields if getattr(args, key) is not None}

    if args.json is None and not any(q.name in raw for q in QUANTITIES):
        print("🚀 Демонстрация калькулятора закона Ома")
        print("=" * 50)
        demo(solver, args.precision)
        return 0

    try:
        if args.json is not None:
            reading = Reading.from_json_str(args.json)
        else:
            reading = Reading.from_json_dict(raw)
    except (ValueError, TypeError) as e:
        print(f"❌ Ошибка ввода: {e}")
        return 1

    outcome = solver.solve(reading)
    print(format_outcome(outcome, args.precision))
    return 1 if isinstance(outcome, SolveError) else 0


if __name__ == "__main__":
    sys.exit(main())
