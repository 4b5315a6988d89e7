"""Конфигурация pytest."""

import pytest
import sys
import os

# Добавляем корневую папку в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def solver():
    """Фикстура с решателем по умолчанию."""
    from ohm_calc.solver import QuantitySolver
    return QuantitySolver()


@pytest.fixture
def strict_solver():
    """Фикстура с решателем, отклоняющим неизвестные единицы."""
    from config import SolverConfig
    from ohm_calc.solver import QuantitySolver
    return QuantitySolver(SolverConfig(strict_units=True))


@pytest.fixture
def sample_payload():
    """Фикстура с примером входных данных (V и R)."""
    return {"V": 12, "VUnit": "V", "R": 4, "RUnit": "Ohm"}


@pytest.fixture
def client():
    """Фикстура с тестовым клиентом HTTP API."""
    from fastapi.testclient import TestClient
    from ohm_calc.server import create_app
    return TestClient(create_app())
