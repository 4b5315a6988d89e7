"""Тесты HTTP API."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from config import ServerConfig, SolverConfig
from ohm_calc.history import CalculationHistory
from ohm_calc.server import create_app


class TestCalculateEndpoint:
    """Тесты POST /calculate."""

    def test_success(self, client, sample_payload):
        response = client.post("/calculate", json=sample_payload)
        assert response.status_code == 200
        data = response.json()
        assert data["I"] == pytest.approx(3.0)
        assert data["P"] == pytest.approx(36.0)
        assert data["IUnit"] == "A"
        assert len(data["explanations"]) == 3
        assert data["consistent"] is True

    def test_frontend_style_payload(self, client):
        """Пустые строки и null означают неизвестные величины."""
        response = client.post("/calculate", json={
            "V": "5000", "VUnit": "mV",
            "I": 2, "IUnit": "A",
            "R": "", "RUnit": "Ohm",
            "P": None, "PUnit": "W",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["V"] == pytest.approx(5000.0)
        assert data["VUnit"] == "mV"
        assert data["R"] == pytest.approx(2.5)
        assert data["P"] == pytest.approx(10.0)

    def test_insufficient_inputs(self, client):
        response = client.post("/calculate", json={"V": 12})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Provide at least two among V, I, R, P."
        assert data["kind"] == "insufficient_inputs"
        assert "note" in data

    def test_empty_body(self, client):
        response = client.post("/calculate", json={})
        assert response.status_code == 400
        assert response.json()["kind"] == "insufficient_inputs"

    def test_undefined_result(self, client):
        response = client.post("/calculate", json={"P": 100, "R": 0})
        assert response.status_code == 400
        assert response.json()["kind"] == "underdetermined"

    def test_malformed_number(self, client):
        response = client.post("/calculate", json={"V": "abc", "R": 4})
        assert response.status_code == 500
        assert response.json() == {
            "error": "Server error.",
            "note": "Check your input and try again.",
        }

    @pytest.mark.parametrize("payload", [
        {"V": [12], "R": 4},
        {"V": {"value": 12}, "R": 4},
        {"V": 12, "VUnit": 5, "R": 4},
    ])
    def test_schema_violation_is_server_error(self, client, payload):
        """Тело не по схеме дает тот же ответ, что и некорректное число, без detail."""
        response = client.post("/calculate", json=payload)
        assert response.status_code == 500
        assert response.json() == {
            "error": "Server error.",
            "note": "Check your input and try again.",
        }

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_is_rejected(self, client, flag):
        response = client.post("/calculate", json={"V": flag, "R": 4})
        assert response.status_code == 500
        assert "detail" not in response.json()
        assert client.get("/history").json()["items"] == []

    def test_non_finite_input(self, client):
        response = client.post("/calculate", json={"V": "inf", "R": 4})
        assert response.status_code == 400
        data = response.json()
        assert data["kind"] == "non_finite_input"
        assert data["error"] == "Inputs must be finite numbers."

    def test_overflow(self, client):
        response = client.post("/calculate", json={"V": "1e200", "I": "1e200"})
        assert response.status_code == 400
        data = response.json()
        assert data["kind"] == "underdetermined"
        assert "overflow" in data["note"]

    def test_strict_units(self):
        client = TestClient(create_app(solver_config=SolverConfig(strict_units=True)))
        response = client.post("/calculate", json={"V": 12, "VUnit": "kV", "R": 4})
        assert response.status_code == 400
        assert response.json()["kind"] == "unknown_unit"


class TestHistoryEndpoint:
    """Тесты GET/DELETE /history."""

    def test_history_records_successes_only(self, client, sample_payload):
        client.post("/calculate", json=sample_payload)
        client.post("/calculate", json={"V": 12})

        response = client.get("/history")
        assert response.status_code == 200
        data = response.json()
        assert data["note"] == "History is stored only in memory (for learning/demo)."
        assert len(data["items"]) == 1

        item = data["items"][0]
        assert item["input"]["V"] == 12
        assert item["result"]["P"] == pytest.approx(36.0)
        assert item["timestamp"]

    def test_history_stores_sent_fields_only(self, client):
        """В историю попадают только поля из тела запроса, без null для остальных."""
        client.post("/calculate", json={"V": 12, "R": 4})

        item = client.get("/history").json()["items"][0]
        assert item["input"] == {"V": 12, "R": 4}

    def test_history_capacity(self):
        client = TestClient(create_app(server_config=ServerConfig(history_capacity=3)))
        for n in range(1, 6):
            client.post("/calculate", json={"V": n, "R": 1})

        items = client.get("/history").json()["items"]
        assert [item["input"]["V"] for item in items] == [3, 4, 5]

    def test_injected_history(self):
        history = CalculationHistory(capacity=5)
        client = TestClient(create_app(history=history))
        client.post("/calculate", json={"V": 1, "R": 1})
        assert len(history) == 1

    def test_apps_do_not_share_history(self):
        first = TestClient(create_app())
        second = TestClient(create_app())
        first.post("/calculate", json={"V": 1, "R": 1})
        assert second.get("/history").json()["items"] == []

    def test_clear_history(self, client, sample_payload):
        client.post("/calculate", json=sample_payload)
        client.post("/calculate", json=sample_payload)

        response = client.delete("/history")
        assert response.status_code == 200
        assert response.json() == {"cleared": 2}
        assert client.get("/history").json()["items"] == []


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": ServerConfig().version}
