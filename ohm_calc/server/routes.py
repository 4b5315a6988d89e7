"""
HTTP API калькулятора
=====================

Тонкий слой над QuantitySolver: разбор запроса, вызов решателя,
запись в историю и отображение ошибок в HTTP статусы.
"""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from base.data import Reading
from config import ServerConfig, SolverConfig, VerifierConfig
from ohm_calc.history import CalculationHistory
from ohm_calc.result import SolveError
from ohm_calc.solver import QuantitySolver
from ohm_calc.server.schemas import (
    CalculateRequest,
    CalculateResponse,
    ClearHistoryResponse,
    ErrorResponse,
    HistoryResponse,
)

logger = logging.getLogger(__name__)

HISTORY_NOTE = "History is stored only in memory (for learning/demo)."

SERVER_ERROR = {
    "error": "Server error.",
    "note": "Check your input and try again.",
}

router = APIRouter()


def get_solver(request: Request) -> QuantitySolver:
    return request.app.state.solver


def get_history(request: Request) -> CalculationHistory:
    return request.app.state.history


@router.get("/health")
def health(request: Request):
    """Health check."""
    return {"status": "ok", "version": request.app.version}


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def calculate(
    req: CalculateRequest,
    solver: QuantitySolver = Depends(get_solver),
    history: CalculationHistory = Depends(get_history),
):
    """
    Находит недостающие величины по любым двум известным.

    Returns:
        200 с полным набором величин, 400 при недостаточных или
        противоречивых данных, 500 при некорректном вводе
    """
    # Только поля, переданные клиентом
    raw_input = req.model_dump(exclude_unset=True)

    try:
        reading = Reading.from_json_dict(raw_input)
        outcome = solver.solve(reading)
    except Exception:
        logger.exception("Ошибка при расчете для входа %s", raw_input)
        return JSONResponse(status_code=500, content=SERVER_ERROR)

    if isinstance(outcome, SolveError):
        return JSONResponse(status_code=400, content=outcome.to_json())

    payload = outcome.to_json()
    history.record(raw_input, payload)
    return payload


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Тело, не прошедшее схему, получает тот же ответ, что и некорректное число."""
    logger.warning("Некорректный запрос %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=500, content=SERVER_ERROR)


@router.get("/history", response_model=HistoryResponse)
def get_history_items(history: CalculationHistory = Depends(get_history)):
    return {"note": HISTORY_NOTE, "items": history.to_json()}


@router.delete("/history", response_model=ClearHistoryResponse)
def clear_history(history: CalculationHistory = Depends(get_history)):
    cleared = history.clear()
    logger.info("История очищена: %d записей", cleared)
    return {"cleared": cleared}


def create_app(
    solver_config: SolverConfig = None,
    server_config: ServerConfig = None,
    history: CalculationHistory = None,
    verifier_config: VerifierConfig = None,
) -> FastAPI:
    """Создает приложение FastAPI.

    Args:
        solver_config: Конфигурация решателя
        server_config: Конфигурация сервиса (CORS, емкость истории)
        history: Готовая история; по умолчанию создается новая
        verifier_config: Погрешности проверки согласованности

    Returns:
        Настроенное приложение с собственной историей
    """
    server_config = server_config or ServerConfig()
    if history is None:
        history = CalculationHistory(server_config.history_capacity)

    app = FastAPI(
        title="Ohm's Law Calculator",
        description="Learning and quick-check tool for V, I, R, P",
        version=server_config.version,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.state.solver = QuantitySolver(solver_config, verifier_config)
    app.state.history = history
    app.include_router(router)
    return app
