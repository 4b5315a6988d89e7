"""HTTP сервис калькулятора."""

from ohm_calc.server.routes import create_app, router

__all__ = ["create_app", "router"]
