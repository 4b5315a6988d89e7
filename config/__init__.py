"""Конфигурационные модули."""

from .solver_config import SolverConfig
from .verifier_config import VerifierConfig
from .server_config import ServerConfig

__all__ = ["SolverConfig", "VerifierConfig", "ServerConfig"]
