"""Конфигурация HTTP сервиса."""

from dataclasses import dataclass
from typing import List


@dataclass
class ServerConfig:
    """Параметры запуска API и истории расчетов."""

    host: str = "127.0.0.1"
    port: int = 3000
    version: str = "1.0.0"

    # Сколько последних расчетов хранить в памяти
    history_capacity: int = 50

    cors_origins: List[str] = None

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = ["*"]
