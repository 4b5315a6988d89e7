"""Базовые модели данных, интерфейсы и утилиты."""
