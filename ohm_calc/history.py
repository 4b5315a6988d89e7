"""История расчетов в памяти процесса.

Хранит ограниченное число последних расчетов; при переполнении удаляется
самая старая запись. История не переживает перезапуск процесса.
"""

import logging
import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


def utc_timestamp() -> str:
    """Текущее время в ISO-8601 (UTC, миллисекунды, суффикс Z)."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class HistoryEntry:
    """Одна запись истории.

    Attributes:
        timestamp: Время расчета в ISO-8601
        input: Входные данные запроса как есть
        result: Ответ решателя
    """

    timestamp: str
    input: Dict[str, Any]
    result: Dict[str, Any]

    def to_json(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "input": self.input, "result": self.result}


class CalculationHistory:
    """Ограниченный журнал расчетов.

    Запись и чтение сериализуются блокировкой, поэтому один экземпляр
    можно использовать из нескольких потоков обработчиков.

    Attributes:
        capacity: Максимальное количество записей
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Емкость истории должна быть положительной, получено {capacity}")
        self._entries = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def record(
        self,
        raw_input: Dict[str, Any],
        result: Dict[str, Any],
        timestamp: Optional[str] = None,
    ) -> HistoryEntry:
        """Добавляет запись, вытесняя самую старую при переполнении.

        Args:
            raw_input: Входные данные запроса
            result: Ответ решателя (словарь)
            timestamp: Время записи; по умолчанию текущее

        Returns:
            Добавленная запись
        """
        entry = HistoryEntry(
            timestamp=timestamp or utc_timestamp(),
            input=dict(raw_input),
            result=dict(result),
        )
        with self._lock:
            if len(self._entries) == self._entries.maxlen:
                logger.debug("История заполнена, удаляется запись от %s", self._entries[0].timestamp)
            self._entries.append(entry)
        return entry

    def items(self) -> List[HistoryEntry]:
        """Снимок записей от самой старой к самой новой."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> int:
        """Очищает историю.

        Returns:
            Количество удаленных записей
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def to_json(self) -> List[Dict[str, Any]]:
        return [entry.to_json() for entry in self.items()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
