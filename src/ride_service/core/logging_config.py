"""Настройка логирования приложения."""

import logging
import sys
from contextvars import ContextVar
from typing import Optional

# ContextVar для хранения request_id в рамках одного запроса
request_id_var: ContextVar[str] = ContextVar("request_id", default="N/A")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


class RequestIdFilter(logging.Filter):
    """
    Добавляет в каждую запись лога поле request_id.
    Значение берется из ContextVar, который выставляет HTTP middleware.
    """

    def __init__(self, request_id_storage: ContextVar[str] = request_id_var):
        super().__init__()
        self.request_id_storage = request_id_storage

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = self.request_id_storage.get()
        return True


def setup_logging(level: Optional[str] = None) -> None:
    """
    Конфигурирует корневой логгер один раз за процесс.

    Args:
        level: Уровень логирования (например, "INFO"). По умолчанию INFO.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel((level or "INFO").upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)
    _configured = True
