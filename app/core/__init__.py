"""
Ядро приложения - настройки и инфраструктура.

Этот модуль содержит основные компоненты приложения:
- config: настройки приложения и переменные окружения
- database: подключение к базе данных
- middleware: промежуточное ПО (CORS, логирование, ошибки)
"""

from .config import settings
from .database import SessionLocal, init_db
from .middleware import setup_middleware, setup_exception_handlers

__all__ = [
    "settings",
    "SessionLocal",
    "init_db",
    "setup_middleware",
    "setup_exception_handlers"
]
