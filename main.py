from fastapi import FastAPI
from dotenv import load_dotenv
from typing import Optional
import os

# Загружаем переменные окружения из .env до импорта настроек
env_file = os.path.join(os.path.dirname(__file__), '.env')
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    load_dotenv(override=False)

from app.core.config import settings
from app.core.middleware import setup_middleware, setup_exception_handlers
from app.core.database import SessionLocal, init_db
from app.features.user.crud import UserCRUD, get_user_crud
from app.features.user.routes import register_user_routes

# Импортируем модели для создания таблиц
from app.features.user.models import User  # noqa: F401


def create_app(store: Optional[UserCRUD] = None) -> FastAPI:
    """
    Собрать FastAPI приложение.

    Хранилище создается один раз и явно передается в контроллер;
    если оно не передано, используется БД из настроек.
    Запуск: uvicorn main:create_app --factory
    """
    app = FastAPI(**settings.get_app_config())

    if store is None:
        # Инициализируем базу данных ПОСЛЕ импорта всех моделей
        init_db()
        store = get_user_crud(SessionLocal)

    # Настраиваем middleware
    setup_middleware(app)

    # Настраиваем обработчики исключений
    setup_exception_handlers(app)

    # Подключаем маршруты
    register_user_routes(app, store)

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:create_app", factory=True, **settings.get_server_config())
