import os
from typing import List
import logging


def _env_list(name: str, default: str = "*") -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """
    Настройки сервиса пользователей (из переменных окружения / .env)
    """

    # === ПРИЛОЖЕНИЕ ===
    APP_NAME: str = os.getenv("APP_NAME", "Users REST API")
    APP_DESCRIPTION: str = "REST API ресурса users: пользователи и их рестораны"
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    DEBUG: bool = _env_bool("DEBUG", "False")

    # === СЕРВЕР ===
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # === ХРАНИЛИЩЕ ===
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Префикс ресурса, например "/api" -> /api/users
    API_PREFIX: str = os.getenv("API_PREFIX", "").rstrip("/")

    # === CORS / ХОСТЫ ===
    CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS")
    CORS_ALLOW_CREDENTIALS: bool = _env_bool("CORS_ALLOW_CREDENTIALS", "True")
    CORS_ALLOW_METHODS: List[str] = _env_list("CORS_ALLOW_METHODS")
    CORS_ALLOW_HEADERS: List[str] = _env_list("CORS_ALLOW_HEADERS")
    TRUSTED_HOSTS: List[str] = _env_list("TRUSTED_HOSTS")

    # === ЛОГИРОВАНИЕ ===
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def setup_logging(self):
        """
        Настройка логирования приложения.
        В режиме DEBUG дополнительно выводятся SQL-запросы хранилища.
        """
        logging.basicConfig(
            level=getattr(logging, self.LOG_LEVEL.upper()),
            format=self.LOG_FORMAT
        )

        if self.DEBUG:
            logging.getLogger("uvicorn.access").setLevel(logging.DEBUG)
            logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    def get_cors_config(self) -> dict:
        return {
            "allow_origins": self.CORS_ORIGINS,
            "allow_credentials": self.CORS_ALLOW_CREDENTIALS,
            "allow_methods": self.CORS_ALLOW_METHODS,
            "allow_headers": self.CORS_ALLOW_HEADERS,
        }

    def get_trusted_hosts_config(self) -> dict:
        return {"allowed_hosts": self.TRUSTED_HOSTS}

    def get_app_config(self) -> dict:
        """
        Параметры FastAPI приложения
        """
        return {
            "title": self.APP_NAME,
            "description": self.APP_DESCRIPTION,
            "version": self.APP_VERSION,
            "debug": self.DEBUG
        }

    def get_server_config(self) -> dict:
        """
        Параметры запуска uvicorn
        """
        return {
            "host": self.HOST,
            "port": self.PORT,
            "log_level": self.LOG_LEVEL.lower(),
        }


# Создаем глобальный экземпляр настроек
settings = Settings()

# Настраиваем логирование при импорте модуля
settings.setup_logging()
