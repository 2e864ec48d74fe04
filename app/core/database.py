from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import settings


def make_engine(database_url: str):
    """Создать engine; для SQLite разрешаем доступ из пула потоков"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(bind) -> sessionmaker:
    # Объекты остаются доступными после закрытия сессии
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=bind
    )


DATABASE_URL = settings.DATABASE_URL
engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)
Base = declarative_base()


def init_db(bind=None):
    """Инициализация базы данных - создание всех таблиц"""
    Base.metadata.create_all(bind=bind or engine)
