import os

# Тестовая база данных должна быть задана до импорта настроек
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient

# Импорты из приложения
from app.core.database import Base, make_engine, make_session_factory
from app.features.user.crud import UserCRUD
from app.features.user.models import User
from main import create_app

# Настройка тестовой базы данных
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = make_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = make_session_factory(engine)


@pytest.fixture(scope="function")
def db_session():
    """Фикстура для создания тестовой сессии БД"""
    # Очищаем и создаем таблицы заново
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()

    yield session

    # Очищаем после теста
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def store(db_session):
    """Хранилище пользователей поверх тестовой БД"""
    return UserCRUD(TestingSessionLocal)


@pytest.fixture(scope="function")
def app(store):
    """Приложение с тестовым хранилищем"""
    return create_app(store=store)


@pytest.fixture(scope="function")
def client(app):
    """Фикстура для тестового клиента FastAPI"""
    # Ошибки хранилища должны превращаться в ответ 500, а не в исключение теста
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def sample_user_data():
    """Фикстура с тестовыми данными пользователя"""
    return {
        "username": "bob",
        "first_name": "Bob",
        "last_name": "Smith",
        "email": "bob@example.com",
        "type": "standard",
        "restaurant": "r-100"
    }


@pytest.fixture
def created_user(db_session, sample_user_data):
    """Фикстура с созданным пользователем в БД"""
    user = User(**sample_user_data)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def multiple_users(db_session):
    """Фикстура с несколькими пользователями в БД"""
    users_data = [
        {"username": "alice", "type": "owner", "restaurant": "r-1"},
        {"username": "carol", "type": "standard", "restaurant": "r-1"},
        {"username": "dave", "type": "standard", "restaurant": "r-2"},
        {"username": "erin", "type": "Standard", "restaurant": None},
    ]

    users = []
    for user_data in users_data:
        user = User(**user_data)
        db_session.add(user)
        users.append(user)

    db_session.commit()
    for user in users:
        db_session.refresh(user)

    return users
