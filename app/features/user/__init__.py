"""
Управление пользователями.

Этот модуль содержит:
- models: модели базы данных (SQLAlchemy)
- schemas: схемы API (Pydantic)
- crud: хранилище пользователей (операции с БД)
- routes: контроллер ресурса /users и регистрация маршрутов
"""

from .models import User
from .crud import UserCRUD, get_user_crud
from .routes import UserController, register_user_routes

__all__ = [
    "User",
    "UserCRUD",
    "get_user_crud",
    "UserController",
    "register_user_routes"
]
