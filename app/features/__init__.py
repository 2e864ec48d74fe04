"""
Функциональные возможности приложения.

Этот модуль содержит функциональные модули:
- user: управление пользователями
"""

from .user.routes import register_user_routes

__all__ = [
    "register_user_routes"
]
