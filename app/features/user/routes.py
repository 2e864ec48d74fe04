"""
Маршруты ресурса /users.

Каждый обработчик делает ровно один вызов хранилища и возвращает его
результат как JSON (HTTP 200). Ошибки хранилища не перехватываются здесь,
их обрабатывает глобальный обработчик исключений.
"""

from fastapi import APIRouter, FastAPI
from typing import Optional
import logging

from ...core.config import settings
from .crud import UserCRUD
from .schemas import UserPayload

# Настройка логирования для routes
logger = logging.getLogger(__name__)


class UserController:
    """
    REST API ресурса users:

    - GET    /users                              все пользователи
    - GET    /users/{user_id}                    пользователь по id
    - POST   /users                              создать пользователя
    - PUT    /users/{user_id}                    обновить пользователя
    - DELETE /users/{user_id}                    удалить пользователя
    - DELETE /users                              удалить всех пользователей
    - DELETE /users/username/{username}/delete   удалить по username
    - GET    /users/type/{type}                  пользователи заданного типа
    - GET    /users/business/{rid}               пользователи ресторана
    - DELETE /users/business/{rid}               удалить пользователей ресторана
    """

    def __init__(self, store: UserCRUD):
        self.store = store

    def build_router(self, prefix: str = "") -> APIRouter:
        """
        Создать роутер с маршрутами контроллера.

        Результат хранилища отдается клиенту без изменений.
        """
        router = APIRouter(prefix=f"{prefix}/users", tags=["users"])

        routes = [
            ("", self.find_all_users, "GET"),
            ("/{user_id}", self.find_user_by_id, "GET"),
            ("", self.create_user, "POST"),
            ("/{user_id}", self.update_user, "PUT"),
            ("/{user_id}", self.delete_user, "DELETE"),
            ("", self.delete_all_users, "DELETE"),
            ("/username/{username}/delete", self.delete_users_by_username, "DELETE"),
            ("/type/{type}", self.find_users_by_type, "GET"),
            ("/business/{rid}", self.find_users_by_restaurant, "GET"),
            ("/business/{rid}", self.delete_users_by_restaurant, "DELETE"),
        ]
        for path, endpoint, method in routes:
            router.add_api_route(
                path, endpoint, methods=[method], response_model=None
            )
        return router

    # === ПОЛЬЗОВАТЕЛИ ===

    async def find_all_users(self):
        """Получить всех пользователей."""
        return await self.store.find_all_users()

    async def find_user_by_id(self, user_id: str):
        """
        Получить пользователя по id.
        Если пользователь не найден, возвращается null со статусом 200.
        """
        return await self.store.find_user_by_id(user_id)

    async def create_user(self, user_data: UserPayload):
        """Создать пользователя. Тело запроса передается хранилищу как есть."""
        return await self.store.create_user(user_data.to_fields())

    async def update_user(self, user_id: str, user_data: UserPayload):
        """Обновить пользователя. Возвращает статус обновления, а не запись."""
        return await self.store.update_user(user_id, user_data.to_fields())

    async def delete_user(self, user_id: str):
        """Удалить пользователя по id."""
        return await self.store.delete_user(user_id)

    async def delete_all_users(self):
        """Удалить всех пользователей."""
        return await self.store.delete_all_users()

    async def delete_users_by_username(self, username: str):
        """Удалить пользователей с заданным username."""
        return await self.store.delete_users_by_username(username)

    async def find_users_by_type(self, type: str):
        """Получить пользователей заданного типа."""
        return await self.store.find_users_by_type(type)

    async def find_users_by_restaurant(self, rid: str):
        """Получить пользователей, связанных с рестораном."""
        return await self.store.find_users_by_restaurant(rid)

    async def delete_users_by_restaurant(self, rid: str):
        """Удалить пользователей, связанных с рестораном."""
        return await self.store.delete_users_by_restaurant(rid)


def register_user_routes(
    app: FastAPI, store: UserCRUD, prefix: Optional[str] = None
) -> UserController:
    """
    Подключить маршруты пользователей к приложению.

    Маршруты регистрируются один раз на приложение: повторный вызов
    возвращает уже созданный контроллер.
    """
    controller = getattr(app.state, "user_controller", None)
    if controller is not None:
        return controller

    controller = UserController(store)
    if prefix is None:
        prefix = settings.API_PREFIX
    app.include_router(controller.build_router(prefix))
    app.state.user_controller = controller
    logger.info(f"Маршруты пользователей подключены: {prefix}/users")
    return controller
