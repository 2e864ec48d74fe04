from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session, sessionmaker
from typing import Any, Dict, List, Optional
import logging

from .models import User
from .schemas import UserResponse, UpdateStatus, DeleteStatus

# Настройка логирования
logger = logging.getLogger(__name__)

USER_COLUMNS = frozenset(
    column.name for column in User.__table__.columns
) - {"id", "created_at", "updated_at"}


class UserCRUD:
    """
    Хранилище пользователей.

    Один экземпляр на процесс; каждая операция открывает собственную сессию
    из общей фабрики и выполняется в пуле потоков, не блокируя event loop.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @staticmethod
    def _parse_id(user_id: Any) -> int:
        # ValueError для некорректного id пробрасывается вызывающему
        return int(user_id)

    @staticmethod
    def _serialize(user: Optional[User]) -> Optional[UserResponse]:
        """Снимок записи, не зависящий от сессии"""
        if user is None:
            return None
        return UserResponse.model_validate(user)

    @staticmethod
    def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
        """Оставить только известные колонки таблицы users"""
        return {k: v for k, v in fields.items() if k in USER_COLUMNS}

    async def _run(self, operation, *args):
        def call():
            with self.session_factory() as db:
                return operation(db, *args)
        return await run_in_threadpool(call)

    # === ЧТЕНИЕ ===

    async def find_all_users(self) -> List[UserResponse]:
        """Получить всех пользователей"""
        return await self._run(self._find_all)

    async def find_user_by_id(self, user_id: Any) -> Optional[UserResponse]:
        """Получить пользователя по id (None если не найден)"""
        return await self._run(self._find_by_id, self._parse_id(user_id))

    async def find_users_by_type(self, user_type: str) -> List[UserResponse]:
        """Получить пользователей заданного типа"""
        return await self._run(self._find_by, User.type, user_type)

    async def find_users_by_restaurant(self, rid: str) -> List[UserResponse]:
        """Получить пользователей, связанных с рестораном"""
        return await self._run(self._find_by, User.restaurant, rid)

    # === ЗАПИСЬ ===

    async def create_user(self, fields: Dict[str, Any]) -> UserResponse:
        """Создать нового пользователя"""
        return await self._run(self._create, self._clean_fields(fields))

    async def update_user(self, user_id: Any, fields: Dict[str, Any]) -> UpdateStatus:
        """Обновить пользователя; возвращает статус, а не запись"""
        return await self._run(
            self._update, self._parse_id(user_id), self._clean_fields(fields)
        )

    async def delete_user(self, user_id: Any) -> DeleteStatus:
        """Удалить пользователя по id"""
        return await self._run(
            self._delete_where, User.id == self._parse_id(user_id)
        )

    async def delete_all_users(self) -> DeleteStatus:
        """Удалить всех пользователей"""
        return await self._run(self._delete_where, None)

    async def delete_users_by_username(self, username: str) -> DeleteStatus:
        """Удалить пользователей с заданным username"""
        return await self._run(self._delete_where, User.username == username)

    async def delete_users_by_restaurant(self, rid: str) -> DeleteStatus:
        """Удалить пользователей, связанных с рестораном"""
        return await self._run(self._delete_where, User.restaurant == rid)

    # === СИНХРОННАЯ ЧАСТЬ (выполняется в пуле потоков) ===

    @staticmethod
    def _find_all(db: Session) -> List[UserResponse]:
        users = db.query(User).order_by(User.id).all()
        return [UserCRUD._serialize(u) for u in users]

    @staticmethod
    def _find_by_id(db: Session, user_id: int) -> Optional[UserResponse]:
        return UserCRUD._serialize(db.get(User, user_id))

    @staticmethod
    def _find_by(db: Session, column, value) -> List[UserResponse]:
        users = db.query(User).filter(column == value).order_by(User.id).all()
        return [UserCRUD._serialize(u) for u in users]

    @staticmethod
    def _create(db: Session, fields: Dict[str, Any]) -> UserResponse:
        try:
            user = User(**fields)
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"Создан пользователь: id={user.id} username={user.username}")
            return UserCRUD._serialize(user)
        except Exception as e:
            db.rollback()
            logger.error(f"Ошибка создания пользователя: {e}")
            raise

    @staticmethod
    def _update(db: Session, user_id: int, fields: Dict[str, Any]) -> UpdateStatus:
        query = db.query(User).filter(User.id == user_id)
        if not fields:
            matched = query.count()
            return UpdateStatus(matched_count=matched, modified_count=0)

        try:
            modified = query.update(fields, synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Ошибка обновления пользователя id={user_id}: {e}")
            raise

        logger.info(f"Обновлен пользователь: id={user_id} (строк: {modified})")
        return UpdateStatus(matched_count=modified, modified_count=modified)

    @staticmethod
    def _delete_where(db: Session, condition) -> DeleteStatus:
        query = db.query(User)
        if condition is not None:
            query = query.filter(condition)

        try:
            deleted = query.delete(synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Ошибка удаления пользователей: {e}")
            raise

        logger.info(f"Удалено пользователей: {deleted}")
        return DeleteStatus(deleted_count=deleted)


def get_user_crud(session_factory: sessionmaker) -> UserCRUD:
    return UserCRUD(session_factory)
