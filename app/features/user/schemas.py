from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Any, Optional


# Тело запроса для создания/обновления пользователя.
# Все поля необязательны и без ограничения типа: проверку выполняет хранилище.
class UserPayload(BaseModel):
    username: Optional[Any] = Field(None, description="Имя пользователя")
    first_name: Optional[Any] = Field(None, description="Имя")
    last_name: Optional[Any] = Field(None, description="Фамилия")
    email: Optional[Any] = Field(None, description="Email")
    type: Optional[Any] = Field(None, description="Тип пользователя")
    restaurant: Optional[Any] = Field(
        None, description="ID ресторана, с которым связан пользователь"
    )

    model_config = ConfigDict(extra="allow")

    def to_fields(self) -> dict:
        """Только переданные клиентом поля"""
        return self.model_dump(exclude_unset=True)


class UserResponse(BaseModel):
    id: int
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    type: Optional[str] = None
    restaurant: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UpdateStatus(BaseModel):
    acknowledged: bool = True
    matched_count: int = 0
    modified_count: int = 0


class DeleteStatus(BaseModel):
    acknowledged: bool = True
    deleted_count: int = 0
