from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from ...core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    type = Column(String(50), index=True, nullable=True)  # Классификация пользователя
    restaurant = Column(String(64), index=True, nullable=True)  # ID ресторана
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User {self.id} - {self.username}>"
