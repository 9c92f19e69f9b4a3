# wastehunt/models/user.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
import enum
from .base import Base


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(32), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.USER.value, server_default=UserRole.USER.value)

    # Игровые счётчики меняются только относительными UPDATE (x = x + n)
    points = Column(Integer, nullable=False, default=0, server_default="0")
    weekly_points = Column(Integer, nullable=False, default=0, server_default="0")
    rank = Column(String, nullable=False, default="Rookie", server_default="Rookie")
    total_tips = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tips = relationship("Tip", back_populates="user")
    achievements = relationship("Achievement", back_populates="user")
    badges = relationship("Badge", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, rank={self.rank})>"

    def __str__(self):
        return self.username
