# wastehunt/models/__init__.py
from .base import Base
from .user import User, UserRole
from .waste import Report, ReportSource, Tip
from .engagement import Achievement, Badge, Comment

# Этот список нужен, чтобы IDE и alembic видели все таблицы
__all__ = [
    "Base",
    "User", "UserRole",
    "Report", "ReportSource", "Tip",
    "Achievement", "Badge", "Comment",
]
