# wastehunt/core/utils.py
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.core.database import db_helper
from wastehunt.core.exceptions import AuthenticationError, AuthorizationError
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.services.auth_service import AuthService
from wastehunt.models.user import User, UserRole
import logging

logger = logging.getLogger(__name__)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login")


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    session: AsyncSession = Depends(db_helper.session_getter)
) -> User:
    """Зависимость для получения текущего пользователя из токена"""
    try:
        return await AuthService(UserRepository(session)).get_current_user(token)
    except AuthenticationError as e:
        logger.warning(f"Authentication failed: {e.detail}")
        raise AuthenticationError("Could not validate credentials")


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN.value:
        raise AuthorizationError("Admin role required")
    return current_user
