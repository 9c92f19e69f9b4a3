# wastehunt/services/auth_service.py
import logging
from datetime import timedelta
from typing import Tuple
from wastehunt.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    create_refresh_token,
    decode_token
)
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.core.schemas.auth import UserCreate, Token
from wastehunt.core.config import settings
from wastehunt.core.exceptions import AuthenticationError, ValidationError
from wastehunt.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def register_user(self, user_create: UserCreate) -> Tuple[User, Token]:
        """Регистрация: уникальный ник, bcrypt-хеш пароля, пара токенов"""
        existing_user = await self.user_repository.get_by_username(user_create.username)
        if existing_user:
            raise ValidationError("User with this username already exists")

        password_hash = get_password_hash(user_create.password)
        user = await self.user_repository.create(user_create.username, password_hash)
        token = self._generate_tokens(user.id)
        return user, token

    async def authenticate_user(self, username: str, password: str) -> Tuple[User, Token]:
        user = await self.user_repository.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid username or password")

        return user, self._generate_tokens(user.id)

    async def refresh_tokens(self, refresh_token: str) -> Token:
        """Новая пара токенов по refresh token"""
        payload = self._decode(refresh_token, expected_type="refresh")
        user = await self.user_repository.get_by_id(int(payload["sub"]))
        if not user:
            raise AuthenticationError("User not found")
        return self._generate_tokens(user.id)

    async def get_current_user(self, token: str) -> User:
        payload = self._decode(token, expected_type="access")
        user = await self.user_repository.get_by_id(int(payload["sub"]))
        if not user:
            raise AuthenticationError("User not found")
        return user

    def _decode(self, token: str, expected_type: str) -> dict:
        try:
            payload = decode_token(token)
        except ValueError as e:
            raise AuthenticationError(str(e))

        if payload.get("type") != expected_type:
            raise AuthenticationError("Invalid token type")
        if not payload.get("sub"):
            raise AuthenticationError("Invalid token payload")
        return payload

    def _generate_tokens(self, user_id: int) -> Token:
        """Генерация пары access/refresh токенов"""
        access_token_expires = timedelta(
            minutes=settings.security.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        )
        access_token = create_access_token(
            data={"sub": str(user_id)},
            expires_delta=access_token_expires
        )
        refresh_token = create_refresh_token(data={"sub": str(user_id)})

        return Token(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(access_token_expires.total_seconds())
        )
