# wastehunt/core/schemas/auth.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
import re

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class PasswordComplexity:
    """Минимальные требования к паролю"""
    MIN_LENGTH = 8
    MAX_LENGTH = 64
    WEAK_PASSWORDS = {
        "password", "12345678", "qwerty123", "password1", "iloveyou", "welcome1",
    }

    @classmethod
    def validate(cls, password: str) -> None:
        errors = []

        if len(password) < cls.MIN_LENGTH:
            errors.append(f"Password must be at least {cls.MIN_LENGTH} characters long")
        if len(password) > cls.MAX_LENGTH:
            errors.append(f"Password must be at most {cls.MAX_LENGTH} characters long")
        if not any(c.isalpha() for c in password):
            errors.append("Password must contain at least one letter")
        if not any(c.isdigit() for c in password):
            errors.append("Password must contain at least one digit")
        if password.lower() in cls.WEAK_PASSWORDS:
            errors.append("Password is too common and easily guessable")

        if errors:
            raise ValueError("; ".join(errors))


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=32, description="Public nickname")
    password: str = Field(..., description="User password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username may contain only letters, digits, '.', '_' and '-'")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        PasswordComplexity.validate(v)
        return v


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token expiration time in seconds")


class RefreshTokenRequest(BaseModel):
    refresh_token: str = Field(..., description="Refresh token for getting new access token")


class UserResponse(BaseModel):
    id: int
    username: str
    role: str = "user"
    points: int = 0
    weekly_points: int = 0
    rank: str = "Rookie"
    total_tips: int = 0
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
