# wastehunt/api/v1/routes/auth.py
from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordRequestForm
from wastehunt.api.v1.dependencies import get_auth_service
from wastehunt.services.auth_service import AuthService
from wastehunt.core.schemas.auth import UserCreate, UserResponse, Token, RefreshTokenRequest
from wastehunt.core.exceptions import AuthenticationError, ValidationError
from wastehunt.core.limiter import limiter
from wastehunt.core.utils import get_current_user
from wastehunt.models.user import User
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def register_user(
    request: Request,
    user_create: UserCreate,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Регистрация нового охотника"""
    client_ip = request.client.host if request.client else "unknown"
    logger.info(f"Registration attempt from IP: {client_ip} for username: {user_create.username}")

    try:
        user, _ = await auth_service.register_user(user_create)
    except ValidationError as e:
        logger.warning(f"Validation error during registration: {e.detail}")
        raise HTTPException(status_code=e.status_code, detail=e.detail)

    logger.info(f"Successful registration for user ID: {user.id}, username: {user.username}")
    return user


@router.post("/login", response_model=Token)
@limiter.limit("10/minute")
async def login_for_access_token(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Логин и получение пары токенов"""
    client_ip = request.client.host if request.client else "unknown"
    try:
        _, token = await auth_service.authenticate_user(form_data.username, form_data.password)
    except AuthenticationError as e:
        logger.warning(f"Authentication failed for username: {form_data.username} from IP: {client_ip}")
        raise HTTPException(
            status_code=e.status_code,
            detail=e.detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"Successful login for username: {form_data.username}")
    return token


@router.post("/refresh", response_model=Token)
@limiter.limit("20/hour")
async def refresh_access_token(
    request: Request,
    refresh_request: RefreshTokenRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        return await auth_service.refresh_tokens(refresh_request.refresh_token)
    except AuthenticationError as e:
        logger.warning(f"Token refresh failed: {e.detail}")
        raise HTTPException(
            status_code=e.status_code,
            detail=e.detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
