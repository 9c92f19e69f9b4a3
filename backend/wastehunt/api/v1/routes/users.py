# wastehunt/api/v1/routes/users.py
from fastapi import APIRouter, Depends
from typing import List
from wastehunt.api.v1.dependencies import get_user_repository, get_reward_repository
from wastehunt.core.exceptions import UserNotFoundError
from wastehunt.core.schemas.auth import UserResponse
from wastehunt.core.schemas.engagement import AchievementResponse, BadgeResponse
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.repositories.reward_repository import RewardRepository

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, user_repo: UserRepository = Depends(get_user_repository)):
    user = await user_repo.get_by_id(user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user


@router.get("/{user_id}/achievements", response_model=List[AchievementResponse])
async def get_user_achievements(user_id: int, reward_repo: RewardRepository = Depends(get_reward_repository)):
    """Ачивки пользователя, новые сверху. Для неизвестного id пустой список"""
    return await reward_repo.get_achievements(user_id)


@router.get("/{user_id}/badges", response_model=List[BadgeResponse])
async def get_user_badges(user_id: int, reward_repo: RewardRepository = Depends(get_reward_repository)):
    return await reward_repo.get_badges(user_id)
