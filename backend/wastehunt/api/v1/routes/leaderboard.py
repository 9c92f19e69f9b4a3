# wastehunt/api/v1/routes/leaderboard.py
from fastapi import APIRouter, Depends, Query
from typing import List
from wastehunt.api.v1.dependencies import get_leaderboard_service
from wastehunt.core.schemas.auth import UserResponse
from wastehunt.core.schemas.engagement import DetailedLeaderboardEntry
from wastehunt.services.leaderboard_service import LeaderboardService

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("/", response_model=List[UserResponse])
async def get_leaderboard(
    limit: int = Query(5, ge=1, le=100),
    leaderboard_service: LeaderboardService = Depends(get_leaderboard_service),
):
    return await leaderboard_service.get_leaderboard(limit)


@router.get("/weekly", response_model=List[UserResponse])
async def get_weekly_leaderboard(
    limit: int = Query(5, ge=1, le=100),
    leaderboard_service: LeaderboardService = Depends(get_leaderboard_service),
):
    return await leaderboard_service.get_weekly_leaderboard(limit)


@router.get("/detailed", response_model=List[DetailedLeaderboardEntry])
async def get_detailed_leaderboard(
    leaderboard_service: LeaderboardService = Depends(get_leaderboard_service),
):
    """Топ-10 с ачивками, бейджами и процентом подтверждённых типов"""
    return await leaderboard_service.get_detailed_leaderboard()
