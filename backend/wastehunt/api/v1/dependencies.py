# wastehunt/api/v1/dependencies.py
"""Сборка сервисов на каждый запрос поверх сессии из db_helper"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.core.database import db_helper
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.repositories.reward_repository import RewardRepository
from wastehunt.repositories.report_repository import ReportRepository
from wastehunt.repositories.tip_repository import TipRepository
from wastehunt.repositories.stats_repository import StatsRepository
from wastehunt.repositories.comment_repository import CommentRepository
from wastehunt.services.auth_service import AuthService
from wastehunt.services.gamification_service import GamificationService
from wastehunt.services.tip_service import TipService
from wastehunt.services.leaderboard_service import LeaderboardService


def get_auth_service(session: AsyncSession = Depends(db_helper.session_getter)) -> AuthService:
    return AuthService(UserRepository(session))


def get_tip_service(session: AsyncSession = Depends(db_helper.session_getter)) -> TipService:
    user_repo = UserRepository(session)
    return TipService(
        TipRepository(session),
        ReportRepository(session),
        user_repo,
        GamificationService(user_repo, RewardRepository(session)),
    )


def get_leaderboard_service(session: AsyncSession = Depends(db_helper.session_getter)) -> LeaderboardService:
    return LeaderboardService(UserRepository(session), RewardRepository(session), TipRepository(session))


def get_report_repository(session: AsyncSession = Depends(db_helper.session_getter)) -> ReportRepository:
    return ReportRepository(session)


def get_stats_repository(session: AsyncSession = Depends(db_helper.session_getter)) -> StatsRepository:
    return StatsRepository(session)


def get_comment_repository(session: AsyncSession = Depends(db_helper.session_getter)) -> CommentRepository:
    return CommentRepository(session)


def get_user_repository(session: AsyncSession = Depends(db_helper.session_getter)) -> UserRepository:
    return UserRepository(session)


def get_reward_repository(session: AsyncSession = Depends(db_helper.session_getter)) -> RewardRepository:
    return RewardRepository(session)
