# wastehunt/services/leaderboard_service.py
from typing import List, Dict, Any
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.repositories.reward_repository import RewardRepository
from wastehunt.repositories.tip_repository import TipRepository
from wastehunt.models.user import User

DETAILED_LEADERBOARD_SIZE = 10


def verification_rate(verified_tips: int, total_tips: int) -> float:
    """Процент подтверждённых типов, 0 если типов нет"""
    if not total_tips:
        return 0
    return verified_tips / total_tips * 100


class LeaderboardService:
    def __init__(
        self,
        user_repository: UserRepository,
        reward_repository: RewardRepository,
        tip_repository: TipRepository,
    ):
        self.user_repository = user_repository
        self.reward_repository = reward_repository
        self.tip_repository = tip_repository

    async def get_leaderboard(self, limit: int) -> List[User]:
        return await self.user_repository.get_top_users(limit)

    async def get_weekly_leaderboard(self, limit: int) -> List[User]:
        return await self.user_repository.get_weekly_leaders(limit)

    async def get_detailed_leaderboard(self) -> List[Dict[str, Any]]:
        """
        Топ-10 с ачивками, бейджами и статистикой типов.
        Запросы идут последовательно: AsyncSession не выполняет запросы параллельно.
        """
        users = await self.user_repository.get_top_users(DETAILED_LEADERBOARD_SIZE)
        detailed = []
        for user in users:
            achievements = await self.reward_repository.get_achievements(user.id)
            badges = await self.reward_repository.get_badges(user.id)
            stats = await self.tip_repository.get_user_stats(user.id)

            detailed.append({
                "id": user.id,
                "username": user.username,
                "role": user.role,
                "points": user.points,
                "weekly_points": user.weekly_points,
                "rank": user.rank,
                "total_tips": user.total_tips,
                "created_at": user.created_at,
                "achievements": achievements,
                "badges": badges,
                "verification_rate": verification_rate(stats.verified_tips, stats.total_tips),
                "total_impact": stats.total_impact,
                "tip_count": stats.total_tips,
            })
        return detailed
