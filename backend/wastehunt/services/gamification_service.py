# wastehunt/services/gamification_service.py
"""
Движок геймификации.

Состояния между вызовами нет: каждый шаг перечитывает то, что ему нужно,
и сразу пишет результат. Выдача ачивок и бейджей идёт через INSERT ... ON
CONFLICT DO NOTHING по уникальным ключам (user_id, type) / (user_id, name),
смена ранга через compare-and-swap, поэтому конкурентные сабмиты одного
пользователя не дают дублей. Ошибки хранилища пробрасываются наверх без
повторов: повтор инкремента очков начислил бы их дважды.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional
from wastehunt.core.gamification import (
    AchievementType,
    HIGH_IMPACT_AMOUNT,
    achievement_for,
    points_for_tip,
    rank_badge_icon,
    rank_for,
)
from wastehunt.models.engagement import Achievement, Badge
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.repositories.reward_repository import RewardRepository

logger = logging.getLogger(__name__)


@dataclass
class RankChange:
    new_rank: str
    badge: Optional[Badge]


@dataclass
class TipRewards:
    """Что получил пользователь за тип, для уведомления на клиенте"""
    points_awarded: int
    achievements: List[Achievement] = field(default_factory=list)
    new_rank: Optional[str] = None
    badge: Optional[Badge] = None


class GamificationService:
    def __init__(self, user_repository: UserRepository, reward_repository: RewardRepository):
        self.user_repository = user_repository
        self.reward_repository = reward_repository

    async def process_tip_submission(self, user_id: int, tip_amount: int) -> TipRewards:
        """Начисления за один отправленный тип"""
        await self.user_repository.increment_tip_count(user_id)

        unlocked: List[Achievement] = []

        first_tip = await self.check_and_award_achievement(user_id, AchievementType.FIRST_TIP)
        if first_tip:
            unlocked.append(first_tip)

        if tip_amount >= HIGH_IMPACT_AMOUNT:
            high_impact = await self.check_and_award_achievement(user_id, AchievementType.HIGH_IMPACT)
            if high_impact:
                unlocked.append(high_impact)

        points = points_for_tip(tip_amount)
        await self.user_repository.add_points(user_id, points)
        logger.info(f"User {user_id} earned {points} points for a tip of {tip_amount}")

        rewards = TipRewards(points_awarded=points, achievements=unlocked)
        rank_change = await self.update_rank_if_needed(user_id)
        if rank_change:
            rewards.new_rank = rank_change.new_rank
            rewards.badge = rank_change.badge
        return rewards

    async def check_and_award_achievement(
        self, user_id: int, achievement_type: AchievementType
    ) -> Optional[Achievement]:
        """Выдать ачивку, если её ещё нет. Возвращает новую запись или None"""
        spec = achievement_for(achievement_type)
        achievement = await self.reward_repository.add_achievement_if_absent(
            user_id=user_id,
            type=spec.type.value,
            title=spec.title,
            description=spec.description,
        )
        if achievement:
            logger.info(f"User {user_id} unlocked achievement '{spec.type.value}'")
        return achievement

    async def update_rank_if_needed(self, user_id: int) -> Optional[RankChange]:
        """
        Пересчитать ранг по текущим очкам. Для неизвестного пользователя ничего
        не делаем: ранг без пользователя смысла не имеет.
        """
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            logger.warning(f"Rank update skipped: user {user_id} not found")
            return None

        new_rank = rank_for(user.points or 0)
        if new_rank == user.rank:
            return None

        # Параллельный запрос мог уже перевести ранг; тогда бейдж выдаёт он
        promoted = await self.user_repository.update_rank_if_current(user_id, user.rank, new_rank)
        if not promoted:
            logger.info(f"User {user_id} rank already changed concurrently, skipping badge")
            return None

        badge = await self.award_badge(user_id, new_rank, rank_badge_icon(new_rank))
        logger.info(f"User {user_id} promoted {user.rank!r} -> {new_rank!r}")
        return RankChange(new_rank=new_rank, badge=badge)

    async def award_badge(self, user_id: int, name: str, icon: str) -> Optional[Badge]:
        return await self.reward_repository.add_badge_if_absent(user_id=user_id, name=name, icon=icon)
