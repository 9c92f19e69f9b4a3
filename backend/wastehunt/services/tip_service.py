# wastehunt/services/tip_service.py
import logging
from dataclasses import dataclass
from typing import List
from wastehunt.core.exceptions import TipNotFoundError, UserNotFoundError
from wastehunt.core.schemas.waste import TipCreate
from wastehunt.models.waste import Report, Tip
from wastehunt.repositories.report_repository import ReportRepository
from wastehunt.repositories.tip_repository import TipRepository
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.services.gamification_service import GamificationService, TipRewards

logger = logging.getLogger(__name__)


@dataclass
class TipSubmission:
    tip: Tip
    report: Report
    rewards: TipRewards


class TipService:
    def __init__(
        self,
        tip_repository: TipRepository,
        report_repository: ReportRepository,
        user_repository: UserRepository,
        gamification_service: GamificationService,
    ):
        self.tip_repository = tip_repository
        self.report_repository = report_repository
        self.user_repository = user_repository
        self.gamification_service = gamification_service

    async def submit_tip(self, user_id: int, tip_create: TipCreate) -> TipSubmission:
        """Сохранить тип, опубликовать его в ленте и начислить награды"""
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        tip = await self.tip_repository.create(user_id, tip_create)
        report = await self.report_repository.create_from_tip(tip)
        logger.info(f"Tip {tip.id} from user {user_id} published as report {report.id}")

        rewards = await self.gamification_service.process_tip_submission(user_id, tip.amount)
        return TipSubmission(tip=tip, report=report, rewards=rewards)

    async def list_tips(self) -> List[Tip]:
        return await self.tip_repository.list_all()

    async def verify_tip(self, tip_id: int) -> Tip:
        tip = await self.tip_repository.mark_verified(tip_id)
        if not tip:
            raise TipNotFoundError(tip_id)
        logger.info(f"Tip {tip_id} verified (count={tip.verified})")
        return tip

    async def update_impact(self, tip_id: int, impact_score: int) -> Tip:
        updated = await self.tip_repository.update_impact(tip_id, impact_score)
        if not updated:
            raise TipNotFoundError(tip_id)
        return await self.tip_repository.get_by_id(tip_id)
