# wastehunt/repositories/tip_repository.py
from typing import List, Optional
from sqlalchemy import select, update, func, case
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.models.waste import Tip
from wastehunt.core.schemas.waste import TipCreate, UserTipStats


class TipRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user_id: int, tip_create: TipCreate) -> Tip:
        tip = Tip(user_id=user_id, **tip_create.model_dump())
        self.session.add(tip)
        await self.session.commit()
        await self.session.refresh(tip)
        return tip

    async def list_all(self) -> List[Tip]:
        result = await self.session.execute(select(Tip).order_by(Tip.id))
        return list(result.scalars().all())

    async def get_by_id(self, tip_id: int) -> Optional[Tip]:
        stmt = (
            select(Tip)
            .where(Tip.id == tip_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_impact(self, tip_id: int, impact_score: int) -> bool:
        stmt = (
            update(Tip)
            .where(Tip.id == tip_id)
            .values(impact_score=impact_score)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def mark_verified(self, tip_id: int) -> Optional[Tip]:
        """Ещё одно подтверждение модератора: verified = verified + 1"""
        stmt = (
            update(Tip)
            .where(Tip.id == tip_id)
            .values(verified=Tip.verified + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount == 0:
            return None
        return await self.get_by_id(tip_id)

    async def get_user_stats(self, user_id: int) -> UserTipStats:
        """Сумма по типам пользователя, число подтверждённых и всех типов"""
        stmt = select(
            func.coalesce(func.sum(Tip.amount), 0),
            func.count(case((Tip.verified > 0, Tip.id))),
            func.count(Tip.id),
        ).where(Tip.user_id == user_id)
        result = await self.session.execute(stmt)
        total_impact, verified_tips, total_tips = result.one()
        return UserTipStats(
            total_impact=int(total_impact),
            verified_tips=verified_tips,
            total_tips=total_tips,
        )
