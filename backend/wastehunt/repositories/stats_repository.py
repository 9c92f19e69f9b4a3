# wastehunt/repositories/stats_repository.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlalchemy import select, func, distinct
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.models.waste import Report, Tip

ACTIVE_HUNTER_WINDOW = timedelta(days=7)


class StatsRepository:
    """Агрегаты для дашборда"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_total_impact(self) -> int:
        """Сумма amount по всем записям ленты, 0 если лента пуста"""
        result = await self.session.execute(select(func.coalesce(func.sum(Report.amount), 0)))
        return int(result.scalar() or 0)

    async def get_tip_of_the_day(self) -> Optional[Report]:
        """Запись с максимумом shares"""
        stmt = select(Report).order_by(Report.shares.desc(), Report.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_hunters(self, now: Optional[datetime] = None) -> int:
        """Число разных авторов с подтверждённым типом за последние 7 дней"""
        now = now or datetime.now(timezone.utc)
        stmt = select(func.count(distinct(Tip.user_id))).where(
            Tip.verified > 0,
            Tip.created_at >= now - ACTIVE_HUNTER_WINDOW,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
