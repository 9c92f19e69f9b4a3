# wastehunt/repositories/report_repository.py
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.models.waste import Report, ReportSource, Tip
from wastehunt.core.schemas.waste import ReportCreate


class ReportRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Report]:
        result = await self.session.execute(select(Report).order_by(Report.id))
        return list(result.scalars().all())

    async def get_by_id(self, report_id: int) -> Optional[Report]:
        return await self.session.get(Report, report_id)

    async def create(self, report_create: ReportCreate) -> Report:
        """Добавить запись в ленту"""
        report = Report(**report_create.model_dump())
        self.session.add(report)
        await self.session.commit()
        await self.session.refresh(report)
        return report

    async def increment_shares(self, report_id: int) -> bool:
        """shares = shares + 1; False если записи с таким id нет"""
        stmt = (
            update(Report)
            .where(Report.id == report_id)
            .values(shares=Report.shares + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def create_from_tip(self, tip: Tip) -> Report:
        """Публикует тип в ленте как user-submitted запись текущего года"""
        report = Report(
            title=tip.title,
            description=tip.description,
            amount=tip.amount,
            location=tip.location,
            year=datetime.now(timezone.utc).year,
            evidence=tip.evidence,
            source=ReportSource.USER_SUBMITTED.value,
        )
        self.session.add(report)
        await self.session.commit()
        await self.session.refresh(report)
        return report

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(Report.id)))
        return result.scalar() or 0
