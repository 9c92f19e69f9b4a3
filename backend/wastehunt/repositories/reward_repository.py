# wastehunt/repositories/reward_repository.py
from typing import List, Optional, Sequence, Any, Dict
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.models.engagement import Achievement, Badge

# Диалекты, у которых есть INSERT ... ON CONFLICT DO NOTHING RETURNING
_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class RewardRepository:
    """Ачивки и бейджи пользователей"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_achievements(self, user_id: int) -> List[Achievement]:
        stmt = (
            select(Achievement)
            .where(Achievement.user_id == user_id)
            .order_by(Achievement.earned_at.desc(), Achievement.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_badges(self, user_id: int) -> List[Badge]:
        stmt = (
            select(Badge)
            .where(Badge.user_id == user_id)
            .order_by(Badge.earned_at.desc(), Badge.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add_achievement(self, user_id: int, type: str, title: str, description: str) -> Achievement:
        achievement = Achievement(user_id=user_id, type=type, title=title, description=description)
        self.session.add(achievement)
        await self.session.commit()
        await self.session.refresh(achievement)
        return achievement

    async def add_badge(self, user_id: int, name: str, icon: str) -> Badge:
        badge = Badge(user_id=user_id, name=name, icon=icon)
        self.session.add(badge)
        await self.session.commit()
        await self.session.refresh(badge)
        return badge

    async def add_achievement_if_absent(
        self, user_id: int, type: str, title: str, description: str
    ) -> Optional[Achievement]:
        """Выдать ачивку одним атомарным INSERT; None если такая уже есть"""
        return await self._insert_if_absent(
            Achievement,
            ("user_id", "type"),
            {"user_id": user_id, "type": type, "title": title, "description": description},
        )

    async def add_badge_if_absent(self, user_id: int, name: str, icon: str) -> Optional[Badge]:
        return await self._insert_if_absent(
            Badge,
            ("user_id", "name"),
            {"user_id": user_id, "name": name, "icon": icon},
        )

    async def _insert_if_absent(self, model, index_elements: Sequence[str], values: Dict[str, Any]):
        dialect = self.session.get_bind().dialect.name
        insert = _CONFLICT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Conditional insert is not supported for dialect {dialect!r}")

        stmt = (
            insert(model)
            .values(**values)
            .on_conflict_do_nothing(index_elements=list(index_elements))
            .returning(model)
        )
        result = await self.session.scalars(stmt)
        row = result.first()
        await self.session.commit()
        return row
