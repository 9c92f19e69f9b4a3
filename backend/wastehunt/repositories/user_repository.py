# wastehunt/repositories/user_repository.py
from typing import Optional, List
from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.models.user import User, UserRole


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Получить пользователя по ID, всегда со свежими счётчиками из БД"""
        stmt = (
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.username) == username.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_top_users(self, limit: int) -> List[User]:
        """Топ-N по сумме очков"""
        stmt = select(User).order_by(User.points.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_weekly_leaders(self, limit: int) -> List[User]:
        """Топ-N по очкам за неделю"""
        stmt = select(User).order_by(User.weekly_points.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, username: str, password_hash: str, role: str = UserRole.USER.value) -> User:
        """Создать нового пользователя"""
        db_user = User(
            username=username,
            password_hash=password_hash,
            role=role,
        )
        self.session.add(db_user)
        await self.session.commit()
        await self.session.refresh(db_user)
        return db_user

    async def add_points(self, user_id: int, points: int) -> None:
        """Атомарно прибавить очки к общему и недельному счёту"""
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(
                points=User.points + points,
                weekly_points=User.weekly_points + points,
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def update_rank(self, user_id: int, rank: str) -> None:
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(rank=rank)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def update_rank_if_current(self, user_id: int, expected_rank: str, new_rank: str) -> bool:
        """
        Compare-and-swap ранга: пишем только если в БД всё ещё expected_rank.
        True значит, что повышение засчитано именно этим вызовом.
        """
        stmt = (
            update(User)
            .where(User.id == user_id, User.rank == expected_rank)
            .values(rank=new_rank)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1

    async def increment_tip_count(self, user_id: int) -> None:
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(total_tips=User.total_tips + 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(User.id)))
        return result.scalar() or 0
