# wastehunt/repositories/comment_repository.py
from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.models.engagement import Comment


class CommentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Comment]:
        """Все комментарии, новые сверху"""
        stmt = select(Comment).order_by(Comment.created_at.desc(), Comment.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, user_id: int, content: str) -> Comment:
        # длина уже проверена схемой запроса
        comment = Comment(user_id=user_id, content=content)
        self.session.add(comment)
        await self.session.commit()
        await self.session.refresh(comment)
        return comment
