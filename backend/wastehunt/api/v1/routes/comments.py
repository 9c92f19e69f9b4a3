# wastehunt/api/v1/routes/comments.py
from fastapi import APIRouter, Depends, status
from typing import List
from wastehunt.api.v1.dependencies import get_comment_repository
from wastehunt.core.schemas.engagement import CommentCreate, CommentResponse
from wastehunt.core.utils import get_current_user
from wastehunt.models.user import User
from wastehunt.repositories.comment_repository import CommentRepository

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/", response_model=List[CommentResponse])
async def list_comments(comment_repo: CommentRepository = Depends(get_comment_repository)):
    return await comment_repo.list_all()


@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    comment_create: CommentCreate,
    current_user: User = Depends(get_current_user),
    comment_repo: CommentRepository = Depends(get_comment_repository),
):
    # > 300 символов отсекает CommentCreate ещё до этой функции (422)
    return await comment_repo.create(current_user.id, comment_create.content)
