# wastehunt/api/v1/routes/tips.py
from fastapi import APIRouter, Depends, Request, status
from typing import List
from wastehunt.api.v1.dependencies import get_tip_service
from wastehunt.core.limiter import limiter
from wastehunt.core.schemas.waste import TipCreate, TipResponse, TipImpactUpdate
from wastehunt.core.schemas.engagement import TipSubmissionResponse
from wastehunt.core.utils import get_current_user, require_admin
from wastehunt.models.user import User
from wastehunt.services.tip_service import TipService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tips", tags=["tips"])


@router.post("/", response_model=TipSubmissionResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
async def submit_tip(
    request: Request,
    tip_create: TipCreate,
    current_user: User = Depends(get_current_user),
    tip_service: TipService = Depends(get_tip_service),
):
    """Отправить тип: сохраняем, публикуем в ленте, начисляем награды"""
    logger.info(f"Tip submission from user {current_user.id}: amount={tip_create.amount}")
    submission = await tip_service.submit_tip(current_user.id, tip_create)
    return TipSubmissionResponse.model_validate(submission, from_attributes=True)


@router.get("/", response_model=List[TipResponse])
async def list_tips(tip_service: TipService = Depends(get_tip_service)):
    return await tip_service.list_tips()


@router.post("/{tip_id}/verify", response_model=TipResponse)
async def verify_tip(
    tip_id: int,
    admin: User = Depends(require_admin),
    tip_service: TipService = Depends(get_tip_service),
):
    """Модератор подтверждает тип"""
    return await tip_service.verify_tip(tip_id)


@router.patch("/{tip_id}/impact", response_model=TipResponse)
async def update_tip_impact(
    tip_id: int,
    payload: TipImpactUpdate,
    admin: User = Depends(require_admin),
    tip_service: TipService = Depends(get_tip_service),
):
    return await tip_service.update_impact(tip_id, payload.impact_score)
