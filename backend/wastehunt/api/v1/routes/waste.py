# wastehunt/api/v1/routes/waste.py
from fastapi import APIRouter, Depends, status
from typing import List
from wastehunt.api.v1.dependencies import get_report_repository
from wastehunt.core.exceptions import ReportNotFoundError
from wastehunt.core.schemas.waste import ReportCreate, ReportResponse, ShareResponse
from wastehunt.core.utils import require_admin
from wastehunt.models.user import User
from wastehunt.repositories.report_repository import ReportRepository
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/waste", tags=["waste"])


@router.get("/", response_model=List[ReportResponse])
async def list_waste_reports(report_repo: ReportRepository = Depends(get_report_repository)):
    """Лента всех записей"""
    return await report_repo.list_all()


@router.post("/", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def create_waste_report(
    report_create: ReportCreate,
    admin: User = Depends(require_admin),
    report_repo: ReportRepository = Depends(get_report_repository),
):
    report = await report_repo.create(report_create)
    logger.info(f"Admin {admin.id} added report {report.id} ({report.source})")
    return report


@router.post("/{report_id}/share", response_model=ShareResponse)
async def share_waste_report(
    report_id: int,
    report_repo: ReportRepository = Depends(get_report_repository),
):
    """+1 к shares"""
    if not await report_repo.increment_shares(report_id):
        raise ReportNotFoundError(report_id)
    return ShareResponse(success=True)
