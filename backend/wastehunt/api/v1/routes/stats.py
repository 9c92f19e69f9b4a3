# wastehunt/api/v1/routes/stats.py
from fastapi import APIRouter, Depends
from wastehunt.api.v1.dependencies import get_stats_repository
from wastehunt.core.schemas.waste import StatsResponse
from wastehunt.repositories.stats_repository import StatsRepository

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/", response_model=StatsResponse)
async def get_stats(stats_repo: StatsRepository = Depends(get_stats_repository)):
    """Общий ущерб, тип дня и число активных охотников"""
    total_impact = await stats_repo.get_total_impact()
    tip_of_the_day = await stats_repo.get_tip_of_the_day()
    active_hunters = await stats_repo.get_active_hunters()

    return StatsResponse(
        total_impact=total_impact,
        tip_of_the_day=tip_of_the_day,
        active_hunters=active_hunters,
    )
