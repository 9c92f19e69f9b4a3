from fastapi import APIRouter
from .auth import router as auth_router
from .waste import router as waste_router
from .tips import router as tips_router
from .stats import router as stats_router
from .leaderboard import router as leaderboard_router
from .users import router as users_router
from .comments import router as comments_router


api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(waste_router)
api_router.include_router(tips_router)
api_router.include_router(stats_router)
api_router.include_router(leaderboard_router)
api_router.include_router(users_router)
api_router.include_router(comments_router)
