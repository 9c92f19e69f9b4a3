# wastehunt/core/schemas/engagement.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from wastehunt.core.schemas.auth import UserResponse
from wastehunt.core.schemas.waste import TipResponse, ReportResponse

COMMENT_MAX_LENGTH = 300


class CommentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, max_length=COMMENT_MAX_LENGTH)


class CommentResponse(BaseModel):
    id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AchievementResponse(BaseModel):
    id: int
    user_id: int
    type: str
    title: str
    description: str
    earned_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BadgeResponse(BaseModel):
    id: int
    user_id: int
    name: str
    icon: str
    earned_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TipRewardsResponse(BaseModel):
    points_awarded: int
    achievements: List[AchievementResponse] = []
    new_rank: Optional[str] = None
    badge: Optional[BadgeResponse] = None

    model_config = ConfigDict(from_attributes=True)


class TipSubmissionResponse(BaseModel):
    tip: TipResponse
    report: ReportResponse
    rewards: TipRewardsResponse


class DetailedLeaderboardEntry(UserResponse):
    achievements: List[AchievementResponse] = []
    badges: List[BadgeResponse] = []
    verification_rate: float = 0
    total_impact: int = 0
    tip_count: int = 0
