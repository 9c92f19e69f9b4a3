# wastehunt/core/schemas/waste.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal
from datetime import datetime

ReportSourceLiteral = Literal["official", "user-submitted", "social"]

# Колонки amount BIGINT, impact_score INTEGER
MAX_AMOUNT = 2**63 - 1
MAX_IMPACT_SCORE = 2**31 - 1


class TipCreate(BaseModel):
    """Тип от пользователя. Пустые строки не принимаем"""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200, description="Short headline")
    description: str = Field(..., min_length=1, max_length=5000)
    amount: int = Field(..., ge=0, le=MAX_AMOUNT, description="Wasted amount in USD")
    location: str = Field(..., min_length=1, max_length=200)
    evidence: Optional[str] = Field(None, max_length=2000, description="Link or note backing the tip")


class TipResponse(BaseModel):
    id: int
    user_id: int
    title: str
    description: str
    amount: int
    location: str
    verified: int = 0
    impact_score: int = 0
    evidence: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TipImpactUpdate(BaseModel):
    impact_score: int = Field(..., ge=0, le=MAX_IMPACT_SCORE)


class ReportCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0, le=MAX_AMOUNT)
    location: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900, le=2100)
    source: ReportSourceLiteral = "official"
    evidence: Optional[str] = None
    author_handle: Optional[str] = None
    platform_icon: Optional[str] = None
    post_url: Optional[str] = None


class ReportResponse(BaseModel):
    id: int
    title: str
    description: str
    amount: int
    location: str
    year: int
    shares: int = 0
    source: str
    evidence: Optional[str] = None
    author_handle: Optional[str] = None
    platform_icon: Optional[str] = None
    post_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ShareResponse(BaseModel):
    success: bool = True


class UserTipStats(BaseModel):
    total_impact: int = 0
    verified_tips: int = 0
    total_tips: int = 0


class StatsResponse(BaseModel):
    total_impact: int
    tip_of_the_day: Optional[ReportResponse] = None
    active_hunters: int
