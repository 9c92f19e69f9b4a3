# wastehunt/core/gamification.py
"""
Статические таблицы геймификации: ранги, каталог ачивок и начисление очков.

Наборы закрытые, поэтому это кортежи неизменяемых записей, а не словари,
которые можно расширить в рантайме. Порядок RANKS важен для rank_for().
"""
import enum
import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rank:
    threshold: int
    title: str


RANKS: Tuple[Rank, ...] = (
    Rank(0, "Rookie"),
    Rank(100, "Waste Investigator"),
    Rank(500, "Waste Hunter"),
    Rank(1000, "Elite Hunter"),
    Rank(5000, "Waste Legend"),
)

DEFAULT_RANK = RANKS[0].title


def rank_for(points: int) -> str:
    """Название самого высокого ранга, порог которого <= points"""
    title = DEFAULT_RANK
    for rank in RANKS:
        if points >= rank.threshold:
            title = rank.title
        else:
            break
    return title


def rank_badge_icon(title: str) -> str:
    """Иконка бейджа ранга: 'Waste Investigator' -> 'rank-waste-investigator'"""
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return f"rank-{slug}"


class AchievementType(str, enum.Enum):
    FIRST_TIP = "first_tip"
    TIP_STREAK = "tip_streak"
    HIGH_IMPACT = "high_impact"
    VIRAL_HUNTER = "viral_hunter"


@dataclass(frozen=True)
class AchievementSpec:
    type: AchievementType
    title: str
    description: str


# TIP_STREAK и VIRAL_HUNTER есть в каталоге, но движок их пока не выдаёт
ACHIEVEMENTS: Tuple[AchievementSpec, ...] = (
    AchievementSpec(AchievementType.FIRST_TIP, "First Strike", "Submit your first waste tip"),
    AchievementSpec(AchievementType.TIP_STREAK, "On a Roll", "Submit 5 tips in a week"),
    AchievementSpec(AchievementType.HIGH_IMPACT, "Big Fish", "Report waste over $1M"),
    AchievementSpec(AchievementType.VIRAL_HUNTER, "Viral Hunter", "Get 100 shares on your tips"),
)


def achievement_for(achievement_type: AchievementType) -> AchievementSpec:
    for spec in ACHIEVEMENTS:
        if spec.type == achievement_type:
            return spec
    raise KeyError(achievement_type)


# Начисление очков за тип
HIGH_IMPACT_AMOUNT = 1_000_000
MEGA_IMPACT_AMOUNT = 10_000_000
BASE_TIP_POINTS = 10
HIGH_IMPACT_BONUS = 20
MEGA_IMPACT_BONUS = 50


def points_for_tip(amount: int) -> int:
    """10 / 30 / 80 очков; бонусы складываются, а не заменяют друг друга"""
    points = BASE_TIP_POINTS
    if amount >= HIGH_IMPACT_AMOUNT:
        points += HIGH_IMPACT_BONUS
    if amount >= MEGA_IMPACT_AMOUNT:
        points += MEGA_IMPACT_BONUS
    return points
