from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from wastehunt.core.schemas.waste import ReportCreate, TipCreate
from wastehunt.models.engagement import Achievement
from wastehunt.models.waste import Tip
from wastehunt.repositories.comment_repository import CommentRepository
from wastehunt.repositories.report_repository import ReportRepository
from wastehunt.repositories.reward_repository import RewardRepository
from wastehunt.repositories.stats_repository import StatsRepository
from wastehunt.repositories.tip_repository import TipRepository
from wastehunt.repositories.user_repository import UserRepository


def report_payload(**overrides) -> ReportCreate:
    data = dict(
        title="$20M on Unused Trash Cans",
        description="Brand new smart trash cans left in storage",
        amount=20_000_000,
        location="NYC",
        year=2023,
    )
    data.update(overrides)
    return ReportCreate(**data)


def tip_payload(**overrides) -> TipCreate:
    data = dict(title="Gold toilets", description="Again", amount=1_500_000, location="DC")
    data.update(overrides)
    return TipCreate(**data)


async def test_share_increments_twice(session):
    repo = ReportRepository(session)
    report = await repo.create(report_payload())
    assert report.shares == 0

    assert await repo.increment_shares(report.id)
    assert await repo.increment_shares(report.id)

    await session.refresh(report)
    assert report.shares == 2


async def test_share_unknown_report_returns_false(session):
    assert await ReportRepository(session).increment_shares(999) is False


async def test_total_impact_is_zero_without_reports(session):
    assert await StatsRepository(session).get_total_impact() == 0
    assert await StatsRepository(session).get_tip_of_the_day() is None


async def test_total_impact_sums_all_reports(session):
    repo = ReportRepository(session)
    await repo.create(report_payload(amount=20_000_000))
    await repo.create(report_payload(amount=482_000_000, source="social", author_handle="@GovWatchdog"))

    assert await StatsRepository(session).get_total_impact() == 502_000_000


async def test_tip_of_the_day_has_most_shares(session):
    repo = ReportRepository(session)
    await repo.create(report_payload(title="quiet"))
    viral = await repo.create(report_payload(title="viral"))
    for _ in range(3):
        await repo.increment_shares(viral.id)

    tip_of_the_day = await StatsRepository(session).get_tip_of_the_day()
    assert tip_of_the_day.id == viral.id


async def test_report_from_tip_is_user_submitted(session, make_user):
    user = await make_user("tipster")
    tip = await TipRepository(session).create(user.id, tip_payload(evidence="https://example.org/doc.pdf"))

    report = await ReportRepository(session).create_from_tip(tip)

    assert report.source == "user-submitted"
    assert report.year == datetime.now(timezone.utc).year
    assert (report.title, report.amount, report.location) == (tip.title, tip.amount, tip.location)
    assert report.evidence == "https://example.org/doc.pdf"
    assert report.shares == 0


async def test_active_hunters_counts_recent_verified_distinct_users(session, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    carol = await make_user("carol")
    now = datetime.now(timezone.utc)

    def tip(user, verified, age_days):
        return Tip(user_id=user.id, title="t", description="d", amount=1, location="x",
                   verified=verified, created_at=now - timedelta(days=age_days))

    session.add_all([
        tip(alice, 1, 1),
        tip(alice, 2, 2),   # тот же пользователь считается один раз
        tip(bob, 0, 1),     # не подтверждён
        tip(carol, 1, 10),  # за пределами окна
    ])
    await session.commit()

    assert await StatsRepository(session).get_active_hunters(now=now) == 1


async def test_add_points_updates_total_and_weekly(session, make_user):
    repo = UserRepository(session)
    user = await make_user("counter")

    await repo.add_points(user.id, 30)
    await repo.add_points(user.id, 80)
    await repo.increment_tip_count(user.id)

    fresh = await repo.get_by_id(user.id)
    assert (fresh.points, fresh.weekly_points, fresh.total_tips) == (110, 110, 1)


async def test_leaders_are_sorted_descending(session, make_user):
    repo = UserRepository(session)
    low = await make_user("low")
    high = await make_user("high")
    weekly = await make_user("weekly")
    await repo.add_points(low.id, 10)
    await repo.add_points(high.id, 500)
    await repo.add_points(weekly.id, 50)

    top = await repo.get_top_users(2)
    assert [u.username for u in top] == ["high", "weekly"]


async def test_achievement_insert_if_absent(session, make_user):
    repo = RewardRepository(session)
    user = await make_user("unique")

    first = await repo.add_achievement_if_absent(user.id, "first_tip", "First Strike", "Submit your first waste tip")
    duplicate = await repo.add_achievement_if_absent(user.id, "first_tip", "First Strike", "Submit your first waste tip")

    assert isinstance(first, Achievement)
    assert duplicate is None
    assert len(await repo.get_achievements(user.id)) == 1


async def test_badge_insert_if_absent(session, make_user):
    repo = RewardRepository(session)
    user = await make_user("badged")

    assert await repo.add_badge_if_absent(user.id, "Waste Hunter", "rank-waste-hunter") is not None
    assert await repo.add_badge_if_absent(user.id, "Waste Hunter", "rank-waste-hunter") is None


async def test_rewards_are_listed_newest_first(session, make_user):
    repo = RewardRepository(session)
    user = await make_user("historian")
    older = await repo.add_badge(user.id, "Waste Investigator", "rank-waste-investigator")
    newer = await repo.add_badge(user.id, "Waste Hunter", "rank-waste-hunter")
    older.earned_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    newer.earned_at = datetime(2024, 6, 1, tzinfo=timezone.utc)
    await session.commit()

    badges = await repo.get_badges(user.id)
    assert [b.id for b in badges] == [newer.id, older.id]


async def test_user_tip_stats(session, make_user):
    repo = TipRepository(session)
    user = await make_user("stats")
    first = await repo.create(user.id, tip_payload(amount=100))
    await repo.create(user.id, tip_payload(amount=250))
    await repo.mark_verified(first.id)

    stats = await repo.get_user_stats(user.id)
    assert (stats.total_impact, stats.verified_tips, stats.total_tips) == (350, 1, 2)


async def test_user_tip_stats_without_tips(session, make_user):
    user = await make_user("empty")
    stats = await TipRepository(session).get_user_stats(user.id)
    assert (stats.total_impact, stats.verified_tips, stats.total_tips) == (0, 0, 0)


async def test_update_impact_and_verify_unknown_tip(session):
    repo = TipRepository(session)
    assert await repo.update_impact(12345, 7) is False
    assert await repo.mark_verified(12345) is None


async def test_comments_newest_first(session, make_user):
    repo = CommentRepository(session)
    user = await make_user("talker")
    older = await repo.create(user.id, "first")
    newer = await repo.create(user.id, "second")
    older.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    newer.created_at = datetime(2024, 2, 1, tzinfo=timezone.utc)
    await session.commit()

    comments = await repo.list_all()
    assert [c.content for c in comments] == ["second", "first"]


async def test_update_rank_overwrites_unconditionally(session, make_user):
    repo = UserRepository(session)
    user = await make_user("demoted")

    await repo.update_rank(user.id, "Waste Hunter")
    assert (await repo.get_by_id(user.id)).rank == "Waste Hunter"

    await repo.update_rank(user.id, "Rookie")
    assert (await repo.get_by_id(user.id)).rank == "Rookie"


async def test_add_achievement_plain_insert(session, make_user):
    repo = RewardRepository(session)
    user = await make_user("plain")

    achievement = await repo.add_achievement(user.id, "high_impact", "Big Fish", "Report waste over $1M")

    assert achievement.id is not None
    assert achievement.earned_at is not None
    assert [a.id for a in await repo.get_achievements(user.id)] == [achievement.id]


async def test_add_achievement_rejects_duplicate_type(session, make_user):
    repo = RewardRepository(session)
    user = await make_user("twice")
    await repo.add_achievement(user.id, "first_tip", "First Strike", "Submit your first waste tip")

    with pytest.raises(IntegrityError):
        await repo.add_achievement(user.id, "first_tip", "First Strike", "Submit your first waste tip")
