import pytest

from wastehunt.models import UserRole
from wastehunt.repositories.report_repository import ReportRepository
from wastehunt.core.schemas.waste import ReportCreate

from conftest import TEST_PASSWORD

TIP = {
    "title": "$15M on Ghost Town Wi-Fi",
    "description": "Installing high-speed internet in abandoned mining towns",
    "amount": 15_000_000,
    "location": "Nevada",
}


async def test_register_and_login(client):
    response = await client.post("/api/v1/auth/register", json={"username": "newhunter", "password": "trash2024"})
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "newhunter"
    assert body["rank"] == "Rookie"
    assert body["points"] == 0

    response = await client.post(
        "/api/v1/auth/login",
        data={"username": "newhunter", "password": "trash2024"},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]

    response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["username"] == "newhunter"


async def test_register_duplicate_username(client, make_user):
    await make_user("taken")
    response = await client.post("/api/v1/auth/register", json={"username": "taken", "password": TEST_PASSWORD})
    assert response.status_code == 422


async def test_login_with_wrong_password(client, make_user):
    await make_user("careful")
    response = await client.post("/api/v1/auth/login", data={"username": "careful", "password": "wrong-pass1"})
    assert response.status_code == 401


async def test_submit_tip_requires_auth(client):
    response = await client.post("/api/v1/tips/", json=TIP)
    assert response.status_code == 401


async def test_submit_mega_tip_scenario(client, make_user, auth_headers):
    user = await make_user("scenario")

    response = await client.post("/api/v1/tips/", json=TIP, headers=auth_headers(user))
    assert response.status_code == 201
    body = response.json()

    assert body["tip"]["user_id"] == user.id
    assert body["tip"]["verified"] == 0
    assert body["report"]["source"] == "user-submitted"
    assert body["report"]["amount"] == 15_000_000
    assert body["rewards"]["points_awarded"] == 80
    assert {a["type"] for a in body["rewards"]["achievements"]} == {"first_tip", "high_impact"}
    assert body["rewards"]["new_rank"] is None

    # второй тип: 160 очков, первый порог пройден
    response = await client.post("/api/v1/tips/", json=TIP, headers=auth_headers(user))
    rewards = response.json()["rewards"]
    assert rewards["achievements"] == []
    assert rewards["new_rank"] == "Waste Investigator"
    assert rewards["badge"]["icon"] == "rank-waste-investigator"

    profile = (await client.get(f"/api/v1/users/{user.id}")).json()
    assert profile["points"] == 160
    assert profile["weekly_points"] == 160
    assert profile["total_tips"] == 2
    assert profile["rank"] == "Waste Investigator"

    badges = (await client.get(f"/api/v1/users/{user.id}/badges")).json()
    assert [b["name"] for b in badges] == ["Waste Investigator"]
    achievements = (await client.get(f"/api/v1/users/{user.id}/achievements")).json()
    assert len(achievements) == 2


@pytest.mark.parametrize("field, value", [
    ("title", ""),
    ("amount", -5),
    ("amount", 10**19),
    ("location", ""),
    ("title", "   "),
    ("description", " \n\t "),
    ("location", "   "),
])
async def test_submit_tip_validation(client, make_user, auth_headers, field, value):
    user = await make_user("validator")
    response = await client.post("/api/v1/tips/", json={**TIP, field: value}, headers=auth_headers(user))
    assert response.status_code == 422

    tips = (await client.get("/api/v1/tips/")).json()
    assert tips == []


async def test_submit_tip_missing_field(client, make_user, auth_headers):
    user = await make_user("forgetful")
    payload = {k: v for k, v in TIP.items() if k != "description"}
    response = await client.post("/api/v1/tips/", json=payload, headers=auth_headers(user))
    assert response.status_code == 422


async def test_share_report_twice(client, session):
    report = await ReportRepository(session).create(ReportCreate(
        title="$75M on Robot Dogs", description="Autonomous quadruped robots",
        amount=75_000_000, location="Pentagon", year=2024,
    ))

    for _ in range(2):
        response = await client.post(f"/api/v1/waste/{report.id}/share")
        assert response.status_code == 200
        assert response.json() == {"success": True}

    reports = (await client.get("/api/v1/waste/")).json()
    assert reports[0]["shares"] == 2


async def test_share_unknown_report(client):
    response = await client.post("/api/v1/waste/999/share")
    assert response.status_code == 404
    assert response.json()["error"] == "ReportNotFoundError"


async def test_comment_length_limit(client, make_user, auth_headers):
    user = await make_user("commenter")

    response = await client.post("/api/v1/comments/", json={"content": "x" * 301}, headers=auth_headers(user))
    assert response.status_code == 422
    assert (await client.get("/api/v1/comments/")).json() == []

    response = await client.post("/api/v1/comments/", json={"content": "    "}, headers=auth_headers(user))
    assert response.status_code == 422

    response = await client.post("/api/v1/comments/", json={"content": "x" * 300}, headers=auth_headers(user))
    assert response.status_code == 201
    assert response.json()["user_id"] == user.id

    comments = (await client.get("/api/v1/comments/")).json()
    assert len(comments) == 1


async def test_stats_on_empty_database(client):
    response = await client.get("/api/v1/stats/")
    assert response.status_code == 200
    assert response.json() == {"total_impact": 0, "tip_of_the_day": None, "active_hunters": 0}


async def test_stats_after_submission(client, make_user, auth_headers):
    user = await make_user("impactful")
    await client.post("/api/v1/tips/", json=TIP, headers=auth_headers(user))
    await client.post("/api/v1/tips/", json={**TIP, "amount": 5_000_000}, headers=auth_headers(user))

    stats = (await client.get("/api/v1/stats/")).json()
    assert stats["total_impact"] == 20_000_000
    assert stats["tip_of_the_day"]["title"] == TIP["title"]
    # типы ещё не подтверждены модератором
    assert stats["active_hunters"] == 0


async def test_admin_verification_feeds_stats_and_leaderboard(client, make_user, auth_headers):
    hunter = await make_user("verifiedhunter")
    admin = await make_user("moderator", role=UserRole.ADMIN.value)

    tip_id = (await client.post("/api/v1/tips/", json=TIP, headers=auth_headers(hunter))).json()["tip"]["id"]
    await client.post("/api/v1/tips/", json={**TIP, "amount": 100}, headers=auth_headers(hunter))

    response = await client.post(f"/api/v1/tips/{tip_id}/verify", headers=auth_headers(hunter))
    assert response.status_code == 403

    response = await client.post(f"/api/v1/tips/{tip_id}/verify", headers=auth_headers(admin))
    assert response.status_code == 200
    assert response.json()["verified"] == 1

    response = await client.patch(
        f"/api/v1/tips/{tip_id}/impact", json={"impact_score": 9}, headers=auth_headers(admin)
    )
    assert response.json()["impact_score"] == 9

    response = await client.patch(
        f"/api/v1/tips/{tip_id}/impact", json={"impact_score": 2**31}, headers=auth_headers(admin)
    )
    assert response.status_code == 422

    stats = (await client.get("/api/v1/stats/")).json()
    assert stats["active_hunters"] == 1

    detailed = (await client.get("/api/v1/leaderboard/detailed")).json()
    entry = next(e for e in detailed if e["username"] == "verifiedhunter")
    assert entry["tip_count"] == 2
    assert entry["verification_rate"] == 50
    assert entry["total_impact"] == 15_000_100
    assert {a["type"] for a in entry["achievements"]} == {"first_tip", "high_impact"}

    admin_entry = next(e for e in detailed if e["username"] == "moderator")
    assert admin_entry["verification_rate"] == 0
    assert admin_entry["badges"] == []


async def test_verify_unknown_tip(client, make_user, auth_headers):
    admin = await make_user("admin", role=UserRole.ADMIN.value)
    response = await client.post("/api/v1/tips/777/verify", headers=auth_headers(admin))
    assert response.status_code == 404


async def test_leaderboards(client, make_user, auth_headers):
    small = await make_user("small")
    big = await make_user("big")
    await client.post("/api/v1/tips/", json={**TIP, "amount": 10}, headers=auth_headers(small))
    await client.post("/api/v1/tips/", json=TIP, headers=auth_headers(big))

    board = (await client.get("/api/v1/leaderboard/", params={"limit": 1})).json()
    assert [u["username"] for u in board] == ["big"]

    weekly = (await client.get("/api/v1/leaderboard/weekly")).json()
    assert [u["username"] for u in weekly] == ["big", "small"]
    assert [u["weekly_points"] for u in weekly] == [80, 10]

    response = await client.get("/api/v1/leaderboard/", params={"limit": 0})
    assert response.status_code == 422


async def test_unknown_user(client):
    response = await client.get("/api/v1/users/404")
    assert response.status_code == 404
    assert (await client.get("/api/v1/users/404/achievements")).json() == []
    assert (await client.get("/api/v1/users/404/badges")).json() == []


async def test_create_report_is_admin_only(client, make_user, auth_headers):
    user = await make_user("regular")
    admin = await make_user("editor", role=UserRole.ADMIN.value)
    payload = {
        "title": "Empty Office Space Costs",
        "description": "Paying for empty office space",
        "amount": 200_000_000,
        "location": "Washington DC",
        "year": 2024,
        "source": "social",
        "author_handle": "@FedSpaceWatch",
        "platform_icon": "X",
        "post_url": "https://x.com/FedSpaceWatch/status/1234567893",
    }

    assert (await client.post("/api/v1/waste/", json=payload, headers=auth_headers(user))).status_code == 403

    response = await client.post("/api/v1/waste/", json=payload, headers=auth_headers(admin))
    assert response.status_code == 201
    assert response.json()["source"] == "social"

    response = await client.post("/api/v1/waste/", json={**payload, "source": "rumour"}, headers=auth_headers(admin))
    assert response.status_code == 422

    response = await client.post("/api/v1/waste/", json={**payload, "amount": 2**63}, headers=auth_headers(admin))
    assert response.status_code == 422
