"""Exercise log retrieval — GET /api/users/{id}/logs.

Invariants:
    - `from`/`to` are inclusive bounds and combine
    - `limit` caps the page; `count` is the page size, not the total
    - Absent/invalid `limit` falls back to the 500 cap
    - Logs are scoped to the requested user
"""

import pytest

from app.routes.users import resolve_limit


@pytest.fixture
async def user_with_three(create_user, log_exercise):
    user = await create_user("fcc_test")
    for date in ("2023-01-01", "2023-06-01", "2023-12-01"):
        res = await log_exercise(user["_id"], description=f"ex {date}", duration=10, date=date)
        assert res.status_code == 200
    return user


async def test_log_for_user_without_exercises(client, create_user):
    user = await create_user("lonely")

    res = await client.get(f"/api/users/{user['_id']}/logs")

    assert res.status_code == 200
    assert res.json() == {
        "username": "lonely",
        "count": 0,
        "_id": user["_id"],
        "log": [],
    }


async def test_full_log(client, user_with_three):
    res = await client.get(f"/api/users/{user_with_three['_id']}/logs")

    body = res.json()
    assert body["count"] == 3
    assert body["username"] == "fcc_test"
    assert body["_id"] == user_with_three["_id"]
    assert {e["date"] for e in body["log"]} == {
        "Sun Jan 01 2023", "Thu Jun 01 2023", "Fri Dec 01 2023",
    }
    for entry in body["log"]:
        assert set(entry) == {"description", "duration", "date"}


async def test_date_range_filter(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs",
        params={"from": "2023-02-01", "to": "2023-07-01"},
    )

    body = res.json()
    assert body["count"] == 1
    assert body["log"] == [
        {"description": "ex 2023-06-01", "duration": 10, "date": "Thu Jun 01 2023"}
    ]


async def test_bounds_are_inclusive(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs",
        params={"from": "2023-06-01", "to": "2023-12-01"},
    )

    assert res.json()["count"] == 2


async def test_from_only(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs", params={"from": "2023-06-02"}
    )

    assert [e["date"] for e in res.json()["log"]] == ["Fri Dec 01 2023"]


async def test_to_only(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs", params={"to": "2023-01-31"}
    )

    assert [e["date"] for e in res.json()["log"]] == ["Sun Jan 01 2023"]


async def test_limit(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs", params={"limit": "1"}
    )

    body = res.json()
    assert body["count"] == 1
    assert len(body["log"]) == 1


async def test_non_numeric_limit_returns_everything(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs", params={"limit": "lots"}
    )

    assert res.json()["count"] == 3


async def test_logs_are_scoped_to_user(client, create_user, log_exercise, user_with_three):
    other = await create_user("other")
    await log_exercise(other["_id"], description="walk", duration=5)

    res = await client.get(f"/api/users/{other['_id']}/logs")

    body = res.json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "walk"


async def test_unknown_user_returns_plain_text(client):
    res = await client.get("/api/users/65a1f0c2e4b0a1b2c3d4e5f6/logs")

    assert res.status_code == 200
    assert res.text == "Could not find user"


async def test_invalid_from_is_rejected(client, user_with_three):
    res = await client.get(
        f"/api/users/{user_with_three['_id']}/logs", params={"from": "someday"}
    )

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid 'from' date"}


@pytest.mark.parametrize("raw,expected", [
    (None, 500),
    ("", 500),
    ("abc", 500),
    ("0", 500),
    ("-3", 500),
    ("2", 2),
    ("2.7", 2),
    ("499", 499),
    ("5000", 500),
])
def test_resolve_limit(raw, expected):
    assert resolve_limit(raw, 500) == expected
