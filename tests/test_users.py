"""User routes — create and list.

Invariants:
    - Created users get a store-assigned, unique `_id`
    - Duplicate usernames are accepted
    - Empty collection answers with plain text "No users" in legacy mode
    - Missing username is a 400, not a 500
"""

from bson import ObjectId


async def test_create_user_returns_username_and_id(client):
    res = await client.post("/api/users", data={"username": "fcc_test"})

    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "fcc_test"
    assert ObjectId.is_valid(body["_id"])
    assert set(body) == {"username", "_id"}


async def test_created_user_appears_in_listing(client, create_user):
    user = await create_user("alice")

    res = await client.get("/api/users")

    assert res.status_code == 200
    assert {"_id": user["_id"], "username": "alice"} in res.json()


async def test_user_ids_are_unique(client, create_user):
    first = await create_user("bob")
    second = await create_user("bob")

    assert first["_id"] != second["_id"]

    res = await client.get("/api/users")
    ids = [u["_id"] for u in res.json()]
    assert len(ids) == len(set(ids)) == 2


async def test_listing_projects_only_id_and_username(client, create_user):
    await create_user("carol")

    res = await client.get("/api/users")

    assert all(set(u) == {"_id", "username"} for u in res.json())


async def test_empty_listing_returns_plain_text(client):
    res = await client.get("/api/users")

    assert res.status_code == 200
    assert res.text == "No users"
    assert res.headers["content-type"].startswith("text/plain")


async def test_missing_username_is_rejected(client):
    res = await client.post("/api/users", data={})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request"
    assert any(d["field"].endswith("username") for d in body["details"])


async def test_empty_username_is_rejected(client):
    res = await client.post("/api/users", data={"username": ""})

    assert res.status_code == 400
