"""User routes: creation and listing.

Invariants:
    - A non-empty username yields {id, username} with a generated id
    - Missing or empty username yields 400 and persists nothing
    - Listing returns every created user with matching id/username pairs
    - Duplicate usernames are allowed
"""

import uuid

from sqlalchemy import func, select

from exercise_tracker.models.user import User


async def _user_count(db_manager) -> int:
    async with db_manager.session() as db:
        result = await db.execute(select(func.count()).select_from(User))
        return result.scalar_one()


async def test_create_user_returns_generated_id_and_username(client):
    res = await client.post("/api/users", json={"username": "alice"})

    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "alice"
    assert body["id"]
    uuid.UUID(body["id"])


async def test_create_user_accepts_form_body(client):
    res = await client.post("/api/users", data={"username": "bob"})

    assert res.status_code == 200
    assert res.json()["username"] == "bob"


async def test_create_user_missing_username_returns_400(client, db_manager):
    res = await client.post("/api/users", json={})

    assert res.status_code == 400
    assert res.json() == {"error": "Username is required"}
    assert await _user_count(db_manager) == 0


async def test_create_user_empty_username_returns_400(client, db_manager):
    res = await client.post("/api/users", data={"username": ""})

    assert res.status_code == 400
    assert res.json() == {"error": "Username is required"}
    assert await _user_count(db_manager) == 0


async def test_create_user_without_body_returns_400(client):
    res = await client.post("/api/users")

    assert res.status_code == 400
    assert res.json() == {"error": "Username is required"}


async def test_create_user_malformed_json_returns_400(client):
    res = await client.post(
        "/api/users",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json() == {"error": "Malformed JSON body"}


async def test_create_user_json_array_returns_400(client):
    res = await client.post("/api/users", json=["alice"])

    assert res.status_code == 400
    assert "error" in res.json()


async def test_duplicate_usernames_are_allowed(client):
    first = await client.post("/api/users", json={"username": "sam"})
    second = await client.post("/api/users", json={"username": "sam"})

    assert first.status_code == second.status_code == 200
    assert first.json()["id"] != second.json()["id"]


async def test_list_users_empty_store_returns_empty_list(client):
    res = await client.get("/api/users")

    assert res.status_code == 200
    assert res.json() == []


async def test_list_users_contains_created_users(client, create_user):
    u1 = await create_user("alice")
    u2 = await create_user("bob")

    res = await client.get("/api/users")

    assert res.status_code == 200
    users = res.json()
    assert len(users) == 2
    assert {"id": u1["id"], "username": "alice"} in users
    assert {"id": u2["id"], "username": "bob"} in users
