"""Identity context — the X-User-Id header resolved to an Actor per request."""

from uuid import uuid4

QUESTIONS = "/api/v1/questions"
BODY = {"title": "T", "description": "D", "tags": []}


async def test_missing_header_is_unauthenticated(client):
    resp = await client.post(QUESTIONS, json=BODY)
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_malformed_header_is_validation_error(client):
    resp = await client.post(QUESTIONS, json=BODY, headers={"X-User-Id": "nope"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_unknown_user_is_unauthenticated(client):
    resp = await client.post(
        QUESTIONS, json=BODY, headers={"X-User-Id": str(uuid4())},
    )
    assert resp.status_code == 401


async def test_banned_user_is_forbidden(client, make_user, headers_for):
    _, banned = await make_user(is_banned=True)
    resp = await client.post(QUESTIONS, json=BODY, headers=headers_for(banned))
    assert resp.status_code == 403
    assert resp.json()["error"]["message"] == "User is banned"


async def test_reads_need_no_identity(client):
    resp = await client.get(QUESTIONS)
    assert resp.status_code == 200
    assert resp.json() == []


async def test_health_liveness(client):
    resp = await client.get("/api/v1/health/")
    assert resp.status_code == 200
    assert resp.json()["service"] == "threadboard-api"
