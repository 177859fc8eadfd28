"""Question Store — create/list/update/delete and tag normalization."""

from uuid import uuid4

import pytest

from threadboard.core.errors import ForbiddenError, ResourceNotFoundError
from threadboard.services.question_store import QuestionStore, normalize_tags
from threadboard.services.reply_tree import ReplyTreeEngine


def test_normalize_tags_dedupes_and_strips():
    assert normalize_tags([" python ", "async", "python", "", "  "]) == [
        "python", "async",
    ]
    assert normalize_tags(None) == []


async def test_create_and_get(test_db, make_user):
    _, a = await make_user()
    store = QuestionStore(test_db)
    created = await store.create_question(a, "Title", "Body", ["x", "x"])
    fetched = await store.get_question(created.id)
    assert fetched.user_id == a.id
    assert fetched.tags == ["x"]


async def test_get_missing_is_not_found(test_db):
    with pytest.raises(ResourceNotFoundError, match="Question"):
        await QuestionStore(test_db).get_question(uuid4())


async def test_list_newest_first_with_paging(test_db, make_user):
    _, a = await make_user()
    store = QuestionStore(test_db)
    q1 = await store.create_question(a, "one", "d")
    q2 = await store.create_question(a, "two", "d")
    q3 = await store.create_question(a, "three", "d")

    assert [q.id for q in await store.list_questions()] == [q3.id, q2.id, q1.id]
    assert [q.id for q in await store.list_questions(limit=1, offset=1)] == [q2.id]


async def test_update_only_given_fields(test_db, make_user):
    _, a = await make_user()
    store = QuestionStore(test_db)
    q = await store.create_question(a, "Title", "Body", ["t"])
    updated = await store.update_question(
        a, q.id, {"title": "New title", "description": None},
    )
    assert updated.title == "New title"
    assert updated.description == "Body"
    assert updated.tags == ["t"]


async def test_update_by_stranger_forbidden_by_admin_allowed(test_db, make_user):
    _, a = await make_user()
    _, b = await make_user()
    _, admin = await make_user(role="admin")
    store = QuestionStore(test_db)
    q = await store.create_question(a, "Title", "Body")

    with pytest.raises(ForbiddenError):
        await store.update_question(b, q.id, {"title": "hijack"})
    updated = await store.update_question(admin, q.id, {"tags": ["moderated"]})
    assert updated.tags == ["moderated"]


async def test_delete_leaves_replies(test_db, make_user, publisher):
    _, a = await make_user()
    _, b = await make_user()
    store = QuestionStore(test_db)
    tree = ReplyTreeEngine(test_db, publisher)
    q = await store.create_question(a, "Title", "Body")
    reply = await tree.create_reply(b, "answer", question_id=q.id)

    await store.delete_question(a, q.id)

    with pytest.raises(ResourceNotFoundError):
        await store.get_question(q.id)
    assert [r.id for r in await tree.list_top_level(q.id)] == [reply.id]


async def test_delete_by_stranger_forbidden(test_db, make_user):
    _, a = await make_user()
    _, b = await make_user()
    store = QuestionStore(test_db)
    q = await store.create_question(a, "Title", "Body")
    with pytest.raises(ForbiddenError):
        await store.delete_question(b, q.id)
