"""Moderation Layer — reports, admin gating, bans, content removal."""

from uuid import uuid4

import pytest

from threadboard.core.domain_types import ReportTargetType
from threadboard.core.errors import ForbiddenError, ResourceNotFoundError
from threadboard.services.moderation import ModerationService
from threadboard.services.question_store import QuestionStore
from threadboard.services.reply_tree import ReplyTreeEngine


async def test_any_user_can_file_report(test_db, make_user):
    reporter_row, reporter = await make_user()
    report = await ModerationService(test_db).file_report(
        reporter, ReportTargetType.QUESTION, uuid4(), "spam",
    )
    assert report.reported_by == reporter.id
    assert report.target_type == "question"
    assert report.reporter.username == reporter_row.username


@pytest.mark.parametrize("call", [
    lambda m, actor: m.list_users(actor),
    lambda m, actor: m.list_reports(actor),
    lambda m, actor: m.toggle_ban(actor, uuid4()),
    lambda m, actor: m.delete_content(actor, uuid4()),
])
async def test_admin_operations_reject_plain_users(test_db, make_user, call):
    _, user = await make_user()
    with pytest.raises(ForbiddenError, match="Admins only"):
        await call(ModerationService(test_db), user)


async def test_toggle_ban_flips(test_db, make_user):
    _, admin = await make_user(role="admin")
    target_row, _ = await make_user()
    moderation = ModerationService(test_db)

    assert (await moderation.toggle_ban(admin, target_row.id)).is_banned is True
    assert (await moderation.toggle_ban(admin, target_row.id)).is_banned is False


async def test_toggle_ban_unknown_user_not_found(test_db, make_user):
    _, admin = await make_user(role="admin")
    with pytest.raises(ResourceNotFoundError):
        await ModerationService(test_db).toggle_ban(admin, uuid4())


async def test_list_reports_newest_first(test_db, make_user):
    _, admin = await make_user(role="admin")
    _, user = await make_user()
    moderation = ModerationService(test_db)
    first = await moderation.file_report(user, ReportTargetType.REPLY, uuid4(), "a")
    second = await moderation.file_report(user, ReportTargetType.REPLY, uuid4(), "b")

    reports = await moderation.list_reports(admin)
    assert [r.id for r in reports] == [second.id, first.id]


async def test_list_users_includes_everyone(test_db, make_user):
    _, admin = await make_user(role="admin")
    await make_user()
    await make_user(is_banned=True)
    users = await ModerationService(test_db).list_users(admin)
    assert len(users) == 3


async def test_delete_content_removes_question_or_reply(
    test_db, make_user, publisher,
):
    _, admin = await make_user(role="admin")
    _, a = await make_user()
    store = QuestionStore(test_db)
    tree = ReplyTreeEngine(test_db, publisher)
    q = await store.create_question(a, "Title", "Body")
    reply = await tree.create_reply(a, "answer", question_id=q.id)
    moderation = ModerationService(test_db)

    await moderation.delete_content(admin, reply.id)
    test_db.expunge_all()
    assert await tree.list_top_level(q.id) == []

    await moderation.delete_content(admin, q.id)
    test_db.expunge_all()
    with pytest.raises(ResourceNotFoundError):
        await store.get_question(q.id)

    # unknown id is silently accepted
    await moderation.delete_content(admin, uuid4())
