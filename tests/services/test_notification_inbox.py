"""Notification Inbox — own notifications only, mark-read semantics."""

from uuid import uuid4

import pytest

from threadboard.core.domain_types import NotificationType
from threadboard.core.errors import ForbiddenError, ResourceNotFoundError
from threadboard.core.notification_events import NotificationEvent
from threadboard.services.notification_fanout import NotificationFanout
from threadboard.services.notification_inbox import NotificationInbox


async def _seed(test_db, target, actor, count):
    events = [
        NotificationEvent(
            target_user_id=target.id, actor_id=actor.id,
            type=NotificationType.REPLY, message=f"n{i}", link="/questions/q",
        )
        for i in range(count)
    ]
    return await NotificationFanout(test_db).deliver(events)


async def test_list_only_own(test_db, make_user):
    _, a = await make_user()
    _, b = await make_user()
    await _seed(test_db, a, b, 2)
    await _seed(test_db, b, a, 1)

    inbox = NotificationInbox(test_db)
    assert len(await inbox.list_for(a)) == 2
    assert len(await inbox.list_for(b)) == 1


async def test_mark_read_and_unread_filter(test_db, make_user):
    _, a = await make_user()
    _, b = await make_user()
    rows = await _seed(test_db, a, b, 2)
    inbox = NotificationInbox(test_db)

    marked = await inbox.mark_read(a, rows[0].id)
    assert marked.is_read is True
    unread = await inbox.list_for(a, unread_only=True)
    assert [n.id for n in unread] == [rows[1].id]


async def test_mark_someone_elses_notification_forbidden(test_db, make_user):
    _, a = await make_user()
    _, b = await make_user()
    rows = await _seed(test_db, a, b, 1)
    with pytest.raises(ForbiddenError):
        await NotificationInbox(test_db).mark_read(b, rows[0].id)


async def test_mark_missing_notification_not_found(test_db, make_user):
    _, a = await make_user()
    with pytest.raises(ResourceNotFoundError):
        await NotificationInbox(test_db).mark_read(a, uuid4())


async def test_mark_all_read_counts_only_unread(test_db, make_user):
    _, a = await make_user()
    _, b = await make_user()
    rows = await _seed(test_db, a, b, 3)
    inbox = NotificationInbox(test_db)
    await inbox.mark_read(a, rows[0].id)

    assert await inbox.mark_all_read(a) == 2
    assert await inbox.mark_all_read(a) == 0
    assert await inbox.list_for(a, unread_only=True) == []
