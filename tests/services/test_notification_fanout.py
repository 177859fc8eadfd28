"""Notification Fan-out — rows written per event, failures contained.

Tests cover:
    - deliver() inserts one row per event, unread, with message and link
    - Self-targeted events are dropped
    - deliver_in_background() swallows delivery errors and logs them
    - BackgroundPublisher queues one background task per event
"""

import logging
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import BackgroundTasks
from sqlalchemy import select

import threadboard.infrastructure.database as db_module
from threadboard.core.domain_types import NotificationType
from threadboard.core.notification_events import NotificationEvent, reply_event
from threadboard.models.notification import Notification
from threadboard.services.notification_fanout import (
    BackgroundPublisher, NotificationFanout, deliver_in_background,
)


def _event(target, actor, kind=NotificationType.REPLY):
    return NotificationEvent(
        target_user_id=target, actor_id=actor, type=kind,
        message="hello", link="/questions/x",
    )


async def test_deliver_writes_unread_rows(test_db, make_user):
    _, owner = await make_user()
    _, replier = await make_user()
    question_id = uuid4()

    rows = await NotificationFanout(test_db).deliver(
        [reply_event(replier.id, owner.id, question_id)],
    )

    assert len(rows) == 1
    result = await test_db.execute(
        select(Notification).where(Notification.user_id == owner.id),
    )
    stored = result.scalar_one()
    assert stored.type == "reply"
    assert stored.is_read is False
    assert stored.link == f"/questions/{question_id}"
    assert stored.message == "Someone replied to your question."


async def test_deliver_skips_self_targeted_events(test_db, make_user):
    _, user = await make_user()
    rows = await NotificationFanout(test_db).deliver([_event(user.id, user.id)])
    assert rows == []
    result = await test_db.execute(select(Notification))
    assert result.scalars().all() == []


class _BrokenManager:
    @asynccontextmanager
    async def session(self):
        raise RuntimeError("connection refused")
        yield  # pragma: no cover


async def test_background_delivery_failure_is_logged_not_raised(
    monkeypatch, caplog,
):
    monkeypatch.setattr(db_module, "db_manager", _BrokenManager())
    with caplog.at_level(logging.ERROR):
        await deliver_in_background([_event(uuid4(), uuid4())])
    assert "Notification delivery failed" in caplog.text


async def test_background_delivery_without_database_is_noop(monkeypatch, caplog):
    monkeypatch.setattr(db_module, "db_manager", None)
    with caplog.at_level(logging.ERROR):
        await deliver_in_background([_event(uuid4(), uuid4())])
    assert "database not initialized" in caplog.text


def test_background_publisher_queues_one_task_per_event():
    tasks = BackgroundTasks()
    publisher = BackgroundPublisher(tasks)
    publisher.emit(_event(uuid4(), uuid4()))
    publisher.emit(_event(uuid4(), uuid4(), NotificationType.VOTE))
    assert len(tasks.tasks) == 2
    assert all(t.func is deliver_in_background for t in tasks.tasks)
