"""Notification Fan-out — delivers NotificationEvents as inbox rows, best-effort.

Invariants:
    - Only this module inserts Notification rows
    - Delivery runs AFTER the primary write has committed; a delivery failure is
      logged and never surfaces to the caller of the primary operation
    - Events targeting the actor never reach here (core builders return None)

Design Decisions:
    - BackgroundPublisher queues each event as a FastAPI background task that
      opens its own DB session (request session is closed by then)
    - NotificationFanout.deliver is usable directly with any session (tests, scripts)
    - No retry, no dead-letter queue: a lost notification is acceptable
"""

import logging
from typing import Iterable

from fastapi import BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.core.notification_events import NotificationEvent
from threadboard.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationFanout:
    """Writes notification rows for a batch of events."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def deliver(self, events: Iterable[NotificationEvent]) -> list[Notification]:
        rows = []
        for event in events:
            if event.target_user_id == event.actor_id:
                logger.debug(
                    "Dropping self-notification",
                    extra={"actor_id": event.actor_id, "notification_type": event.type.value},
                )
                continue
            row = Notification(
                user_id=event.target_user_id,
                type=event.type.value,
                message=event.message,
                link=event.link,
            )
            self.db.add(row)
            rows.append(row)
        if rows:
            await self.db.commit()
        return rows


async def deliver_in_background(events: list[NotificationEvent]) -> None:
    """Background task: deliver events with a fresh DB session, never raise."""
    from threadboard.infrastructure.database import db_manager

    if not db_manager:
        logger.error("Cannot deliver notifications: database not initialized")
        return

    try:
        async with db_manager.session() as db:
            rows = await NotificationFanout(db).deliver(events)
    except Exception:
        for event in events:
            logger.error(
                "Notification delivery failed",
                exc_info=True,
                extra={
                    "target_user_id": event.target_user_id,
                    "notification_type": event.type.value,
                },
            )
        return
    logger.info(f"Delivered {len(rows)} notification(s)")


class BackgroundPublisher:
    """NotificationPublisher that defers delivery to FastAPI background tasks."""

    def __init__(self, background_tasks: BackgroundTasks):
        self._background_tasks = background_tasks

    def emit(self, event: NotificationEvent) -> None:
        self._background_tasks.add_task(deliver_in_background, [event])
