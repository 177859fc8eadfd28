"""Notification Inbox — read side of fan-out: list and mark-read.

Invariants:
    - A user only ever sees or marks their own notifications
    - is_read only moves False -> True
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.core.access_policy import Actor, ensure_access
from threadboard.core.domain_types import Action
from threadboard.core.errors import ResourceNotFoundError
from threadboard.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationInbox:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for(self, actor: Actor, unread_only: bool = False) -> list[Notification]:
        """Newest first."""
        query = (
            select(Notification)
            .where(Notification.user_id == actor.id)
            .order_by(Notification.created_at.desc())
        )
        if unread_only:
            query = query.where(Notification.is_read.is_(False))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def mark_read(self, actor: Actor, notification_id: UUID) -> Notification:
        notification = await self.db.get(Notification, notification_id)
        if not notification:
            raise ResourceNotFoundError("Notification", str(notification_id))
        ensure_access(
            actor, notification, Action.READ_NOTIFICATION, notification_id,
        )
        notification.is_read = True
        await self.db.commit()
        return notification

    async def mark_all_read(self, actor: Actor) -> int:
        """Returns the number of notifications that flipped to read."""
        result = await self.db.execute(
            update(Notification)
            .where(Notification.user_id == actor.id)
            .where(Notification.is_read.is_(False))
            .values(is_read=True)
        )
        await self.db.commit()
        logger.info(
            f"Marked {result.rowcount} notification(s) read",
            extra={"actor_id": actor.id},
        )
        return result.rowcount
