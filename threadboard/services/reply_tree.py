"""Reply Tree Engine — threaded replies rooted at questions.

Invariants:
    - A nested reply copies its parent's question_id verbatim; parent_id = parent.id
    - A top-level reply has question_id = target question, parent_id = None
    - New replies start with votes = 0 and is_accepted = False
    - Lists are ordered oldest first
    - Deleting a reply never touches its children
    - accept() is authorized against the QUESTION owner, not the reply owner
    - Notifications are emitted only after the primary write commits

Design Decisions:
    - Target given as exactly one of question_id / parent_id: mirrors the two
      routes (/questions/{id}/replies and /replies/{id}/replies)
    - Empty or whitespace content on update means "no change"
    - Acceptance is idempotent and not exclusive per question
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.core.access_policy import Actor, ensure_access
from threadboard.core.domain_types import Action
from threadboard.core.errors import ResourceNotFoundError, ValidationFailure
from threadboard.core.notification_events import (
    DEFAULT_LINK_BASE, NotificationEvent,
    accepted_event, nested_reply_event, reply_event,
)
from threadboard.core.repository_protocols import NotificationPublisher
from threadboard.models.question import Question
from threadboard.models.reply import Reply

logger = logging.getLogger(__name__)


class ReplyTreeEngine:
    """Create, list, edit, delete and accept replies."""

    def __init__(
        self, db: AsyncSession, publisher: NotificationPublisher,
        link_base: str = DEFAULT_LINK_BASE,
    ):
        self.db = db
        self.publisher = publisher
        self.link_base = link_base

    async def get_reply(self, reply_id: UUID) -> Reply:
        """Get reply or raise ResourceNotFoundError."""
        reply = await self.db.get(Reply, reply_id)
        if not reply:
            raise ResourceNotFoundError("Reply", str(reply_id))
        return reply

    async def _get_question(self, question_id: UUID) -> Question:
        question = await self.db.get(Question, question_id)
        if not question:
            raise ResourceNotFoundError("Question", str(question_id))
        return question

    def _publish(self, event: NotificationEvent | None, actor: Actor) -> None:
        if event is None:
            logger.debug(
                "Notification suppressed: actor is target",
                extra={"actor_id": actor.id},
            )
            return
        self.publisher.emit(event)

    async def create_reply(
        self, actor: Actor, content: str,
        question_id: UUID | None = None, parent_id: UUID | None = None,
    ) -> Reply:
        """Attach a reply to a question (top-level) or to a reply (nested)."""
        if (question_id is None) == (parent_id is None):
            raise ValidationFailure(
                "Reply target must be exactly one of question or parent reply",
                "target",
            )

        if parent_id is not None:
            parent = await self.db.get(Reply, parent_id)
            if not parent:
                raise ResourceNotFoundError("Parent reply", str(parent_id))
            reply = Reply(
                user_id=actor.id,
                question_id=parent.question_id,
                parent_id=parent.id,
                content=content,
                votes=0,
                is_accepted=False,
            )
            self.db.add(reply)
            await self.db.commit()
            await self.db.refresh(reply)
            event = nested_reply_event(
                actor.id, parent.user_id, reply.question_id, reply.id,
                self.link_base,
            )
        else:
            question = await self._get_question(question_id)
            reply = Reply(
                user_id=actor.id,
                question_id=question.id,
                parent_id=None,
                content=content,
                votes=0,
                is_accepted=False,
            )
            self.db.add(reply)
            await self.db.commit()
            await self.db.refresh(reply)
            event = reply_event(
                actor.id, question.user_id, question.id, self.link_base,
            )

        logger.info(
            "Reply created",
            extra={
                "actor_id": actor.id, "reply_id": reply.id,
                "question_id": reply.question_id,
            },
        )
        self._publish(event, actor)
        return reply

    async def list_top_level(self, question_id: UUID) -> list[Reply]:
        result = await self.db.execute(
            select(Reply)
            .where(Reply.question_id == question_id)
            .where(Reply.parent_id.is_(None))
            .order_by(Reply.created_at.asc())
        )
        return list(result.scalars().all())

    async def list_children(self, reply_id: UUID) -> list[Reply]:
        result = await self.db.execute(
            select(Reply)
            .where(Reply.parent_id == reply_id)
            .order_by(Reply.created_at.asc())
        )
        return list(result.scalars().all())

    async def update_content(
        self, actor: Actor, reply_id: UUID, content: str | None,
    ) -> Reply:
        reply = await self.get_reply(reply_id)
        ensure_access(actor, reply, Action.UPDATE_REPLY, reply_id)
        content = content.strip() if content else None
        if content:
            reply.content = content
            await self.db.commit()
        return reply

    async def delete_reply(self, actor: Actor, reply_id: UUID) -> None:
        reply = await self.get_reply(reply_id)
        ensure_access(actor, reply, Action.DELETE_REPLY, reply_id)
        await self.db.delete(reply)
        await self.db.commit()
        logger.info(
            "Reply deleted",
            extra={"actor_id": actor.id, "reply_id": reply_id},
        )

    async def accept(self, actor: Actor, reply_id: UUID) -> Reply:
        reply = await self.get_reply(reply_id)
        question = await self._get_question(reply.question_id)
        ensure_access(actor, question, Action.ACCEPT_REPLY, reply_id)
        reply.is_accepted = True
        await self.db.commit()
        self._publish(
            accepted_event(
                actor.id, reply.user_id, reply.question_id, reply.id,
                self.link_base,
            ),
            actor,
        )
        return reply
