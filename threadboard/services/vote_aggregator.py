"""Vote Aggregator — one signed vote per (user, reply) and the reply's running total.

Invariants:
    - After cast_vote or remove_vote completes, reply.votes == SUM(reply_votes.value)
    - The total is recomputed from rows, never adjusted by +1/-1
    - A same-value cast raises VoteConflictError before any write
    - Only upvotes by someone other than the reply owner notify
    - remove_vote on a vote that was never cast is a no-op, not an error

Design Decisions:
    - Vote write, recompute and total update share one session and one commit
    - The reply row is locked (SELECT ... FOR UPDATE) before the existing vote is
      read, so concurrent casts on one reply serialize and each SUM sees every
      committed vote
    - A concurrent first vote by the same user trips the unique constraint and
      is reported as a conflict
"""

import logging
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.core.access_policy import Actor
from threadboard.core.errors import ErrorContext, ResourceNotFoundError, VoteConflictError
from threadboard.core.notification_events import DEFAULT_LINK_BASE, vote_event
from threadboard.core.repository_protocols import NotificationPublisher
from threadboard.core.vote_rules import VoteTransition, decide_vote, parse_vote_value
from threadboard.models.reply import Reply
from threadboard.models.reply_vote import ReplyVote

logger = logging.getLogger(__name__)


def locked_reply_query(reply_id: UUID) -> Select:
    return (
        select(Reply)
        .where(Reply.id == reply_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )


class VoteAggregator:

    def __init__(
        self, db: AsyncSession, publisher: NotificationPublisher,
        link_base: str = DEFAULT_LINK_BASE,
    ):
        self.db = db
        self.publisher = publisher
        self.link_base = link_base

    async def _lock_reply(self, reply_id: UUID) -> Reply:
        """Load the reply FOR UPDATE: vote writes on one reply run one at a time."""
        result = await self.db.execute(locked_reply_query(reply_id))
        reply = result.scalar_one_or_none()
        if not reply:
            raise ResourceNotFoundError("Reply", str(reply_id))
        return reply

    async def _recompute_total(self, reply: Reply) -> int:
        """Full aggregate over surviving rows, persisted onto the reply."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(ReplyVote.value), 0))
            .where(ReplyVote.reply_id == reply.id)
        )
        reply.votes = int(result.scalar_one())
        return reply.votes

    async def cast_vote(self, actor: Actor, reply_id: UUID, value: object) -> Reply:
        vote_value = parse_vote_value(value)
        reply = await self._lock_reply(reply_id)

        result = await self.db.execute(
            select(ReplyVote)
            .where(ReplyVote.user_id == actor.id)
            .where(ReplyVote.reply_id == reply_id)
        )
        existing = result.scalar_one_or_none()
        try:
            transition = decide_vote(
                existing.value if existing else None, vote_value,
            )
        except VoteConflictError as e:
            e.context.actor_id = str(actor.id)
            e.context.resource_id = str(reply_id)
            raise

        if transition == VoteTransition.INSERT:
            self.db.add(ReplyVote(
                user_id=actor.id, reply_id=reply_id, value=int(vote_value),
            ))
        else:
            existing.value = int(vote_value)

        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise VoteConflictError(ErrorContext(
                actor_id=str(actor.id), resource_id=str(reply_id),
            ))

        total = await self._recompute_total(reply)
        await self.db.commit()
        logger.info(
            f"Vote {transition.value} ({int(vote_value):+d}), total now {total}",
            extra={"actor_id": actor.id, "reply_id": reply_id},
        )

        event = vote_event(
            actor.id, reply.user_id, reply.question_id, reply.id,
            int(vote_value), self.link_base,
        )
        if event is not None:
            self.publisher.emit(event)
        return reply

    async def remove_vote(self, actor: Actor, reply_id: UUID) -> Reply:
        reply = await self._lock_reply(reply_id)
        await self.db.execute(
            delete(ReplyVote)
            .where(ReplyVote.user_id == actor.id)
            .where(ReplyVote.reply_id == reply_id)
        )
        total = await self._recompute_total(reply)
        await self.db.commit()
        logger.info(
            f"Vote removed, total now {total}",
            extra={"actor_id": actor.id, "reply_id": reply_id},
        )
        return reply
