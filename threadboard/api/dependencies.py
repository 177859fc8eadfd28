"""Request Dependencies — identity context, notification publisher, and service wiring.

Invariants:
    - get_actor resolves the identity header to an Actor or raises:
      missing/unknown user -> AuthenticationError (401), malformed id -> ValidationFailure (400),
      banned user -> ForbiddenError (403)
    - Services are built per request from the request's DB session

Design Decisions:
    - The token scheme is owned by the gateway in front of this service; it forwards
      the authenticated user id in settings.identity_header
"""

from uuid import UUID

from fastapi import BackgroundTasks, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.config import get_settings
from threadboard.core.access_policy import Actor
from threadboard.core.domain_types import Role
from threadboard.core.errors import (
    AuthenticationError, ErrorContext, ForbiddenError, ValidationFailure,
)
from threadboard.infrastructure.database import get_db
from threadboard.models.user import User
from threadboard.services.moderation import ModerationService
from threadboard.services.notification_fanout import BackgroundPublisher
from threadboard.services.notification_inbox import NotificationInbox
from threadboard.services.question_store import QuestionStore
from threadboard.services.reply_tree import ReplyTreeEngine
from threadboard.services.vote_aggregator import VoteAggregator


async def get_actor(
    request: Request, db: AsyncSession = Depends(get_db),
) -> Actor:
    """Resolve the caller. Every write endpoint depends on this."""
    header = get_settings().identity_header
    raw = request.headers.get(header)
    if not raw:
        raise AuthenticationError()
    try:
        user_id = UUID(raw)
    except ValueError:
        raise ValidationFailure(f"{header} must be a UUID", header) from None

    user = await db.get(User, user_id)
    if not user:
        raise AuthenticationError("Unknown user")
    if user.is_banned:
        raise ForbiddenError(
            "User is banned", context=ErrorContext(actor_id=str(user_id)),
        )
    return Actor(id=user.id, role=Role(user.role))


def get_publisher(background_tasks: BackgroundTasks) -> BackgroundPublisher:
    return BackgroundPublisher(background_tasks)


def get_question_store(db: AsyncSession = Depends(get_db)) -> QuestionStore:
    return QuestionStore(db)


def get_reply_tree(
    db: AsyncSession = Depends(get_db),
    publisher: BackgroundPublisher = Depends(get_publisher),
) -> ReplyTreeEngine:
    return ReplyTreeEngine(
        db, publisher, get_settings().notification_link_base,
    )


def get_vote_aggregator(
    db: AsyncSession = Depends(get_db),
    publisher: BackgroundPublisher = Depends(get_publisher),
) -> VoteAggregator:
    return VoteAggregator(
        db, publisher, get_settings().notification_link_base,
    )


def get_inbox(db: AsyncSession = Depends(get_db)) -> NotificationInbox:
    return NotificationInbox(db)


def get_moderation(db: AsyncSession = Depends(get_db)) -> ModerationService:
    return ModerationService(db)
