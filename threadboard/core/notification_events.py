"""Notification Events — pure builders for the four fan-out event kinds.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - A builder returns None when the actor is the target (never notify yourself)
    - `reply` links to the question; every other kind anchors the link to a reply
    - Message text is fixed per NotificationType

Design Decisions:
    - Events are frozen dataclasses: services pass them to a publisher, the
      publisher decides when and how they are written
    - Builders take plain ids, not ORM rows: testable without a database
"""

from dataclasses import dataclass
from uuid import UUID

from threadboard.core.domain_types import NotificationType


MESSAGES: dict[NotificationType, str] = {
    NotificationType.REPLY: "Someone replied to your question.",
    NotificationType.NESTED_REPLY: "Someone replied to your comment.",
    NotificationType.ACCEPTED: "Your reply was accepted as the answer.",
    NotificationType.VOTE: "Your reply was upvoted.",
}

DEFAULT_LINK_BASE = "/questions"


@dataclass(frozen=True)
class NotificationEvent:
    """One notice addressed to one user."""
    target_user_id: UUID
    actor_id: UUID
    type: NotificationType
    message: str
    link: str


def question_link(question_id: UUID, link_base: str = DEFAULT_LINK_BASE) -> str:
    return f"{link_base}/{question_id}"


def reply_link(
    question_id: UUID, reply_id: UUID, link_base: str = DEFAULT_LINK_BASE,
) -> str:
    return f"{question_link(question_id, link_base)}#reply-{reply_id}"


def _build(
    kind: NotificationType, actor_id: UUID, target_user_id: UUID, link: str,
) -> NotificationEvent | None:
    if actor_id == target_user_id:
        return None
    return NotificationEvent(
        target_user_id=target_user_id,
        actor_id=actor_id,
        type=kind,
        message=MESSAGES[kind],
        link=link,
    )


def reply_event(
    actor_id: UUID, question_owner_id: UUID, question_id: UUID,
    link_base: str = DEFAULT_LINK_BASE,
) -> NotificationEvent | None:
    """New top-level reply → question owner."""
    return _build(
        NotificationType.REPLY, actor_id, question_owner_id,
        question_link(question_id, link_base),
    )


def nested_reply_event(
    actor_id: UUID, parent_owner_id: UUID, question_id: UUID, reply_id: UUID,
    link_base: str = DEFAULT_LINK_BASE,
) -> NotificationEvent | None:
    """New nested reply → parent reply owner. reply_id is the NEW reply."""
    return _build(
        NotificationType.NESTED_REPLY, actor_id, parent_owner_id,
        reply_link(question_id, reply_id, link_base),
    )


def accepted_event(
    actor_id: UUID, reply_owner_id: UUID, question_id: UUID, reply_id: UUID,
    link_base: str = DEFAULT_LINK_BASE,
) -> NotificationEvent | None:
    """Reply accepted → reply owner."""
    return _build(
        NotificationType.ACCEPTED, actor_id, reply_owner_id,
        reply_link(question_id, reply_id, link_base),
    )


def vote_event(
    actor_id: UUID, reply_owner_id: UUID, question_id: UUID, reply_id: UUID,
    value: int, link_base: str = DEFAULT_LINK_BASE,
) -> NotificationEvent | None:
    """Upvote → reply owner. Downvotes never notify."""
    if value != 1:
        return None
    return _build(
        NotificationType.VOTE, actor_id, reply_owner_id,
        reply_link(question_id, reply_id, link_base),
    )
