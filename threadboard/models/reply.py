"""Reply ORM — one node of a reply tree rooted at a question.

Invariants:
    - question_id is the ROOT question, copied onto every node at creation
      (a nested reply inherits its parent's question_id, never the parent's id)
    - parent_id is None for top-level replies
    - votes always equals SUM(reply_votes.value) for this reply once a vote
      operation completes
    - is_accepted only ever goes False -> True

Design Decisions:
    - question_id/parent_id carry no FK constraint: deleting a question or a
      parent reply leaves children in place (no cascade)
    - votes denormalized: list endpoints never aggregate
    - author loaded selectin so listings expose the poster's username without
      a per-row query
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from threadboard.db.base import Base


class Reply(Base):
    """Threaded reply to a question or to another reply."""
    __tablename__ = "replies"
    __table_args__ = (
        Index("ix_replies_question_parent", "question_id", "parent_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False,
    )
    question_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), nullable=True, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_accepted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    author: Mapped["User"] = relationship("User", lazy="selectin")
