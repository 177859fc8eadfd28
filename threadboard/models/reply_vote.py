"""ReplyVote ORM — one signed vote per (user, reply).

Invariants:
    - UNIQUE(user_id, reply_id): a changed vote updates the row in place
    - value is +1 or -1 (CHECK constraint); removal deletes the row
    - Rows cascade away with their reply
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Integer, DateTime, ForeignKey, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from threadboard.db.base import Base


class ReplyVote(Base):
    """Vote row aggregated into Reply.votes."""
    __tablename__ = "reply_votes"
    __table_args__ = (
        UniqueConstraint("user_id", "reply_id", name="uq_reply_votes_user_reply"),
        CheckConstraint("value IN (1, -1)", name="ck_reply_votes_value"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    reply_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("replies.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
