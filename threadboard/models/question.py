"""Question ORM — root of every reply tree.

Invariants:
    - user_id is the owner; only owner or admin may update or delete
    - tags stored as a JSON list of unique strings
    - Deleting a question does NOT delete its replies (orphans stay listable)
    - author (selectin) carries the poster's username onto every read
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from threadboard.db.base import Base


class Question(Base):
    """A question posted by a user."""
    __tablename__ = "questions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    author: Mapped["User"] = relationship("User", lazy="selectin")
