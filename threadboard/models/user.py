"""User ORM — minimal identity row read by the forum core.

Invariants:
    - role is one of Role ('user' | 'admin')
    - password_hash is never serialized by any schema
    - is_banned gates every authenticated request (api.dependencies.get_actor)

Design Decisions:
    - User lifecycle (signup, password storage) owned by the auth gateway; this
      service only reads role and ban state and lets admins flip is_banned
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from threadboard.db.base import Base


class User(Base):
    """Forum account as seen by this service."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    password_hash: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    role: Mapped[str] = mapped_column(
        String(10), nullable=False, default="user",
    )
    is_banned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
