"""Notification Schemas — inbox entries as returned to their owner."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: str
    message: str
    link: str
    is_read: bool
    created_at: datetime


class MarkAllResult(BaseModel):
    updated: int
