"""Moderation Schemas — reports and the admin view of users.

Invariants:
    - UserSummary never includes password_hash
    - ReportCreate.reason 1-1000 chars, stripped
    - target_type limited to ReportTargetType values
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from threadboard.core.domain_types import ReportTargetType


class ReportCreate(BaseModel):
    target_type: ReportTargetType
    target_id: UUID
    reason: str = Field(min_length=1, max_length=1000)

    @field_validator("reason")
    @classmethod
    def strip_reason(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("reason cannot be empty or whitespace")
        return v


class ReporterSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    target_type: str
    target_id: UUID
    reason: str
    created_at: datetime
    reporter: ReporterSummary | None = None


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    role: str
    is_banned: bool
    created_at: datetime


class BanResult(BaseModel):
    user_id: UUID
    is_banned: bool
    message: str
