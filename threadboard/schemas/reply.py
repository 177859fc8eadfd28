"""Reply Schemas — reply payloads, vote payload, public reply shape.

Invariants:
    - ReplyCreate.content 1-10000 chars, stripped, non-empty
    - ReplyUpdate.content stripped; omitted, empty or whitespace-only becomes None
      ("no change")
    - VoteCast.vote is exactly 1 or -1 (bool rejected)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from threadboard.schemas.question import AuthorSummary


class ReplyCreate(BaseModel):
    content: str = Field(min_length=1, max_length=10_000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v


class ReplyUpdate(BaseModel):
    content: str | None = Field(None, max_length=10_000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class ReplyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    question_id: UUID
    parent_id: UUID | None
    content: str
    is_accepted: bool
    votes: int
    created_at: datetime
    author: AuthorSummary | None = None


class VoteCast(BaseModel):
    vote: int

    @field_validator("vote", mode="before")
    @classmethod
    def check_vote(cls, v: object) -> object:
        if isinstance(v, bool) or v not in (1, -1):
            raise ValueError("vote must be 1 or -1")
        return v


class VoteResult(BaseModel):
    reply_id: UUID
    votes: int
    message: str
