"""Question Schemas — create/update payloads and the public question shape.

Invariants:
    - title 1-300 chars, description 1-20000 chars, both stripped
    - tags: at most 10, each 1-40 chars
    - QuestionUpdate fields are all optional; None means "leave unchanged"
    - Responses carry the author as (id, username) only
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


class QuestionCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=20_000)
    tags: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: list[str]) -> list[str]:
        for tag in v:
            if len(tag.strip()) > 40:
                raise ValueError("tags must be at most 40 characters")
        return v


class QuestionUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = Field(None, min_length=1, max_length=20_000)
    tags: list[str] | None = Field(None, max_length=10)

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_required(v) if v is not None else None


class QuestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    description: str
    tags: list[str]
    created_at: datetime
    author: AuthorSummary | None = None
