"""Question Store — CRUD for questions, the roots of reply trees.

Invariants:
    - Questions listed newest first (reply lists are oldest first)
    - Update and delete gated by core.access_policy (owner or admin)
    - Deleting a question leaves its replies in place
    - update_question only touches fields present in `changes`
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.core.access_policy import Actor, ensure_access
from threadboard.core.domain_types import Action
from threadboard.core.errors import ResourceNotFoundError
from threadboard.models.question import Question

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "tags")


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Tags are a set: strip, drop empties, keep first occurrence order."""
    seen: dict[str, None] = {}
    for tag in tags or []:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


class QuestionStore:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_question(self, question_id: UUID) -> Question:
        """Get question or raise ResourceNotFoundError."""
        question = await self.db.get(Question, question_id)
        if not question:
            raise ResourceNotFoundError("Question", str(question_id))
        return question

    async def create_question(
        self, actor: Actor, title: str, description: str,
        tags: list[str] | None = None,
    ) -> Question:
        question = Question(
            user_id=actor.id,
            title=title,
            description=description,
            tags=normalize_tags(tags),
        )
        self.db.add(question)
        await self.db.commit()
        await self.db.refresh(question)
        logger.info(
            "Question created",
            extra={"actor_id": actor.id, "question_id": question.id},
        )
        return question

    async def list_questions(
        self, limit: int = 50, offset: int = 0,
    ) -> list[Question]:
        query = (
            select(Question)
            .order_by(Question.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_question(
        self, actor: Actor, question_id: UUID, changes: dict,
    ) -> Question:
        question = await self.get_question(question_id)
        ensure_access(actor, question, Action.UPDATE_QUESTION, question_id)
        for field in UPDATABLE_FIELDS:
            if changes.get(field) is None:
                continue
            value = changes[field]
            if field == "tags":
                value = normalize_tags(value)
            setattr(question, field, value)
        await self.db.commit()
        return question

    async def delete_question(self, actor: Actor, question_id: UUID) -> None:
        question = await self.get_question(question_id)
        ensure_access(actor, question, Action.DELETE_QUESTION, question_id)
        await self.db.delete(question)
        await self.db.commit()
        logger.info(
            "Question deleted",
            extra={"actor_id": actor.id, "question_id": question_id},
        )
