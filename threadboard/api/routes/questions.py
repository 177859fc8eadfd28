"""Question Routes — CRUD for questions plus the top-level reply endpoints.

Invariants:
    - Reads are public; writes require an Actor
    - GET /questions is newest first; GET /questions/{id}/replies is oldest first
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from threadboard.api.dependencies import (
    get_actor, get_question_store, get_reply_tree,
)
from threadboard.core.access_policy import Actor
from threadboard.schemas.question import (
    QuestionCreate, QuestionResponse, QuestionUpdate,
)
from threadboard.schemas.reply import ReplyCreate, ReplyResponse
from threadboard.services.question_store import QuestionStore
from threadboard.services.reply_tree import ReplyTreeEngine

router = APIRouter(prefix="/api/v1/questions", tags=["questions"])


@router.post(
    "", response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    body: QuestionCreate,
    actor: Actor = Depends(get_actor),
    store: QuestionStore = Depends(get_question_store),
):
    return await store.create_question(
        actor, body.title, body.description, body.tags,
    )


@router.get("", response_model=list[QuestionResponse])
async def list_questions(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    store: QuestionStore = Depends(get_question_store),
):
    """List questions, newest first."""
    return await store.list_questions(limit=limit, offset=offset)


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID, store: QuestionStore = Depends(get_question_store),
):
    return await store.get_question(question_id)


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: UUID,
    body: QuestionUpdate,
    actor: Actor = Depends(get_actor),
    store: QuestionStore = Depends(get_question_store),
):
    return await store.update_question(
        actor, question_id, body.model_dump(exclude_unset=True),
    )


@router.delete("/{question_id}")
async def delete_question(
    question_id: UUID,
    actor: Actor = Depends(get_actor),
    store: QuestionStore = Depends(get_question_store),
):
    await store.delete_question(actor, question_id)
    return {"message": "Deleted"}


# ─── Top-level replies ──────────────────────────────────────────

@router.post(
    "/{question_id}/replies", response_model=ReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_top_level_reply(
    question_id: UUID,
    body: ReplyCreate,
    actor: Actor = Depends(get_actor),
    tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    return await tree.create_reply(
        actor, body.content, question_id=question_id,
    )


@router.get("/{question_id}/replies", response_model=list[ReplyResponse])
async def list_top_level_replies(
    question_id: UUID, tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    """Top-level replies, oldest first."""
    return await tree.list_top_level(question_id)
