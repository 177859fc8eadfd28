"""Reply Routes — nested replies, edit, delete, accept, and votes.

Invariants:
    - POST /replies/{id}/replies creates a nested reply under reply {id}
    - Votes live under /replies/{id}/vote (POST cast, DELETE remove)
    - Notification delivery is scheduled as a background task by the services
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from threadboard.api.dependencies import (
    get_actor, get_reply_tree, get_vote_aggregator,
)
from threadboard.core.access_policy import Actor
from threadboard.schemas.reply import (
    ReplyCreate, ReplyResponse, ReplyUpdate, VoteCast, VoteResult,
)
from threadboard.services.reply_tree import ReplyTreeEngine
from threadboard.services.vote_aggregator import VoteAggregator

router = APIRouter(prefix="/api/v1/replies", tags=["replies"])


@router.post(
    "/{reply_id}/replies", response_model=ReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_nested_reply(
    reply_id: UUID,
    body: ReplyCreate,
    actor: Actor = Depends(get_actor),
    tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    return await tree.create_reply(actor, body.content, parent_id=reply_id)


@router.get("/{reply_id}/replies", response_model=list[ReplyResponse])
async def list_child_replies(
    reply_id: UUID, tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    """Direct children, oldest first."""
    return await tree.list_children(reply_id)


@router.put("/{reply_id}", response_model=ReplyResponse)
async def update_reply(
    reply_id: UUID,
    body: ReplyUpdate,
    actor: Actor = Depends(get_actor),
    tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    return await tree.update_content(actor, reply_id, body.content)


@router.delete("/{reply_id}")
async def delete_reply(
    reply_id: UUID,
    actor: Actor = Depends(get_actor),
    tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    await tree.delete_reply(actor, reply_id)
    return {"message": "Reply deleted"}


@router.post("/{reply_id}/accept", response_model=ReplyResponse)
async def accept_reply(
    reply_id: UUID,
    actor: Actor = Depends(get_actor),
    tree: ReplyTreeEngine = Depends(get_reply_tree),
):
    return await tree.accept(actor, reply_id)


# ─── Votes ──────────────────────────────────────────────────────

@router.post("/{reply_id}/vote", response_model=VoteResult)
async def cast_vote(
    reply_id: UUID,
    body: VoteCast,
    actor: Actor = Depends(get_actor),
    votes: VoteAggregator = Depends(get_vote_aggregator),
):
    reply = await votes.cast_vote(actor, reply_id, body.vote)
    return VoteResult(
        reply_id=reply.id, votes=reply.votes, message="Vote recorded",
    )


@router.delete("/{reply_id}/vote", response_model=VoteResult)
async def remove_vote(
    reply_id: UUID,
    actor: Actor = Depends(get_actor),
    votes: VoteAggregator = Depends(get_vote_aggregator),
):
    reply = await votes.remove_vote(actor, reply_id)
    return VoteResult(
        reply_id=reply.id, votes=reply.votes, message="Vote removed",
    )
