"""Admin Routes — moderation surface, admin role required on every endpoint.

Invariants:
    - Role check happens in ModerationService via core.access_policy, never here
    - DELETE /admin/content/{id} answers the same whether a question, a reply,
      or nothing matched
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from threadboard.api.dependencies import get_actor, get_moderation
from threadboard.core.access_policy import Actor
from threadboard.schemas.moderation import BanResult, ReportResponse, UserSummary
from threadboard.services.moderation import ModerationService

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/users", response_model=list[UserSummary])
async def list_users(
    actor: Actor = Depends(get_actor),
    moderation: ModerationService = Depends(get_moderation),
):
    return await moderation.list_users(actor)


@router.put("/users/{user_id}/ban", response_model=BanResult)
async def toggle_ban(
    user_id: UUID,
    actor: Actor = Depends(get_actor),
    moderation: ModerationService = Depends(get_moderation),
):
    user = await moderation.toggle_ban(actor, user_id)
    return BanResult(
        user_id=user.id,
        is_banned=user.is_banned,
        message="User banned" if user.is_banned else "User unbanned",
    )


@router.get("/reports", response_model=list[ReportResponse])
async def list_reports(
    actor: Actor = Depends(get_actor),
    moderation: ModerationService = Depends(get_moderation),
):
    return await moderation.list_reports(actor)


@router.delete("/content/{content_id}")
async def delete_content(
    content_id: UUID,
    actor: Actor = Depends(get_actor),
    moderation: ModerationService = Depends(get_moderation),
):
    await moderation.delete_content(actor, content_id)
    return {"message": "Deleted content (question or reply)"}
