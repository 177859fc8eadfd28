"""Notification Routes — the caller's own inbox.

Invariants:
    - Every endpoint is scoped to the resolved Actor
    - Marking another user's notification read is Forbidden
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from threadboard.api.dependencies import get_actor, get_inbox
from threadboard.core.access_policy import Actor
from threadboard.schemas.notification import MarkAllResult, NotificationResponse
from threadboard.services.notification_inbox import NotificationInbox

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    unread: bool = Query(False),
    actor: Actor = Depends(get_actor),
    inbox: NotificationInbox = Depends(get_inbox),
):
    """Own notifications, newest first."""
    return await inbox.list_for(actor, unread_only=unread)


@router.post("/mark-all", response_model=MarkAllResult)
async def mark_all_notifications_read(
    actor: Actor = Depends(get_actor),
    inbox: NotificationInbox = Depends(get_inbox),
):
    return MarkAllResult(updated=await inbox.mark_all_read(actor))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: UUID,
    actor: Actor = Depends(get_actor),
    inbox: NotificationInbox = Depends(get_inbox),
):
    return await inbox.mark_read(actor, notification_id)
