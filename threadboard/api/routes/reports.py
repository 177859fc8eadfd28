"""Report Routes — any authenticated user may file a report."""

from fastapi import APIRouter, Depends, status

from threadboard.api.dependencies import get_actor, get_moderation
from threadboard.core.access_policy import Actor
from threadboard.schemas.moderation import ReportCreate, ReportResponse
from threadboard.services.moderation import ModerationService

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.post(
    "", response_model=ReportResponse, status_code=status.HTTP_201_CREATED,
)
async def file_report(
    body: ReportCreate,
    actor: Actor = Depends(get_actor),
    moderation: ModerationService = Depends(get_moderation),
):
    return await moderation.file_report(
        actor, body.target_type, body.target_id, body.reason,
    )
