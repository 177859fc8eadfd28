"""Moderation Layer — user reports and admin-only account/content actions.

Invariants:
    - Every admin operation passes core.access_policy (Action.MODERATE) first
    - Reports are append-only; filing one needs no role
    - toggle_ban is read-modify-write; concurrent toggles resolve last-write-wins
    - delete_content tries questions AND replies unconditionally and reports nothing
      about which table matched

Design Decisions:
    - Reporter identity resolved through Report.reporter (selectin load)
    - User rows returned as ORM objects; schemas decide which fields leave the API
      (password_hash never does)
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from threadboard.core.access_policy import Actor, ensure_access
from threadboard.core.domain_types import Action, ReportTargetType
from threadboard.core.errors import ResourceNotFoundError
from threadboard.models.question import Question
from threadboard.models.reply import Reply
from threadboard.models.report import Report
from threadboard.models.user import User

logger = logging.getLogger(__name__)


class ModerationService:

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reports (any authenticated user) ──────────────────────────

    async def file_report(
        self, actor: Actor, target_type: ReportTargetType, target_id: UUID,
        reason: str,
    ) -> Report:
        report = Report(
            reported_by=actor.id,
            target_type=ReportTargetType(target_type).value,
            target_id=target_id,
            reason=reason,
        )
        self.db.add(report)
        await self.db.commit()
        await self.db.refresh(report)
        logger.info(
            f"Report filed against {report.target_type} {target_id}",
            extra={"actor_id": actor.id},
        )
        return report

    # ─── Admin ─────────────────────────────────────────────────────

    async def list_users(self, actor: Actor) -> list[User]:
        ensure_access(actor, None, Action.MODERATE)
        result = await self.db.execute(
            select(User).order_by(User.created_at.asc()),
        )
        return list(result.scalars().all())

    async def toggle_ban(self, actor: Actor, user_id: UUID) -> User:
        ensure_access(actor, None, Action.MODERATE, user_id)
        user = await self.db.get(User, user_id)
        if not user:
            raise ResourceNotFoundError("User", str(user_id))
        user.is_banned = not user.is_banned
        await self.db.commit()
        logger.warning(
            f"User {user_id} {'banned' if user.is_banned else 'unbanned'}",
            extra={"actor_id": actor.id},
        )
        return user

    async def list_reports(self, actor: Actor) -> list[Report]:
        ensure_access(actor, None, Action.MODERATE)
        result = await self.db.execute(
            select(Report).order_by(Report.created_at.desc()),
        )
        return list(result.scalars().all())

    async def delete_content(self, actor: Actor, content_id: UUID) -> None:
        ensure_access(actor, None, Action.MODERATE, content_id)
        await self.db.execute(delete(Question).where(Question.id == content_id))
        await self.db.execute(delete(Reply).where(Reply.id == content_id))
        await self.db.commit()
        logger.warning(
            f"Content {content_id} deleted by admin",
            extra={"actor_id": actor.id},
        )
