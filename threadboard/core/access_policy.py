"""Access Policy — one authorization predicate for every guarded operation.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - can_access never raises; ensure_access raises ForbiddenError on denial
    - Rules live in a single table keyed by Action — no inline role checks elsewhere
    - ACCEPT_REPLY is evaluated against the QUESTION, not the reply

Design Decisions:
    - Rule = (owner_allowed, admin_allowed): every rule in the forum is a
      combination of "owns the resource" and "is an admin"
    - Resource may be None for role-only actions (MODERATE)
"""

from dataclasses import dataclass
from uuid import UUID

from threadboard.core.domain_types import Action, Role
from threadboard.core.errors import ErrorContext, ForbiddenError
from threadboard.core.repository_protocols import OwnedResource


@dataclass(frozen=True)
class Actor:
    """Resolved identity of the caller."""
    id: UUID
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


# Action -> (owner may act, admin may act)
RULES: dict[Action, tuple[bool, bool]] = {
    Action.UPDATE_QUESTION: (True, True),
    Action.DELETE_QUESTION: (True, True),
    Action.UPDATE_REPLY: (True, False),
    Action.DELETE_REPLY: (True, True),
    Action.ACCEPT_REPLY: (True, False),
    Action.READ_NOTIFICATION: (True, False),
    Action.MODERATE: (False, True),
}

DENIAL_MESSAGES: dict[Action, str] = {
    Action.ACCEPT_REPLY: "Only question owner can accept",
    Action.MODERATE: "Admins only",
}


def can_access(
    actor: Actor, resource: OwnedResource | None, action: Action,
) -> bool:
    """True if actor may perform action on resource."""
    owner_allowed, admin_allowed = RULES[action]
    if admin_allowed and actor.is_admin:
        return True
    if owner_allowed and resource is not None:
        return resource.user_id == actor.id
    return False


def ensure_access(
    actor: Actor, resource: OwnedResource | None, action: Action,
    resource_id: UUID | None = None,
) -> None:
    """Raise ForbiddenError unless can_access holds."""
    if can_access(actor, resource, action):
        return
    raise ForbiddenError(
        DENIAL_MESSAGES.get(action, "Unauthorized"),
        context=ErrorContext(
            actor_id=str(actor.id),
            resource_id=str(resource_id) if resource_id else None,
            debug_info={"action": action.value},
        ),
    )
