"""Vote Rules — pure transition logic for the (user, reply) vote row.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - At most one row per (user, reply): a cast either inserts or updates in place
    - Casting the value already held is a conflict, never a silent no-op

Design Decisions:
    - decide_vote returns a VoteTransition enum instead of mutating a row, so the
      shell performs exactly the write the rule asked for
    - parse_vote_value accepts only 1 and -1; bool is rejected explicitly
"""

from enum import Enum

from threadboard.core.domain_types import VoteValue
from threadboard.core.errors import ValidationFailure, VoteConflictError


class VoteTransition(str, Enum):
    INSERT = "insert"
    UPDATE = "update"


def parse_vote_value(value: object) -> VoteValue:
    """Coerce a boundary value to VoteValue or raise ValidationFailure."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationFailure("vote must be 1 or -1", "vote")
    try:
        return VoteValue(value)
    except ValueError:
        raise ValidationFailure("vote must be 1 or -1", "vote") from None


def decide_vote(existing: int | None, requested: VoteValue) -> VoteTransition:
    """Decide how a cast changes the actor's row. Raises on same-value cast."""
    if existing is None:
        return VoteTransition.INSERT
    if existing == requested:
        raise VoteConflictError()
    return VoteTransition.UPDATE
