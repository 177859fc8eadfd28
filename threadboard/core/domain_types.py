"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, QuestionId, ReplyId, NotificationId, ReportId wrap UUIDs
    - VoteValue is exactly {+1, -1}; zero is not a vote (removal deletes the row)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum, IntEnum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
ReplyId = NewType("ReplyId", UUID)
NotificationId = NewType("NotificationId", UUID)
ReportId = NewType("ReportId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """User roles — maps to DB `users.role` column."""
    USER = "user"
    ADMIN = "admin"


class VoteValue(IntEnum):
    """Signed vote stored on reply_votes.value."""
    UP = 1
    DOWN = -1


class NotificationType(str, Enum):
    """Fan-out event kinds — maps to DB `notifications.type` column."""
    REPLY = "reply"
    NESTED_REPLY = "nested-reply"
    ACCEPTED = "accepted"
    VOTE = "vote"


class ReportTargetType(str, Enum):
    """What a report points at."""
    QUESTION = "question"
    REPLY = "reply"


class Action(str, Enum):
    """Guarded operations evaluated by core.access_policy."""
    UPDATE_QUESTION = "update_question"
    DELETE_QUESTION = "delete_question"
    UPDATE_REPLY = "update_reply"
    DELETE_REPLY = "delete_reply"
    ACCEPT_REPLY = "accept_reply"
    READ_NOTIFICATION = "read_notification"
    MODERATE = "moderate"
