"""ORM Models — SQLAlchemy declarative models for all forum entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every row carries a UUID id and a timezone-aware created_at

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from threadboard.models.user import User  # noqa: F401
from threadboard.models.question import Question  # noqa: F401
from threadboard.models.reply import Reply  # noqa: F401
from threadboard.models.reply_vote import ReplyVote  # noqa: F401
from threadboard.models.notification import Notification  # noqa: F401
from threadboard.models.report import Report  # noqa: F401
