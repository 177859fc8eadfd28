"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Services emit notifications only through NotificationPublisher
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: ORM rows and test doubles satisfy these structurally
    - NotificationPublisher.emit is sync: it only enqueues, delivery happens later
      in the shell (background task), so the primary write never waits on fan-out
"""

from typing import Protocol
from uuid import UUID

from threadboard.core.notification_events import NotificationEvent


class OwnedResource(Protocol):
    """Anything with an owning user — questions, replies, notifications."""
    user_id: UUID


class NotificationPublisher(Protocol):
    """Contract for fan-out delivery — implemented by shell."""
    def emit(self, event: NotificationEvent) -> None: ...
