"""Root conftest — shared test configuration and pure-core helpers."""

import os
from uuid import uuid4

import pytest

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

from threadboard.core.access_policy import Actor  # noqa: E402
from threadboard.core.domain_types import Role  # noqa: E402


class RecordingPublisher:
    """NotificationPublisher double: keeps emitted events in order."""

    def __init__(self):
        self.events = []

    def emit(self, event):
        self.events.append(event)


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def alice():
    return Actor(id=uuid4())


@pytest.fixture
def bob():
    return Actor(id=uuid4())


@pytest.fixture
def admin():
    return Actor(id=uuid4(), role=Role.ADMIN)
