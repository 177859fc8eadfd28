"""Notification Events — tests for the pure fan-out builders.

Tests cover:
    - Each builder targets the right user with the right type, message, link
    - Self-notification suppressed for all four kinds
    - Downvotes never build an event
    - Custom link base honoured
"""

from uuid import uuid4

import pytest

from threadboard.core.domain_types import NotificationType
from threadboard.core.notification_events import (
    MESSAGES,
    accepted_event,
    nested_reply_event,
    question_link,
    reply_event,
    reply_link,
    vote_event,
)


def test_every_type_has_a_message():
    assert set(MESSAGES) == set(NotificationType)


def test_reply_event_targets_question_owner(alice, bob):
    question_id = uuid4()
    event = reply_event(bob.id, alice.id, question_id)
    assert event.target_user_id == alice.id
    assert event.actor_id == bob.id
    assert event.type == NotificationType.REPLY
    assert event.message == "Someone replied to your question."
    assert event.link == f"/questions/{question_id}"


def test_nested_reply_event_anchors_new_reply(alice, bob):
    question_id, new_reply_id = uuid4(), uuid4()
    event = nested_reply_event(bob.id, alice.id, question_id, new_reply_id)
    assert event.type == NotificationType.NESTED_REPLY
    assert event.link == f"/questions/{question_id}#reply-{new_reply_id}"


def test_accepted_event(alice, bob):
    question_id, reply_id = uuid4(), uuid4()
    event = accepted_event(alice.id, bob.id, question_id, reply_id)
    assert event.target_user_id == bob.id
    assert event.type == NotificationType.ACCEPTED
    assert event.message == "Your reply was accepted as the answer."


def test_upvote_event(alice, bob):
    event = vote_event(alice.id, bob.id, uuid4(), uuid4(), 1)
    assert event.type == NotificationType.VOTE
    assert event.target_user_id == bob.id


def test_downvote_never_notifies(alice, bob):
    assert vote_event(alice.id, bob.id, uuid4(), uuid4(), -1) is None


@pytest.mark.parametrize("build", [
    lambda a: reply_event(a, a, uuid4()),
    lambda a: nested_reply_event(a, a, uuid4(), uuid4()),
    lambda a: accepted_event(a, a, uuid4(), uuid4()),
    lambda a: vote_event(a, a, uuid4(), uuid4(), 1),
])
def test_actor_is_never_notified_about_own_action(build, alice):
    assert build(alice.id) is None


def test_custom_link_base():
    question_id, reply_id = uuid4(), uuid4()
    assert question_link(question_id, "/forum/q") == f"/forum/q/{question_id}"
    assert reply_link(question_id, reply_id, "/forum/q") == (
        f"/forum/q/{question_id}#reply-{reply_id}"
    )
