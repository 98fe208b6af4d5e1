from __future__ import annotations

import pytest

from employee_management.core.exceptions import NotFoundError, ValidationError
from employee_management.messages.model import Message
from employee_management.messages.service import MessageService
from employee_management.users.model import UserProfile


class InMemoryUsers:
    def __init__(self, *users: UserProfile):
        self._by_id = {u.id: u for u in users}

    def get_by_id(self, user_id: int):
        return self._by_id.get(user_id)


class InMemoryMessages:
    def __init__(self):
        self.rows: dict[int, Message] = {}
        self._id = 0

    def add(self, message: Message) -> Message:
        self._id += 1
        message.id = self._id
        self.rows[message.id] = message
        return message

    def save(self, message: Message) -> Message:
        self.rows[message.id] = message
        return message

    def delete(self, message: Message) -> None:
        del self.rows[message.id]

    def get_by_id(self, message_id: int):
        return self.rows.get(message_id)

    def list_by_sender(self, user_id: int):
        return [m for m in self.rows.values() if m.sender.id == user_id]

    def list_by_recipient(self, user_id: int):
        return [m for m in self.rows.values() if m.recipient.id == user_id]

    def list_by_recipient_and_read(self, user_id: int, is_read: bool):
        return [m for m in self.list_by_recipient(user_id) if m.is_read == is_read]


@pytest.fixture
def repo():
    return InMemoryMessages()


@pytest.fixture
def service(repo, fixed_now):
    users = InMemoryUsers(
        UserProfile(id=1, username="cust", password="pw", role="CUSTOMER"),
        UserProfile(id=2, username="emp", password="pw", role="EMPLOYEE"),
        UserProfile(id=3, username="other", password="pw", role="CUSTOMER"),
    )
    return MessageService(repo, users, clock=lambda: fixed_now)


def test_send_starts_unread_with_timestamp(service, fixed_now):
    message = service.send(sender_id=1, recipient_id=2, subject="Hi", content="Hello")

    assert message.is_read is False
    assert message.sent_at == fixed_now
    assert message.to_dict()["sender"]["username"] == "cust"


def test_inbox_partitions_sent_and_received(service):
    m1 = service.send(sender_id=1, recipient_id=2, content="to employee")
    m2 = service.send(sender_id=2, recipient_id=1, content="reply")
    service.send(sender_id=2, recipient_id=3, content="not for user 1")

    inbox = service.inbox(1)

    assert [m.id for m in inbox["sent"]] == [m1.id]
    assert [m.id for m in inbox["received"]] == [m2.id]


def test_self_addressed_message_is_in_both_groups(service):
    note = service.send(sender_id=1, recipient_id=1, content="reminder")

    inbox = service.inbox(1)

    assert [m.id for m in inbox["sent"]] == [note.id]
    assert [m.id for m in inbox["received"]] == [note.id]


def test_unread_filter_and_mark_as_read(service):
    first = service.send(sender_id=2, recipient_id=1, content="one")
    second = service.send(sender_id=2, recipient_id=1, content="two")

    service.mark_as_read(first.id)

    assert [m.id for m in service.list_for_recipient(1, is_read=False)] == [second.id]
    assert [m.id for m in service.list_for_recipient(1, is_read=True)] == [first.id]


def test_delete_removes_message(service, repo):
    message = service.send(sender_id=1, recipient_id=2, content="oops")

    service.delete(message.id)

    assert repo.rows == {}
    with pytest.raises(NotFoundError):
        service.delete(message.id)


def test_send_requires_content_and_known_users(service):
    with pytest.raises(ValidationError):
        service.send(sender_id=1, recipient_id=2, content="   ")
    with pytest.raises(NotFoundError):
        service.send(sender_id=1, recipient_id=42, content="hello")
