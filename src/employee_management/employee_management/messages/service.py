from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..users.repository import UserRepository
from ..users.service import require_user
from .model import Message
from .repository import MessageRepository


class MessageService:
    def __init__(self, messages: MessageRepository, users: UserRepository, *, clock: Callable[[], datetime] = now_local):
        self._messages = messages
        self._users = users
        self._clock = clock

    def send(self, *, sender_id: int, recipient_id: int, content: str, subject: Optional[str] = None) -> Message:
        sender = require_user(self._users, sender_id, "Sender")
        recipient = require_user(self._users, recipient_id, "Recipient")

        message = Message(
            subject=subject,
            content=require_non_empty(content, "Content"),
            is_read=False,
            sent_at=self._clock(),
        )
        message.sender = sender
        message.recipient = recipient
        return self._messages.add(message)

    def inbox(self, user_id: int) -> dict[str, Sequence[Message]]:
        """Messages grouped by direction. Self-addressed messages land in both groups."""
        require_user(self._users, user_id)
        return {
            "sent": self._messages.list_by_sender(int(user_id)),
            "received": self._messages.list_by_recipient(int(user_id)),
        }

    def list_for_recipient(self, user_id: int, *, is_read: bool = False) -> Sequence[Message]:
        require_user(self._users, user_id)
        return self._messages.list_by_recipient_and_read(int(user_id), bool(is_read))

    def get_message(self, message_id: int) -> Message:
        message = self._messages.get_by_id(int(message_id))
        if not message:
            raise NotFoundError(f"Message {message_id} not found")
        return message

    def mark_as_read(self, message_id: int) -> Message:
        message = self.get_message(message_id)
        message.is_read = True
        return self._messages.save(message)

    def delete(self, message_id: int) -> None:
        self._messages.delete(self.get_message(message_id))
