from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Message


class MessageRepository(Protocol):
    def add(self, message: Message) -> Message:
        raise NotImplementedError

    def save(self, message: Message) -> Message:
        raise NotImplementedError

    def delete(self, message: Message) -> None:
        raise NotImplementedError

    def get_by_id(self, message_id: int) -> Optional[Message]:
        raise NotImplementedError

    def list_by_sender(self, user_id: int) -> Sequence[Message]:
        raise NotImplementedError

    def list_by_recipient(self, user_id: int) -> Sequence[Message]:
        raise NotImplementedError

    def list_by_recipient_and_read(self, user_id: int, is_read: bool) -> Sequence[Message]:
        raise NotImplementedError
