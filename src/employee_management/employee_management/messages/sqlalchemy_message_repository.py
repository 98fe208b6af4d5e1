from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from ..database.session import default_session, fetchall, session_scope
from .model import Message
from .repository import MessageRepository


class SQLAlchemyMessageRepository(MessageRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def add(self, message: Message) -> Message:
        with session_scope(self._session) as s:
            s.add(message)
        return message

    def save(self, message: Message) -> Message:
        return self.add(message)

    def delete(self, message: Message) -> None:
        with session_scope(self._session) as s:
            s.delete(message)

    def get_by_id(self, message_id: int) -> Optional[Message]:
        return self._session.get(Message, int(message_id))

    def list_by_sender(self, user_id: int) -> Sequence[Message]:
        stmt = select(Message).where(Message.sender_id == int(user_id)).order_by(Message.id)
        return fetchall(self._session, stmt)

    def list_by_recipient(self, user_id: int) -> Sequence[Message]:
        stmt = select(Message).where(Message.recipient_id == int(user_id)).order_by(Message.id)
        return fetchall(self._session, stmt)

    def list_by_recipient_and_read(self, user_id: int, is_read: bool) -> Sequence[Message]:
        stmt = (
            select(Message)
            .where(Message.recipient_id == int(user_id), Message.is_read.is_(bool(is_read)))
            .order_by(Message.id)
        )
        return fetchall(self._session, stmt)
