from __future__ import annotations

from typing import Sequence

from sqlalchemy import select

from ..database.session import default_session, fetchall, session_scope
from .model import Feedback
from .repository import FeedbackRepository


class SQLAlchemyFeedbackRepository(FeedbackRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def add(self, feedback: Feedback) -> Feedback:
        with session_scope(self._session) as s:
            s.add(feedback)
        return feedback

    def list_all(self) -> Sequence[Feedback]:
        return fetchall(self._session, select(Feedback).order_by(Feedback.id))

    def list_by_user(self, user_id: int) -> Sequence[Feedback]:
        stmt = select(Feedback).where(Feedback.user_id == int(user_id)).order_by(Feedback.id)
        return fetchall(self._session, stmt)
