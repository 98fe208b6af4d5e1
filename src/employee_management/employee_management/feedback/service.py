from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..users.repository import UserRepository
from ..users.service import require_user
from .model import Feedback
from .repository import FeedbackRepository


class FeedbackService:
    def __init__(self, feedback: FeedbackRepository, users: UserRepository, *, clock: Callable[[], datetime] = now_local):
        self._feedback = feedback
        self._users = users
        self._clock = clock

    def submit(self, *, customer_id: int, content: str, rating: Optional[int] = None) -> Feedback:
        customer = require_user(self._users, customer_id, "Customer")
        content = require_non_empty(content, "Content")
        if rating is not None and not 1 <= int(rating) <= 5:
            raise ValidationError("Rating must be between 1 and 5")

        feedback = Feedback(content=content, rating=rating, created_at=self._clock())
        feedback.user = customer
        return self._feedback.add(feedback)

    def list_by_user(self, user_id: int) -> Sequence[Feedback]:
        require_user(self._users, user_id)
        return self._feedback.list_by_user(int(user_id))

    def list_all(self) -> Sequence[Feedback]:
        return self._feedback.list_all()
