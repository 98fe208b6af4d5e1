from __future__ import annotations

from typing import Protocol, Sequence

from .model import Feedback


class FeedbackRepository(Protocol):
    def add(self, feedback: Feedback) -> Feedback:
        raise NotImplementedError

    def list_all(self) -> Sequence[Feedback]:
        raise NotImplementedError

    def list_by_user(self, user_id: int) -> Sequence[Feedback]:
        raise NotImplementedError
