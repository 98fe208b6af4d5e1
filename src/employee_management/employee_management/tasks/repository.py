from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def add(self, task: Task) -> Task:
        raise NotImplementedError

    def save(self, task: Task) -> Task:
        """Persist changes made to an already tracked task."""

        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_assigned_to(self, user_id: int) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_created_by(self, user_id: int) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_status(self, status: str) -> Sequence[Task]:
        raise NotImplementedError

    def list_due_between(self, start: datetime, end: datetime) -> Sequence[Task]:
        """Tasks whose due date lies in [start, end], both ends inclusive."""

        raise NotImplementedError
