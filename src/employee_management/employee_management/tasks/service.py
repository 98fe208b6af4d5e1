from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import day_span, now_local
from ..core.enums import TaskPriority, TaskStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from ..users.service import require_user
from .model import Task
from .repository import TaskRepository

UPDATABLE_FIELDS = frozenset({"title", "description", "priority", "status", "due_date"})


class TaskService:
    def __init__(self, tasks: TaskRepository, users: UserRepository, *, clock: Callable[[], datetime] = now_local):
        self._tasks = tasks
        self._users = users
        self._clock = clock

    def create_task(
        self,
        *,
        created_by_id: int,
        assigned_to_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Optional[str] = None,
        status: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        created_by = require_user(self._users, created_by_id, "Creator")
        assigned_to = require_user(self._users, assigned_to_id, "Assignee")

        task = Task(
            title=title,
            description=description,
            priority=priority or TaskPriority.MEDIUM.value,
            status=status or TaskStatus.PENDING.value,
            due_date=due_date,
            created_at=self._clock(),
        )
        task.created_by = created_by
        task.assigned_to = assigned_to
        return self._tasks.add(task)

    def list_tasks(self, *, status: Optional[str] = None) -> Sequence[Task]:
        if status:
            return self._tasks.list_by_status(status)
        return self._tasks.list_all()

    def get_task(self, task_id: int) -> Task:
        task = self._tasks.get_by_id(int(task_id))
        if not task:
            raise NotFoundError(f"Task {task_id} not found")
        return task

    def list_assigned_to(self, user_id: int) -> Sequence[Task]:
        require_user(self._users, user_id)
        return self._tasks.list_by_assigned_to(int(user_id))

    def list_created_by(self, user_id: int) -> Sequence[Task]:
        require_user(self._users, user_id)
        return self._tasks.list_by_created_by(int(user_id))

    def list_due_between(self, start: datetime, end: datetime) -> Sequence[Task]:
        if end < start:
            raise ValidationError("End must not be before start")
        return self._tasks.list_due_between(start, end)

    def list_due_on_days(self, start: date, end: date) -> Sequence[Task]:
        return self.list_due_between(*day_span(start, end))

    def update_task(self, task_id: int, changes: dict) -> Task:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update task fields: {', '.join(sorted(unknown))}")

        task = self.get_task(task_id)
        for field_name, value in changes.items():
            setattr(task, field_name, value)
        return self._tasks.save(task)
