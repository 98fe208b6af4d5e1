from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select

from ..database.session import default_session, fetchall, session_scope
from .model import Task
from .repository import TaskRepository


class SQLAlchemyTaskRepository(TaskRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def add(self, task: Task) -> Task:
        with session_scope(self._session) as s:
            s.add(task)
        return task

    def save(self, task: Task) -> Task:
        return self.add(task)

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self._session.get(Task, int(task_id))

    def list_all(self) -> Sequence[Task]:
        return fetchall(self._session, select(Task).order_by(Task.id))

    def list_by_assigned_to(self, user_id: int) -> Sequence[Task]:
        return fetchall(self._session, select(Task).where(Task.assigned_to_id == int(user_id)).order_by(Task.id))

    def list_by_created_by(self, user_id: int) -> Sequence[Task]:
        return fetchall(self._session, select(Task).where(Task.created_by_id == int(user_id)).order_by(Task.id))

    def list_by_status(self, status: str) -> Sequence[Task]:
        return fetchall(self._session, select(Task).where(Task.status == status).order_by(Task.id))

    def list_due_between(self, start: datetime, end: datetime) -> Sequence[Task]:
        stmt = select(Task).where(Task.due_date.between(start, end)).order_by(Task.due_date, Task.id)
        return fetchall(self._session, stmt)
