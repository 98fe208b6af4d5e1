from __future__ import annotations

from datetime import date, datetime

import pytest

from employee_management.core.exceptions import NotFoundError, ValidationError
from employee_management.tasks.model import Task
from employee_management.tasks.service import TaskService
from employee_management.users.model import UserProfile


class InMemoryUsers:
    def __init__(self, *users: UserProfile):
        self._by_id = {u.id: u for u in users}

    def get_by_id(self, user_id: int):
        return self._by_id.get(user_id)


class InMemoryTasks:
    def __init__(self):
        self.rows: dict[int, Task] = {}
        self._id = 0

    def add(self, task: Task) -> Task:
        self._id += 1
        task.id = self._id
        self.rows[task.id] = task
        return task

    def save(self, task: Task) -> Task:
        self.rows[task.id] = task
        return task

    def get_by_id(self, task_id: int):
        return self.rows.get(task_id)

    def list_all(self):
        return list(self.rows.values())

    def list_by_assigned_to(self, user_id: int):
        return [t for t in self.rows.values() if t.assigned_to.id == user_id]

    def list_by_created_by(self, user_id: int):
        return [t for t in self.rows.values() if t.created_by.id == user_id]

    def list_by_status(self, status: str):
        return [t for t in self.rows.values() if t.status == status]

    def list_due_between(self, start, end):
        return [t for t in self.rows.values() if t.due_date and start <= t.due_date <= end]


@pytest.fixture
def service(fixed_now):
    users = InMemoryUsers(
        UserProfile(id=1, username="admin", password="pw", role="ADMIN"),
        UserProfile(id=2, username="emp", password="pw", role="EMPLOYEE"),
    )
    return TaskService(InMemoryTasks(), users, clock=lambda: fixed_now)


def test_create_task_applies_defaults(service, fixed_now):
    task = service.create_task(created_by_id=1, assigned_to_id=2, title="Inventory")

    assert task.priority == "MEDIUM"
    assert task.status == "PENDING"
    assert task.created_at == fixed_now
    payload = task.to_dict()
    assert payload["assignedTo"]["id"] == 2
    assert payload["createdBy"]["username"] == "admin"
    assert "password" not in payload["assignedTo"]


def test_create_task_requires_known_assignee(service):
    with pytest.raises(NotFoundError):
        service.create_task(created_by_id=1, assigned_to_id=77, title="Ghost")


def test_lists_by_assignee_creator_and_status(service):
    a = service.create_task(created_by_id=1, assigned_to_id=2, title="a")
    b = service.create_task(created_by_id=2, assigned_to_id=2, title="b", status="COMPLETED")

    assert [t.id for t in service.list_assigned_to(2)] == [a.id, b.id]
    assert [t.id for t in service.list_created_by(1)] == [a.id]
    assert [t.id for t in service.list_tasks(status="COMPLETED")] == [b.id]
    assert len(service.list_tasks()) == 2


def test_due_on_days_covers_whole_last_day(service):
    late = service.create_task(
        created_by_id=1, assigned_to_id=2, title="late", due_date=datetime(2026, 3, 5, 23, 59, 59)
    )
    service.create_task(created_by_id=1, assigned_to_id=2, title="next", due_date=datetime(2026, 3, 6))

    assert [t.id for t in service.list_due_on_days(date(2026, 3, 5), date(2026, 3, 5))] == [late.id]


def test_update_task_changes_known_fields(service):
    task = service.create_task(created_by_id=1, assigned_to_id=2, title="draft")

    updated = service.update_task(task.id, {"status": "IN_PROGRESS", "title": "final"})

    assert updated.status == "IN_PROGRESS"
    assert updated.title == "final"


def test_update_task_rejects_unknown_fields(service):
    task = service.create_task(created_by_id=1, assigned_to_id=2, title="draft")

    with pytest.raises(ValidationError):
        service.update_task(task.id, {"created_by_id": 2})


def test_get_missing_task(service):
    with pytest.raises(NotFoundError):
        service.get_task(404)
