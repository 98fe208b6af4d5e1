from __future__ import annotations

from datetime import date, datetime

import pytest

from employee_management.appointments.model import Appointment
from employee_management.calendars.service import CalendarService
from employee_management.core.exceptions import NotFoundError, ValidationError
from employee_management.tasks.model import Task
from employee_management.users.model import UserProfile


def _user(user_id: int, role: str) -> UserProfile:
    return UserProfile(id=user_id, username=f"u{user_id}", password="pw", role=role)


class InMemoryUsers:
    def __init__(self, *users: UserProfile):
        self._by_id = {u.id: u for u in users}

    def get_by_id(self, user_id: int):
        return self._by_id.get(user_id)


class InMemoryTasks:
    def __init__(self, tasks):
        self._tasks = list(tasks)

    def list_by_assigned_to(self, user_id: int):
        return [t for t in self._tasks if t.assigned_to and t.assigned_to.id == user_id]


class InMemoryAppointments:
    def __init__(self, appointments):
        self._appointments = list(appointments)
        self.last_range = None

    def list_between(self, start, end, *, customer_id=None, employee_id=None):
        self.last_range = (start, end)
        out = []
        for a in self._appointments:
            if not start <= a.appointment_date <= end:
                continue
            if customer_id is not None and a.customer.id != customer_id:
                continue
            if employee_id is not None and a.employee.id != employee_id:
                continue
            out.append(a)
        return out


CUSTOMER = _user(1, "CUSTOMER")
OTHER_CUSTOMER = _user(2, "CUSTOMER")
EMPLOYEE = _user(3, "EMPLOYEE")


def _appointment(appointment_id: int, when: datetime, customer=CUSTOMER, employee=EMPLOYEE) -> Appointment:
    a = Appointment(id=appointment_id, appointment_date=when, status="SCHEDULED")
    a.customer = customer
    a.employee = employee
    return a


def _task(task_id: int, due: datetime) -> Task:
    t = Task(id=task_id, title=f"task {task_id}", due_date=due)
    t.assigned_to = EMPLOYEE
    return t


@pytest.fixture
def appointments():
    return InMemoryAppointments(
        [
            _appointment(1, datetime(2026, 3, 1, 0, 0, 0)),
            _appointment(2, datetime(2026, 3, 3, 23, 59, 59, 999000)),
            _appointment(3, datetime(2026, 3, 4, 0, 0, 0)),
            _appointment(4, datetime(2026, 2, 28, 23, 59, 59)),
            _appointment(5, datetime(2026, 3, 2, 12, 0), customer=OTHER_CUSTOMER),
        ]
    )


@pytest.fixture
def service(appointments):
    tasks = InMemoryTasks([_task(10, datetime(2025, 1, 1)), _task(11, datetime(2026, 3, 2))])
    return CalendarService(tasks, appointments, InMemoryUsers(CUSTOMER, OTHER_CUSTOMER, EMPLOYEE))


def test_customer_calendar_expands_dates_to_whole_days(service, appointments):
    result = service.customer_calendar(1, start=date(2026, 3, 1), end=date(2026, 3, 3))

    assert [a.id for a in result] == [1, 2]
    start, end = appointments.last_range
    assert start == datetime(2026, 3, 1, 0, 0, 0)
    assert end.date() == date(2026, 3, 3)
    assert end >= datetime(2026, 3, 3, 23, 59, 59, 999000)


def test_single_day_calendar_includes_midnight(service):
    result = service.customer_calendar(1, start=date(2026, 3, 4), end=date(2026, 3, 4))

    assert [a.id for a in result] == [3]


def test_employee_calendar_filters_appointments_but_not_tasks(service):
    calendar = service.employee_calendar(3, start=date(2026, 3, 2), end=date(2026, 3, 3))

    assert [t.id for t in calendar.tasks] == [10, 11]
    assert [a.id for a in calendar.appointments] == [2, 5]


def test_employee_calendar_serializes_both_groups(service):
    payload = service.employee_calendar(3, start=date(2026, 3, 1), end=date(2026, 3, 1)).to_dict()

    assert set(payload) == {"tasks", "appointments"}
    assert [a["id"] for a in payload["appointments"]] == [1]


def test_calendar_rejects_reversed_range(service):
    with pytest.raises(ValidationError):
        service.customer_calendar(1, start=date(2026, 3, 3), end=date(2026, 3, 1))


def test_calendar_for_unknown_user(service):
    with pytest.raises(NotFoundError):
        service.employee_calendar(99, start=date(2026, 3, 1), end=date(2026, 3, 1))
