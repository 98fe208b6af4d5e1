from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..appointments.model import Appointment
from ..appointments.repository import AppointmentRepository
from ..common.datetime_utils import day_span
from ..core.exceptions import ValidationError
from ..tasks.model import Task
from ..tasks.repository import TaskRepository
from ..users.repository import UserRepository
from ..users.service import require_user


@dataclass(frozen=True)
class EmployeeCalendar:
    tasks: Sequence[Task]
    appointments: Sequence[Appointment]

    def to_dict(self) -> dict:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "appointments": [a.to_dict() for a in self.appointments],
        }


class CalendarService:
    """Merges task and appointment lookups for one user over a span of days.

    Both ends of the span are inclusive: ``start`` from 00:00 and ``end`` up to
    the last microsecond of the day.
    """

    def __init__(self, tasks: TaskRepository, appointments: AppointmentRepository, users: UserRepository):
        self._tasks = tasks
        self._appointments = appointments
        self._users = users

    @staticmethod
    def _span(start: date, end: date):
        if end < start:
            raise ValidationError("End date must not be before start date")
        return day_span(start, end)

    def customer_calendar(self, customer_id: int, *, start: date, end: date) -> Sequence[Appointment]:
        require_user(self._users, customer_id, "Customer")
        start_at, end_at = self._span(start, end)
        return self._appointments.list_between(start_at, end_at, customer_id=int(customer_id))

    def employee_calendar(self, user_id: int, *, start: date, end: date) -> EmployeeCalendar:
        require_user(self._users, user_id)
        start_at, end_at = self._span(start, end)

        # Tasks are not narrowed to the span; only appointments are.
        # TODO: filter tasks by due date once existing clients stop relying on the full list.
        tasks = self._tasks.list_by_assigned_to(int(user_id))
        appointments = self._appointments.list_between(start_at, end_at, employee_id=int(user_id))
        return EmployeeCalendar(tasks=tasks, appointments=appointments)
