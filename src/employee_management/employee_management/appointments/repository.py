from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Appointment


class AppointmentRepository(Protocol):
    def add(self, appointment: Appointment) -> Appointment:
        raise NotImplementedError

    def save(self, appointment: Appointment) -> Appointment:
        raise NotImplementedError

    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Appointment]:
        raise NotImplementedError

    def list_by_customer(self, customer_id: int) -> Sequence[Appointment]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[Appointment]:
        raise NotImplementedError

    def list_by_status(self, status: str) -> Sequence[Appointment]:
        raise NotImplementedError

    def list_between(
        self,
        start: datetime,
        end: datetime,
        *,
        customer_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[Appointment]:
        """Appointments dated in [start, end], optionally narrowed to one participant."""

        raise NotImplementedError
