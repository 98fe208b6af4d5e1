from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AppointmentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from ..users.service import require_user
from .model import Appointment
from .repository import AppointmentRepository

UPDATABLE_FIELDS = frozenset({"appointment_date", "service_type", "status", "notes", "treatment_details"})


class AppointmentService:
    def __init__(self, appointments: AppointmentRepository, users: UserRepository):
        self._appointments = appointments
        self._users = users

    def book(
        self,
        *,
        customer_id: int,
        employee_id: int,
        appointment_date: Optional[datetime] = None,
        service_type: Optional[str] = None,
        status: Optional[str] = None,
        notes: Optional[str] = None,
        treatment_details: Optional[str] = None,
    ) -> Appointment:
        customer = require_user(self._users, customer_id, "Customer")
        employee = require_user(self._users, employee_id, "Employee")

        appointment = Appointment(
            appointment_date=appointment_date,
            service_type=service_type,
            status=status or AppointmentStatus.SCHEDULED.value,
            notes=notes,
            treatment_details=treatment_details,
        )
        appointment.customer = customer
        appointment.employee = employee
        return self._appointments.add(appointment)

    def list_appointments(self, *, status: Optional[str] = None) -> Sequence[Appointment]:
        if status:
            return self._appointments.list_by_status(status)
        return self._appointments.list_all()

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self._appointments.get_by_id(int(appointment_id))
        if not appointment:
            raise NotFoundError(f"Appointment {appointment_id} not found")
        return appointment

    def history(self, customer_id: int) -> Sequence[Appointment]:
        require_user(self._users, customer_id, "Customer")
        return self._appointments.list_by_customer(int(customer_id))

    def list_for_employee(self, employee_id: int) -> Sequence[Appointment]:
        require_user(self._users, employee_id, "Employee")
        return self._appointments.list_by_employee(int(employee_id))

    def list_between(
        self,
        start: datetime,
        end: datetime,
        *,
        customer_id: Optional[int] = None,
    ) -> Sequence[Appointment]:
        if end < start:
            raise ValidationError("End must not be before start")
        if customer_id is not None:
            require_user(self._users, customer_id, "Customer")
        return self._appointments.list_between(start, end, customer_id=customer_id)

    def update_appointment(self, appointment_id: int, changes: dict) -> Appointment:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update appointment fields: {', '.join(sorted(unknown))}")

        appointment = self.get_appointment(appointment_id)
        for field_name, value in changes.items():
            setattr(appointment, field_name, value)
        return self._appointments.save(appointment)
