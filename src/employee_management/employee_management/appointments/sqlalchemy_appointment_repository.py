from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select

from ..database.session import default_session, fetchall, session_scope
from .model import Appointment
from .repository import AppointmentRepository


class SQLAlchemyAppointmentRepository(AppointmentRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def add(self, appointment: Appointment) -> Appointment:
        with session_scope(self._session) as s:
            s.add(appointment)
        return appointment

    def save(self, appointment: Appointment) -> Appointment:
        return self.add(appointment)

    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        return self._session.get(Appointment, int(appointment_id))

    def list_all(self) -> Sequence[Appointment]:
        return fetchall(self._session, select(Appointment).order_by(Appointment.id))

    def list_by_customer(self, customer_id: int) -> Sequence[Appointment]:
        stmt = select(Appointment).where(Appointment.customer_id == int(customer_id)).order_by(Appointment.id)
        return fetchall(self._session, stmt)

    def list_by_employee(self, employee_id: int) -> Sequence[Appointment]:
        stmt = select(Appointment).where(Appointment.employee_id == int(employee_id)).order_by(Appointment.id)
        return fetchall(self._session, stmt)

    def list_by_status(self, status: str) -> Sequence[Appointment]:
        stmt = select(Appointment).where(Appointment.status == status).order_by(Appointment.id)
        return fetchall(self._session, stmt)

    def list_between(
        self,
        start: datetime,
        end: datetime,
        *,
        customer_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[Appointment]:
        clauses = [Appointment.appointment_date.between(start, end)]
        if customer_id is not None:
            clauses.append(Appointment.customer_id == int(customer_id))
        if employee_id is not None:
            clauses.append(Appointment.employee_id == int(employee_id))

        stmt = select(Appointment).where(*clauses).order_by(Appointment.appointment_date, Appointment.id)
        return fetchall(self._session, stmt)
