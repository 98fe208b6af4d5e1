from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import AppointmentStatus
from ..extensions import db
from ..users.model import UserProfile, user_summary


class Appointment(db.Model):
    __tablename__ = "appointments"

    id = db.Column(db.Integer, primary_key=True)
    appointment_date = db.Column(db.DateTime, index=True)
    service_type = db.Column(db.String(200))
    status = db.Column(db.String(30), default=AppointmentStatus.SCHEDULED.value, index=True)
    notes = db.Column(db.Text)
    treatment_details = db.Column(db.Text)

    customer_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    employee_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    customer = db.relationship(UserProfile, foreign_keys=[customer_id])
    employee = db.relationship(UserProfile, foreign_keys=[employee_id])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "appointmentDate": isoformat_or_none(self.appointment_date),
            "serviceType": self.service_type,
            "status": self.status,
            "notes": self.notes,
            "treatmentDetails": self.treatment_details,
            "customer": user_summary(self.customer),
            "employee": user_summary(self.employee),
        }
