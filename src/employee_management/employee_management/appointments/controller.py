from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import day_span, parse_iso_date, parse_iso_datetime
from ..common.payload import json_body, pick_fields
from ..common.validators import optional_id, require_id
from ..container import Container

APPOINTMENT_FIELDS = {
    "appointmentDate": ("appointment_date", parse_iso_datetime),
    "serviceType": ("service_type", None),
    "status": ("status", None),
    "notes": ("notes", None),
    "treatmentDetails": ("treatment_details", None),
}


def register(app: Flask, container: Container) -> None:
    # Customer side
    @app.route("/customer/appointments", methods=["POST"], endpoint="book_appointment")
    def book_appointment():
        fields = pick_fields(json_body(), APPOINTMENT_FIELDS)
        appointment = container.appointment_service.book(
            customer_id=require_id(request.args.get("customerId"), "customerId"),
            employee_id=require_id(request.args.get("employeeId"), "employeeId"),
            **fields,
        )
        return jsonify(appointment.to_dict())

    @app.route("/customer/appointments/history/<int:customer_id>", endpoint="appointment_history")
    def appointment_history(customer_id: int):
        return jsonify([a.to_dict() for a in container.appointment_service.history(customer_id)])

    # Employee side
    @app.route("/employee/appointments", endpoint="list_appointments")
    def list_appointments():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if start_s or end_s:
            start_at, end_at = day_span(parse_iso_date(start_s or ""), parse_iso_date(end_s or ""))
            appointments = container.appointment_service.list_between(
                start_at,
                end_at,
                customer_id=optional_id(request.args.get("customerId"), "customerId"),
            )
        else:
            appointments = container.appointment_service.list_appointments(status=request.args.get("status"))
        return jsonify([a.to_dict() for a in appointments])

    @app.route("/employee/appointments/employee/<int:user_id>", endpoint="list_employee_appointments")
    def list_employee_appointments(user_id: int):
        return jsonify([a.to_dict() for a in container.appointment_service.list_for_employee(user_id)])

    @app.route("/employee/appointments/<int:appointment_id>", endpoint="get_appointment")
    def get_appointment(appointment_id: int):
        return jsonify(container.appointment_service.get_appointment(appointment_id).to_dict())

    @app.route("/employee/appointments/<int:appointment_id>", methods=["PUT"], endpoint="update_appointment")
    def update_appointment(appointment_id: int):
        changes = pick_fields(json_body(), APPOINTMENT_FIELDS)
        return jsonify(container.appointment_service.update_appointment(appointment_id, changes).to_dict())
