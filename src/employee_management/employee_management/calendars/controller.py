from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _range():
        return parse_iso_date(request.args.get("start", "")), parse_iso_date(request.args.get("end", ""))

    @app.route("/customer/calendar/<int:customer_id>", endpoint="customer_calendar")
    def customer_calendar(customer_id: int):
        start, end = _range()
        appointments = container.calendar_service.customer_calendar(customer_id, start=start, end=end)
        return jsonify([a.to_dict() for a in appointments])

    @app.route("/employee/calendar/<int:user_id>", endpoint="employee_calendar")
    def employee_calendar(user_id: int):
        start, end = _range()
        return jsonify(container.calendar_service.employee_calendar(user_id, start=start, end=end).to_dict())
