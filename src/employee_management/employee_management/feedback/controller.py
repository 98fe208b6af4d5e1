from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import json_body
from ..common.validators import optional_int, require_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/customer/feedback", methods=["POST"], endpoint="submit_feedback")
    def submit_feedback():
        body = json_body()
        feedback = container.feedback_service.submit(
            customer_id=require_id(request.args.get("customerId"), "customerId"),
            content=body.get("content", ""),
            rating=optional_int(body.get("rating"), "rating"),
        )
        return jsonify(feedback.to_dict())

    @app.route("/customer/feedback/<int:customer_id>", endpoint="list_customer_feedback")
    def list_customer_feedback(customer_id: int):
        return jsonify([f.to_dict() for f in container.feedback_service.list_by_user(customer_id)])

    @app.route("/employee/feedback", endpoint="list_feedback")
    def list_feedback():
        return jsonify([f.to_dict() for f in container.feedback_service.list_all()])
