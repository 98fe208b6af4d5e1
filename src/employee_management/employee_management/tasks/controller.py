from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.payload import json_body, pick_fields
from ..common.validators import require_id
from ..container import Container

TASK_FIELDS = {
    "title": ("title", None),
    "description": ("description", None),
    "priority": ("priority", None),
    "status": ("status", None),
    "dueDate": ("due_date", parse_iso_datetime),
}


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/tasks", methods=["POST"], endpoint="create_task")
    def create_task():
        fields = pick_fields(json_body(), TASK_FIELDS)
        task = container.task_service.create_task(
            created_by_id=require_id(request.args.get("createdById"), "createdById"),
            assigned_to_id=require_id(request.args.get("assignedToId"), "assignedToId"),
            **fields,
        )
        return jsonify(task.to_dict())

    @app.route("/employee/tasks", endpoint="list_tasks")
    def list_tasks():
        tasks = container.task_service.list_tasks(status=request.args.get("status"))
        return jsonify([t.to_dict() for t in tasks])

    @app.route("/employee/tasks/due", endpoint="list_tasks_due")
    def list_tasks_due():
        tasks = container.task_service.list_due_on_days(
            parse_iso_date(request.args.get("start", "")),
            parse_iso_date(request.args.get("end", "")),
        )
        return jsonify([t.to_dict() for t in tasks])

    @app.route("/employee/tasks/assigned/<int:user_id>", endpoint="list_tasks_assigned")
    def list_tasks_assigned(user_id: int):
        return jsonify([t.to_dict() for t in container.task_service.list_assigned_to(user_id)])

    @app.route("/employee/tasks/created/<int:user_id>", endpoint="list_tasks_created")
    def list_tasks_created(user_id: int):
        return jsonify([t.to_dict() for t in container.task_service.list_created_by(user_id)])

    @app.route("/employee/tasks/<int:task_id>", endpoint="get_task")
    def get_task(task_id: int):
        return jsonify(container.task_service.get_task(task_id).to_dict())

    @app.route("/employee/tasks/<int:task_id>", methods=["PUT"], endpoint="update_task")
    def update_task(task_id: int):
        changes = pick_fields(json_body(), TASK_FIELDS)
        return jsonify(container.task_service.update_task(task_id, changes).to_dict())
