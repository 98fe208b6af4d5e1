from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import json_body
from ..common.validators import parse_bool, require_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/customer/messages", methods=["POST"], endpoint="send_message")
    def send_message():
        body = json_body()
        message = container.message_service.send(
            sender_id=require_id(request.args.get("senderId"), "senderId"),
            recipient_id=require_id(request.args.get("recipientId"), "recipientId"),
            subject=body.get("subject"),
            content=body.get("content", ""),
        )
        return jsonify(message.to_dict())

    @app.route("/customer/messages/<int:customer_id>", endpoint="customer_messages")
    def customer_messages(customer_id: int):
        groups = container.message_service.inbox(customer_id)
        return jsonify({name: [m.to_dict() for m in items] for name, items in groups.items()})

    @app.route("/customer/messages/<int:customer_id>/unread", endpoint="customer_unread_messages")
    def customer_unread_messages(customer_id: int):
        is_read = parse_bool(request.args.get("isRead"), default=False)
        messages = container.message_service.list_for_recipient(customer_id, is_read=is_read)
        return jsonify([m.to_dict() for m in messages])

    @app.route("/customer/messages/<int:message_id>/read", methods=["PUT"], endpoint="mark_message_read")
    def mark_message_read(message_id: int):
        return jsonify(container.message_service.mark_as_read(message_id).to_dict())

    @app.route("/customer/messages/<int:message_id>", methods=["DELETE"], endpoint="delete_message")
    def delete_message(message_id: int):
        container.message_service.delete(message_id)
        return jsonify({"success": True, "message": "Message deleted"})
