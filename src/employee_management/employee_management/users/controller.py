from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        body = json_body()
        result = container.auth_service.signup(
            username=body.get("username", ""),
            password=body.get("password", ""),
            name=body.get("name"),
            email=body.get("email"),
            role=body.get("role"),
        )
        return jsonify(result.to_dict())

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        result = container.auth_service.login(
            username=body.get("username", ""),
            password=body.get("password", ""),
        )
        return jsonify(result.to_dict())

    @app.route("/users", endpoint="list_users")
    def list_users():
        users = container.user_service.list_users(role=request.args.get("role"))
        return jsonify([u.to_dict() for u in users])

    @app.route("/users/<int:user_id>", endpoint="get_user")
    def get_user(user_id: int):
        return jsonify(container.user_service.get_user(user_id).to_dict())
