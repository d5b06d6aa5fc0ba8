from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.http import admin_required, json_body, json_errors, login_required
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from .model import User


def user_to_json(user: User) -> dict:
    return {"id": user.user_id, "nome": user.name, "login": user.login, "tipo": user.role.value}


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    @json_errors
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("login", ""), data.get("senha", ""))

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        app.logger.info("User %s logged in", s_user.user_id)
        return jsonify({"success": True, "user": {"id": s_user.user_id, "nome": s_user.name, "tipo": s_user.role.value}})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify({"id": session["user_id"], "nome": session.get("name"), "tipo": session.get("role")})

    @app.route("/api/usuarios", methods=["GET"], endpoint="list_users")
    @admin_required
    @json_errors
    def list_users():
        return jsonify([user_to_json(u) for u in container.user_service.list_users()])

    @app.route("/api/usuarios", methods=["POST"], endpoint="create_user")
    @admin_required
    @json_errors
    def create_user():
        data = json_body()
        user = container.user_service.create_user(
            name=data.get("nome", ""),
            login=data.get("login", ""),
            password=data.get("senha", ""),
            role=data.get("tipo"),
        )
        return jsonify(user_to_json(user)), 201

    @app.route("/api/usuarios/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    @json_errors
    def delete_user(user_id: int):
        user = container.user_service.delete_user(current_user_id=int(session["user_id"]), user_id=user_id)
        return jsonify(user_to_json(user))
