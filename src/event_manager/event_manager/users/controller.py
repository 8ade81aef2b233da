from __future__ import annotations

from flask import Flask, request, session

from ..common.http import json_body, ok
from ..common.validators import require_fields, require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = json_body()
        require_fields(
            data,
            "firstName",
            "lastName",
            "email",
            "password",
            "role",
            "organizationId",
            message="All fields are required",
        )

        user = container.auth_service.register(
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data["email"],
            password=data["password"],
            role=data["role"],
            organization_id=require_int(data["organizationId"], "Organization ID"),
        )
        return ok(user=user.to_public())

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        user = container.auth_service.login(data.get("email", ""), data.get("password", ""))

        session["user_id"] = user.user_id
        session["name"] = user.full_name
        session["role"] = user.role.value
        session["organization_id"] = user.organization_id
        return ok(user=user.to_public())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return ok()

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_users")
    def admin_users():
        organization_id = require_int(request.args.get("organizationId"), "Organization ID")
        users = container.user_service.list_for_organization(organization_id)
        return ok(users=[u.to_public() for u in users])

    @app.route("/api/admin/approve-organizer/<int:user_id>", methods=["PUT"], endpoint="approve_organizer")
    def approve_organizer(user_id: int):
        user = container.user_service.set_approval(user_id, True)
        return ok(user=user.to_public())

    @app.route("/api/admin/reject-organizer/<int:user_id>", methods=["PUT"], endpoint="reject_organizer")
    def reject_organizer(user_id: int):
        user = container.user_service.set_approval(user_id, False)
        return ok(user=user.to_public())

    @app.route("/api/admin/toggle-user-status/<int:user_id>", methods=["PUT"], endpoint="toggle_user_status")
    def toggle_user_status(user_id: int):
        user = container.user_service.toggle_status(user_id)
        return ok(user=user.to_public())
