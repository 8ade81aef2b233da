from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.http import json_body, ok
from ..common.validators import require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events/<int:event_id>/registrations", methods=["GET"], endpoint="event_registrations")
    def event_registrations(event_id: int):
        return ok(registrations=container.registration_service.list_for_event(event_id))

    @app.route("/api/events/<int:event_id>/register", methods=["POST"], endpoint="register_for_event")
    def register_for_event(event_id: int):
        user_id = require_int(json_body().get("userId"), "User ID")
        registration = container.registration_service.register(event_id, user_id)
        return ok(registration=registration.to_dict())

    @app.route("/api/users/<int:user_id>/registrations", methods=["GET"], endpoint="user_registrations")
    def user_registrations(user_id: int):
        return ok(registrations=container.registration_service.list_for_user(user_id))

    @app.route("/api/registrations/<int:registration_id>/qr.png", methods=["GET"], endpoint="registration_qr")
    def registration_qr(registration_id: int):
        png = container.registration_service.qr_image(registration_id)
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"registration-{registration_id}.png")
