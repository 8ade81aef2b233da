from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.http import json_body, ok
from ..common.validators import require_int
from ..container import Container


def _optional_int_arg(name: str, label: str) -> Optional[int]:
    value = request.args.get(name)
    if value in (None, ""):
        return None
    return require_int(value, label)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/dashboard-stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        organization_id = require_int(request.args.get("organizationId"), "Organization ID")
        return ok(stats=container.dashboard_service.stats(organization_id))

    @app.route("/api/admin/approve-event/<int:event_id>", methods=["PUT"], endpoint="approve_event")
    def approve_event(event_id: int):
        return ok(event=container.event_service.approve_event(event_id))

    @app.route("/api/admin/reject-event/<int:event_id>", methods=["PUT"], endpoint="reject_event")
    def reject_event(event_id: int):
        return ok(event=container.event_service.reject_event(event_id))

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    def create_event():
        return ok(event=container.event_service.create_event(json_body()))

    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    def list_events():
        events = container.event_service.list_events(
            organizer_id=_optional_int_arg("organizerId", "Organizer ID"),
            organization_id=_optional_int_arg("organizationId", "Organization ID"),
        )
        return ok(events=events)

    @app.route("/api/student/events", methods=["GET"], endpoint="student_events")
    def student_events():
        organization_id = require_int(request.args.get("organizationId"), "Organization ID")
        return ok(events=container.event_service.list_upcoming_approved(organization_id))
