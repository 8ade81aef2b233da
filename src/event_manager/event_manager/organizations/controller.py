from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..common.validators import require_fields
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/organizations", methods=["GET"], endpoint="list_organizations")
    def list_organizations():
        organizations = container.organization_service.list_organizations()
        return ok(organizations=[o.to_dict() for o in organizations])

    @app.route("/api/organizations", methods=["POST"], endpoint="create_organization")
    def create_organization():
        data = json_body()
        require_fields(data, "name", "type", message="Name and type are required")

        organization, credentials = container.organization_service.create_organization(
            name=data["name"],
            org_type=data["type"],
        )
        return ok(organization=organization.to_dict(), adminCredentials=credentials.to_dict())
