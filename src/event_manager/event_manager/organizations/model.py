from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Organization:
    """Domain entity: an organization (university, company, club...)."""

    organization_id: int
    name: str
    org_type: str
    created_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.organization_id,
            "name": self.name,
            "type": self.org_type,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class AdminCredentials:
    """Login of the admin account generated with an organization, shown once."""

    email: str
    password: str

    def to_dict(self) -> dict:
        return {"email": self.email, "password": self.password}
