from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; password material never leaves through ``to_public``.
    """

    user_id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: Role
    organization_id: int
    approved: bool
    created_at: str
    approved_at: Optional[str] = None
    rejected_at: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def can_log_in(self) -> bool:
        return self.approved or self.role == Role.ADMIN

    def to_public(self) -> dict:
        data = {
            "id": self.user_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "role": self.role.value,
            "organizationId": self.organization_id,
            "approved": self.approved,
            "createdAt": self.created_at,
        }
        if self.approved_at:
            data["approvedAt"] = self.approved_at
        if self.rejected_at:
            data["rejectedAt"] = self.rejected_at
        return data
