from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_utc, to_iso
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_ADMIN_PASSWORD
from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..users.repository import UserRepository
from .model import AdminCredentials, Organization
from .repository import OrganizationRepository

logger = logging.getLogger(__name__)


def admin_email_for(name: str) -> str:
    """'Acme U' -> 'admin@acmeu.com'."""
    slug = re.sub(r"\s+", "", name.lower())
    return f"admin@{slug}.com"


class OrganizationService:
    """Use case: onboard an organization together with its first admin."""

    def __init__(
        self,
        organizations: OrganizationRepository,
        users: UserRepository,
        *,
        default_admin_password: str = DEFAULT_ADMIN_PASSWORD,
    ):
        self._organizations = organizations
        self._users = users
        self._default_admin_password = default_admin_password

    def list_organizations(self) -> Sequence[Organization]:
        return self._organizations.list_all()

    def create_organization(
        self,
        *,
        name: str,
        org_type: str,
        now: Optional[datetime] = None,
    ) -> tuple[Organization, AdminCredentials]:
        name = require_non_empty(name, "Name")
        org_type = require_non_empty(org_type, "Type")

        if self._organizations.get_by_name(name):
            raise ConflictError("Organization already exists")

        admin_email = admin_email_for(name)
        if self._users.get_by_email(admin_email):
            raise ConflictError(f"Admin account {admin_email} already exists")

        stamp = to_iso(now or now_utc())
        organization = self._organizations.create(name=name, org_type=org_type, created_at=stamp)

        try:
            self._users.create_user(
                first_name="Admin",
                last_name=name,
                email=admin_email,
                password_hash=generate_password_hash(self._default_admin_password),
                role=Role.ADMIN,
                organization_id=organization.organization_id,
                approved=True,
                created_at=stamp,
            )
        except ConflictError:
            logger.error("Organization %s created but admin %s already exists", organization.organization_id, admin_email)
            raise

        logger.info("Created organization %s (%s) with admin %s", organization.organization_id, name, admin_email)
        return organization, AdminCredentials(email=admin_email, password=self._default_admin_password)
