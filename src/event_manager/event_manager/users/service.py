from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc, to_iso
from ..common.validators import require_non_empty
from ..core.enums import AUTO_APPROVED_ROLES, Role
from ..core.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from ..organizations.repository import OrganizationRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def parse_role(value: str) -> Role:
    try:
        return Role(str(value).strip().lower())
    except ValueError:
        raise ValidationError("Invalid role")


class AuthService:
    """Use cases: self sign-up and login."""

    def __init__(self, users: UserRepository, organizations: OrganizationRepository):
        self._users = users
        self._organizations = organizations

    def register(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: str,
        organization_id: int,
        now: Optional[datetime] = None,
    ) -> User:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")
        parsed_role = parse_role(role)

        if parsed_role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be created here")

        if self._users.get_by_email(email):
            raise ConflictError("Email already registered")

        if not self._organizations.get_by_id(int(organization_id)):
            raise InvalidReferenceError("Invalid organization")

        user = self._users.create_user(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=generate_password_hash(password),
            role=parsed_role,
            organization_id=int(organization_id),
            approved=parsed_role in AUTO_APPROVED_ROLES,
            created_at=to_iso(now or now_utc()),
        )
        logger.info("Registered %s user %s (approved=%s)", user.role.value, user.user_id, user.approved)
        return user

    def login(self, email: str, password: str) -> User:
        if not isinstance(email, str) or not isinstance(password, str) or not email.strip() or not password:
            raise ValidationError("Email and password are required")
        email = email.strip()

        user = self._users.get_by_email(email)
        if not user:
            raise AccountNotFoundError("User does not exist")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. empty or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError("Incorrect password")

        if not user.can_log_in:
            raise AuthorizationError("Account pending approval")

        return user


class UserService:
    """Use cases: admin-side user management."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_for_organization(self, organization_id: int) -> Sequence[User]:
        return self._users.list_by_organization(int(organization_id))

    def set_approval(self, user_id: int, approved: bool, *, now: Optional[datetime] = None) -> User:
        user = self._users.set_approved(int(user_id), approved=bool(approved), at=to_iso(now or now_utc()))
        if not user:
            raise NotFoundError("User not found")
        logger.info("User %s %s", user.user_id, "approved" if user.approved else "rejected")
        return user

    def toggle_status(self, user_id: int, *, now: Optional[datetime] = None) -> User:
        user = self._users.toggle_approved(int(user_id), at=to_iso(now or now_utc()))
        if not user:
            raise NotFoundError("User not found")
        logger.info("User %s toggled to approved=%s", user.user_id, user.approved)
        return user
