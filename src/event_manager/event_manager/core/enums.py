from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles inside an organization."""

    ADMIN = "admin"
    ORGANIZER = "organizer"
    STUDENT = "student"
    EMPLOYEE = "employee"


class EventStatus(str, Enum):
    """Approval workflow states of an event."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Roles that can use the platform right after signing up
AUTO_APPROVED_ROLES = frozenset({Role.STUDENT, Role.EMPLOYEE})
