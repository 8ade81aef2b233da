from __future__ import annotations

from datetime import datetime, timezone

import pytest
from werkzeug.security import check_password_hash

from src.event_manager.event_manager.container import build_container
from src.event_manager.event_manager.core.enums import Role
from src.event_manager.event_manager.core.exceptions import ConflictError, ValidationError
from src.event_manager.event_manager.organizations.service import admin_email_for
from src.event_manager.event_manager.storage.memory_store import InMemoryStore


def _container(**kwargs):
    return build_container(store=InMemoryStore(), **kwargs)


def test_admin_email_strips_whitespace_and_lowercases():
    assert admin_email_for("Acme U") == "admin@acmeu.com"
    assert admin_email_for("  Big   State\tCollege ") == "admin@bigstatecollege.com"


def test_create_organization_generates_approved_admin():
    c = _container()
    now = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)

    org, creds = c.organization_service.create_organization(name="Acme U", org_type="university", now=now)

    assert org.organization_id == 1
    assert org.to_dict() == {"id": 1, "name": "Acme U", "type": "university", "createdAt": "2026-03-01T09:30:00.000Z"}
    assert creds.email == "admin@acmeu.com"
    assert creds.password == "admin123"

    admin = c.users_repo.get_by_email("admin@acmeu.com")
    assert admin is not None
    assert admin.role == Role.ADMIN
    assert admin.approved is True
    assert admin.organization_id == org.organization_id
    assert admin.first_name == "Admin"
    assert admin.last_name == "Acme U"
    assert check_password_hash(admin.password_hash, "admin123")


def test_admin_password_is_configurable():
    c = _container(default_admin_password="s3cret-default")
    _, creds = c.organization_service.create_organization(name="Globex", org_type="company")

    assert creds.password == "s3cret-default"
    assert c.auth_service.login("admin@globex.com", "s3cret-default").role == Role.ADMIN


def test_duplicate_name_is_case_insensitive():
    c = _container()
    c.organization_service.create_organization(name="Acme U", org_type="university")

    with pytest.raises(ConflictError):
        c.organization_service.create_organization(name="ACME u", org_type="college")

    assert len(c.organization_service.list_organizations()) == 1


def test_name_colliding_on_admin_email_is_rejected_before_writing():
    c = _container()
    c.organization_service.create_organization(name="Acme U", org_type="university")

    with pytest.raises(ConflictError):
        c.organization_service.create_organization(name="AcmeU", org_type="university")

    assert [o.name for o in c.organization_service.list_organizations()] == ["Acme U"]


@pytest.mark.parametrize("name, org_type", [("", "university"), ("Acme", ""), ("   ", "club")])
def test_missing_fields_are_rejected(name, org_type):
    c = _container()
    with pytest.raises(ValidationError):
        c.organization_service.create_organization(name=name, org_type=org_type)


def test_list_organizations_keeps_insertion_order():
    c = _container()
    for name in ("Zeta", "Alpha", "Mid"):
        c.organization_service.create_organization(name=name, org_type="club")

    orgs = c.organization_service.list_organizations()
    assert [(o.organization_id, o.name) for o in orgs] == [(1, "Zeta"), (2, "Alpha"), (3, "Mid")]
