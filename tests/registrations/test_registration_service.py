from __future__ import annotations

import base64
import json
from datetime import datetime, timezone

import pytest

from src.event_manager.event_manager.container import build_container
from src.event_manager.event_manager.core.exceptions import ConflictError, InvalidReferenceError, NotFoundError
from src.event_manager.event_manager.registrations.qr import decode_token
from src.event_manager.event_manager.storage.memory_store import InMemoryStore

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _setup():
    store = InMemoryStore()
    c = build_container(store=store)
    org, _ = c.organization_service.create_organization(name="Acme U", org_type="university")
    student = c.auth_service.register(
        first_name="Sam",
        last_name="Park",
        email="sam@acme.edu",
        password="pw-123456",
        role="student",
        organization_id=org.organization_id,
    )
    event = c.event_service.create_event(
        {"name": "Hack Night", "date": "2026-05-20", "organizerId": 1, "organizationId": org.organization_id}
    )
    return store, c, event["id"], student.user_id


def test_register_issues_decodable_token_and_png():
    _, c, event_id, user_id = _setup()
    now = datetime(2026, 5, 2, 10, 0, tzinfo=timezone.utc)

    registration = c.registration_service.register(event_id, user_id, now=now)

    payload = decode_token(registration.qr_data)
    assert (payload.event_id, payload.user_id) == (event_id, user_id)
    assert payload.issued_at == "2026-05-02T10:00:00.000Z"
    assert json.loads(registration.qr_data) == {"eventId": event_id, "userId": user_id, "timestamp": "2026-05-02T10:00:00.000Z"}

    prefix = "data:image/png;base64,"
    assert registration.qr_code.startswith(prefix)
    assert base64.b64decode(registration.qr_code[len(prefix):]).startswith(PNG_MAGIC)


def test_second_registration_for_same_pair_conflicts():
    store, c, event_id, user_id = _setup()
    c.registration_service.register(event_id, user_id)

    with pytest.raises(ConflictError):
        c.registration_service.register(event_id, user_id)

    pairs = [(r["eventId"], r["userId"]) for r in store.read_collection("registrations")]
    assert pairs.count((event_id, user_id)) == 1


def test_store_rejects_duplicate_even_when_precheck_is_bypassed():
    _, c, event_id, user_id = _setup()
    c.registration_service.register(event_id, user_id)

    with pytest.raises(ConflictError):
        c.registrations_repo.create_registration(
            event_id=event_id, user_id=user_id, qr_data="{}", qr_code="", created_at="2026-05-02T10:00:00.000Z"
        )


def test_register_requires_existing_event_and_user():
    _, c, event_id, user_id = _setup()
    with pytest.raises(InvalidReferenceError):
        c.registration_service.register(999, user_id)
    with pytest.raises(InvalidReferenceError):
        c.registration_service.register(event_id, 999)


def test_list_for_event_enriches_with_user_fields():
    store, c, event_id, user_id = _setup()
    c.registration_service.register(event_id, user_id)
    store.write_collection(
        "registrations",
        store.read_collection("registrations")
        + [{"id": 2, "eventId": event_id, "userId": 404, "qrData": "", "qrCode": "", "createdAt": ""}],
    )

    rows = c.registration_service.list_for_event(event_id)

    assert [(r["firstName"], r["lastName"], r["email"]) for r in rows] == [("Sam", "Park", "sam@acme.edu"), ("", "", "")]
    assert c.registration_service.list_for_event(event_id + 1) == []


def test_list_for_user_embeds_event_or_none():
    store, c, event_id, user_id = _setup()
    c.registration_service.register(event_id, user_id)
    store.write_collection(
        "registrations",
        store.read_collection("registrations")
        + [{"id": 2, "eventId": 404, "userId": user_id, "qrData": "", "qrCode": "", "createdAt": ""}],
    )

    rows = c.registration_service.list_for_user(user_id)

    assert rows[0]["event"]["name"] == "Hack Night"
    assert rows[1]["event"] is None


def test_qr_image_renders_png_or_not_found():
    _, c, event_id, user_id = _setup()
    registration = c.registration_service.register(event_id, user_id)

    assert c.registration_service.qr_image(registration.registration_id).startswith(PNG_MAGIC)
    with pytest.raises(NotFoundError):
        c.registration_service.qr_image(999)
