from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.event_manager.event_manager.common.datetime_utils import parse_event_date
from src.event_manager.event_manager.container import build_container
from src.event_manager.event_manager.core.enums import EventStatus
from src.event_manager.event_manager.core.exceptions import NotFoundError, ValidationError
from src.event_manager.event_manager.events.model import Event
from src.event_manager.event_manager.events.service import is_upcoming
from src.event_manager.event_manager.storage.memory_store import InMemoryStore

TODAY = date(2026, 5, 10)


def _setup():
    store = InMemoryStore()
    c = build_container(store=store)
    org, _ = c.organization_service.create_organization(name="Acme U", org_type="university")
    organizer = c.auth_service.register(
        first_name="Jo",
        last_name="Lee",
        email="jo@acme.edu",
        password="pw-123456",
        role="organizer",
        organization_id=org.organization_id,
    )
    return store, c, org.organization_id, organizer.user_id


def _event(c, org_id, organizer_id, **extra):
    payload = {"name": "Hack Night", "date": "2026-05-20", "venue": "Hall A", "organizerId": organizer_id, "organizationId": org_id}
    payload.update(extra)
    return c.event_service.create_event(payload)


def test_create_event_starts_pending_with_no_registrations():
    _, c, org_id, organizer_id = _setup()
    now = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)

    event = c.event_service.create_event(
        {"name": "Hack Night", "date": "2026-05-20", "venue": "Hall A", "organizerId": str(organizer_id), "organizationId": org_id},
        now=now,
    )

    assert event["id"] == 1
    assert event["status"] == "pending"
    assert event["registrations"] == []
    assert event["createdAt"] == "2026-05-01T12:00:00.000Z"
    assert event["organizerId"] == organizer_id


def test_client_cannot_force_workflow_fields_but_extras_are_kept():
    store, c, org_id, organizer_id = _setup()

    event = _event(
        c,
        org_id,
        organizer_id,
        id=77,
        status="approved",
        approvedAt="2020-01-01T00:00:00.000Z",
        registrations=[{"id": 1}],
        description="Bring a laptop",
        capacity=40,
    )

    assert event["id"] == 1
    assert event["status"] == "pending"
    assert "approvedAt" not in event
    assert event["registrations"] == []
    assert event["description"] == "Bring a laptop"
    assert store.read_collection("events")[0]["capacity"] == 40


@pytest.mark.parametrize("missing", ["name", "date", "organizerId", "organizationId"])
def test_create_event_requires_core_fields(missing):
    _, c, org_id, organizer_id = _setup()
    payload = {"name": "X", "date": "2026-05-20", "organizerId": organizer_id, "organizationId": org_id}
    payload.pop(missing)

    with pytest.raises(ValidationError):
        c.event_service.create_event(payload)


def test_ids_follow_max_plus_one():
    store, c, org_id, organizer_id = _setup()
    store.write_collection("events", [{"id": 5, "name": "Old", "date": "2026-01-01", "status": "approved"}])

    assert _event(c, org_id, organizer_id)["id"] == 6


def test_list_events_filters_with_logical_and_in_insertion_order():
    _, c, org_id, organizer_id = _setup()
    other_org, _ = c.organization_service.create_organization(name="Globex", org_type="company")
    first = _event(c, org_id, organizer_id, name="A")
    _event(c, org_id, 99, name="B")
    third = _event(c, org_id, organizer_id, name="C")
    fourth = _event(c, other_org.organization_id, organizer_id, name="D")

    by_organizer = c.event_service.list_events(organizer_id=organizer_id)
    assert [e["id"] for e in by_organizer] == [first["id"], third["id"], fourth["id"]]

    both = c.event_service.list_events(organizer_id=organizer_id, organization_id=org_id)
    assert [e["name"] for e in both] == ["A", "C"]

    assert len(c.event_service.list_events()) == 4


def test_upcoming_includes_today_and_excludes_yesterday():
    _, c, org_id, organizer_id = _setup()
    yesterday = _event(c, org_id, organizer_id, name="Yesterday", date="2026-05-09")
    today = _event(c, org_id, organizer_id, name="Today", date="2026-05-10T18:30:00.000Z")
    pending = _event(c, org_id, organizer_id, name="Pending", date="2026-06-01")
    garbled = _event(c, org_id, organizer_id, name="Garbled", date="next friday")
    for e in (yesterday, today, garbled):
        c.event_service.approve_event(e["id"])

    upcoming = c.event_service.list_upcoming_approved(org_id, today=TODAY)

    assert [e["name"] for e in upcoming] == ["Today"]
    assert upcoming[0]["organizer"] == "Jo"
    assert pending["status"] == "pending"


def _dated(value):
    return Event(
        event_id=1,
        organizer_id=1,
        organization_id=1,
        name="Late Show",
        date=value,
        venue=None,
        status=EventStatus.APPROVED,
        created_at="2026-05-01T00:00:00.000Z",
    )


def test_offset_timestamps_are_compared_on_the_local_day():
    value = "2026-05-10T23:30:00-05:00"
    local_day = datetime(2026, 5, 11, 4, 30, tzinfo=timezone.utc).astimezone().date()

    assert parse_event_date(value) == local_day
    assert is_upcoming(_dated(value), local_day)
    assert is_upcoming(_dated("2026-05-10T23:30:00Z"), datetime(2026, 5, 10, 23, 30, tzinfo=timezone.utc).astimezone().date())


def test_bare_dates_and_naive_timestamps_keep_their_calendar_day():
    assert parse_event_date("2026-05-11") == date(2026, 5, 11)
    assert parse_event_date("2026-05-10T23:30:00") == date(2026, 5, 10)
    assert parse_event_date("next friday") is None
    assert is_upcoming(_dated("2026-05-11"), date(2026, 5, 11))
    assert not is_upcoming(_dated("2026-05-10T23:30:00"), date(2026, 5, 11))


def test_upcoming_is_scoped_to_organization_and_defaults_unknown_organizer():
    _, c, org_id, _ = _setup()
    other_org, _ = c.organization_service.create_organization(name="Globex", org_type="company")
    mine = _event(c, org_id, 404, name="Ghost organizer")
    theirs = _event(c, other_org.organization_id, 2, name="Elsewhere")
    c.event_service.approve_event(mine["id"])
    c.event_service.approve_event(theirs["id"])

    upcoming = c.event_service.list_upcoming_approved(org_id, today=TODAY)

    assert [(e["name"], e["organizer"]) for e in upcoming] == [("Ghost organizer", "Unknown")]


def test_approve_and_reject_stamp_times():
    _, c, org_id, organizer_id = _setup()
    event = _event(c, org_id, organizer_id)
    t1 = datetime(2026, 5, 2, 8, 0, tzinfo=timezone.utc)
    t2 = datetime(2026, 5, 3, 8, 0, tzinfo=timezone.utc)

    approved = c.event_service.approve_event(event["id"], now=t1)
    assert approved["status"] == "approved"
    assert approved["approvedAt"] == "2026-05-02T08:00:00.000Z"

    # An approved event can still be rejected.
    rejected = c.event_service.reject_event(event["id"], now=t2)
    assert rejected["status"] == "rejected"
    assert rejected["rejectedAt"] == "2026-05-03T08:00:00.000Z"
    assert rejected["approvedAt"] == "2026-05-02T08:00:00.000Z"


def test_unknown_event_transitions_are_not_found():
    _, c, _, _ = _setup()
    with pytest.raises(NotFoundError):
        c.event_service.approve_event(12)
    with pytest.raises(NotFoundError):
        c.event_service.reject_event(12)


def test_registrations_are_joined_on_read():
    store, c, org_id, organizer_id = _setup()
    event = _event(c, org_id, organizer_id)
    student = c.auth_service.register(
        first_name="Sam",
        last_name="Park",
        email="sam@acme.edu",
        password="pw-123456",
        role="student",
        organization_id=org_id,
    )

    registration = c.registration_service.register(event["id"], student.user_id)

    listed = c.event_service.list_events(organization_id=org_id)[0]
    assert [r["id"] for r in listed["registrations"]] == [registration.registration_id]
    assert "registrations" not in store.read_collection("events")[0]
