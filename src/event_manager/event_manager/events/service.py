from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, parse_event_date, to_iso, today_local
from ..common.validators import require_int, require_non_empty
from ..core.constants import UNKNOWN_ORGANIZER
from ..core.enums import EventStatus
from ..core.exceptions import NotFoundError
from ..registrations.repository import RegistrationRepository
from ..users.repository import UserRepository
from .model import Event
from .repository import EventRepository

logger = logging.getLogger(__name__)


def is_upcoming(event: Event, today: date) -> bool:
    """Dated today or later; events with unreadable dates never are."""
    event_day = parse_event_date(event.date)
    return event_day is not None and event_day >= today


class EventService:
    """Event creation, listing and the pending -> approved/rejected workflow.

    An event's ``registrations`` list is joined from the registrations
    collection on every read instead of being stored on the event.
    """

    def __init__(self, events: EventRepository, users: UserRepository, registrations: RegistrationRepository):
        self._events = events
        self._users = users
        self._registrations = registrations

    def _views(self, events: Sequence[Event]) -> list[dict]:
        by_event: dict[int, list[dict]] = {}
        for r in self._registrations.list_all():
            by_event.setdefault(r.event_id, []).append(r.to_dict())
        return [{**e.to_dict(), "registrations": by_event.get(e.event_id, [])} for e in events]

    def create_event(self, payload: dict[str, Any], *, now: Optional[datetime] = None) -> dict:
        name = require_non_empty(payload.get("name"), "Event name")
        event_date = require_non_empty(payload.get("date"), "Event date")
        organizer_id = require_int(payload.get("organizerId"), "Organizer ID")
        organization_id = require_int(payload.get("organizationId"), "Organization ID")

        event = self._events.create_event(
            organizer_id=organizer_id,
            organization_id=organization_id,
            name=name,
            date=event_date,
            venue=payload.get("venue"),
            details=payload,
            created_at=to_iso(now or now_utc()),
        )
        logger.info("Event %s created by organizer %s (pending approval)", event.event_id, organizer_id)
        return {**event.to_dict(), "registrations": []}

    def list_events(self, *, organizer_id: Optional[int] = None, organization_id: Optional[int] = None) -> list[dict]:
        events = [
            e
            for e in self._events.list_all()
            if (organizer_id is None or e.organizer_id == organizer_id)
            and (organization_id is None or e.organization_id == organization_id)
        ]
        return self._views(events)

    def list_upcoming_approved(self, organization_id: int, *, today: Optional[date] = None) -> list[dict]:
        today = today or today_local()
        events = [
            e
            for e in self._events.list_all()
            if e.status == EventStatus.APPROVED and e.organization_id == organization_id and is_upcoming(e, today)
        ]
        organizers = {u.user_id: u.first_name for u in self._users.list_all()}
        return [
            {**view, "organizer": organizers.get(view["organizerId"]) or UNKNOWN_ORGANIZER}
            for view in self._views(events)
        ]

    def _transition(self, event_id: int, status: EventStatus, now: Optional[datetime]) -> dict:
        event = self._events.set_status(int(event_id), status=status, at=to_iso(now or now_utc()))
        if not event:
            raise NotFoundError("Event not found")
        logger.info("Event %s %s", event.event_id, status.value)
        return self._views([event])[0]

    def approve_event(self, event_id: int, *, now: Optional[datetime] = None) -> dict:
        return self._transition(event_id, EventStatus.APPROVED, now)

    def reject_event(self, event_id: int, *, now: Optional[datetime] = None) -> dict:
        # Approved events may still be rejected; nothing returns to pending.
        return self._transition(event_id, EventStatus.REJECTED, now)
