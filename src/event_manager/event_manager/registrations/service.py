from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_utc, to_iso
from ..core.exceptions import ConflictError, InvalidReferenceError, NotFoundError
from ..events.repository import EventRepository
from ..users.repository import UserRepository
from . import qr
from .model import Registration
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    def __init__(self, registrations: RegistrationRepository, events: EventRepository, users: UserRepository):
        self._registrations = registrations
        self._events = events
        self._users = users

    def register(self, event_id: int, user_id: int, *, now: Optional[datetime] = None) -> Registration:
        event_id, user_id = int(event_id), int(user_id)

        if not self._events.get_by_id(event_id):
            raise InvalidReferenceError("Event not found")
        if not self._users.get_by_id(user_id):
            raise InvalidReferenceError("User not found")

        if self._registrations.get_for_event_and_user(event_id, user_id):
            raise ConflictError("Already registered")

        stamp = to_iso(now or now_utc())
        token = qr.encode_token(event_id=event_id, user_id=user_id, issued_at=stamp)
        registration = self._registrations.create_registration(
            event_id=event_id,
            user_id=user_id,
            qr_data=token,
            qr_code=qr.to_data_url(qr.render_png(token)),
            created_at=stamp,
        )
        logger.info("User %s registered for event %s (registration %s)", user_id, event_id, registration.registration_id)
        return registration

    def list_for_event(self, event_id: int) -> list[dict]:
        """Registrations of one event with the registrant's name and email."""
        users = {u.user_id: u for u in self._users.list_all()}
        out: list[dict] = []
        for r in self._registrations.list_by_event(int(event_id)):
            user = users.get(r.user_id)
            out.append(
                {
                    **r.to_dict(),
                    "firstName": user.first_name if user else "",
                    "lastName": user.last_name if user else "",
                    "email": user.email if user else "",
                }
            )
        return out

    def list_for_user(self, user_id: int) -> list[dict]:
        events = {e.event_id: e for e in self._events.list_all()}
        out: list[dict] = []
        for r in self._registrations.list_by_user(int(user_id)):
            event = events.get(r.event_id)
            out.append({**r.to_dict(), "event": event.to_dict() if event else None})
        return out

    def qr_image(self, registration_id: int) -> bytes:
        registration = self._registrations.get_by_id(int(registration_id))
        if not registration:
            raise NotFoundError("Registration not found")
        return qr.render_png(registration.qr_data)
