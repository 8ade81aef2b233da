from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_utc, to_iso
from ..core.exceptions import AlreadyAttendedError, ConflictError, EventMismatchError, NotFoundError
from ..registrations.qr import decode_token
from ..users.repository import UserRepository
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check attendees in by scanning the QR token issued at registration."""

    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def verify(self, qr_token: Any, event_id: int, *, now: Optional[datetime] = None) -> dict:
        """Record attendance at most once per (event, attendee).

        A second scan raises AlreadyAttendedError whose payload still names
        the attendee, so the operator at the door can see who it was.
        """

        payload = decode_token(qr_token)
        event_id = int(event_id)
        if payload.event_id != event_id:
            raise EventMismatchError("Invalid QR code for this event")

        user = self._users.get_by_id(payload.user_id)
        if not user:
            raise NotFoundError("User not found")

        try:
            record = self._attendance.record(event_id=event_id, user_id=user.user_id, timestamp=to_iso(now or now_utc()))
        except ConflictError:
            logger.info("Repeat scan for user %s at event %s", user.user_id, event_id)
            raise AlreadyAttendedError(
                "Already marked as attended",
                payload={
                    "attendanceInfo": {
                        "firstName": user.first_name,
                        "lastName": user.last_name,
                        "alreadyAttended": True,
                    }
                },
            )

        logger.info("Attendance %s recorded for user %s at event %s", record.attendance_id, user.user_id, event_id)
        return {
            "firstName": user.first_name,
            "lastName": user.last_name,
            "email": user.email,
            "timestamp": record.timestamp,
            "alreadyAttended": False,
        }
