from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: an attendee checked in at an event."""

    attendance_id: int
    event_id: int
    user_id: int
    timestamp: str

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "eventId": self.event_id,
            "userId": self.user_id,
            "timestamp": self.timestamp,
        }
