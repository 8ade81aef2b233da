from __future__ import annotations

from ..core.constants import ATTENDANCE
from ..core.exceptions import ConflictError
from ..storage.base import CollectionStore, DuplicateRecordError
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row["id"]),
        event_id=int(row.get("eventId") or 0),
        user_id=int(row.get("userId") or 0),
        timestamp=row.get("timestamp", ""),
    )


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def record(self, *, event_id: int, user_id: int, timestamp: str) -> AttendanceRecord:
        try:
            row = self._store.insert(
                ATTENDANCE,
                {"eventId": event_id, "userId": user_id, "timestamp": timestamp},
                unique_on=("eventId", "userId"),
            )
        except DuplicateRecordError:
            raise ConflictError("Already marked as attended")
        return _to_record(row)
