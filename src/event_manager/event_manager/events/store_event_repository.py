from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.constants import EVENTS
from ..core.enums import EventStatus
from ..storage.base import CollectionStore
from .model import RESERVED_FIELDS, Event
from .repository import EventRepository


def _to_event(row: dict) -> Event:
    return Event(
        event_id=int(row["id"]),
        organizer_id=int(row.get("organizerId") or 0),
        organization_id=int(row.get("organizationId") or 0),
        name=row.get("name", ""),
        date=row.get("date", ""),
        venue=row.get("venue"),
        status=EventStatus(row.get("status", EventStatus.PENDING.value)),
        created_at=row.get("createdAt", ""),
        approved_at=row.get("approvedAt"),
        rejected_at=row.get("rejectedAt"),
        details={k: v for k, v in row.items() if k not in RESERVED_FIELDS},
    )


def _apply_status(record: dict, status: EventStatus, at: str) -> None:
    record["status"] = status.value
    if status == EventStatus.APPROVED:
        record["approvedAt"] = at
    elif status == EventStatus.REJECTED:
        record["rejectedAt"] = at


class StoreEventRepository(EventRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Event]:
        return [_to_event(r) for r in self._store.read_collection(EVENTS)]

    def get_by_id(self, event_id: int) -> Optional[Event]:
        row = self._store.find(EVENTS, event_id)
        return _to_event(row) if row else None

    def create_event(
        self,
        *,
        organizer_id: int,
        organization_id: int,
        name: str,
        date: str,
        venue: Optional[str],
        details: dict[str, Any],
        created_at: str,
    ) -> Event:
        record = {k: v for k, v in details.items() if k not in RESERVED_FIELDS}
        record.update(
            {
                "organizerId": organizer_id,
                "organizationId": organization_id,
                "name": name,
                "date": date,
                "venue": venue,
                "status": EventStatus.PENDING.value,
                "createdAt": created_at,
            }
        )
        return _to_event(self._store.insert(EVENTS, record))

    def set_status(self, event_id: int, *, status: EventStatus, at: str) -> Optional[Event]:
        row = self._store.update(EVENTS, event_id, lambda r: _apply_status(r, status, at))
        return _to_event(row) if row else None
