from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import REGISTRATIONS
from ..core.exceptions import ConflictError
from ..storage.base import CollectionStore, DuplicateRecordError
from .model import Registration
from .repository import RegistrationRepository


def _to_registration(row: dict) -> Registration:
    return Registration(
        registration_id=int(row["id"]),
        event_id=int(row.get("eventId") or 0),
        user_id=int(row.get("userId") or 0),
        qr_data=row.get("qrData", ""),
        qr_code=row.get("qrCode", ""),
        created_at=row.get("createdAt", ""),
    )


class StoreRegistrationRepository(RegistrationRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Registration]:
        return [_to_registration(r) for r in self._store.read_collection(REGISTRATIONS)]

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        row = self._store.find(REGISTRATIONS, registration_id)
        return _to_registration(row) if row else None

    def get_for_event_and_user(self, event_id: int, user_id: int) -> Optional[Registration]:
        for row in self._store.read_collection(REGISTRATIONS):
            if row.get("eventId") == event_id and row.get("userId") == user_id:
                return _to_registration(row)
        return None

    def list_by_event(self, event_id: int) -> Sequence[Registration]:
        return [r for r in self.list_all() if r.event_id == event_id]

    def list_by_user(self, user_id: int) -> Sequence[Registration]:
        return [r for r in self.list_all() if r.user_id == user_id]

    def create_registration(
        self,
        *,
        event_id: int,
        user_id: int,
        qr_data: str,
        qr_code: str,
        created_at: str,
    ) -> Registration:
        try:
            row = self._store.insert(
                REGISTRATIONS,
                {
                    "eventId": event_id,
                    "userId": user_id,
                    "qrData": qr_data,
                    "qrCode": qr_code,
                    "createdAt": created_at,
                },
                unique_on=("eventId", "userId"),
            )
        except DuplicateRecordError:
            raise ConflictError("Already registered")
        return _to_registration(row)
