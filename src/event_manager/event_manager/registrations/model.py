from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Registration:
    """Domain entity: one attendee signed up for one event."""

    registration_id: int
    event_id: int
    user_id: int
    qr_data: str
    qr_code: str
    created_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.registration_id,
            "eventId": self.event_id,
            "userId": self.user_id,
            "qrData": self.qr_data,
            "qrCode": self.qr_code,
            "createdAt": self.created_at,
        }
